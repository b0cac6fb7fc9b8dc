"""
Fixed-size 2D grid of arbitrary values, row-major, backed by a numpy object array.
"""

from collections.abc import Iterator
from typing import Any, Generic, TypeVar

import numpy as np
from typing_extensions import Self

T = TypeVar("T")


class Matrix2D(Generic[T]):
    """
    A rows x cols grid. Indices are bound-checked: negative indices are
    rejected rather than wrapped around as numpy would.
    """

    def __init__(self, rows: int, cols: int, default: T) -> None:
        if rows < 0 or cols < 0:
            raise ValueError(f"Invalid matrix shape ({rows}, {cols})")
        self._data = np.empty((rows, cols), dtype=object)
        # Fill cell by cell: np.full would broadcast sequence defaults
        for row in range(rows):
            for col in range(cols):
                self._data[row, col] = default

    @classmethod
    def defaulted(cls, rows: int, cols: int) -> Self:
        """Matrix with every cell set to None."""
        return cls(rows, cols, None)  # type: ignore[arg-type]

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    def at(self, row: int, col: int) -> T:
        self._check_index(row, col)
        return self._data[row, col]

    def set(self, row: int, col: int, value: T) -> None:
        self._check_index(row, col)
        self._data[row, col] = value

    def row(self, row: int) -> tuple[T, ...]:
        self._check_row(row)
        return tuple(self._data[row, :])

    def column(self, col: int) -> Iterator[T]:
        self._check_col(col)
        return (self._data[row, col] for row in range(self.rows))

    def to_numpy(self) -> np.ndarray:
        """Copy of the underlying object array."""
        return self._data.copy()

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Matrix2D):
            return False
        return self.shape == other.shape and all(
            self._data[r, c] == other._data[r, c]
            for r in range(self.rows)
            for c in range(self.cols)
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._data.tolist()!r})"

    def _check_index(self, row: int, col: int) -> None:
        self._check_row(row)
        self._check_col(col)

    def _check_row(self, row: int) -> None:
        if not 0 <= row < self.rows:
            raise IndexError("row index out of bound")

    def _check_col(self, col: int) -> None:
        if not 0 <= col < self.cols:
            raise IndexError("col index out of bound")
