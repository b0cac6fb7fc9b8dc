"""
Global constants used throughout the project
"""

import os

# Concurrent merge sort falls back to the sequential sort below
# parallelism * MIN_ELEMENTS_PER_WORKER elements
MIN_ELEMENTS_PER_WORKER = 200
DEFAULT_PARALLELISM = os.cpu_count() or 1

# Fork-join merge sort spawns at most 2 ** DEFAULT_FORK_DEPTH leaf tasks
DEFAULT_FORK_DEPTH = 3

DEMO_SEED = 123456
