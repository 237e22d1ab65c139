"""
Configuration constants for the hanoi solver.

This module centralizes the fixed values used throughout the codebase.
"""

# Board layout
SOURCE = 0  # Peg holding every disk at the start
SPARE = 1   # Intermediate peg
TARGET = 2  # Peg that must hold every disk at the end
PEG_COUNT = 3
PEG_LABELS = "ABC"  # Labels used by the diagnostic dump and move listings

# CLI input rules
DEFAULT_DISKS = 3  # Disk count used when the argument is missing or below one
WARN_ABOVE_DISKS = 25  # Above this many disks the run time is noticeable
MAX_DISKS_ARG = 2 ** 31 - 1  # Inputs outside the signed 32-bit range are rejected

# Benchmark
DEFAULT_BENCH_DISKS = 16  # Largest disk count solved by `hanoi-bench` by default

# Solver
DUMP_BOARD = False  # Print the board before every outer iteration unless told otherwise
