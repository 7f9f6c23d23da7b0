"""Solutions to the 2024 Advent of Code puzzles, days 1 to 19, with a command line entry point."""

__version__ = "0.1.0"