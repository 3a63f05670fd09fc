"""TodoMatic - a local-first task tracker for the terminal."""

__version__ = "0.3.0"
