"""Classic data structures and algorithms in plain Python, with an interactive menu command."""

__version__ = "0.1.0"