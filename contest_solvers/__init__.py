"""Solutions to classic programming-contest problems, with a small command line."""

__version__ = "0.1.0"
__all__ = ["graphs", "contests", "counting", "search", "cli"]