"""Two-stack integer sorting with a restricted set of operations, and a checker for operation lists."""

__version__ = "0.1.0"
__all__ = ["stacks", "parsing", "sorter", "cli"]