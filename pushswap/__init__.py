"""Sort integers with two stacks and check sequences of stack operations."""

__version__ = "1.0.0"
__all__ = ["cli", "parse", "sort", "stack"]