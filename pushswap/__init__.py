"""Sort integers with two stacks and a small instruction set, printing the operations."""

__version__ = "1.0.0"
__all__ = ["analysis", "bench", "cli", "parsing", "stacks", "strategies"]