"""Sort integers with two stacks and a restricted instruction set, with small text and buffer helpers."""

__version__ = "1.0.0"