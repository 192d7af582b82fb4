"""Interactive solver for the multiples-of-3-and-5 problem and its helper modules."""

__version__ = "0.1.0"
__all__ = ["chars", "cli", "lines", "multiples", "printf", "text"]