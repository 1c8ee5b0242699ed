"""Array exercises and text patterns for programming practice."""

__version__ = "0.1.0"