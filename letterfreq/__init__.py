"""Letter occurrence counting, frequency formatting and language guessing."""

__version__ = "0.1.0"
__all__ = ["cli", "formatting", "frequencies"]