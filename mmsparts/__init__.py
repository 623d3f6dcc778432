"""MMS message part records, with or without an owned file descriptor, and their struct form."""

__version__ = "0.1.0"
__all__ = ["__version__"]