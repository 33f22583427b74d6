"""A command-line todo list stored in a CSV file, with its storage and list operations."""

__version__ = "0.1.0"

__all__ = ["__version__"]