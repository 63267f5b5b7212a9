"""Register of cities and their residents, kept as singly linked lists, with a terminal menu."""

__version__ = "0.1.0"
__all__ = ["__version__"]