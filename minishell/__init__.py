"""Interactive prompt that splits command lines into words, pipes and redirections."""

__version__ = "0.1.0"
__all__ = ["__version__"]