"""Menu, order and customer services for a restaurant."""

__version__ = "0.1.0"

__all__ = ["__version__"]