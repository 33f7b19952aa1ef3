"""A snake game on a wrapping grid: rules, quit key bindings and a pygame window."""

__version__ = "0.1.0"
__all__ = ["__version__"]