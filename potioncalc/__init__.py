"""Search ingredient combinations that brew perfect Potionomics potions."""

__version__ = "0.1.0"
__all__ = ["__version__"]