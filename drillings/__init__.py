"""Loading, checking and tracking programming exercises, plus worked example modules."""

__version__ = "0.1.0"
__all__ = ["__version__"]