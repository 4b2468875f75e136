"""Client-side inventory and point-of-sale state model."""

__version__ = "0.1.0"
