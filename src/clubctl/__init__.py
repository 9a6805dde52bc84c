"""clubctl — in-memory fitness club membership registry."""

__version__ = "0.1.0"
