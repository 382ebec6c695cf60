"""Parse, reduce and solve polynomial equations of degree up to two."""

__version__ = "1.0.0"