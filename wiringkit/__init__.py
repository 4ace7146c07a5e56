"""Character classes, bit and math helpers, number formatting and a mutable string type."""

__version__ = "0.1.0"
__all__ = ["chars", "core", "numfmt", "wstring"]