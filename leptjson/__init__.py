"""A small, strict JSON parser with a typed value model."""

__version__ = "0.1.0"
__all__ = ["parser", "scanner", "value"]