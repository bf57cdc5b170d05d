"""Content models, schema naming, an in-memory post store and a small Flask site."""

__version__ = "0.1.0"
__all__ = ["__version__"]