"""Typed HTTP headers: a header map with typed access, header classes and value types."""

__version__ = "0.3.5"