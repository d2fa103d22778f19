"""Immutable car construction through a fluent builder."""

__version__ = "1.0.0"
