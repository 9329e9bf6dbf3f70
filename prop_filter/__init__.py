"""Prop Filter - interactive filtering of real-estate listings."""

__version__ = "0.1.0"
