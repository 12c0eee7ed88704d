"""Numerical, vector and physics helpers, signal transforms and typed domain records."""

__version__ = "0.1.0"