"""Pitching statistics for a fixed set of MLB pitchers."""

__version__ = "0.1.0"
