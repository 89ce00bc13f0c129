"""Preflop starting-hand strength chart."""

__version__ = "0.1.0"
