"""Stepwise sorting visualizer."""

__version__ = "0.1.0"
