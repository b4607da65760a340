"""Breeze widget-style building blocks: geometry, tile sets, shadows, window-drag rules and settings."""

__version__ = "6.4.80"