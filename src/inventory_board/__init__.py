"""Inventory Board - per-location inventory lists with low-stock highlighting."""

__version__ = "0.1.0"
