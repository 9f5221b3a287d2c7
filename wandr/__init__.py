"""Wandr backend: attraction visits, location progress and badge awards."""

__version__ = "1.0.0"
