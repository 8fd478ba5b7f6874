"""Hometowns: tonight's NHL players grouped by where they were born."""

__version__ = "0.1.0"
