"""Quantity measurement: unit conversion, comparison and arithmetic."""

__version__ = "0.1.0"
