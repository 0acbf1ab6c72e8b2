"""Utility helpers for the application."""

from .units import convert_value, to_quantity, ureg

__all__ = ["convert_value", "to_quantity", "ureg"]
