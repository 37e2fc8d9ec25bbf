# This project was developed with assistance from AI tools.
"""Shared schema components."""

from .calculator import FieldError, field_messages

__all__ = ["FieldError", "field_messages"]
