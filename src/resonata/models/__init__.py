"""
Pydantic models for serializing library values.

This module provides:
- IntervalModel: A spelled interval, field by field
- ScaleDefinition: A named step pattern with its modes
- ScaleMetadata: Listing view of a definition
"""

from resonata.models.interval import IntervalModel
from resonata.models.scale import ScaleDefinition, ScaleMetadata, normalize_name

__all__ = [
    "IntervalModel",
    "ScaleDefinition",
    "ScaleMetadata",
    "normalize_name",
]
