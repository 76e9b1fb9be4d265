"""
Known-scale catalog.

Scale families live as YAML bundles; the catalog loads them and matches
Scale values against every named rotation.
"""

from resonata.scales.loader import DEFAULT_LIBRARY_PATH, ScaleCatalog, ScaleMatch

__all__ = [
    "DEFAULT_LIBRARY_PATH",
    "ScaleCatalog",
    "ScaleMatch",
]
