"""
Core music primitives - the interval algebra and its consumers.

These are the invariants everything else composes on:
- Size: Diatonic interval size (unison to seventh)
- Quality: Diminished / minor / major / perfect / augmented, with degree
- Interval: Spelled distance between pitches (quality + size + octaves)
- NoteName, PitchClass, Note: Spelled notes and their projections
- interval_between, directed_interval: Interval between two notes
- Scale: Step pattern from an implicit root
- Key: Accidental for each letter name
"""

from resonata.core.interval import Interval
from resonata.core.pitch import (
    Note,
    NoteName,
    NoteProjection,
    PitchClass,
    directed_interval,
    interval_between,
    spell_interval,
)
from resonata.core.quality import Quality, QualityKind, Size, is_valid
from resonata.core.scale import Key, Scale

__all__ = [
    # Lattice
    "Size",
    "Quality",
    "QualityKind",
    "is_valid",
    # Interval
    "Interval",
    # Pitch
    "NoteName",
    "PitchClass",
    "Note",
    "NoteProjection",
    "spell_interval",
    "directed_interval",
    "interval_between",
    # Scale
    "Scale",
    "Key",
]
