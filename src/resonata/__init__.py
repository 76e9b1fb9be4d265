"""
resonata - spelled intervals, notes, scales and keys.

Intervals carry quality, size and octaves and convert losslessly between
that spelling, semitones, diatonic steps and notation like "M3" or "d5".
"""

from resonata.core import (
    Interval,
    Key,
    Note,
    NoteName,
    NoteProjection,
    PitchClass,
    Quality,
    QualityKind,
    Scale,
    Size,
    directed_interval,
    interval_between,
    is_valid,
    spell_interval,
)
from resonata.errors import (
    IntervalError,
    InvalidAccidental,
    InvalidInterval,
    InvalidIntervalFormat,
    InvalidIntervalQuality,
    InvalidIntervalSize,
    InvalidKey,
    InvalidNoteName,
    InvalidOctave,
    InvalidScale,
    NoteError,
    ResonataError,
    ScaleError,
)

__version__ = "0.1.0"

__all__ = [
    "Interval",
    "Key",
    "Note",
    "NoteName",
    "NoteProjection",
    "PitchClass",
    "Quality",
    "QualityKind",
    "Scale",
    "Size",
    "directed_interval",
    "interval_between",
    "is_valid",
    "spell_interval",
    # Errors
    "ResonataError",
    "IntervalError",
    "InvalidInterval",
    "InvalidIntervalFormat",
    "InvalidIntervalQuality",
    "InvalidIntervalSize",
    "NoteError",
    "InvalidNoteName",
    "InvalidAccidental",
    "InvalidOctave",
    "ScaleError",
    "InvalidScale",
    "InvalidKey",
]
