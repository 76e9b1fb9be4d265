"""
Error types.

All errors derive from ResonataError and ValueError, so callers can catch
either the library root or the usual invalid-value exception.
"""


class ResonataError(ValueError):
    """Base class for all library errors."""


# Intervals


class IntervalError(ResonataError):
    """Base class for interval errors."""


class InvalidInterval(IntervalError):
    """Quality and size do not combine, or the semitone total is out of range."""


class InvalidIntervalQuality(IntervalError):
    """Malformed quality token or an alteration degree below 1."""


class InvalidIntervalSize(IntervalError):
    """Size token is 0, or an octave count is negative or out of range."""


class InvalidIntervalFormat(IntervalError):
    """Notation does not split into quality and size."""


# Notes


class NoteError(ResonataError):
    """Base class for note errors."""


class InvalidNoteName(NoteError):
    pass


class InvalidAccidental(NoteError):
    pass


class InvalidOctave(NoteError):
    pass


# Scales and keys


class ScaleError(ResonataError):
    """Base class for scale errors."""


class InvalidScale(ScaleError):
    pass


class InvalidKey(ScaleError):
    pass
