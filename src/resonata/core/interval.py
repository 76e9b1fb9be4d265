"""
Interval primitive - quality, size and octaves.

An interval is spelled: a major third and a diminished fourth are different
intervals even though both span four semitones. The semitone total is
derived from the spelling and is what equality and ordering use.

Conversions:
- build / from_semitones: spelling <-> semitone count
- to_diatonic_steps / as_size: spelling <-> letter distance, respelling
- parse / str(): spelling <-> notation ("M3", "d5", "AA2", "P8")
"""

from __future__ import annotations

import re
from functools import total_ordering
from typing import Any, ClassVar

from resonata.constants import (
    DIATONIC_STEPS_PER_OCTAVE,
    SEMITONE_MAX,
    SEMITONE_MIN,
    SEMITONES_PER_OCTAVE,
)
from resonata.core.quality import Quality, Size, is_valid
from resonata.errors import InvalidInterval, InvalidIntervalFormat, InvalidIntervalSize

# Spelling chosen for each chromatic step within an octave.
# Six semitones is ambiguous; the augmented fourth wins.
_CHROMATIC_TABLE: tuple[tuple[Quality, Size], ...] = (
    (Quality.PERFECT, Size.UNISON),
    (Quality.MINOR, Size.SECOND),
    (Quality.MAJOR, Size.SECOND),
    (Quality.MINOR, Size.THIRD),
    (Quality.MAJOR, Size.THIRD),
    (Quality.PERFECT, Size.FOURTH),
    (Quality.augmented(1), Size.FOURTH),
    (Quality.PERFECT, Size.FIFTH),
    (Quality.MINOR, Size.SIXTH),
    (Quality.MAJOR, Size.SIXTH),
    (Quality.MINOR, Size.SEVENTH),
    (Quality.MAJOR, Size.SEVENTH),
)

_NOTATION_RE = re.compile(r"^(?P<quality>[^0-9]*?)(?P<size>[0-9]+|U)$")


def _to_size(size: int) -> Size:
    try:
        return Size(size)
    except ValueError:
        raise InvalidIntervalSize(f"Unknown interval size: {size!r}") from None


def _check_range(semitones: int) -> None:
    if not SEMITONE_MIN <= semitones <= SEMITONE_MAX:
        raise InvalidInterval(
            f"Interval of {semitones} semitones is outside {SEMITONE_MIN}..{SEMITONE_MAX}"
        )


@total_ordering
class Interval:
    """
    Distance between two pitches, spelled as quality + size + octaves.

    Equality, ordering and hashing use the semitone total, so the
    augmented fourth equals the diminished fifth. Compare `spelling`
    (or str()) to tell them apart.

    Immutable and hashable.
    """

    __slots__ = ("_quality", "_size", "_octaves", "_semitones")
    _quality: Quality
    _size: Size
    _octaves: int
    _semitones: int

    # Named intervals (class constants)
    UNISON: ClassVar[Interval]
    MINOR_SECOND: ClassVar[Interval]
    MAJOR_SECOND: ClassVar[Interval]
    MINOR_THIRD: ClassVar[Interval]
    MAJOR_THIRD: ClassVar[Interval]
    PERFECT_FOURTH: ClassVar[Interval]
    TRITONE: ClassVar[Interval]
    PERFECT_FIFTH: ClassVar[Interval]
    MINOR_SIXTH: ClassVar[Interval]
    MAJOR_SIXTH: ClassVar[Interval]
    MINOR_SEVENTH: ClassVar[Interval]
    MAJOR_SEVENTH: ClassVar[Interval]
    OCTAVE: ClassVar[Interval]

    # Short aliases
    P1: ClassVar[Interval]
    m2: ClassVar[Interval]
    M2: ClassVar[Interval]
    m3: ClassVar[Interval]
    M3: ClassVar[Interval]
    P4: ClassVar[Interval]
    TT: ClassVar[Interval]
    P5: ClassVar[Interval]
    m6: ClassVar[Interval]
    M6: ClassVar[Interval]
    m7: ClassVar[Interval]
    M7: ClassVar[Interval]
    P8: ClassVar[Interval]

    def __init__(self, quality: Quality, size: Size, octaves: int = 0) -> None:
        """
        Build an interval from its spelling.

        Raises:
            InvalidInterval: quality cannot qualify size, or the semitone
                total is out of range
            InvalidIntervalSize: size is not 0-6, or octaves is negative
        """
        size = _to_size(size)
        if octaves < 0:
            raise InvalidIntervalSize(f"Octaves must be non-negative, got {octaves}")
        if not is_valid(quality, size):
            raise InvalidInterval(f"{quality!r} cannot qualify a {size.name.lower()}")

        semitones = (
            size.diatonic_semitones
            + quality.semitone_offset(size)
            + octaves * SEMITONES_PER_OCTAVE
        )
        _check_range(semitones)

        object.__setattr__(self, "_quality", quality)
        object.__setattr__(self, "_size", size)
        object.__setattr__(self, "_octaves", octaves)
        object.__setattr__(self, "_semitones", semitones)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Interval is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Interval is immutable")

    # Construction

    @classmethod
    def build(cls, quality: Quality, size: Size, octaves: int = 0) -> Interval:
        """Same as the constructor; reads better next to from_semitones()."""
        return cls(quality, size, octaves)

    @classmethod
    def from_semitones(cls, semitones: int) -> Interval:
        """
        Spell a semitone count.

        Within each octave the conventional spelling is used (6 -> A4).
        Negative counts are diminished unisons (-2 -> dd1).
        """
        _check_range(semitones)
        if semitones < 0:
            return cls(Quality.diminished(-semitones), Size.UNISON)

        octaves, remainder = divmod(semitones, SEMITONES_PER_OCTAVE)
        quality, size = _CHROMATIC_TABLE[remainder]
        return cls(quality, size, octaves)

    @classmethod
    def major(cls, size: Size, octaves: int = 0) -> Interval:
        return cls(Quality.MAJOR, size, octaves)

    @classmethod
    def minor(cls, size: Size, octaves: int = 0) -> Interval:
        return cls(Quality.MINOR, size, octaves)

    @classmethod
    def perfect(cls, size: Size, octaves: int = 0) -> Interval:
        return cls(Quality.PERFECT, size, octaves)

    @classmethod
    def augmented(cls, size: Size, degree: int = 1, octaves: int = 0) -> Interval:
        return cls(Quality.augmented(degree), size, octaves)

    @classmethod
    def diminished(cls, size: Size, degree: int = 1, octaves: int = 0) -> Interval:
        return cls(Quality.diminished(degree), size, octaves)

    @classmethod
    def parse(cls, text: str) -> Interval:
        """
        Parse notation like 'M3', 'd5', 'AA2', 'P8' or 'm9'.

        The number is 1-based and compound-aware: 8 is an octave unison,
        9 a second plus an octave, 15 a unison plus two octaves.
        'U' is accepted for a simple unison.
        """
        text = text.strip()
        match = _NOTATION_RE.match(text)
        if match is None:
            raise InvalidIntervalFormat(f"Invalid interval format: {text!r}")

        quality = Quality.parse(match.group("quality"))

        size_token = match.group("size")
        if size_token == "U":
            return cls(quality, Size.UNISON)

        number = int(size_token)
        if number == 0:
            raise InvalidIntervalSize("Interval size must be at least 1")
        octaves, steps = divmod(number - 1, DIATONIC_STEPS_PER_OCTAVE)
        return cls(quality, Size(steps), octaves)

    # Accessors

    @property
    def quality(self) -> Quality:
        return self._quality

    @property
    def size(self) -> Size:
        return self._size

    @property
    def octaves(self) -> int:
        return self._octaves

    @property
    def semitones(self) -> int:
        """Total semitones, octaves included."""
        return self._semitones

    def to_semitones(self) -> int:
        return self._semitones

    @property
    def diatonic_steps(self) -> int:
        """Letter distance, octaves included (M10 -> 9)."""
        return self._size.value + DIATONIC_STEPS_PER_OCTAVE * self._octaves

    def to_diatonic_steps(self) -> int:
        return self.diatonic_steps

    @property
    def spelling(self) -> tuple[str, Size, int]:
        """Structural identity: (quality symbol, size, octaves)."""
        return (self._quality.symbol, self._size, self._octaves)

    @property
    def simple(self) -> Interval:
        """The same spelling within one octave."""
        return self.with_octaves(0)

    @property
    def is_compound(self) -> bool:
        return self._octaves > 0

    # Respelling and arithmetic

    def as_size(self, size: Size, octaves: int = 0) -> Interval:
        """
        Respell the same distance with another size.

        The quality absorbs the difference: a major third as a fourth is a
        diminished fourth. The semitone total never changes.

        Raises:
            InvalidIntervalSize: size is not 0-6, or octaves is negative
        """
        size = _to_size(size)
        if octaves < 0:
            raise InvalidIntervalSize(f"Octaves must be non-negative, got {octaves}")

        natural = size.diatonic_semitones + octaves * SEMITONES_PER_OCTAVE
        quality = Quality.from_semitone_offset(self._semitones - natural, size)
        return Interval(quality, size, octaves)

    def invert(self) -> Interval:
        """
        Invert within the octave, keeping the octave count.

        M2 -> m7, A4 -> d5, P1 -> P1.
        """
        return Interval(self._quality.invert(), self._size.invert(), self._octaves)

    def with_octaves(self, octaves: int) -> Interval:
        """The same spelling with a different octave count."""
        if octaves < 0:
            raise InvalidIntervalSize(f"Octaves must be non-negative, got {octaves}")
        try:
            return Interval(self._quality, self._size, octaves)
        except InvalidInterval as exc:
            raise InvalidIntervalSize(
                f"{self.simple} with {octaves} octaves is out of range"
            ) from exc

    def compound(self, octaves: int = 1) -> Interval:
        """Add octaves (m6.compound(2) -> m20)."""
        return self.with_octaves(self._octaves + octaves)

    def __add__(self, other: Interval) -> Interval:
        """Add two intervals. The result is spelled by from_semitones()."""
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval.from_semitones(self._semitones + other._semitones)

    def __sub__(self, other: Interval) -> Interval:
        """Subtract an interval. The result is spelled by from_semitones()."""
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval.from_semitones(self._semitones - other._semitones)

    # Comparison

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self._semitones == other._semitones

    def __lt__(self, other: Interval) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self._semitones < other._semitones

    def __hash__(self) -> int:
        return hash(self._semitones)

    def __repr__(self) -> str:
        return f"Interval.parse({str(self)!r})"

    def __str__(self) -> str:
        number = self._size.number + DIATONIC_STEPS_PER_OCTAVE * self._octaves
        return f"{self._quality.symbol}{number}"


_NAMED_INTERVALS = {
    "UNISON": "P1",
    "MINOR_SECOND": "m2",
    "MAJOR_SECOND": "M2",
    "MINOR_THIRD": "m3",
    "MAJOR_THIRD": "M3",
    "PERFECT_FOURTH": "P4",
    "TRITONE": "A4",
    "PERFECT_FIFTH": "P5",
    "MINOR_SIXTH": "m6",
    "MAJOR_SIXTH": "M6",
    "MINOR_SEVENTH": "m7",
    "MAJOR_SEVENTH": "M7",
    "OCTAVE": "P8",
}

# Initialize class constants after class is defined
for _name, _notation in _NAMED_INTERVALS.items():
    setattr(Interval, _name, Interval.parse(_notation))

# Short aliases
for _notation in ("P1", "m2", "M2", "m3", "M3", "P4", "P5", "m6", "M6", "m7", "M7", "P8"):
    setattr(Interval, _notation, Interval.parse(_notation))
Interval.TT = Interval.TRITONE
