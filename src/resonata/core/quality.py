"""
Quality and size primitives - the interval lattice.

Size is the diatonic category of an interval (unison to seventh).
Quality is its flavour (diminished, minor, major, perfect, augmented).
Not every pairing is legal: is_valid() is the single source of truth.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from functools import total_ordering
from typing import ClassVar

from resonata.constants import (
    AUGMENTED_SYMBOLS,
    DIATONIC_STEPS_PER_OCTAVE,
    DIMINISHED_SYMBOLS,
    NATURAL_SEMITONES,
    PERFECT_SYMBOLS,
)
from resonata.errors import InvalidIntervalQuality


class Size(IntEnum):
    """
    The seven diatonic interval sizes (0-6).

    Compound intervals are a size plus octaves, so there is no NINTH -
    a ninth is a SECOND with one octave.
    """

    UNISON = 0
    SECOND = 1
    THIRD = 2
    FOURTH = 3
    FIFTH = 4
    SIXTH = 5
    SEVENTH = 6

    @property
    def diatonic_semitones(self) -> int:
        """Semitones from the tonic in a major scale (THIRD -> 4)."""
        return NATURAL_SEMITONES[self.value]

    @property
    def is_perfect(self) -> bool:
        """Unison, fourth and fifth take perfect qualities."""
        return self in _PERFECT_SIZES

    @property
    def number(self) -> int:
        """The 1-based number used in notation (THIRD -> 3)."""
        return self.value + 1

    def invert(self) -> Size:
        """Second <-> seventh, third <-> sixth, fourth <-> fifth."""
        return Size((DIATONIC_STEPS_PER_OCTAVE - self.value) % DIATONIC_STEPS_PER_OCTAVE)

    @classmethod
    def from_steps(cls, steps: int) -> Size:
        """Size of a diatonic step count, ignoring octaves."""
        return cls(steps % DIATONIC_STEPS_PER_OCTAVE)

    def __str__(self) -> str:
        return str(self.number)


_PERFECT_SIZES = frozenset({Size.UNISON, Size.FOURTH, Size.FIFTH})


class QualityKind(str, Enum):
    """The five quality families. Values are the notation symbols."""

    DIMINISHED = "d"
    MINOR = "m"
    MAJOR = "M"
    PERFECT = "P"
    AUGMENTED = "A"


@total_ordering
@dataclass(frozen=True, eq=False)
class Quality:
    """
    An interval quality with an alteration degree.

    Degree only applies to diminished and augmented qualities:
    Quality.diminished(2) is doubly diminished. Other kinds carry degree 0.

    Qualities compare by their semitone offset from major/perfect, so
    MAJOR == PERFECT. Diminished(n) counts as -(n + 1), its offset on an
    imperfect size; see semitone_offset() for the size-aware value.

    Immutable and hashable.
    """

    kind: QualityKind
    degree: int = 0

    MINOR: ClassVar[Quality]
    MAJOR: ClassVar[Quality]
    PERFECT: ClassVar[Quality]

    def __post_init__(self) -> None:
        if self.is_altered:
            if self.degree < 1:
                raise InvalidIntervalQuality(
                    f"{self.kind.name.lower()} degree must be at least 1, got {self.degree}"
                )
        elif self.degree != 0:
            raise InvalidIntervalQuality(f"{self.kind.name.lower()} takes no degree")

    @classmethod
    def diminished(cls, degree: int = 1) -> Quality:
        return cls(QualityKind.DIMINISHED, degree)

    @classmethod
    def augmented(cls, degree: int = 1) -> Quality:
        return cls(QualityKind.AUGMENTED, degree)

    @property
    def is_altered(self) -> bool:
        """True for diminished and augmented qualities."""
        return self.kind in (QualityKind.DIMINISHED, QualityKind.AUGMENTED)

    @property
    def offset(self) -> int:
        """Semitones relative to major/perfect, without reference to a size."""
        if self.kind == QualityKind.AUGMENTED:
            return self.degree
        if self.kind == QualityKind.DIMINISHED:
            return -self.degree - 1
        if self.kind == QualityKind.MINOR:
            return -1
        return 0

    def semitone_offset(self, size: Size) -> int:
        """
        Semitones this quality adds to the diatonic size.

        On perfect sizes diminished sits directly below perfect. On imperfect
        sizes minor already occupies -1, so diminished starts at -2.
        """
        if self.kind == QualityKind.DIMINISHED and size.is_perfect:
            return -self.degree
        return self.offset

    @classmethod
    def from_semitone_offset(cls, offset: int, size: Size) -> Quality:
        """
        The quality that adds exactly `offset` semitones to `size`.

        Inverse of semitone_offset() for a fixed size.
        """
        if offset > 0:
            return cls.augmented(offset)
        if size.is_perfect:
            return cls.PERFECT if offset == 0 else cls.diminished(-offset)
        if offset == 0:
            return cls.MAJOR
        if offset == -1:
            return cls.MINOR
        return cls.diminished(-offset - 1)

    def invert(self) -> Quality:
        """Diminished <-> augmented, minor <-> major, perfect stays perfect."""
        if self.kind == QualityKind.DIMINISHED:
            return Quality.augmented(self.degree)
        if self.kind == QualityKind.AUGMENTED:
            return Quality.diminished(self.degree)
        if self.kind == QualityKind.MINOR:
            return Quality.MAJOR
        if self.kind == QualityKind.MAJOR:
            return Quality.MINOR
        return self

    @property
    def symbol(self) -> str:
        """Notation token: 'M', 'm', 'P', or a run of 'A' / 'd'."""
        if self.is_altered:
            return self.kind.value * self.degree
        return self.kind.value

    @classmethod
    def parse(cls, token: str) -> Quality:
        """
        Parse a quality token like 'M', 'm', 'P', 'AA' or 'ddd'.

        Runs must be homogeneous: 'Ad' and 'MM' are rejected.
        """
        if not token:
            raise InvalidIntervalQuality("Empty interval quality")

        if token == "M":
            return cls.MAJOR
        if token == "m":
            return cls.MINOR
        if len(token) == 1 and token in PERFECT_SYMBOLS:
            return cls.PERFECT

        if all(c in AUGMENTED_SYMBOLS for c in token):
            return cls.augmented(len(token))
        if all(c in DIMINISHED_SYMBOLS for c in token):
            return cls.diminished(len(token))

        raise InvalidIntervalQuality(f"Unknown interval quality: {token}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quality):
            return NotImplemented
        return self.offset == other.offset

    def __lt__(self, other: Quality) -> bool:
        if not isinstance(other, Quality):
            return NotImplemented
        return self.offset < other.offset

    def __hash__(self) -> int:
        return hash(self.offset)

    def __str__(self) -> str:
        return self.symbol

    def __repr__(self) -> str:
        if self.is_altered:
            return f"Quality.{self.kind.name.lower()}({self.degree})"
        return f"Quality.{self.kind.name}"


Quality.MINOR = Quality(QualityKind.MINOR)
Quality.MAJOR = Quality(QualityKind.MAJOR)
Quality.PERFECT = Quality(QualityKind.PERFECT)


def is_valid(quality: Quality, size: Size) -> bool:
    """
    Check that a quality may qualify a size.

    Major and minor need an imperfect size, perfect needs a perfect size,
    diminished and augmented go with anything.
    """
    if quality.kind in (QualityKind.MAJOR, QualityKind.MINOR):
        return not size.is_perfect
    if quality.kind == QualityKind.PERFECT:
        return size.is_perfect
    return True
