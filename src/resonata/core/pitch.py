"""
Pitch primitives - NoteName, PitchClass, Note, and the note-interval bridge.

A Note is spelled: letter + accidental (+ optional octave). Anything that
exposes a chromatic degree and a diatonic position can be measured with
interval_between() / directed_interval(), which reconcile the two distances
into a uniquely spelled Interval.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum
from typing import Protocol

from resonata.constants import (
    ACCIDENTAL_SYMBOLS,
    DIATONIC_STEPS_PER_OCTAVE,
    NATURAL_SEMITONES,
    OCTAVE_MAX,
    OCTAVE_MIN,
    SEMITONES_PER_OCTAVE,
)
from resonata.core.interval import Interval
from resonata.core.quality import Size
from resonata.errors import InvalidAccidental, InvalidNoteName, InvalidOctave

# Display name mappings (module level to avoid IntEnum member issues)
_SHARP_NAMES: list[str] = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]
_FLAT_NAMES: list[str] = ["C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"]

_NOTE_RE = re.compile(r"^(?P<name>[A-Ga-g])(?P<accidental>[#x𝄪b♯♭♮]*)(?P<octave>-?\d+)?$")


class NoteName(IntEnum):
    """The seven letter names, numbered by diatonic position from C."""

    C = 0
    D = 1
    E = 2
    F = 3
    G = 4
    A = 5
    B = 6

    @property
    def natural_semitones(self) -> int:
        """Semitones above C of the natural note (E -> 4)."""
        return NATURAL_SEMITONES[self.value]

    def shifted(self, steps: int) -> NoteName:
        """Move by diatonic steps, wrapping around the octave."""
        return NoteName((self.value + steps) % DIATONIC_STEPS_PER_OCTAVE)

    @classmethod
    def parse(cls, letter: str) -> NoteName:
        try:
            return cls[letter.strip().upper()]
        except KeyError:
            raise InvalidNoteName(f"Unknown note name: {letter}") from None


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave- and spelling-independent: C# and Db are both PitchClass.Cs.
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % SEMITONES_PER_OCTAVE)

    def spell(self, prefer_flats: bool = False) -> str:
        """Get a conventional name."""
        names = _FLAT_NAMES if prefer_flats else _SHARP_NAMES
        return names[self.value]

    @classmethod
    def from_midi(cls, midi_note: int) -> PitchClass:
        """Extract pitch class from MIDI note number."""
        return cls(midi_note % SEMITONES_PER_OCTAVE)


class NoteProjection(Protocol):
    """What the bridge needs from a note."""

    @property
    def chromatic_degree(self) -> int: ...

    @property
    def diatonic_position(self) -> int: ...


def spell_interval(chromatic: int, diatonic: int) -> Interval:
    """
    Spell the interval spanning `chromatic` semitones and `diatonic` letters.

    The semitone count fixes the distance, the letter count fixes size and
    octaves; the quality is whatever reconciles them.

    Raises:
        InvalidInterval: the semitone count is out of range
        InvalidIntervalSize: the letter distance is negative
    """
    octaves = diatonic // DIATONIC_STEPS_PER_OCTAVE
    provisional = Interval.from_semitones(chromatic)
    return provisional.as_size(Size.from_steps(diatonic), octaves)


def directed_interval(source: NoteProjection, target: NoteProjection) -> Interval:
    """
    Interval from source up to target, keeping direction.

    A target spelled below the source has no ascending interval and
    raises InvalidIntervalSize; use interval_between() for magnitude only.
    """
    return spell_interval(
        target.chromatic_degree - source.chromatic_degree,
        target.diatonic_position - source.diatonic_position,
    )


def interval_between(a: NoteProjection, b: NoteProjection) -> Interval:
    """
    Interval between two notes regardless of order.

    The pair is measured from the diatonically lower note; for equal
    letters, from the chromatically lower one.
    """
    chromatic = b.chromatic_degree - a.chromatic_degree
    diatonic = b.diatonic_position - a.diatonic_position
    if diatonic < 0 or (diatonic == 0 and chromatic < 0):
        chromatic, diatonic = -chromatic, -diatonic
    return spell_interval(chromatic, diatonic)


def _parse_accidental(symbols: str) -> int:
    values = [ACCIDENTAL_SYMBOLS[c] for c in symbols]
    if 0 in values and len(values) > 1:
        raise InvalidAccidental(f"Natural sign cannot be combined: {symbols}")
    if any(v > 0 for v in values) and any(v < 0 for v in values):
        raise InvalidAccidental(f"Cannot mix sharps and flats: {symbols}")
    return sum(values)


@dataclass(frozen=True)
class Note:
    """
    A spelled note, optionally pitched in an octave.

    Accidental is in semitones: -1 = flat, +1 = sharp, 0 = natural.
    Octave follows scientific pitch notation (C4 = middle C) and must be
    within -1..9; unpitched notes leave it as None.

    Examples:
        Note(NoteName.F, 1) = F#
        Note(NoteName.B, -1, 3) = Bb3
        Note.parse("Ebb5")
    """

    name: NoteName
    accidental: int = 0
    octave: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, NoteName):
            raise InvalidNoteName(f"Expected a NoteName, got {self.name!r}")
        if self.octave is not None and not OCTAVE_MIN <= self.octave <= OCTAVE_MAX:
            raise InvalidOctave(f"Octave must be {OCTAVE_MIN}-{OCTAVE_MAX}, got {self.octave}")

    @classmethod
    def parse(cls, text: str) -> Note:
        """Parse a note from a string like 'C', 'F#4', 'Bb', 'Gx-1'."""
        match = _NOTE_RE.match(text.strip())
        if match is None:
            raise InvalidNoteName(f"Invalid note: {text}")

        octave = match.group("octave")
        return cls(
            NoteName.parse(match.group("name")),
            _parse_accidental(match.group("accidental")),
            int(octave) if octave is not None else None,
        )

    @classmethod
    def from_midi(cls, midi_note: int, prefer_flats: bool = False) -> Note:
        """Spell a MIDI note number, sharps by default (61 -> C#4)."""
        pitch = PitchClass.from_midi(midi_note).spell(prefer_flats)
        octave = midi_note // SEMITONES_PER_OCTAVE - 1
        return cls.parse(f"{pitch}{octave}")

    @property
    def is_pitched(self) -> bool:
        return self.octave is not None

    @property
    def chromatic_degree(self) -> int:
        """Semitones above C (of octave 0 when pitched). Cb -> -1."""
        base = self.name.natural_semitones + self.accidental
        return base + SEMITONES_PER_OCTAVE * (self.octave or 0)

    @property
    def diatonic_position(self) -> int:
        """Letter steps above C (of octave 0 when pitched). F4 -> 31."""
        return self.name.value + DIATONIC_STEPS_PER_OCTAVE * (self.octave or 0)

    @property
    def pitch_class(self) -> PitchClass:
        return PitchClass(self.chromatic_degree % SEMITONES_PER_OCTAVE)

    def to_midi(self) -> int:
        """Convert to MIDI note number. C4 = 60."""
        if self.octave is None:
            raise InvalidOctave(f"{self} has no octave")
        return self.chromatic_degree + SEMITONES_PER_OCTAVE

    def with_octave(self, octave: int | None) -> Note:
        return Note(self.name, self.accidental, octave)

    def transpose(self, interval: Interval) -> Note:
        """
        Transpose up by an interval, keeping the spelling exact.

        The letter moves by the interval's diatonic steps and the accidental
        takes up the difference: E + M3 = G#, not Ab.
        """
        return self._at(
            self.chromatic_degree + interval.semitones,
            self.diatonic_position + interval.diatonic_steps,
        )

    def transpose_down(self, interval: Interval) -> Note:
        """Transpose down by an interval, keeping the spelling exact."""
        return self._at(
            self.chromatic_degree - interval.semitones,
            self.diatonic_position - interval.diatonic_steps,
        )

    def _at(self, chromatic: int, position: int) -> Note:
        octave, letter = divmod(position, DIATONIC_STEPS_PER_OCTAVE)
        name = NoteName(letter)
        accidental = chromatic - name.natural_semitones - SEMITONES_PER_OCTAVE * octave
        return Note(name, accidental, octave if self.is_pitched else None)

    def interval_to(self, other: Note) -> Interval:
        """
        Ascending interval from this note to another.

        Two pitched notes are measured as written. Otherwise the other note
        is placed at the nearest position at or above this one, so B -> C
        is a minor second and C# -> C a diminished octave.
        """
        if self.is_pitched and other.is_pitched:
            return directed_interval(self, other)

        steps = (other.name - self.name) % DIATONIC_STEPS_PER_OCTAVE
        octave = (self.diatonic_position + steps) // DIATONIC_STEPS_PER_OCTAVE
        target = other.with_octave(None).chromatic_degree + SEMITONES_PER_OCTAVE * octave
        # Same letter but lower: take the next octave
        if steps == 0 and target < self.chromatic_degree:
            steps += DIATONIC_STEPS_PER_OCTAVE
            target += SEMITONES_PER_OCTAVE
        return spell_interval(target - self.chromatic_degree, steps)

    def __add__(self, other: Interval) -> Note:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.transpose(other)

    def __sub__(self, other: Interval | Note) -> Note | Interval:
        """Note - Interval transposes down; Note - Note measures the distance."""
        if isinstance(other, Interval):
            return self.transpose_down(other)
        if isinstance(other, Note):
            return interval_between(other, self)
        return NotImplemented

    def __str__(self) -> str:
        if self.accidental > 0:
            accidental = "#" * self.accidental
        else:
            accidental = "b" * -self.accidental
        octave = "" if self.octave is None else str(self.octave)
        return f"{self.name.name}{accidental}{octave}"

    def __repr__(self) -> str:
        return f"Note.parse({str(self)!r})"
