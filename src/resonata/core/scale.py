"""
Scale primitives - Scale and Key.

Scales are step patterns from an implicit root: each interval is measured
from the previous degree. Keys map each letter name to an accidental.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import ClassVar

from resonata.core.interval import Interval
from resonata.core.pitch import Note, NoteName, spell_interval
from resonata.errors import IntervalError, InvalidKey, InvalidScale, NoteError

_SEPARATOR_RE = re.compile(r"[,\s]+")


@dataclass(frozen=True)
class Scale:
    """
    A scale defined by its step intervals.

    A major scale is: M2 M2 m2 M2 M2 M2 m2.
    Steps are spelled, so the harmonic minor's augmented second survives
    realisation on a root. Scales compare by step semitones only; the name
    is a label.

    Immutable and hashable.
    """

    intervals: tuple[Interval, ...]
    name: str = field(default="", compare=False)

    # Common scales (defined after class)
    MAJOR: ClassVar[Scale]
    NATURAL_MINOR: ClassVar[Scale]
    HARMONIC_MINOR: ClassVar[Scale]
    MELODIC_MINOR: ClassVar[Scale]
    DORIAN: ClassVar[Scale]
    PHRYGIAN: ClassVar[Scale]
    LYDIAN: ClassVar[Scale]
    MIXOLYDIAN: ClassVar[Scale]
    LOCRIAN: ClassVar[Scale]

    def __post_init__(self) -> None:
        intervals = tuple(self.intervals)
        for interval in intervals:
            if not isinstance(interval, Interval):
                raise InvalidScale(f"Scale steps must be intervals, got {interval!r}")
        object.__setattr__(self, "intervals", intervals)

    @classmethod
    def from_steps(cls, steps: Iterable[int], name: str = "") -> Scale:
        """
        Create a scale from semitone steps, e.g. [2, 2, 1, 2, 2, 2, 1].

        Steps get their conventional spelling (3 -> m3).
        """
        return cls(tuple(Interval.from_semitones(step) for step in steps), name)

    @classmethod
    def from_notes(cls, notes: Sequence[Note], name: str = "") -> Scale:
        """
        Create a scale from its notes, e.g. C D E F# G A B.

        Each step is the ascending interval to the next note, closing with
        the step from the last note back to the first. A trailing repeat of
        the first note is ignored. Octaves are disregarded.
        """
        notes = [note.with_octave(None) for note in notes]
        if len(notes) > 1 and notes[-1] == notes[0]:
            notes = notes[:-1]
        if not notes:
            return cls((), name)

        steps = [a.interval_to(b) for a, b in zip(notes, notes[1:])]
        steps.append(notes[-1].interval_to(notes[0]))
        return cls(tuple(steps), name)

    @classmethod
    def parse(cls, text: str, name: str = "") -> Scale:
        """
        Parse a scale from intervals ('M2, M2, m2, ...') or notes ('C D E ...').

        Tokens may be separated by commas and/or whitespace. Text that reads
        as intervals is taken as intervals, so 'A4 D5' is an augmented fourth
        and a diminished fifth; use from_notes() for pitched note lists.
        """
        tokens = [token for token in _SEPARATOR_RE.split(text.strip()) if token]
        if not tokens:
            raise InvalidScale("Empty scale")

        try:
            return cls(tuple(Interval.parse(token) for token in tokens), name)
        except IntervalError:
            pass

        try:
            return cls.from_notes([Note.parse(token) for token in tokens], name)
        except (NoteError, IntervalError) as exc:
            raise InvalidScale(f"Cannot parse scale: {text}") from exc

    def to_steps(self) -> list[int]:
        """Semitone steps, e.g. [2, 2, 1, 2, 2, 2, 1] for major."""
        return [interval.semitones for interval in self.intervals]

    @property
    def span(self) -> int:
        """Total semitones covered by the steps (12 for octave scales)."""
        return sum(self.to_steps())

    def degrees(self) -> list[Interval]:
        """
        Intervals from the root to each degree, starting with P1.

        Major -> P1 M2 M3 P4 P5 M6 M7.
        """
        degrees = [Interval.UNISON]
        semitones = steps = 0
        for interval in self.intervals[:-1]:
            semitones += interval.semitones
            steps += interval.diatonic_steps
            degrees.append(spell_interval(semitones, steps))
        return degrees

    def to_notes(self, root: Note) -> list[Note]:
        """
        Realise the scale on a root note.

        Returns one note per step, starting with the root; the closing
        octave is not included.
        """
        notes = []
        current = root
        for interval in self.intervals:
            notes.append(current)
            current = current + interval
        return notes

    def rotated(self, n: int) -> Scale:
        """
        Rotate the steps; positive n rotates left.

        Major rotated by 1 is dorian.
        """
        if not self.intervals:
            return self
        n %= len(self.intervals)
        return Scale(self.intervals[n:] + self.intervals[:n])

    def rotations(self) -> list[Scale]:
        """Every rotation, starting with the scale itself."""
        return [self.rotated(i) for i in range(len(self.intervals))]

    def interval(self, n: int) -> Interval:
        """Step n, clamped to the last step."""
        if not self.intervals:
            raise InvalidScale("Scale has no steps")
        return self.intervals[min(n, len(self.intervals) - 1)]

    def __add__(self, other: Scale) -> Scale:
        """Concatenate the steps of two scales."""
        if not isinstance(other, Scale):
            return NotImplemented
        return Scale(self.intervals + other.intervals)

    def __len__(self) -> int:
        return len(self.intervals)

    def __iter__(self) -> Iterator[Interval]:
        return iter(self.intervals)

    def __str__(self) -> str:
        return self.name or ", ".join(str(i) for i in self.intervals)

    def __repr__(self) -> str:
        if self.name:
            return f"Scale.{self.name.upper().replace(' ', '_')}"
        steps = ", ".join(str(i) for i in self.intervals)
        return f"Scale.parse({steps!r})"


Scale.MAJOR = Scale.parse("M2 M2 m2 M2 M2 M2 m2", "major")
Scale.NATURAL_MINOR = Scale.parse("M2 m2 M2 M2 m2 M2 M2", "natural minor")
Scale.HARMONIC_MINOR = Scale.parse("M2 m2 M2 M2 m2 A2 m2", "harmonic minor")
Scale.MELODIC_MINOR = Scale.parse("M2 m2 M2 M2 M2 M2 m2", "melodic minor")
Scale.DORIAN = Scale(Scale.MAJOR.rotated(1).intervals, "dorian")
Scale.PHRYGIAN = Scale(Scale.MAJOR.rotated(2).intervals, "phrygian")
Scale.LYDIAN = Scale(Scale.MAJOR.rotated(3).intervals, "lydian")
Scale.MIXOLYDIAN = Scale(Scale.MAJOR.rotated(4).intervals, "mixolydian")
Scale.LOCRIAN = Scale(Scale.MAJOR.rotated(6).intervals, "locrian")

_SCALE_NAMES: dict[str, Scale] = {
    "major": Scale.MAJOR,
    "ionian": Scale.MAJOR,
    "minor": Scale.NATURAL_MINOR,
    "natural_minor": Scale.NATURAL_MINOR,
    "aeolian": Scale.NATURAL_MINOR,
    "harmonic_minor": Scale.HARMONIC_MINOR,
    "melodic_minor": Scale.MELODIC_MINOR,
    "dorian": Scale.DORIAN,
    "phrygian": Scale.PHRYGIAN,
    "lydian": Scale.LYDIAN,
    "mixolydian": Scale.MIXOLYDIAN,
    "locrian": Scale.LOCRIAN,
}


@dataclass(frozen=True)
class Key:
    """
    A key is an accidental for each of the seven letter names.

    Letters the key does not mention are natural. The tonic and mode are
    labels for display; keys compare by accidentals only.

    Examples:
        Key.parse("D_major") = C#, D, E, F#, G, A, B
        Key.from_notes([Note.parse("Bb")]) = F major's pitches
    """

    accidentals: tuple[int, ...] = (0,) * 7
    tonic: Note | None = field(default=None, compare=False)
    mode: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        accidentals = tuple(self.accidentals)
        if len(accidentals) != len(NoteName):
            raise InvalidKey(f"A key needs {len(NoteName)} accidentals, got {len(accidentals)}")
        object.__setattr__(self, "accidentals", accidentals)

    @classmethod
    def from_notes(
        cls, notes: Iterable[Note], tonic: Note | None = None, mode: str = ""
    ) -> Key:
        """Later notes on the same letter override earlier ones."""
        accidentals = [0] * len(NoteName)
        for note in notes:
            accidentals[note.name] = note.accidental
        return cls(tuple(accidentals), tonic, mode)

    @classmethod
    def from_scale(cls, root: Note, scale: Scale) -> Key:
        """The key whose pitches are `scale` realised on `root`."""
        root = root.with_octave(None)
        return cls.from_notes(scale.to_notes(root), root, scale.name)

    @classmethod
    def parse(cls, name: str) -> Key:
        """
        Parse a key from a string like 'C_major', 'D_minor', 'F#_dorian'.

        Args:
            name: Key name with underscore separator

        Returns:
            Parsed Key object
        """
        parts = name.split("_")
        if len(parts) < 2:
            raise InvalidKey(f"Invalid key format: {name}. Expected 'root_scale' like 'C_major'")

        scale_str = "_".join(parts[1:]).lower()
        if scale_str not in _SCALE_NAMES:
            raise InvalidKey(f"Unknown scale type: {scale_str}")

        try:
            root = Note.parse(parts[0])
        except NoteError as exc:
            raise InvalidKey(f"Invalid key root: {parts[0]}") from exc

        return cls.from_scale(root, _SCALE_NAMES[scale_str])

    def pitch(self, name: NoteName) -> Note:
        return Note(name, self.accidentals[name])

    def pitches(self) -> list[Note]:
        """The seven pitches, C to B."""
        return [self.pitch(name) for name in NoteName]

    def contains(self, note: Note) -> bool:
        """True if the note's spelling belongs to the key (octave ignored)."""
        return self.accidentals[note.name] == note.accidental

    @property
    def signature(self) -> int:
        """Net accidentals: sharps count up, flats count down (D major -> 2)."""
        return sum(self.accidentals)

    def transpose(self, interval: Interval) -> Key:
        """Move every pitch (and the tonic) up by an interval."""
        tonic = self.tonic.transpose(interval) if self.tonic else None
        return Key.from_notes((note + interval for note in self.pitches()), tonic, self.mode)

    def transpose_down(self, interval: Interval) -> Key:
        tonic = self.tonic.transpose_down(interval) if self.tonic else None
        return Key.from_notes((note - interval for note in self.pitches()), tonic, self.mode)

    def __add__(self, other: Interval) -> Key:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.transpose(other)

    def __sub__(self, other: Interval) -> Key:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.transpose_down(other)

    def __str__(self) -> str:
        if self.tonic is not None:
            return f"{self.tonic} {self.mode}".strip()
        return ", ".join(str(note) for note in self.pitches())

    def __repr__(self) -> str:
        return f"Key({self.accidentals!r})"
