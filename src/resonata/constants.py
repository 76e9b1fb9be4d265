"""
Constants for the music system.

No magic numbers - bounds and symbol tables live here.
"""

from typing import Final

# Semitone range shared by every interval
SEMITONE_MIN: Final = -127
SEMITONE_MAX: Final = 127

SEMITONES_PER_OCTAVE: Final = 12
DIATONIC_STEPS_PER_OCTAVE: Final = 7

# Scientific pitch notation range (C4 = MIDI 60)
OCTAVE_MIN: Final = -1
OCTAVE_MAX: Final = 9

# Semitones above C for each natural letter, C D E F G A B
NATURAL_SEMITONES: Final[tuple[int, ...]] = (0, 2, 4, 5, 7, 9, 11)

# Accidental spellings accepted by the note parser, in semitones
ACCIDENTAL_SYMBOLS: Final[dict[str, int]] = {
    "#": 1,
    "♯": 1,
    "x": 2,
    "𝄪": 2,
    "b": -1,
    "♭": -1,
    "♮": 0,
}

# Quality characters accepted by the interval parser
AUGMENTED_SYMBOLS: Final = frozenset("Aa")
DIMINISHED_SYMBOLS: Final = frozenset("dD")
PERFECT_SYMBOLS: Final = frozenset("Pp")
