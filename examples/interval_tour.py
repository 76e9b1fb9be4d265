#!/usr/bin/env python3
"""
Example: A tour of spelled intervals, notes and scales.

Usage:
    python examples/interval_tour.py

Shows that:
1. Intervals convert between notation, semitones and respellings
2. Notes transpose and measure without losing their spelling
3. Scales realise on any root and the catalog names them
"""

from resonata import Interval, Key, Note, Scale, Size, interval_between
from resonata.scales import ScaleCatalog


def show_intervals() -> None:
    """Notation, semitones and respelling."""
    print("Intervals")
    print("-" * 40)
    for notation in ["P1", "m3", "M3", "A4", "d5", "P8", "m9", "AA2"]:
        interval = Interval.parse(notation)
        print(f"  {notation:>4} = {interval.semitones:>2} semitones, inverts to {interval.invert()}")

    print()
    major_third = Interval.parse("M3")
    for size in (Size.SECOND, Size.THIRD, Size.FOURTH):
        print(f"  M3 spelled as a {size.name.lower()}: {major_third.as_size(size)}")
    print()


def show_notes() -> None:
    """Spelled transposition and measurement."""
    print("Notes")
    print("-" * 40)
    print(f"  E4 + M3      = {Note.parse('E4') + Interval.M3}")
    print(f"  C4 - m3      = {Note.parse('C4') - Interval.m3}")
    print(f"  C to F#      = {interval_between(Note.parse('C'), Note.parse('F#'))}")
    print(f"  C to Gb      = {interval_between(Note.parse('C'), Note.parse('Gb'))}")
    print(f"  MIDI 61      = {Note.from_midi(61)} / {Note.from_midi(61, prefer_flats=True)}")
    print()


def show_scales() -> None:
    """Scales, keys and the catalog."""
    print("Scales")
    print("-" * 40)
    for root in ("C", "F#", "Bb"):
        notes = " ".join(str(n) for n in Scale.MAJOR.to_notes(Note.parse(root)))
        print(f"  {root} major: {notes}")

    harmonic = " ".join(str(n) for n in Scale.HARMONIC_MINOR.to_notes(Note.parse("A")))
    print(f"  A harmonic minor: {harmonic}")
    print(f"  D major signature: {Key.parse('D_major').signature:+d}")
    print()

    catalog = ScaleCatalog()
    for text in ["C D E F# G A B", "C D E F# G# A B", "A C D E G", "C D E F G A Bbb"]:
        match = catalog.identify(Scale.parse(text))
        if match is None:
            print(f"  {text}: unknown")
        else:
            print(f"  {text}: {match.name} (mode {match.mode} of {match.family})")


def main() -> None:
    show_intervals()
    show_notes()
    show_scales()


if __name__ == "__main__":
    main()
