"""
Tests for the interval algebra.

Tests cover:
- Size and Quality (quality.py)
- Interval construction, semitone and diatonic codecs (interval.py)
- Notation parsing and formatting
- Arithmetic, inversion, compounding and ordering
"""

import pytest

from resonata.core import Interval, Quality, QualityKind, Size, is_valid
from resonata.errors import (
    InvalidInterval,
    InvalidIntervalFormat,
    InvalidIntervalQuality,
    InvalidIntervalSize,
    ResonataError,
)

_QUALITIES = [
    Quality.PERFECT,
    Quality.MAJOR,
    Quality.MINOR,
    Quality.augmented(1),
    Quality.augmented(2),
    Quality.diminished(1),
    Quality.diminished(2),
]


def _all_intervals(max_octaves: int = 3) -> list[Interval]:
    """Every valid spelling over a few octaves."""
    return [
        Interval(quality, size, octaves)
        for quality in _QUALITIES
        for size in Size
        for octaves in range(max_octaves + 1)
        if is_valid(quality, size)
    ]


class TestSize:
    """Tests for Size enum."""

    def test_diatonic_semitones(self) -> None:
        """Sizes map to the major scale."""
        assert [s.diatonic_semitones for s in Size] == [0, 2, 4, 5, 7, 9, 11]

    def test_perfect_sizes(self) -> None:
        """Unison, fourth and fifth are perfect."""
        perfect = {s for s in Size if s.is_perfect}
        assert perfect == {Size.UNISON, Size.FOURTH, Size.FIFTH}

    def test_invert(self) -> None:
        """Sizes invert within the octave."""
        assert Size.UNISON.invert() == Size.UNISON
        assert Size.SECOND.invert() == Size.SEVENTH
        assert Size.THIRD.invert() == Size.SIXTH
        assert Size.FOURTH.invert() == Size.FIFTH
        assert Size.SEVENTH.invert() == Size.SECOND

    def test_from_steps_wraps(self) -> None:
        """Step counts beyond an octave wrap."""
        assert Size.from_steps(2) == Size.THIRD
        assert Size.from_steps(9) == Size.THIRD
        assert Size.from_steps(7) == Size.UNISON

    def test_number(self) -> None:
        """Notation numbers are 1-based."""
        assert Size.UNISON.number == 1
        assert str(Size.FIFTH) == "5"


class TestQuality:
    """Tests for Quality values."""

    def test_degree_zero_rejected(self) -> None:
        """Diminished and augmented need a degree of at least 1."""
        with pytest.raises(InvalidIntervalQuality):
            Quality.diminished(0)
        with pytest.raises(InvalidIntervalQuality):
            Quality.augmented(0)
        with pytest.raises(InvalidIntervalQuality):
            Quality(QualityKind.AUGMENTED)

    def test_degree_on_plain_quality_rejected(self) -> None:
        """Major, minor and perfect take no degree."""
        with pytest.raises(InvalidIntervalQuality):
            Quality(QualityKind.MAJOR, 2)

    def test_offsets(self) -> None:
        """Offsets are relative to major/perfect."""
        assert Quality.MINOR.offset == -1
        assert Quality.MAJOR.offset == 0
        assert Quality.PERFECT.offset == 0
        assert Quality.augmented(2).offset == 2
        assert Quality.diminished(1).offset == -2

    def test_size_aware_offset(self) -> None:
        """Diminished sits one semitone lower on imperfect sizes."""
        assert Quality.diminished(1).semitone_offset(Size.FIFTH) == -1
        assert Quality.diminished(1).semitone_offset(Size.THIRD) == -2
        assert Quality.diminished(2).semitone_offset(Size.UNISON) == -2
        assert Quality.augmented(1).semitone_offset(Size.SECOND) == 1

    def test_ordering(self) -> None:
        """Qualities order by offset."""
        ordered = [
            Quality.diminished(2),
            Quality.diminished(1),
            Quality.MINOR,
            Quality.MAJOR,
            Quality.augmented(1),
            Quality.augmented(2),
        ]
        assert sorted(reversed(ordered)) == ordered

    def test_equality_by_offset(self) -> None:
        """Major and perfect share an offset, so they compare equal."""
        assert Quality.MAJOR == Quality.PERFECT
        assert hash(Quality.MAJOR) == hash(Quality.PERFECT)
        assert Quality.augmented(1) != Quality.diminished(1)

    def test_invert(self) -> None:
        """Inversion swaps diminished/augmented and minor/major."""
        assert Quality.diminished(2).invert().symbol == "AA"
        assert Quality.augmented(1).invert().symbol == "d"
        assert Quality.MINOR.invert().symbol == "M"
        assert Quality.MAJOR.invert().symbol == "m"
        assert Quality.PERFECT.invert().symbol == "P"

    def test_parse(self) -> None:
        """Parse quality tokens."""
        assert Quality.parse("M").kind == QualityKind.MAJOR
        assert Quality.parse("m").kind == QualityKind.MINOR
        assert Quality.parse("P").kind == QualityKind.PERFECT
        assert Quality.parse("p").kind == QualityKind.PERFECT
        assert Quality.parse("AAA") == Quality.augmented(3)
        assert Quality.parse("a").symbol == "A"
        assert Quality.parse("dd").symbol == "dd"
        assert Quality.parse("D").symbol == "d"

    @pytest.mark.parametrize("token", ["", "Ad", "MM", "mM", "Pd", "x"])
    def test_parse_rejects(self, token: str) -> None:
        """Empty, mixed and unknown runs are rejected."""
        with pytest.raises(InvalidIntervalQuality):
            Quality.parse(token)

    def test_repr(self) -> None:
        assert repr(Quality.MAJOR) == "Quality.MAJOR"
        assert repr(Quality.diminished(2)) == "Quality.diminished(2)"


class TestValidity:
    """Tests for the quality/size lattice."""

    def test_major_minor_need_imperfect(self) -> None:
        assert is_valid(Quality.MAJOR, Size.THIRD)
        assert is_valid(Quality.MINOR, Size.SEVENTH)
        assert not is_valid(Quality.MAJOR, Size.UNISON)
        assert not is_valid(Quality.MINOR, Size.FOURTH)

    def test_perfect_needs_perfect(self) -> None:
        assert is_valid(Quality.PERFECT, Size.FIFTH)
        assert not is_valid(Quality.PERFECT, Size.THIRD)

    def test_altered_goes_anywhere(self) -> None:
        for size in Size:
            assert is_valid(Quality.augmented(1), size)
            assert is_valid(Quality.diminished(3), size)

    @pytest.mark.parametrize(
        ("quality", "size"),
        [
            (Quality.MAJOR, Size.UNISON),
            (Quality.MINOR, Size.FOURTH),
            (Quality.PERFECT, Size.THIRD),
        ],
    )
    def test_build_rejects_invalid(self, quality: Quality, size: Size) -> None:
        """build() enforces the lattice."""
        with pytest.raises(InvalidInterval):
            Interval.build(quality, size, 0)


class TestSemitoneCodec:
    """Tests for build() and from_semitones()."""

    def test_octave_unison(self) -> None:
        """A perfect unison plus an octave is 12 semitones."""
        assert Interval.build(Quality.PERFECT, Size.UNISON, 1).semitones == 12

    def test_build_offsets(self) -> None:
        """Quality offsets apply on top of the diatonic size."""
        assert Interval.major(Size.THIRD).semitones == 4
        assert Interval.minor(Size.THIRD).semitones == 3
        assert Interval.diminished(Size.THIRD).semitones == 2
        assert Interval.diminished(Size.FIFTH).semitones == 6
        assert Interval.augmented(Size.FOURTH).semitones == 6
        assert Interval.augmented(Size.SECOND, degree=2).semitones == 4
        assert Interval.perfect(Size.FIFTH, octaves=2).semitones == 31

    def test_from_semitones_major_third(self) -> None:
        """Four semitones is a major third."""
        assert Interval.from_semitones(4).spelling == ("M", Size.THIRD, 0)

    def test_from_semitones_table(self) -> None:
        """Each chromatic step has a conventional spelling."""
        names = [str(Interval.from_semitones(n)) for n in range(13)]
        assert names == [
            "P1", "m2", "M2", "m3", "M3", "P4", "A4",
            "P5", "m6", "M6", "m7", "M7", "P8",
        ]

    def test_tritone_prefers_augmented_fourth(self) -> None:
        assert Interval.from_semitones(6).spelling == ("A", Size.FOURTH, 0)
        assert Interval.from_semitones(18).spelling == ("A", Size.FOURTH, 1)

    def test_negative_semitones(self) -> None:
        """Negative counts are diminished unisons."""
        assert Interval.from_semitones(-1).spelling == ("d", Size.UNISON, 0)
        assert Interval.from_semitones(-3).spelling == ("ddd", Size.UNISON, 0)

    def test_round_trip(self) -> None:
        """from_semitones() is exact over the whole range."""
        for n in range(-127, 128):
            assert Interval.from_semitones(n).semitones == n

    def test_round_trip_of_built_values(self) -> None:
        """Every built interval survives a trip through semitones."""
        for interval in _all_intervals():
            assert Interval.from_semitones(interval.semitones) == interval

    def test_out_of_range(self) -> None:
        """Semitone totals are bounded to -127..127."""
        assert Interval.from_semitones(127).spelling == ("P", Size.FIFTH, 10)
        with pytest.raises(InvalidInterval):
            Interval.from_semitones(128)
        with pytest.raises(InvalidInterval):
            Interval.from_semitones(-128)
        with pytest.raises(InvalidInterval):
            Interval.major(Size.SEVENTH, octaves=10)

    def test_negative_octaves(self) -> None:
        with pytest.raises(InvalidIntervalSize):
            Interval.perfect(Size.UNISON, octaves=-1)

    def test_unknown_size(self) -> None:
        """Sizes outside 0-6 stay inside the library's errors."""
        with pytest.raises(InvalidIntervalSize):
            Interval(Quality.MAJOR, 7)
        with pytest.raises(ResonataError):
            Interval.build(Quality.MAJOR, 7)
        with pytest.raises(InvalidIntervalSize):
            Interval.augmented(-1)

    def test_errors_are_value_errors(self) -> None:
        """Callers can catch ValueError or the library root."""
        with pytest.raises(ValueError):
            Interval.from_semitones(500)
        with pytest.raises(ResonataError):
            Interval.from_semitones(500)


class TestDiatonicCodec:
    """Tests for diatonic steps and respelling."""

    def test_diatonic_steps(self) -> None:
        assert Interval.parse("P1").to_diatonic_steps() == 0
        assert Interval.parse("M3").diatonic_steps == 2
        assert Interval.parse("M10").diatonic_steps == 9
        assert Interval.parse("P15").diatonic_steps == 14

    def test_as_size(self) -> None:
        """The quality absorbs the change of size."""
        assert Interval.parse("M3").as_size(Size.FOURTH).spelling == ("d", Size.FOURTH, 0)
        assert Interval.parse("M3").as_size(Size.SECOND).spelling == ("AA", Size.SECOND, 0)
        assert Interval.parse("A4").as_size(Size.FIFTH).spelling == ("d", Size.FIFTH, 0)
        assert Interval.parse("m3").as_size(Size.SECOND).spelling == ("A", Size.SECOND, 0)
        assert Interval.parse("P8").as_size(Size.SEVENTH).spelling == ("A", Size.SEVENTH, 0)
        assert Interval.parse("P1").as_size(Size.SECOND).spelling == ("d", Size.SECOND, 0)

    def test_as_size_across_octaves(self) -> None:
        assert Interval.parse("P8").as_size(Size.UNISON, 1).spelling == ("P", Size.UNISON, 1)
        assert Interval.parse("M9").as_size(Size.THIRD, 1).spelling == ("d", Size.THIRD, 1)

    def test_identity(self) -> None:
        """Respelling to the same size changes nothing."""
        for interval in _all_intervals():
            same = interval.as_size(interval.size, interval.octaves)
            assert same.spelling == interval.spelling

    def test_preserves_semitones(self) -> None:
        """Respelling never changes the distance."""
        for interval in _all_intervals(max_octaves=1):
            for size in Size:
                for octaves in range(3):
                    respelled = interval.as_size(size, octaves)
                    assert respelled.semitones == interval.semitones
                    assert respelled.size == size
                    assert respelled.octaves == octaves

    def test_negative_octaves(self) -> None:
        with pytest.raises(InvalidIntervalSize):
            Interval.parse("M3").as_size(Size.THIRD, -1)

    def test_unknown_size(self) -> None:
        with pytest.raises(InvalidIntervalSize):
            Interval.parse("M3").as_size(7)


class TestNotation:
    """Tests for parsing and formatting notation."""

    def test_parse_diminished_fifth(self) -> None:
        d5 = Interval.parse("d5")
        assert d5.quality.kind == QualityKind.DIMINISHED
        assert d5.quality.degree == 1
        assert d5.size == Size.FIFTH
        assert d5.octaves == 0
        assert d5.semitones == 6

    def test_parse_augmented_fourth(self) -> None:
        a4 = Interval.parse("A4")
        assert a4.spelling == ("A", Size.FOURTH, 0)
        assert a4.semitones == 6

    def test_enharmonic_spellings(self) -> None:
        """A4 and d5 are equal distances but distinct spellings."""
        assert Interval.parse("A4") == Interval.parse("d5")
        assert Interval.parse("A4").spelling != Interval.parse("d5").spelling
        assert str(Interval.parse("A4")) != str(Interval.parse("d5"))

    def test_compound_sizes(self) -> None:
        """Numbers beyond 7 add octaves."""
        assert Interval.parse("P8").spelling == ("P", Size.UNISON, 1)
        assert Interval.parse("m9").spelling == ("m", Size.SECOND, 1)
        assert Interval.parse("M13").spelling == ("M", Size.SIXTH, 1)
        assert Interval.parse("P15").spelling == ("P", Size.UNISON, 2)
        assert Interval.parse("m9").semitones == 13

    def test_multiple_alterations(self) -> None:
        assert Interval.parse("AA2").semitones == 4
        assert Interval.parse("dd5").semitones == 5
        assert Interval.parse("dd3").semitones == 1

    def test_whitespace_and_unison_token(self) -> None:
        assert Interval.parse(" M3 ") == Interval.MAJOR_THIRD
        assert Interval.parse("PU").spelling == ("P", Size.UNISON, 0)

    def test_format(self) -> None:
        assert str(Interval.diminished(Size.FIFTH, degree=2)) == "dd5"
        assert str(Interval.major(Size.THIRD, octaves=1)) == "M10"
        assert str(Interval.perfect(Size.UNISON, octaves=2)) == "P15"
        assert repr(Interval.parse("d5")) == "Interval.parse('d5')"

    def test_round_trip(self) -> None:
        """Formatting then parsing reproduces the spelling."""
        for interval in _all_intervals():
            assert Interval.parse(str(interval)).spelling == interval.spelling

    def test_size_zero(self) -> None:
        with pytest.raises(InvalidIntervalSize):
            Interval.parse("M0")

    @pytest.mark.parametrize("text", ["Ad3", "3", "MM3", "X5"])
    def test_bad_quality(self, text: str) -> None:
        with pytest.raises(InvalidIntervalQuality):
            Interval.parse(text)

    @pytest.mark.parametrize("text", ["", "M", "M3x", "3M", "M٣", "P١"])
    def test_bad_format(self, text: str) -> None:
        with pytest.raises(InvalidIntervalFormat):
            Interval.parse(text)

    @pytest.mark.parametrize("text", ["M5", "P3", "m1", "M8"])
    def test_invalid_pairing(self, text: str) -> None:
        with pytest.raises(InvalidInterval):
            Interval.parse(text)


class TestArithmetic:
    """Tests for addition, subtraction, inversion and compounding."""

    def test_add(self) -> None:
        result = Interval.MAJOR_THIRD + Interval.MINOR_THIRD
        assert result.spelling == ("P", Size.FIFTH, 0)

    def test_add_respells(self) -> None:
        """Sums take the table spelling, not a diatonic one."""
        result = Interval.parse("M3") + Interval.parse("M3")
        assert result.semitones == 8
        assert str(result) == "m6"

    def test_subtract(self) -> None:
        assert str(Interval.P5 - Interval.M3) == "m3"
        assert (Interval.M3 - Interval.P5).spelling == ("ddd", Size.UNISON, 0)

    def test_overflow(self) -> None:
        """Sums outside the range raise instead of clamping."""
        with pytest.raises(InvalidInterval):
            Interval.from_semitones(120) + Interval.OCTAVE
        with pytest.raises(InvalidInterval):
            Interval.from_semitones(-120) - Interval.OCTAVE

    def test_foreign_operands(self) -> None:
        with pytest.raises(TypeError):
            Interval.M3 + 4

    def test_invert(self) -> None:
        assert Interval.build(Quality.MAJOR, Size.SECOND, 0).invert().spelling == (
            "m",
            Size.SEVENTH,
            0,
        )
        assert str(Interval.parse("A4").invert()) == "d5"
        assert str(Interval.parse("P1").invert()) == "P1"
        assert str(Interval.parse("dd1").invert()) == "AA1"

    def test_invert_keeps_octaves(self) -> None:
        assert str(Interval.parse("m10").invert()) == "M13"

    def test_invert_involution(self) -> None:
        for interval in _all_intervals():
            assert interval.invert().invert().spelling == interval.spelling

    def test_compound(self) -> None:
        m6 = Interval.build(Quality.MINOR, Size.SIXTH, 0)
        assert m6.compound(2).semitones == 8 + 24
        assert str(m6.compound(2)) == "m20"
        assert Interval.P5.compound().semitones == 19

    def test_with_octaves_and_simple(self) -> None:
        m10 = Interval.parse("m10")
        assert m10.is_compound
        assert str(m10.simple) == "m3"
        assert str(m10.with_octaves(2)) == "m17"

    def test_compound_limits(self) -> None:
        assert Interval.P5.compound(10).semitones == 127
        with pytest.raises(InvalidIntervalSize):
            Interval.P5.compound(11)
        with pytest.raises(InvalidIntervalSize):
            Interval.M3.compound(-1)
        with pytest.raises(InvalidIntervalSize):
            Interval.M7.with_octaves(10)


class TestOrdering:
    """Tests for comparison and hashing."""

    def test_comparison(self) -> None:
        assert Interval.MINOR_THIRD < Interval.MAJOR_THIRD
        assert Interval.PERFECT_FIFTH > Interval.PERFECT_FOURTH
        assert Interval.parse("d4") <= Interval.parse("M3")

    def test_sorting(self) -> None:
        intervals = [Interval.parse(n) for n in ["P8", "m2", "P1", "A4", "M3"]]
        assert [str(i) for i in sorted(intervals)] == ["P1", "m2", "M3", "A4", "P8"]

    def test_hashable(self) -> None:
        """Enharmonic spellings collapse in sets."""
        intervals = {Interval.parse("A4"), Interval.parse("d5"), Interval.P5}
        assert len(intervals) == 2
        assert Interval.TRITONE in intervals

    def test_immutable(self) -> None:
        with pytest.raises(AttributeError):
            Interval.M3._semitones = 5


class TestNamedIntervals:
    """Tests for class constants."""

    def test_named_intervals(self) -> None:
        assert Interval.UNISON.semitones == 0
        assert Interval.MINOR_THIRD.semitones == 3
        assert Interval.PERFECT_FIFTH.semitones == 7
        assert Interval.OCTAVE.spelling == ("P", Size.UNISON, 1)

    def test_short_aliases(self) -> None:
        assert Interval.P1 == Interval.UNISON
        assert Interval.m3 == Interval.MINOR_THIRD
        assert Interval.M3 == Interval.MAJOR_THIRD
        assert Interval.P8 == Interval.OCTAVE
        assert str(Interval.TT) == "A4"
