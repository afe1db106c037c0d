"""Tests for pitch class and interval helpers."""

import pytest

from chord_diagram.pitch_class import (
    INTERVALS,
    fretted_tone,
    interval_between,
    interval_by_abbr,
    interval_by_semitones,
    normalize_note,
    note_by_interval,
    note_to_pc,
    transpose_note,
)


class TestNoteToPc:
    """Test note name parsing."""

    @pytest.mark.parametrize(
        ("note", "pc"),
        [("C", 0), ("C#", 1), ("Db", 1), ("E", 4), ("Fb", 4), ("B#", 0), ("Bb", 10), ("e", 4)],
    )
    def test_known_notes(self, note: str, pc: int) -> None:
        assert note_to_pc(note) == pc

    def test_unknown_note_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown note"):
            note_to_pc("H")

    def test_empty_note_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown note"):
            note_to_pc("")

    def test_normalize(self) -> None:
        assert normalize_note("f#") == "F#"
        assert normalize_note("") == ""


class TestTranspose:
    """Test transposition and fretted tones."""

    def test_wraps_octave(self) -> None:
        assert transpose_note("B", 1) == "C"
        assert transpose_note("C", -13) == "B"

    def test_prefers_sharps(self) -> None:
        assert transpose_note("Bb", 0) == "A#"

    @pytest.mark.parametrize(
        ("open_note", "fret", "tone"),
        [("E", 1, "F"), ("A", 3, "C"), ("D", 2, "E"), ("G", 0, "G"), ("B", 1, "C"), ("E", 12, "E")],
    )
    def test_fretted_tone(self, open_note: str, fret: int, tone: str) -> None:
        assert fretted_tone(open_note, fret) == tone

    def test_muted_string_has_no_tone(self) -> None:
        with pytest.raises(ValueError, match="Muted strings"):
            fretted_tone("E", -1)


class TestIntervals:
    """Test the interval table."""

    def test_table_covers_octave(self) -> None:
        assert [interval.semitones for interval in INTERVALS] == list(range(12))

    def test_lookup_by_abbr(self) -> None:
        fifth = interval_by_abbr("P5")
        assert fifth is not None
        assert fifth.semitones == 7
        assert fifth.degree == 5
        assert fifth.quality == "perfect"

    def test_unknown_abbr(self) -> None:
        assert interval_by_abbr("P9") is None

    def test_compound_folds(self) -> None:
        assert interval_by_semitones(16).abbr == "M3"
        assert interval_by_semitones(-1).abbr == "M7"

    @pytest.mark.parametrize(
        ("root", "note", "abbr"),
        [("C", "C", "P1"), ("C", "G", "P5"), ("A", "C", "m3"), ("E", "D", "m7"), ("F#", "C", "A4")],
    )
    def test_between(self, root: str, note: str, abbr: str) -> None:
        assert interval_between(root, note).abbr == abbr

    def test_note_by_interval(self) -> None:
        major_third = interval_by_abbr("M3")
        assert major_third is not None
        assert note_by_interval("E", major_third) == "G#"
