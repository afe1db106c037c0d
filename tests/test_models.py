"""Tests for the chord input models."""

import pytest

from chord_diagram.models import (
    Barre,
    BottomLabels,
    ChordDiagramData,
    ChordPositionData,
    FretPosition,
    NoteAnnotation,
    PositionedNote,
    RenderOptions,
)


class TestFretPosition:
    """Test fret position status flags."""

    @pytest.mark.parametrize(
        ("fret", "muted", "open_", "fretted"),
        [
            (-1, True, False, False),
            (0, False, True, False),
            (3, False, False, True),
        ],
    )
    def test_status(self, fret: int, muted: bool, open_: bool, fretted: bool) -> None:
        position = FretPosition(string=2, fret=fret)
        assert position.is_muted is muted
        assert position.is_open is open_
        assert position.is_fretted is fretted

    def test_positioned_note_delegates(self) -> None:
        note = PositionedNote(FretPosition(string=4, fret=-1))
        assert note.string == 4
        assert note.fret == -1
        assert note.is_muted


class TestNoteAnnotation:
    """Test annotation field lookup."""

    def test_finger_as_text(self) -> None:
        assert NoteAnnotation(finger=2).field("finger") == "2"

    def test_thumb(self) -> None:
        assert NoteAnnotation(finger="T").field("finger") == "T"

    @pytest.mark.parametrize("label_type", ["tone", "interval", "degree", "finger"])
    def test_unset_fields_are_none(self, label_type: str) -> None:
        assert NoteAnnotation().field(label_type) is None

    def test_none_label_type(self) -> None:
        assert NoteAnnotation(tone="C").field("none") is None


class TestBarre:
    """Test barre normalization."""

    def test_either_direction(self) -> None:
        forward = Barre(from_string=1, to_string=5, fret=3)
        backward = Barre(from_string=5, to_string=1, fret=3)
        assert (forward.start_string, forward.end_string) == (1, 5)
        assert (backward.start_string, backward.end_string) == (1, 5)

    def test_covers_is_inclusive(self) -> None:
        barre = Barre(from_string=2, to_string=4, fret=5)
        assert barre.covers(2)
        assert barre.covers(4)
        assert not barre.covers(1)
        assert not barre.covers(5)

    @pytest.mark.parametrize(("fret", "valid"), [(0, False), (-1, False), (1, True)])
    def test_validity(self, fret: int, valid: bool) -> None:
        assert Barre(from_string=1, to_string=6, fret=fret).is_valid is valid


class TestBottomLabels:
    """Test bottom row toggles."""

    def test_default_rows(self) -> None:
        assert BottomLabels().enabled_rows == ("tones",)

    def test_all_rows_in_order(self) -> None:
        labels = BottomLabels(show_fingers=True, show_tones=True, show_intervals=True)
        assert labels.enabled_rows == ("fingers", "tones", "intervals")

    def test_no_rows(self) -> None:
        assert BottomLabels(show_tones=False).enabled_rows == ()


class TestHashable:
    """Models are used as cache keys."""

    def test_chord_is_hashable(self) -> None:
        chord = ChordDiagramData(
            name="C",
            positions=(
                ChordPositionData(
                    notes=(PositionedNote(FretPosition(5, 3), NoteAnnotation(finger=3)),),
                    barres=(Barre(1, 2, 1),),
                ),
            ),
        )
        same = ChordDiagramData(
            name="C",
            positions=(
                ChordPositionData(
                    notes=(PositionedNote(FretPosition(5, 3), NoteAnnotation(finger=3)),),
                    barres=(Barre(1, 2, 1),),
                ),
            ),
        )
        assert hash(chord) == hash(same)
        assert hash(RenderOptions(label_type="tone")) == hash(RenderOptions(label_type="tone"))
