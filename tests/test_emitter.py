"""Tests for primitive emission helpers."""

import pytest

from chord_diagram.engine.emitter import emit, fret_number_labels, string_stroke_width
from chord_diagram.engine.labels import resolve_labels
from chord_diagram.engine.normalizer import resolve
from chord_diagram.engine.occlusion import filter_occluded_notes, resolve_barre_spans
from chord_diagram.models import (
    Barre,
    ChordDiagramData,
    ChordPositionData,
    FretPosition,
    NoteAnnotation,
    PositionedNote,
    RenderOptions,
)


class TestStringStrokeWidth:
    """Test string line thickness."""

    def test_outer_strings_thick(self) -> None:
        widths = [string_stroke_width(index, 6) for index in range(6)]
        assert widths == [1.5, 1.2, 1.2, 1.2, 1.2, 1.5]

    @pytest.mark.parametrize("total", [1, 2, 3, 4])
    def test_few_strings_all_thick(self, total: int) -> None:
        assert {string_stroke_width(index, total) for index in range(total)} == {1.5}


class TestFretNumberLabels:
    """Test which fret numbers are drawn."""

    def test_all_numbers(self) -> None:
        assert fret_number_labels(5, 4, True) == [(1, "5"), (2, "6"), (3, "7"), (4, "8")]

    def test_start_fret_always_shown(self) -> None:
        assert fret_number_labels(7, 5, False) == [(1, "7")]

    def test_first_position_hidden(self) -> None:
        assert fret_number_labels(1, 5, False) == []


class TestEmit:
    """Test emitting a resolved configuration directly."""

    def test_barre_with_finger_in_finger_mode(self) -> None:
        position = ChordPositionData(
            barres=(Barre(from_string=6, to_string=1, fret=1, finger=1),),
            notes=tuple(
                PositionedNote(FretPosition(string, 1), NoteAnnotation(tone="F"))
                for string in range(1, 7)
            ),
        )
        config = resolve(
            ChordDiagramData(name="F", positions=(position,)),
            RenderOptions(width=400, height=600),
        )
        spans = resolve_barre_spans(config.barres, config.num_strings)
        notes = filter_occluded_notes(config.notes, config.barres)
        result = emit(config, notes, spans, resolve_labels(config.notes, "finger", 6))

        (label,) = result.of_kind("barre-label")
        assert label.text == "1"
        assert label.string is None
        assert label.marker_radius is None
        assert label.x == pytest.approx(80 + 264 / 2)
        assert result.of_kind("note-circle") == ()

    def test_barre_rect_geometry(self) -> None:
        position = ChordPositionData(barres=(Barre(from_string=2, to_string=4, fret=2),))
        config = resolve(
            ChordDiagramData(name="B", positions=(position,)),
            RenderOptions(width=400, height=600),
        )
        result = emit(config, (), resolve_barre_spans(config.barres, 6), (" ",) * 6)

        (rect,) = result.of_kind("barre-rect")
        radius = result.grid.note_radius
        assert rect.x == pytest.approx(80 + 2 * 52.8 - radius)
        assert rect.width == pytest.approx(2 * 52.8 + 2 * radius)
        assert rect.height == pytest.approx(2 * radius)
        assert rect.y + radius == pytest.approx(80 + 1.5 * result.grid.fret_spacing)
        assert (rect.start_string, rect.end_string) == (2, 4)
        assert result.of_kind("barre-label") == ()
