"""Tests for barre spans and note occlusion."""

import itertools

import pytest

from chord_diagram.engine.occlusion import (
    covered_notes,
    filter_occluded_notes,
    is_occluded,
    resolve_barre_spans,
)
from chord_diagram.models import Barre, FretPosition, PositionedNote


def note(string: int, fret: int) -> PositionedNote:
    return PositionedNote(FretPosition(string, fret))


class TestResolveBarreSpans:
    """Test barre normalization."""

    def test_normalizes_order(self) -> None:
        (span,) = resolve_barre_spans([Barre(from_string=6, to_string=1, fret=1, finger=1)])
        assert (span.start_string, span.end_string, span.fret, span.finger) == (1, 6, 1, 1)

    @pytest.mark.parametrize("fret", [0, -1])
    def test_non_positive_fret_skipped(self, fret: int) -> None:
        assert resolve_barre_spans([Barre(from_string=1, to_string=6, fret=fret)]) == ()

    def test_clamped_to_strings(self) -> None:
        (span,) = resolve_barre_spans([Barre(from_string=2, to_string=9, fret=3)], total_strings=4)
        assert (span.start_string, span.end_string) == (2, 4)

    def test_outside_strings_dropped(self) -> None:
        assert resolve_barre_spans([Barre(from_string=7, to_string=9, fret=3)], total_strings=6) == ()

    def test_keeps_input_order(self) -> None:
        spans = resolve_barre_spans([Barre(1, 3, 5), Barre(1, 6, 3)])
        assert [span.fret for span in spans] == [5, 3]


class TestFilterOccludedNotes:
    """Test that barres hide the notes they cover."""

    def test_f_major(self) -> None:
        notes = [note(6, 1), note(5, 3), note(4, 3), note(3, 2), note(2, 1), note(1, 1)]
        visible = filter_occluded_notes(notes, [Barre(from_string=6, to_string=1, fret=1)])
        assert [(n.string, n.fret) for n in visible] == [(5, 3), (4, 3), (3, 2)]

    def test_fret_zero_barre_occludes_nothing(self) -> None:
        notes = [note(1, 0), note(2, 0)]
        assert filter_occluded_notes(notes, [Barre(from_string=1, to_string=2, fret=0)]) == tuple(notes)

    def test_notes_outside_span_stay(self) -> None:
        notes = [note(4, 3), note(5, 3)]
        visible = filter_occluded_notes(notes, [Barre(from_string=1, to_string=4, fret=3)])
        assert [n.string for n in visible] == [5]

    def test_completeness(self) -> None:
        barres = [Barre(1, 3, 2), Barre(6, 4, 5), Barre(2, 5, 0)]
        notes = [note(s, f) for s, f in itertools.product(range(1, 7), range(-1, 7))]
        visible = set(filter_occluded_notes(notes, barres))
        for barre, n in itertools.product(barres, notes):
            if barre.fret > 0 and n.fret == barre.fret and barre.covers(n.string):
                assert n not in visible
        hidden = set(notes) - visible
        assert len(hidden) == 6

    def test_is_occluded(self) -> None:
        spans = resolve_barre_spans([Barre(1, 3, 2)])
        assert is_occluded(note(2, 2), spans)
        assert not is_occluded(note(2, 3), spans)


class TestCoveredNotes:
    """Test the notes feeding a barre's own labels."""

    def test_ordered_by_string(self) -> None:
        (span,) = resolve_barre_spans([Barre(6, 1, 1)])
        notes = [note(6, 1), note(3, 2), note(1, 1), note(2, 1)]
        assert [n.string for n in covered_notes(notes, span)] == [1, 2, 6]
