"""Tests that render every chord in the testdata files."""

import json
from pathlib import Path

import pytest

from chord_diagram import RenderOptions, chord_from_dict, render_diagram
from chord_diagram.engine.geometry import CONTENT_ASPECT_RATIO

TESTDATA_DIR = Path(__file__).parent.parent / "testdata"


@pytest.fixture
def chord_documents() -> list[dict]:
    """Load chords from chords.json."""
    with open(TESTDATA_DIR / "chords.json") as f:
        data = json.load(f)
    return data["chords"]


@pytest.fixture
def chords(chord_documents):
    """Chords from chords.json keyed by name."""
    return {document["name"]: chord_from_dict(document) for document in chord_documents}


class TestRenderAllTestdata:
    @pytest.mark.parametrize("label_type", ["none", "finger", "tone", "interval", "degree"])
    def test_every_chord_renders(self, chords, label_type):
        """No chord in the testdata should make the engine raise."""
        for chord in chords.values():
            for index in range(max(len(chord.positions), 1)):
                result = render_diagram(chord, RenderOptions(position_index=index, label_type=label_type))
                assert result.width / result.height == pytest.approx(CONTENT_ASPECT_RATIO) or result.placeholder
                if not result.placeholder:
                    assert len(result.labels) == len(result.of_kind("string-line"))
                    assert "" not in result.labels

    def test_empty_positions_placeholder(self, chords):
        assert render_diagram(chords["N.C."]).placeholder


class TestTestdataScenarios:
    def test_open_c_labels(self, chords):
        result = render_diagram(chords["C"])
        assert result.labels == (" ", "1", " ", "2", "3", "X")
        assert result.info.full_name == "C Major"
        assert result.info.intervals == ("R", "3", "5")

    def test_c_second_position(self, chords):
        result = render_diagram(chords["C"], RenderOptions(position_index=1, label_type="tone"))
        assert result.of_kind("nut") == ()
        assert [p.text for p in result.of_kind("barre-label")] == ["G", "C"]

    def test_f_barre_tones(self, chords):
        result = render_diagram(chords["F"], RenderOptions(label_type="tone"))
        assert [(p.string, p.text) for p in result.of_kind("barre-label")] == [(1, "F"), (2, "C"), (6, "F")]
        assert result.info.instrument == "guitar"

    def test_e7_legacy_arrays(self, chords):
        result = render_diagram(chords["E7"])
        assert result.labels == ("E", "B", "G#", "D", "B", "E")
        fingers, tones, intervals = result.bottom_rows
        assert fingers.labels == (" ", " ", "1", " ", "2", " ")
        assert tones.labels == ("E", "B", "G#", "D", "B", "E")
        assert intervals.labels == ("R", "5", "3", "b7", "5", "R")
        assert result.info.chord_tones == ("E", "G#", "B", "D")

    def test_bass_default_tuning(self, chords):
        result = render_diagram(chords["G"], RenderOptions(bottom_labels=None))
        assert result.info.tuning == ("E", "A", "D", "G")
        assert len(result.of_kind("string-line")) == 4
        assert {line.stroke_width for line in result.of_kind("string-line")} == {1.5}

    def test_legacy_flat_notes(self, chords):
        result = render_diagram(chords["Am"])
        assert result.labels == (" ", "1", "3", "2", " ", "X")
        assert len(result.of_kind("muted-glyph")) == 1

    def test_inconsistent_d_minor(self, chords):
        result = render_diagram(chords["D Minor"])
        assert result.info.tuning == ("D", "A", "D", "F")
        assert len(result.of_kind("string-line")) == 4
        assert len(result.of_kind("nut")) == 1
        (rect,) = result.of_kind("barre-rect")
        assert (rect.start_string, rect.end_string, rect.fret) == (2, 4, 3)
        circles = sorted((c.string, c.fret) for c in result.of_kind("note-circle"))
        assert circles == [(1, 1), (3, 2), (4, 0)]
        assert result.labels == ("1", "3", "2", " ")

    def test_seven_strings(self, chords):
        result = render_diagram(chords["B7"], RenderOptions(label_type="tone"))
        assert len(result.labels) == 7
        assert result.labels[5] == "X"
        assert result.info.tuning[0] == "B"
        bottom = {p.string: p.text for p in result.of_kind("label-text") if p.role == "bottom"}
        assert bottom[6] == "X"
        assert bottom[7] == "B"
