"""Chord diagram library for stringed instruments.

This library resolves chord data (fret positions, barres, tunings and note
annotations) into declarative drawing primitives for a chord diagram:
string and fret lines, the nut, note markers, barres and their labels.

Examples
--------
>>> from chord_diagram import chord_from_dict, render_diagram

>>> # Open C major, frets listed from the lowest-pitched string
>>> chord = chord_from_dict({"name": "C", "positions": [{"frets": ["x", 3, 2, 0, 1, 0]}]})
>>> diagram = render_diagram(chord)
>>> diagram.width, diagram.height
(200.0, 250.0)
>>> len(diagram.of_kind("muted-glyph"))
1

>>> # Per-call overrides
>>> from chord_diagram import RenderOptions
>>> render_diagram(chord, RenderOptions(label_type="tone")).labels
(' ', ' ', ' ', ' ', ' ', 'X')
"""

from chord_diagram.converter import chord_from_dict, options_from_dict
from chord_diagram.engine import DiagramPrimitives, MissingPositionError, render_diagram, render_diagram_cached
from chord_diagram.models import (
    Barre,
    BottomLabels,
    ChordDiagramData,
    ChordPositionData,
    ChordTheory,
    DisplaySettings,
    FretPosition,
    NamedTuning,
    NoteAnnotation,
    PositionedNote,
    RenderOptions,
    TuningNotes,
)
from chord_diagram.theory import ChordInfo, annotate_notes, build_chord_info

__all__ = [
    "Barre",
    "BottomLabels",
    "ChordDiagramData",
    "ChordInfo",
    "ChordPositionData",
    "ChordTheory",
    "DiagramPrimitives",
    "DisplaySettings",
    "FretPosition",
    "MissingPositionError",
    "NamedTuning",
    "NoteAnnotation",
    "PositionedNote",
    "RenderOptions",
    "TuningNotes",
    "annotate_notes",
    "build_chord_info",
    "chord_from_dict",
    "options_from_dict",
    "render_diagram",
    "render_diagram_cached",
]
