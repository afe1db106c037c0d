"""Layout engine for chord diagrams.

This module turns chord data into an ordered list of drawing primitives
with resolved geometry and labels. Rendering them is left to the caller.
"""

from chord_diagram.engine.geometry import Dimensions, GridMetrics, compute_dimensions, compute_grid
from chord_diagram.engine.labels import resolve_bottom_rows, resolve_labels
from chord_diagram.engine.normalizer import MissingPositionError, ResolvedConfig, resolve
from chord_diagram.engine.occlusion import BarreSpan, filter_occluded_notes, resolve_barre_spans
from chord_diagram.engine.primitives import (
    BarreLabel,
    BarreRect,
    BottomLabelRow,
    DiagramPrimitives,
    FretLine,
    LabelText,
    MutedGlyph,
    NoteCircle,
    Nut,
    Primitive,
    StringLine,
)
from chord_diagram.engine.render import render_diagram, render_diagram_cached

__all__ = [
    "BarreLabel",
    "BarreRect",
    "BarreSpan",
    "BottomLabelRow",
    "DiagramPrimitives",
    "Dimensions",
    "FretLine",
    "GridMetrics",
    "LabelText",
    "MissingPositionError",
    "MutedGlyph",
    "NoteCircle",
    "Nut",
    "Primitive",
    "ResolvedConfig",
    "StringLine",
    "compute_dimensions",
    "compute_grid",
    "filter_occluded_notes",
    "render_diagram",
    "render_diagram_cached",
    "resolve",
    "resolve_barre_spans",
    "resolve_bottom_rows",
    "resolve_labels",
]
