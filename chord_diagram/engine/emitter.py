"""Assembly of the ordered primitive list handed to a drawing backend.

Primitives are emitted back to front: string lines, fret lines, nut, fret
numbers, barre bars, barre labels, note markers, muted glyphs, in-marker
labels and bottom labels. Later primitives sit above earlier ones.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from chord_diagram.engine.coordinates import fret_y, open_string_y, string_x
from chord_diagram.engine.geometry import compute_dimensions, compute_grid
from chord_diagram.engine.labels import MUTED_LABEL, resolve_note_label
from chord_diagram.engine.occlusion import covered_notes
from chord_diagram.engine.primitives import (
    BarreLabel,
    BarreRect,
    DiagramPrimitives,
    FretLine,
    LabelText,
    MutedGlyph,
    NoteCircle,
    Nut,
    StringLine,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from chord_diagram.engine.geometry import Dimensions, GridMetrics
    from chord_diagram.engine.normalizer import ResolvedConfig
    from chord_diagram.engine.occlusion import BarreSpan
    from chord_diagram.engine.primitives import BottomLabelRow, Primitive, StyleIntent
    from chord_diagram.models import PositionedNote
    from chord_diagram.theory import ChordInfo

# Label types whose barre labels are drawn once per covered string
PER_STRING_BARRE_LABELS = frozenset({"tone", "interval", "degree"})
THEORY_LABEL_TYPES = PER_STRING_BARRE_LABELS

NUT_HEIGHT_FACTOR = 0.3
FRET_STROKE = 1.5
THICK_STRING_STROKE = 1.5
THIN_STRING_STROKE = 1.2
OPEN_NOTE_STROKE = 1.5
FRETTED_NOTE_STROKE = 1.0

NOTE_FONT_FACTOR = 1.2
MUTED_FONT_FACTOR = 1.4
BARRE_MARKER_FONT_FACTOR = 1.1

FRET_NUMBER_SPACING_FACTOR = 0.1
FRET_NUMBER_OFFSET = -5.0
FRET_NUMBER_MIN_FONT = 12.0
FRET_NUMBER_MAX_FONT = 16.0

BOTTOM_LABEL_OFFSET = 20.0
BOTTOM_ROW_SPACING = 16.0
BOTTOM_FONT_SIZE = 14.0


def string_stroke_width(visual_index: int, total_strings: int) -> float:
    """Return the stroke width of a string line.

    Four-string instruments get thick strings throughout; otherwise only
    the two outer strings are thick.

    Examples
    --------
    >>> string_stroke_width(0, 6), string_stroke_width(2, 6), string_stroke_width(2, 4)
    (1.5, 1.2, 1.5)
    """
    if total_strings <= 4:
        return THICK_STRING_STROKE
    if visual_index in (0, total_strings - 1):
        return THICK_STRING_STROKE
    return THIN_STRING_STROKE


def fret_number_labels(start_fret: int, num_frets: int, show_all: bool) -> list[tuple[int, str]]:
    """Return ``(band_index, text)`` pairs for the fret numbers to draw.

    Band 1 is the first fret band below the top line. When numbers are
    disabled only the start fret of a position above the nut is labelled.

    Examples
    --------
    >>> fret_number_labels(1, 3, True)
    [(1, '1'), (2, '2'), (3, '3')]
    >>> fret_number_labels(5, 3, False)
    [(1, '5')]
    >>> fret_number_labels(1, 3, False)
    []
    """
    if show_all:
        return [(band, str(start_fret + band - 1)) for band in range(1, num_frets + 1)]
    if start_fret > 1:
        return [(1, str(start_fret))]
    return []


class _Emitter:
    """Accumulates primitives for one diagram in absolute coordinates."""

    def __init__(self, config: ResolvedConfig, dimensions: Dimensions, grid: GridMetrics) -> None:
        self.config = config
        self.dimensions = dimensions
        self.grid = grid
        self.origin_x = dimensions.side_padding
        self.origin_y = dimensions.top_padding
        self.primitives: list[Primitive] = []

    def x(self, string: int) -> float:
        return self.origin_x + string_x(string, self.config.num_strings, self.grid.string_spacing)

    def y(self, fret: int) -> float:
        return self.origin_y + fret_y(fret, self.config.start_fret, self.grid.fret_spacing)

    @property
    def marker_y(self) -> float:
        return self.origin_y + open_string_y(self.grid.fret_spacing)

    def strings(self) -> None:
        n = self.config.num_strings
        xs = self.origin_x + np.arange(n) * self.grid.string_spacing
        for visual_index, x in enumerate(xs.tolist()):
            self.primitives.append(
                StringLine(
                    x=x,
                    y1=self.origin_y,
                    y2=self.origin_y + self.grid.height,
                    stroke_width=string_stroke_width(visual_index, n),
                    string=n - visual_index,
                )
            )

    def frets(self) -> None:
        ys = self.origin_y + np.arange(self.config.num_frets + 1) * self.grid.fret_spacing
        for index, y in enumerate(ys.tolist()):
            self.primitives.append(
                FretLine(
                    y=y,
                    x1=self.origin_x,
                    x2=self.origin_x + self.grid.width,
                    stroke_width=FRET_STROKE,
                    index=index,
                )
            )

    def nut(self) -> None:
        if self.config.start_fret != 1:
            return
        self.primitives.append(
            Nut(
                x=self.origin_x,
                y=self.origin_y,
                width=self.grid.width,
                height=self.grid.fret_spacing * NUT_HEIGHT_FACTOR,
            )
        )

    def fret_numbers(self) -> None:
        config = self.config
        if config.fret_number_position == "none":
            return
        spacing = self.grid.width * FRET_NUMBER_SPACING_FACTOR
        if config.fret_number_position == "left":
            x = self.origin_x - spacing + FRET_NUMBER_OFFSET
        else:
            x = self.origin_x + self.grid.width + spacing
        font_size = min(self.grid.width, self.grid.height) * 0.05
        font_size = max(FRET_NUMBER_MIN_FONT, min(font_size, FRET_NUMBER_MAX_FONT))
        for band, text in fret_number_labels(
            config.start_fret, config.num_frets, config.show_fret_numbers
        ):
            self.primitives.append(
                LabelText(
                    x=x,
                    y=self.origin_y + (band - 0.5) * self.grid.fret_spacing,
                    text=text,
                    font_size=font_size,
                    role="fret-number",
                )
            )

    def barres(self, spans: Sequence[BarreSpan]) -> None:
        radius = self.grid.note_radius
        for span in spans:
            left = self.x(span.end_string)
            right = self.x(span.start_string)
            self.primitives.append(
                BarreRect(
                    x=left - radius,
                    y=self.y(span.fret) - radius,
                    width=right - left + radius * 2,
                    height=radius * 2,
                    corner_radius=radius,
                    fret=span.fret,
                    start_string=span.start_string,
                    end_string=span.end_string,
                )
            )

    def barre_labels(self, spans: Sequence[BarreSpan]) -> None:
        label_type = self.config.label_type
        radius = self.grid.note_radius
        for span in spans:
            y = self.y(span.fret)
            if label_type == "finger":
                if span.finger is None or not str(span.finger).strip():
                    continue
                self.primitives.append(
                    BarreLabel(
                        x=(self.x(span.end_string) + self.x(span.start_string)) / 2,
                        y=y,
                        text=str(span.finger),
                        font_size=radius * NOTE_FONT_FACTOR,
                    )
                )
            elif label_type in PER_STRING_BARRE_LABELS:
                for note in covered_notes(self.config.notes, span):
                    label = resolve_note_label(note, label_type)
                    if label.is_blank:
                        continue
                    self.primitives.append(
                        BarreLabel(
                            x=self.x(note.string),
                            y=y,
                            text=label.text,
                            font_size=radius * BARRE_MARKER_FONT_FACTOR,
                            marker_radius=radius,
                            string=note.string,
                        )
                    )

    def notes(self, notes: Sequence[PositionedNote]) -> None:
        for note in notes:
            if note.is_muted:
                continue
            highlight = note.annotation is not None and note.annotation.highlight
            style: StyleIntent = "highlight" if highlight else "primary"
            self.primitives.append(
                NoteCircle(
                    x=self.x(note.string),
                    y=self.y(note.fret),
                    radius=self.grid.note_radius,
                    fill="hollow" if note.position.is_open else "solid",
                    stroke_width=OPEN_NOTE_STROKE if note.position.is_open else FRETTED_NOTE_STROKE,
                    string=note.string,
                    fret=note.fret,
                    style=style,
                )
            )

    def muted_glyphs(self, notes: Sequence[PositionedNote]) -> None:
        for note in notes:
            if not note.is_muted:
                continue
            self.primitives.append(
                MutedGlyph(
                    x=self.x(note.string),
                    y=self.marker_y,
                    font_size=self.grid.note_radius * MUTED_FONT_FACTOR,
                    string=note.string,
                )
            )

    def note_labels(self, notes: Sequence[PositionedNote], labels: Sequence[str]) -> None:
        for note in notes:
            if note.is_muted:
                continue
            text = labels[note.string - 1]
            if not text.strip():
                continue
            self.primitives.append(
                LabelText(
                    x=self.x(note.string),
                    y=self.y(note.fret),
                    text=text,
                    font_size=self.grid.note_radius * NOTE_FONT_FACTOR,
                    role="note",
                    string=note.string,
                    inverse=not note.position.is_open,
                )
            )

    def _bottom_label(self, string: int, row: int, text: str, style: StyleIntent) -> None:
        self.primitives.append(
            LabelText(
                x=self.x(string),
                y=self.origin_y + self.grid.height + BOTTOM_LABEL_OFFSET + row * BOTTOM_ROW_SPACING,
                text=text,
                font_size=BOTTOM_FONT_SIZE,
                role="bottom",
                string=string,
                row=row,
                style=style,
            )
        )

    def string_names(self, labels: Sequence[str]) -> None:
        """Classic single bottom row: marker label, else the tuning name."""
        config = self.config
        n = config.num_strings
        for string in range(n, 0, -1):
            text = labels[string - 1]
            style: StyleIntent = "primary"
            if text.strip():
                if text == MUTED_LABEL:
                    style = "muted"
                elif config.label_type in THEORY_LABEL_TYPES:
                    style = "accent"
            elif config.show_string_names:
                text = config.tuning[n - string]
            if text == MUTED_LABEL or (config.show_string_names and text.strip()):
                self._bottom_label(string, 0, text, style)

    def bottom_rows(self, rows: Sequence[BottomLabelRow]) -> None:
        n = self.config.num_strings
        for row_index, row in enumerate(rows):
            for string in range(n, 0, -1):
                text = row.labels[string - 1]
                if not text.strip():
                    continue
                if text == MUTED_LABEL:
                    style: StyleIntent = "muted"
                elif row.name == "fingers":
                    style = "primary"
                else:
                    style = "accent"
                self._bottom_label(string, row_index, text, style)


def emit(
    config: ResolvedConfig,
    notes: Sequence[PositionedNote],
    spans: Sequence[BarreSpan],
    labels: Sequence[str],
    bottom_rows: Sequence[BottomLabelRow] = (),
    info: ChordInfo | None = None,
) -> DiagramPrimitives:
    """Assemble the render-ready primitive list.

    Parameters
    ----------
    config : ResolvedConfig
        Resolved settings.
    notes : Sequence[PositionedNote]
        Notes left after barre occlusion, out-of-range strings removed.
    spans : Sequence[BarreSpan]
        Valid barre spans.
    labels : Sequence[str]
        In-marker labels indexed by string - 1.
    bottom_rows : Sequence[BottomLabelRow]
        Multi-row bottom labels; ignored unless ``config.bottom_labels``
        is set, in which case they replace the classic string-name row.
    info : ChordInfo | None
        Chord info panel data passed through to the output.

    Returns
    -------
    DiagramPrimitives
        Primitives in drawing order with the geometry used.
    """
    dimensions = compute_dimensions(config.width, config.height)
    grid = compute_grid(dimensions, config.num_strings, config.num_frets)
    emitter = _Emitter(config, dimensions, grid)

    emitter.strings()
    emitter.frets()
    emitter.nut()
    emitter.fret_numbers()
    emitter.barres(spans)
    emitter.barre_labels(spans)
    emitter.notes(notes)
    emitter.muted_glyphs(notes)
    emitter.note_labels(notes, labels)
    if config.bottom_labels is not None:
        emitter.bottom_rows(bottom_rows)
    else:
        emitter.string_names(labels)

    return DiagramPrimitives(
        width=dimensions.diagram_width,
        height=dimensions.diagram_height,
        primitives=tuple(emitter.primitives),
        labels=tuple(labels),
        bottom_rows=tuple(bottom_rows) if config.bottom_labels is not None else (),
        dimensions=dimensions,
        grid=grid,
        info=info,
    )
