"""Main diagram rendering orchestration.

This module provides ``render_diagram``, which runs the full pipeline:
normalize the input, resolve labels and barre occlusion, and emit the
ordered primitive list. Malformed input degrades to reduced output and
never raises.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from chord_diagram.engine.emitter import emit
from chord_diagram.engine.geometry import compute_dimensions
from chord_diagram.engine.labels import resolve_bottom_rows, resolve_labels
from chord_diagram.engine.normalizer import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    MissingPositionError,
    ResolvedConfig,
    resolve,
)
from chord_diagram.engine.occlusion import filter_occluded_notes, resolve_barre_spans
from chord_diagram.engine.primitives import DiagramPrimitives, LabelText
from chord_diagram.models import MUTED_FRET, ChordDiagramData, PositionedNote, RenderOptions
from chord_diagram.theory import build_chord_info

logger = logging.getLogger(__name__)

PLACEHOLDER_TEXT = "No position data"
PLACEHOLDER_X = 10.0
PLACEHOLDER_Y = 20.0
PLACEHOLDER_FONT_SIZE = 14.0


def placeholder(options: RenderOptions | None = None, text: str = PLACEHOLDER_TEXT) -> DiagramPrimitives:
    """Return the minimal output used when there is nothing to draw.

    The placeholder is sized to the requested dimensions.

    Examples
    --------
    >>> result = placeholder()
    >>> result.placeholder, result.primitives[0].text
    (True, 'No position data')
    """
    options = options or RenderOptions()
    width = options.width if options.width is not None else DEFAULT_WIDTH
    height = options.height if options.height is not None else DEFAULT_HEIGHT
    return DiagramPrimitives(
        width=float(width),
        height=float(height),
        primitives=(
            LabelText(
                x=PLACEHOLDER_X,
                y=PLACEHOLDER_Y,
                text=text,
                font_size=PLACEHOLDER_FONT_SIZE,
                role="placeholder",
                style="muted",
            ),
        ),
        placeholder=True,
    )


def layout_notes(config: ResolvedConfig) -> tuple[PositionedNote, ...]:
    """Return the notes that can be laid out.

    Notes on strings outside ``[1, num_strings]`` and notes with a fret
    below -1 are skipped.
    """
    valid: list[PositionedNote] = []
    for note in config.notes:
        if not 1 <= note.string <= config.num_strings:
            logger.debug("Skipping note on string %d of %d", note.string, config.num_strings)
            continue
        if note.fret < MUTED_FRET:
            logger.debug("Skipping note with fret %d on string %d", note.fret, note.string)
            continue
        valid.append(note)
    return tuple(valid)


def render_diagram(data: ChordDiagramData, options: RenderOptions | None = None) -> DiagramPrimitives:
    """Render one position of a chord into drawing primitives.

    This is the main entry point of the engine.

    Parameters
    ----------
    data : ChordDiagramData
        The chord to render.
    options : RenderOptions | None
        Per-call overrides, including the position index.

    Returns
    -------
    DiagramPrimitives
        The ordered primitives, or a placeholder when the chord has no
        position at the requested index.

    Examples
    --------
    >>> from chord_diagram.models import ChordDiagramData
    >>> render_diagram(ChordDiagramData(name="Empty", positions=())).placeholder
    True
    """
    try:
        config = resolve(data, options)
    except MissingPositionError as exc:
        logger.warning("%s", exc)
        return placeholder(options)

    notes = layout_notes(config)
    labels = resolve_labels(notes, config.label_type, config.num_strings)
    bottom_rows = ()
    if config.bottom_labels is not None:
        bottom_rows = resolve_bottom_rows(
            notes, config.bottom_labels, config.tuning, config.num_strings
        )
    spans = resolve_barre_spans(config.barres, config.num_strings)
    visible = filter_occluded_notes(notes, config.barres)

    return emit(
        config,
        visible,
        spans,
        labels,
        bottom_rows=bottom_rows,
        info=build_chord_info(data, config.tuning),
    )


@lru_cache(maxsize=256)
def render_diagram_cached(
    data: ChordDiagramData, options: RenderOptions | None = None
) -> DiagramPrimitives:
    """Memoized ``render_diagram``.

    All inputs are frozen dataclasses, so the call arguments themselves are
    the cache key. Only useful to avoid recomputation; results are shared
    and must be treated as read-only.
    """
    return render_diagram(data, options)


def diagram_size(options: RenderOptions | None = None) -> tuple[float, float]:
    """Return the diagram size a render with these options would produce."""
    options = options or RenderOptions()
    dimensions = compute_dimensions(
        options.width if options.width is not None else DEFAULT_WIDTH,
        options.height if options.height is not None else DEFAULT_HEIGHT,
    )
    return dimensions.diagram_width, dimensions.diagram_height
