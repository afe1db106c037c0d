"""Resolution of partially-specified chord input into a full configuration.

Every setting is resolved with the same precedence: the per-call override,
then the chord's own display settings, then the defaults below.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from chord_diagram.models import DisplaySettings, NoteAnnotation, RenderOptions

if TYPE_CHECKING:
    from chord_diagram.models import (
        Barre,
        BottomLabels,
        ChordDiagramData,
        ChordPositionData,
        FretNumberPosition,
        LabelType,
        PositionedNote,
        Tuning,
    )

logger = logging.getLogger(__name__)

DEFAULT_LABEL_TYPE: LabelType = "finger"
DEFAULT_SHOW_FRET_NUMBERS = True
DEFAULT_FRET_NUMBER_POSITION: FretNumberPosition = "left"
DEFAULT_SHOW_STRING_NAMES = True
DEFAULT_NUM_STRINGS = 6
DEFAULT_NUM_FRETS = 5
DEFAULT_WIDTH = 200.0
DEFAULT_HEIGHT = 300.0

# Canonical open-string tunings by string count, lowest-pitched string first
DEFAULT_TUNINGS: dict[int, tuple[str, ...]] = {
    4: ("E", "A", "D", "G"),
    5: ("A", "D", "G", "B", "E"),
    6: ("E", "A", "D", "G", "B", "E"),
    7: ("B", "E", "A", "D", "G", "B", "E"),
}

BLANK_TUNING_NOTE = ""


class MissingPositionError(LookupError):
    """Raised when a chord has no position at the requested index."""


@dataclass(frozen=True)
class ResolvedConfig:
    """Fully-determined settings for one render pass.

    Parameters
    ----------
    name : str
        Chord name.
    position_index : int
        Index of the rendered position.
    position : ChordPositionData
        The rendered position as supplied.
    notes : tuple[PositionedNote, ...]
        The position's notes with legacy label arrays merged in.
    barres : tuple[Barre, ...]
        The position's barres, unfiltered.
    start_fret : int
        Fret shown at the top of the diagram (>= 1).
    num_strings : int
        Resolved string count.
    num_frets : int
        Number of fret bands drawn.
    tuning : tuple[str, ...]
        Open-string names, lowest-pitched string first, one per string.
    label_type : LabelType
        Label drawn inside note markers.
    show_fret_numbers : bool
        Whether every fret number is shown.
    fret_number_position : FretNumberPosition
        Side of the fret numbers, or "none".
    show_string_names : bool
        Whether tuning names fill the classic bottom row.
    bottom_labels : BottomLabels | None
        Multi-row bottom labels, or None for the classic single row.
    width : float
        Requested width.
    height : float
        Requested height.
    """

    name: str
    position_index: int
    position: ChordPositionData
    notes: tuple[PositionedNote, ...]
    barres: tuple[Barre, ...]
    start_fret: int
    num_strings: int
    num_frets: int
    tuning: tuple[str, ...]
    label_type: LabelType
    show_fret_numbers: bool
    fret_number_position: FretNumberPosition
    show_string_names: bool
    bottom_labels: BottomLabels | None
    width: float
    height: float


def _first_set(*values):
    """Return the first value that is not None."""
    for value in values:
        if value is not None:
            return value
    return None


def select_position(data: ChordDiagramData, position_index: int = 0) -> ChordPositionData:
    """Return the position to render.

    Raises
    ------
    MissingPositionError
        If the chord has no positions or the index is out of range.
    """
    if not data.positions or not 0 <= position_index < len(data.positions):
        msg = f"No position data for {data.name!r} at index {position_index}"
        raise MissingPositionError(msg)
    return data.positions[position_index]


def tuning_notes(tuning: Tuning | None) -> tuple[str, ...] | None:
    """Collapse either tuning variant into its note names.

    Examples
    --------
    >>> from chord_diagram.models import NamedTuning, TuningNotes
    >>> tuning_notes(TuningNotes(notes=("E", "A", "D", "G")))
    ('E', 'A', 'D', 'G')
    >>> tuning_notes(NamedTuning(name="Drop D", notes=("D", "A", "D", "G", "B", "E")))[0]
    'D'
    """
    if tuning is None:
        return None
    return tuple(tuning.notes)


def resolve_num_strings(
    override: int | None,
    tuning: tuple[str, ...] | None,
    notes: tuple[PositionedNote, ...],
) -> int:
    """Resolve the string count.

    Order: explicit override, tuning note count, highest string number
    among the notes, then 6.

    Examples
    --------
    >>> resolve_num_strings(None, ("E", "A", "D", "G"), ())
    4
    >>> resolve_num_strings(None, None, ())
    6
    """
    if override is not None:
        if override >= 1:
            return override
        logger.warning("Ignoring invalid string count override %r", override)
    if tuning:
        return len(tuning)
    strings = [note.string for note in notes if note.string >= 1]
    if strings:
        return max(strings)
    return DEFAULT_NUM_STRINGS


def default_tuning(num_strings: int) -> tuple[str, ...]:
    """Return the canonical tuning for a string count.

    Examples
    --------
    >>> default_tuning(4)
    ('E', 'A', 'D', 'G')
    >>> default_tuning(3)
    ('E', 'A', 'D')
    """
    if num_strings in DEFAULT_TUNINGS:
        return DEFAULT_TUNINGS[num_strings]
    return fit_tuning(DEFAULT_TUNINGS[DEFAULT_NUM_STRINGS], num_strings)


def fit_tuning(notes: tuple[str, ...], num_strings: int) -> tuple[str, ...]:
    """Truncate or blank-pad a tuning to the string count.

    Truncation keeps the lowest-pitched strings; padding adds blank names
    on the high side.

    Examples
    --------
    >>> fit_tuning(("E", "A", "D", "G", "B", "E"), 4)
    ('E', 'A', 'D', 'G')
    >>> fit_tuning(("G", "C", "E", "A"), 5)
    ('G', 'C', 'E', 'A', '')
    """
    if len(notes) == num_strings:
        return notes
    logger.debug("Fitting tuning %s to %d strings", notes, num_strings)
    if len(notes) > num_strings:
        return notes[:num_strings]
    return notes + (BLANK_TUNING_NOTE,) * (num_strings - len(notes))


def _legacy_value(values: tuple | None, index: int):
    if values is None or index >= len(values):
        return None
    value = values[index]
    if value is None or value == "":
        return None
    return value


def merge_parallel_labels(position: ChordPositionData) -> tuple[PositionedNote, ...]:
    """Merge legacy parallel label arrays into per-note annotations.

    The arrays are indexed by string position (index 0 is string 1).
    Fields already present on a note's annotation are kept.

    Parameters
    ----------
    position : ChordPositionData
        The position whose notes and arrays should be merged.

    Returns
    -------
    tuple[PositionedNote, ...]
        Notes with a single, per-note annotation source.
    """
    arrays = (position.fingers, position.tones, position.intervals, position.degrees)
    if all(values is None for values in arrays):
        return position.notes

    merged: list[PositionedNote] = []
    for note in position.notes:
        index = note.string - 1
        if index < 0:
            merged.append(note)
            continue
        annotation = note.annotation or NoteAnnotation()
        annotation = replace(
            annotation,
            finger=_first_set(annotation.finger, _legacy_value(position.fingers, index)),
            tone=_first_set(annotation.tone, _legacy_value(position.tones, index)),
            interval=_first_set(annotation.interval, _legacy_value(position.intervals, index)),
            degree=_first_set(annotation.degree, _legacy_value(position.degrees, index)),
        )
        merged.append(replace(note, annotation=annotation))
    return tuple(merged)


def resolve(data: ChordDiagramData, options: RenderOptions | None = None) -> ResolvedConfig:
    """Resolve chord data and caller overrides into a full configuration.

    Parameters
    ----------
    data : ChordDiagramData
        The chord to render.
    options : RenderOptions | None
        Per-call overrides.

    Returns
    -------
    ResolvedConfig
        Every setting needed by the layout stages.

    Raises
    ------
    MissingPositionError
        If there is no position at ``options.position_index``.

    Examples
    --------
    >>> from chord_diagram.models import ChordDiagramData, ChordPositionData
    >>> config = resolve(ChordDiagramData(name="C", positions=(ChordPositionData(),)))
    >>> config.num_strings, config.tuning, config.label_type
    (6, ('E', 'A', 'D', 'G', 'B', 'E'), 'finger')
    """
    options = options or RenderOptions()
    display = data.display or DisplaySettings()
    position = select_position(data, options.position_index)
    notes = merge_parallel_labels(position)

    supplied_tuning = options.tuning or tuning_notes(data.tuning) or None
    num_strings = resolve_num_strings(options.num_strings, supplied_tuning, notes)
    if supplied_tuning:
        tuning = fit_tuning(tuple(supplied_tuning), num_strings)
    else:
        tuning = default_tuning(num_strings)

    num_frets = _first_set(options.num_frets, DEFAULT_NUM_FRETS)
    if num_frets < 1:
        logger.warning("Ignoring invalid fret count %r", num_frets)
        num_frets = DEFAULT_NUM_FRETS

    start_fret = position.base_fret
    if start_fret < 1:
        logger.debug("Clamping base fret %d to 1", start_fret)
        start_fret = 1

    return ResolvedConfig(
        name=data.name,
        position_index=options.position_index,
        position=position,
        notes=notes,
        barres=tuple(position.barres),
        start_fret=start_fret,
        num_strings=num_strings,
        num_frets=num_frets,
        tuning=tuning,
        label_type=_first_set(options.label_type, display.label_type, DEFAULT_LABEL_TYPE),
        show_fret_numbers=_first_set(
            options.show_fret_numbers, display.show_fret_numbers, DEFAULT_SHOW_FRET_NUMBERS
        ),
        fret_number_position=_first_set(
            options.fret_number_position,
            display.fret_number_position,
            DEFAULT_FRET_NUMBER_POSITION,
        ),
        show_string_names=_first_set(
            options.show_string_names, display.show_string_names, DEFAULT_SHOW_STRING_NAMES
        ),
        bottom_labels=_first_set(options.bottom_labels, display.bottom_labels),
        width=_first_set(options.width, DEFAULT_WIDTH),
        height=_first_set(options.height, DEFAULT_HEIGHT),
    )
