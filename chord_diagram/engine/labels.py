"""Resolution of note-marker labels and bottom label rows.

Marker labels and bottom rows are computed independently: a diagram can
show finger numbers inside the markers and note names below the grid.
Both are returned as tuples indexed by string - 1.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from chord_diagram.engine.primitives import BottomLabelRow

if TYPE_CHECKING:
    from collections.abc import Iterable

    from chord_diagram.models import BottomLabels, BottomRow, PositionedNote

logger = logging.getLogger(__name__)

BLANK = " "
MUTED_LABEL = "X"

# Finger values that are string status symbols rather than fingers
STATUS_FINGERS = frozenset({"x", "o"})

LabelSource = Literal["annotation", "tuning", "muted", "absent", "suppressed"]

ROW_FIELDS: dict[str, str] = {
    "fingers": "finger",
    "tones": "tone",
    "intervals": "interval",
}


@dataclass(frozen=True)
class StringLabel:
    """A resolved label and where it came from.

    ``source`` keeps "blank because muted" apart from "blank because the
    annotation is missing".
    """

    text: str
    source: LabelSource

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()


ABSENT = StringLabel(BLANK, "absent")


def notes_by_string(
    notes: Iterable[PositionedNote], total_strings: int
) -> dict[int, PositionedNote]:
    """Index notes by string number, skipping out-of-range strings.

    A later note on the same string replaces an earlier one.
    """
    by_string: dict[int, PositionedNote] = {}
    for note in notes:
        if not 1 <= note.string <= total_strings:
            logger.debug("Skipping note on string %d of %d", note.string, total_strings)
            continue
        by_string[note.string] = note
    return by_string


def _annotation_text(note: PositionedNote, field_name: str) -> str | None:
    if note.annotation is None:
        return None
    text = note.annotation.field(field_name)
    if field_name == "finger" and text is not None and text.strip().lower() in STATUS_FINGERS:
        return None
    if text is None or not text.strip():
        return None
    return text


def resolve_note_label(note: PositionedNote, label_type: str) -> StringLabel:
    """Resolve the in-marker label of one note.

    Examples
    --------
    >>> from chord_diagram.models import FretPosition, NoteAnnotation, PositionedNote
    >>> note = PositionedNote(FretPosition(6, -1), NoteAnnotation(tone="E"))
    >>> resolve_note_label(note, "tone").text
    'X'
    >>> note = PositionedNote(FretPosition(5, 3), NoteAnnotation(finger=3))
    >>> resolve_note_label(note, "finger").text
    '3'
    """
    if note.is_muted:
        return StringLabel(MUTED_LABEL, "muted")
    if label_type == "none":
        return StringLabel(BLANK, "suppressed")
    text = _annotation_text(note, label_type)
    if text is None:
        return ABSENT
    return StringLabel(text, "annotation")


def resolve_string_labels(
    notes: Iterable[PositionedNote], label_type: str, total_strings: int
) -> tuple[StringLabel, ...]:
    """Resolve the in-marker label of every string, with its source."""
    by_string = notes_by_string(notes, total_strings)
    return tuple(
        resolve_note_label(by_string[string], label_type) if string in by_string else ABSENT
        for string in range(1, total_strings + 1)
    )


def resolve_labels(
    notes: Iterable[PositionedNote], label_type: str, total_strings: int
) -> tuple[str, ...]:
    """Resolve the text drawn inside (or above) each string's marker.

    Parameters
    ----------
    notes : Iterable[PositionedNote]
        The position's notes (sparse entries are allowed).
    label_type : str
        "none", "finger", "tone", "interval" or "degree".
    total_strings : int
        Resolved string count.

    Returns
    -------
    tuple[str, ...]
        One label per string, index 0 for string 1. Muted strings are
        always "X"; missing labels are a single space.

    Examples
    --------
    >>> from chord_diagram.models import FretPosition, PositionedNote
    >>> notes = [PositionedNote(FretPosition(2, -1)), PositionedNote(FretPosition(1, 0))]
    >>> resolve_labels(notes, "none", 3)
    (' ', 'X', ' ')
    """
    return tuple(label.text for label in resolve_string_labels(notes, label_type, total_strings))


def resolve_row_label(
    note: PositionedNote | None, row: BottomRow, open_string_name: str
) -> StringLabel:
    """Resolve one string's label in a bottom row.

    Examples
    --------
    >>> from chord_diagram.models import FretPosition, PositionedNote
    >>> muted = PositionedNote(FretPosition(6, -1))
    >>> resolve_row_label(muted, "fingers", "E").text
    'X'
    >>> resolve_row_label(muted, "tones", "E").source
    'muted'
    >>> resolve_row_label(None, "tones", "E").text
    'E'
    """
    if note is not None and note.is_muted:
        if row == "fingers":
            return StringLabel(MUTED_LABEL, "muted")
        return StringLabel(BLANK, "muted")

    text = _annotation_text(note, ROW_FIELDS[row]) if note is not None else None
    if text is not None:
        return StringLabel(text, "annotation")
    if row == "tones" and open_string_name.strip():
        return StringLabel(open_string_name, "tuning")
    return ABSENT


def resolve_bottom_rows(
    notes: Iterable[PositionedNote],
    bottom_labels: BottomLabels,
    tuning: tuple[str, ...],
    total_strings: int,
) -> tuple[BottomLabelRow, ...]:
    """Resolve the enabled bottom label rows.

    Parameters
    ----------
    notes : Iterable[PositionedNote]
        The position's notes.
    bottom_labels : BottomLabels
        Row toggles.
    tuning : tuple[str, ...]
        Open-string names, lowest-pitched string first.
    total_strings : int
        Resolved string count.

    Returns
    -------
    tuple[BottomLabelRow, ...]
        Enabled rows in order fingers, tones, intervals.
    """
    by_string = notes_by_string(notes, total_strings)
    rows: list[BottomLabelRow] = []
    for row in bottom_labels.enabled_rows:
        labels = []
        for string in range(1, total_strings + 1):
            tuning_index = total_strings - string
            open_name = tuning[tuning_index] if tuning_index < len(tuning) else ""
            labels.append(resolve_row_label(by_string.get(string), row, open_name).text)
        rows.append(BottomLabelRow(name=row, labels=tuple(labels)))
    return tuple(rows)
