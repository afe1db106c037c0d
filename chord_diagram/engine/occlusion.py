"""Barre spans and suppression of the notes a barre covers.

A note is occluded when a valid barre sits on the same fret and its string
lies inside the barre's normalized span. Occluded notes are not drawn as
independent markers but still feed the barre's own labels.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from chord_diagram.models import Barre, FingerDesignator, PositionedNote

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BarreSpan:
    """A validated barre with its strings in ascending order.

    Parameters
    ----------
    barre : Barre
        The barre as supplied.
    start_string : int
        Highest-pitched string covered (smallest number).
    end_string : int
        Lowest-pitched string covered (largest number).
    """

    barre: Barre
    start_string: int
    end_string: int

    @property
    def fret(self) -> int:
        return self.barre.fret

    @property
    def finger(self) -> FingerDesignator | None:
        return self.barre.finger

    def covers(self, note: PositionedNote) -> bool:
        return note.fret == self.fret and self.start_string <= note.string <= self.end_string


def resolve_barre_spans(
    barres: Iterable[Barre], total_strings: int | None = None
) -> tuple[BarreSpan, ...]:
    """Normalize barres into drawable spans.

    Barres on fret 0 or below are skipped. When ``total_strings`` is given,
    spans are clamped to the instrument's strings and dropped if nothing
    is left.

    Parameters
    ----------
    barres : Iterable[Barre]
        Barres of the position.
    total_strings : int | None
        Resolved string count.

    Returns
    -------
    tuple[BarreSpan, ...]
        Valid spans in input order.

    Examples
    --------
    >>> from chord_diagram.models import Barre
    >>> spans = resolve_barre_spans([Barre(6, 1, 1), Barre(1, 3, 0)])
    >>> [(s.start_string, s.end_string, s.fret) for s in spans]
    [(1, 6, 1)]
    """
    spans: list[BarreSpan] = []
    for barre in barres:
        if not barre.is_valid:
            logger.debug("Skipping barre on fret %d", barre.fret)
            continue
        start, end = barre.start_string, barre.end_string
        if total_strings is not None:
            start, end = max(start, 1), min(end, total_strings)
            if start > end:
                logger.debug("Skipping barre outside strings 1-%d: %s", total_strings, barre)
                continue
        spans.append(BarreSpan(barre=barre, start_string=start, end_string=end))
    return tuple(spans)


def is_occluded(note: PositionedNote, spans: Iterable[BarreSpan]) -> bool:
    """Check whether any barre span covers the note."""
    return any(span.covers(note) for span in spans)


def filter_occluded_notes(
    notes: Iterable[PositionedNote], barres: Iterable[Barre]
) -> tuple[PositionedNote, ...]:
    """Drop the notes covered by a barre.

    Examples
    --------
    >>> from chord_diagram.models import Barre, FretPosition, PositionedNote
    >>> notes = [PositionedNote(FretPosition(1, 1)), PositionedNote(FretPosition(3, 2))]
    >>> visible = filter_occluded_notes(notes, [Barre(from_string=6, to_string=1, fret=1)])
    >>> [(n.string, n.fret) for n in visible]
    [(3, 2)]
    """
    spans = resolve_barre_spans(barres)
    return tuple(note for note in notes if not is_occluded(note, spans))


def covered_notes(notes: Iterable[PositionedNote], span: BarreSpan) -> tuple[PositionedNote, ...]:
    """Return the notes a barre covers, ordered from start to end string.

    A later note on the same string replaces an earlier one.
    """
    by_string = {note.string: note for note in notes if span.covers(note)}
    return tuple(by_string[string] for string in sorted(by_string))
