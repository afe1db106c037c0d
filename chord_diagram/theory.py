"""Chord theory helpers for the info panel and note annotation.

Chord tones come from the chord's theory data when present, otherwise from
parsing the chord name with pychord.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from chord_diagram.models import NoteAnnotation
from chord_diagram.pitch_class import fretted_tone, interval_between

if TYPE_CHECKING:
    from collections.abc import Iterable

    from chord_diagram.models import ChordDiagramData, PositionedNote

logger = logging.getLogger(__name__)

ROOT_INTERVAL = "R"


@dataclass(frozen=True)
class ChordInfo:
    """Data shown next to a diagram.

    Parameters
    ----------
    name : str
        Chord name.
    full_name : str | None
        Descriptive name.
    instrument : str | None
        Instrument type, from the chord or its named tuning.
    tuning : tuple[str, ...]
        Resolved tuning, lowest-pitched string first.
    chord_tones : tuple[str, ...]
        Notes of the chord.
    intervals : tuple[str, ...]
        Interval formula (e.g., ("R", "3", "5")).
    comments : str | None
        Free text.
    root : str | None
        Root note when the chord name is a chord symbol.
    """

    name: str
    full_name: str | None
    instrument: str | None
    tuning: tuple[str, ...]
    chord_tones: tuple[str, ...]
    intervals: tuple[str, ...]
    comments: str | None = None
    root: str | None = None


def chord_tones_from_name(name: str) -> tuple[str, ...]:
    """Return the notes of a chord symbol, or () if it is not one.

    Parameters
    ----------
    name : str
        A chord symbol in pychord notation (e.g., "Am7", "C/E").

    Returns
    -------
    tuple[str, ...]
        Chord tones in pychord order, empty when the name does not parse.

    Examples
    --------
    >>> chord_tones_from_name("Am7")
    ('A', 'C', 'E', 'G')
    >>> chord_tones_from_name("C Major (Open)")
    ()
    """
    from pychord import Chord as PyChord

    if not name.strip():
        return ()
    try:
        return tuple(PyChord(name.strip()).components())
    except ValueError:
        logger.debug("Chord name %r is not a chord symbol", name)
        return ()


def chord_root_from_name(name: str) -> str | None:
    """Return the root of a chord symbol, or None if it is not one.

    Examples
    --------
    >>> chord_root_from_name("F#m7")
    'F#'
    """
    from pychord import Chord as PyChord

    if not name.strip():
        return None
    try:
        return PyChord(name.strip()).root
    except ValueError:
        return None


def build_chord_info(data: ChordDiagramData, tuning: tuple[str, ...]) -> ChordInfo:
    """Collect the info panel data for a chord.

    Parameters
    ----------
    data : ChordDiagramData
        The chord.
    tuning : tuple[str, ...]
        Resolved tuning.

    Returns
    -------
    ChordInfo
        Panel data with chord tones and root filled in where possible.
    """
    theory = data.theory
    chord_tones: tuple[str, ...] = ()
    intervals: tuple[str, ...] = ()
    if theory is not None:
        chord_tones = tuple(theory.chord_tones)
        if theory.formula:
            intervals = tuple(theory.formula.split())
        elif theory.intervals:
            intervals = tuple(theory.intervals)
    if not chord_tones:
        chord_tones = chord_tones_from_name(data.name)

    instrument = data.instrument
    if instrument is None and data.tuning is not None:
        instrument = getattr(data.tuning, "instrument", None)

    return ChordInfo(
        name=data.name,
        full_name=data.full_name,
        instrument=instrument,
        tuning=tuning,
        chord_tones=chord_tones,
        intervals=intervals,
        comments=data.comments,
        root=chord_root_from_name(data.name),
    )


def annotate_notes(
    notes: Iterable[PositionedNote],
    tuning: tuple[str, ...],
    root: str | None = None,
) -> tuple[PositionedNote, ...]:
    """Fill in missing tone and interval annotations.

    The tone is the note sounding at the fret; the interval is measured
    from ``root`` ("R" for the root itself). Existing annotation fields,
    muted strings and strings with an unknown tuning note are left alone.

    Parameters
    ----------
    notes : Iterable[PositionedNote]
        Notes to annotate.
    tuning : tuple[str, ...]
        Open-string names, lowest-pitched string first.
    root : str | None
        Chord root; intervals are only filled when given.

    Returns
    -------
    tuple[PositionedNote, ...]
        Annotated copies of the notes.

    Examples
    --------
    >>> from chord_diagram.models import FretPosition, PositionedNote
    >>> notes = [PositionedNote(FretPosition(5, 3)), PositionedNote(FretPosition(4, 2))]
    >>> [(n.annotation.tone, n.annotation.interval)
    ...  for n in annotate_notes(notes, ("E", "A", "D", "G", "B", "E"), "C")]
    [('C', 'R'), ('E', 'M3')]
    """
    total = len(tuning)
    annotated: list[PositionedNote] = []
    for note in notes:
        tuning_index = total - note.string
        if note.is_muted or note.fret < 0 or not 0 <= tuning_index < total:
            annotated.append(note)
            continue
        try:
            tone = fretted_tone(tuning[tuning_index], note.fret)
        except ValueError:
            logger.debug("Cannot derive tone for string %d from %r", note.string, tuning[tuning_index])
            annotated.append(note)
            continue

        annotation = note.annotation or NoteAnnotation()
        updates: dict[str, str] = {}
        if annotation.tone is None:
            updates["tone"] = tone
        if annotation.interval is None and root is not None:
            interval = interval_between(root, tone)
            updates["interval"] = ROOT_INTERVAL if interval.semitones == 0 else interval.abbr
        annotated.append(replace(note, annotation=replace(annotation, **updates)))
    return tuple(annotated)
