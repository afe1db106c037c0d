"""Pitch class and interval operations.

This module maps note names to pitch classes (0-11) and provides the
interval table used to derive tones and intervals for fretted notes.
"""

from __future__ import annotations

from dataclasses import dataclass

# Note name to pitch class (0-11, where C=0)
NOTE_TO_PC: dict[str, int] = {
    "C": 0,
    "C#": 1,
    "Db": 1,
    "D": 2,
    "D#": 3,
    "Eb": 3,
    "E": 4,
    "Fb": 4,
    "E#": 5,
    "F": 5,
    "F#": 6,
    "Gb": 6,
    "G": 7,
    "G#": 8,
    "Ab": 8,
    "A": 9,
    "A#": 10,
    "Bb": 10,
    "B": 11,
    "Cb": 11,
    "B#": 0,
}

# Pitch class to sharp note name (prefer sharps for consistency)
PC_TO_NOTE: tuple[str, ...] = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")


@dataclass(frozen=True)
class Interval:
    """A simple interval within one octave.

    Parameters
    ----------
    name : str
        Full name (e.g., "Minor Third").
    abbr : str
        Abbreviation (e.g., "m3").
    semitones : int
        Size in semitones (0-11).
    degree : int
        Diatonic degree number (1-7).
    quality : str
        "perfect", "major", "minor" or "augmented".
    """

    name: str
    abbr: str
    semitones: int
    degree: int
    quality: str


INTERVALS: tuple[Interval, ...] = (
    Interval("Perfect Unison", "P1", 0, 1, "perfect"),
    Interval("Minor Second", "m2", 1, 2, "minor"),
    Interval("Major Second", "M2", 2, 2, "major"),
    Interval("Minor Third", "m3", 3, 3, "minor"),
    Interval("Major Third", "M3", 4, 3, "major"),
    Interval("Perfect Fourth", "P4", 5, 4, "perfect"),
    Interval("Augmented Fourth", "A4", 6, 4, "augmented"),
    Interval("Perfect Fifth", "P5", 7, 5, "perfect"),
    Interval("Minor Sixth", "m6", 8, 6, "minor"),
    Interval("Major Sixth", "M6", 9, 6, "major"),
    Interval("Minor Seventh", "m7", 10, 7, "minor"),
    Interval("Major Seventh", "M7", 11, 7, "major"),
)


def normalize_note(note: str) -> str:
    """Normalize the spelling of a note name.

    Uppercases the letter and keeps the accidental, so lowercase tuning
    names such as the high "e" in "EADGBe" are accepted.

    Examples
    --------
    >>> normalize_note("e")
    'E'
    >>> normalize_note(" bb ")
    'Bb'
    """
    stripped = note.strip()
    if not stripped:
        return stripped
    return stripped[0].upper() + stripped[1:].lower()


def note_to_pc(note: str) -> int:
    """Convert a note name to pitch class (0-11).

    Parameters
    ----------
    note : str
        Note name (e.g., "C", "F#", "Bb").

    Returns
    -------
    int
        Pitch class (0-11, where C=0).

    Raises
    ------
    ValueError
        If the note name is not recognized.

    Examples
    --------
    >>> note_to_pc("C")
    0
    >>> note_to_pc("F#")
    6
    >>> note_to_pc("Bb")
    10
    """
    normalized = normalize_note(note)
    if normalized in NOTE_TO_PC:
        return NOTE_TO_PC[normalized]
    msg = f"Unknown note: {note}"
    raise ValueError(msg)


def transpose_note(note: str, semitones: int) -> str:
    """Transpose a note name by a number of semitones.

    Examples
    --------
    >>> transpose_note("E", 1)
    'F'
    >>> transpose_note("C", -1)
    'B'
    """
    return PC_TO_NOTE[(note_to_pc(note) + semitones) % 12]


def fretted_tone(open_note: str, fret: int) -> str:
    """Return the note sounding on a string fretted at ``fret``.

    Parameters
    ----------
    open_note : str
        Open-string note name.
    fret : int
        Fret number (0 for the open string).

    Raises
    ------
    ValueError
        If the string is muted or the note name is unknown.

    Examples
    --------
    >>> fretted_tone("A", 3)
    'C'
    >>> fretted_tone("E", 0)
    'E'
    """
    if fret < 0:
        msg = f"Muted strings have no tone (fret={fret})"
        raise ValueError(msg)
    return transpose_note(open_note, fret)


def interval_by_abbr(abbr: str) -> Interval | None:
    """Look up an interval by abbreviation (e.g., "m3", "P5").

    Examples
    --------
    >>> interval_by_abbr("P5").semitones
    7
    >>> interval_by_abbr("x9") is None
    True
    """
    for interval in INTERVALS:
        if interval.abbr == abbr:
            return interval
    return None


def interval_by_semitones(semitones: int) -> Interval:
    """Look up an interval by size, folding compound intervals into one octave.

    Examples
    --------
    >>> interval_by_semitones(3).abbr
    'm3'
    >>> interval_by_semitones(14).abbr
    'M2'
    """
    return INTERVALS[semitones % 12]


def interval_between(root: str, note: str) -> Interval:
    """Return the ascending interval from ``root`` to ``note``.

    Raises
    ------
    ValueError
        If either note name is unknown.

    Examples
    --------
    >>> interval_between("C", "E").abbr
    'M3'
    >>> interval_between("A", "C").abbr
    'm3'
    """
    return interval_by_semitones(note_to_pc(note) - note_to_pc(root))


def note_by_interval(root: str, interval: Interval) -> str:
    """Apply an interval to a root note.

    Examples
    --------
    >>> note_by_interval("A", interval_by_abbr("m3"))
    'C'
    """
    return transpose_note(root, interval.semitones)
