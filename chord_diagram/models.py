"""Input data models for chord diagrams.

This module defines the immutable value objects a caller supplies for a
render pass: fret positions, note annotations, barres, tunings, display
settings and the chord itself. Sequences are stored as tuples so every
model is hashable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

LabelType = Literal["none", "finger", "tone", "interval", "degree"]
FretNumberPosition = Literal["left", "right", "none"]
BottomRow = Literal["fingers", "tones", "intervals"]

# 1-4 for fingers, "T"/"P" for the thumb, "O" for open and "X" for muted
FingerDesignator = int | str

MUTED_FRET = -1
OPEN_FRET = 0


@dataclass(frozen=True)
class FretPosition:
    """A string/fret pair.

    Parameters
    ----------
    string : int
        1-based string number; string 1 is the highest-pitched string.
    fret : int
        0 for an open string, -1 for a muted string, otherwise the fret.

    Examples
    --------
    >>> FretPosition(string=6, fret=-1).is_muted
    True
    """

    string: int
    fret: int

    @property
    def is_muted(self) -> bool:
        return self.fret == MUTED_FRET

    @property
    def is_open(self) -> bool:
        return self.fret == OPEN_FRET

    @property
    def is_fretted(self) -> bool:
        return self.fret > OPEN_FRET


@dataclass(frozen=True)
class NoteAnnotation:
    """Optional musical information attached to a note.

    Parameters
    ----------
    tone : str | None
        Note name (e.g., "C", "F#").
    interval : str | None
        Interval relative to the chord root (e.g., "R", "m3", "5").
    degree : str | None
        Scale degree (e.g., "1", "b3").
    finger : FingerDesignator | None
        Finger number, thumb, or an "O"/"X" status symbol.
    highlight : bool
        Whether the note should be visually emphasized.
    """

    tone: str | None = None
    interval: str | None = None
    degree: str | None = None
    finger: FingerDesignator | None = None
    highlight: bool = False

    def field(self, label_type: str) -> str | None:
        """Return the annotation text for a label type.

        Parameters
        ----------
        label_type : str
            One of "finger", "tone", "interval" or "degree".

        Returns
        -------
        str | None
            The field as text, or None when the field is unset.

        Examples
        --------
        >>> NoteAnnotation(finger=3, tone="C").field("finger")
        '3'
        >>> NoteAnnotation(tone="C").field("interval") is None
        True
        """
        if label_type == "finger":
            return None if self.finger is None else str(self.finger)
        if label_type == "tone":
            return self.tone
        if label_type == "interval":
            return self.interval
        if label_type == "degree":
            return self.degree
        return None


@dataclass(frozen=True)
class PositionedNote:
    """A fret position with an optional annotation."""

    position: FretPosition
    annotation: NoteAnnotation | None = None

    @property
    def string(self) -> int:
        return self.position.string

    @property
    def fret(self) -> int:
        return self.position.fret

    @property
    def is_muted(self) -> bool:
        return self.position.is_muted


@dataclass(frozen=True)
class Barre:
    """One finger pressing several adjacent strings at the same fret.

    Parameters
    ----------
    from_string : int
        One end of the barre (either order is accepted).
    to_string : int
        The other end of the barre.
    fret : int
        Absolute fret number; must be > 0 to be drawn.
    finger : FingerDesignator | None
        Finger used for the barre.

    Examples
    --------
    >>> barre = Barre(from_string=6, to_string=1, fret=1)
    >>> barre.start_string, barre.end_string
    (1, 6)
    >>> barre.covers(3)
    True
    """

    from_string: int
    to_string: int
    fret: int
    finger: FingerDesignator | None = None

    @property
    def start_string(self) -> int:
        return min(self.from_string, self.to_string)

    @property
    def end_string(self) -> int:
        return max(self.from_string, self.to_string)

    @property
    def is_valid(self) -> bool:
        return self.fret > 0

    def covers(self, string: int) -> bool:
        return self.start_string <= string <= self.end_string


@dataclass(frozen=True)
class TuningNotes:
    """A bare tuning: open-string note names, lowest-pitched string first."""

    notes: tuple[str, ...]


@dataclass(frozen=True)
class NamedTuning:
    """A named tuning.

    Parameters
    ----------
    name : str
        Display name (e.g., "Standard EADGBE", "Drop D").
    notes : tuple[str, ...]
        Open-string note names, lowest-pitched string first.
    instrument : str | None
        Instrument the tuning belongs to.
    string_count : int | None
        Declared string count. ``len(notes)`` wins when the two disagree.
    """

    name: str
    notes: tuple[str, ...]
    instrument: str | None = None
    string_count: int | None = None


Tuning = TuningNotes | NamedTuning


@dataclass(frozen=True)
class ChordTheory:
    """Optional theory information for the info panel."""

    formula: str | None = None
    intervals: tuple[str, ...] = ()
    chord_tones: tuple[str, ...] = ()


@dataclass(frozen=True)
class BottomLabels:
    """Independent toggles for the label rows drawn below the grid."""

    show_fingers: bool = False
    show_tones: bool = True
    show_intervals: bool = False

    @property
    def enabled_rows(self) -> tuple[BottomRow, ...]:
        """Enabled rows in drawing order (fingers, tones, intervals).

        Examples
        --------
        >>> BottomLabels(show_fingers=True, show_tones=False, show_intervals=True).enabled_rows
        ('fingers', 'intervals')
        """
        rows: list[BottomRow] = []
        if self.show_fingers:
            rows.append("fingers")
        if self.show_tones:
            rows.append("tones")
        if self.show_intervals:
            rows.append("intervals")
        return tuple(rows)


@dataclass(frozen=True)
class DisplaySettings:
    """Per-chord display preferences; None leaves the default in place."""

    label_type: LabelType | None = None
    show_fret_numbers: bool | None = None
    fret_number_position: FretNumberPosition | None = None
    show_string_names: bool | None = None
    bottom_labels: BottomLabels | None = None


@dataclass(frozen=True)
class ChordPositionData:
    """One voicing of a chord.

    Parameters
    ----------
    base_fret : int
        Fret shown at the top edge of the diagram. 1 draws the nut.
    notes : tuple[PositionedNote, ...]
        Ideally one entry per string, muted strings included.
    barres : tuple[Barre, ...]
        Barres of this voicing.
    name : str | None
        Optional name of the voicing (e.g., "C at 5th fret").
    fingers, tones, intervals, degrees : tuple | None
        Legacy label sources indexed by string position (index 0 is
        string 1). Annotations on the notes take precedence.
    """

    base_fret: int = 1
    notes: tuple[PositionedNote, ...] = ()
    barres: tuple[Barre, ...] = ()
    name: str | None = None
    fingers: tuple[FingerDesignator | None, ...] | None = None
    tones: tuple[str | None, ...] | None = None
    intervals: tuple[str | None, ...] | None = None
    degrees: tuple[str | None, ...] | None = None


@dataclass(frozen=True)
class ChordDiagramData:
    """A chord with one or more positions.

    Parameters
    ----------
    name : str
        Primary chord name (e.g., "Am7").
    positions : tuple[ChordPositionData, ...]
        Alternate voicings; one is rendered at a time.
    theory : ChordTheory | None
        Formula, intervals and chord tones.
    tuning : Tuning | None
        Bare or named tuning.
    display : DisplaySettings | None
        Per-chord display settings.
    instrument : str | None
        Instrument type (e.g., "guitar", "bass", "ukulele").
    comments : str | None
        Free text.
    full_name : str | None
        Descriptive name (e.g., "A Minor 7th").
    aliases : tuple[str, ...]
        Alternative names.
    """

    name: str
    positions: tuple[ChordPositionData, ...]
    theory: ChordTheory | None = None
    tuning: Tuning | None = None
    display: DisplaySettings | None = None
    instrument: str | None = None
    comments: str | None = None
    full_name: str | None = None
    aliases: tuple[str, ...] = ()


@dataclass(frozen=True)
class RenderOptions:
    """Caller overrides for a single render; None means not overridden.

    Examples
    --------
    >>> RenderOptions(label_type="tone").position_index
    0
    """

    position_index: int = 0
    label_type: LabelType | None = None
    show_fret_numbers: bool | None = None
    fret_number_position: FretNumberPosition | None = None
    show_string_names: bool | None = None
    width: float | None = None
    height: float | None = None
    num_strings: int | None = None
    num_frets: int | None = None
    tuning: tuple[str, ...] | None = None
    bottom_labels: BottomLabels | None = None
