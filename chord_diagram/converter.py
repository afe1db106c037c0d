"""Conversion of JSON chord documents into the chord models.

This module turns the camelCase dictionaries found in chord JSON files into
``ChordDiagramData`` and ``RenderOptions``. Besides the current note shape
(``{"position": {"string": 1, "fret": 0}, "annotation": {...}}``) it
accepts the older shapes still found in chord libraries:

- flat notes: ``{"string": 6, "fret": "x", "label": "X"}``
- position-level ``frets`` arrays, lowest-pitched string first
- parallel ``fingers``/``tones``/``intervals``/``degrees`` arrays
"""

from __future__ import annotations

import math
from typing import Any

from chord_diagram.models import (
    MUTED_FRET,
    Barre,
    BottomLabels,
    ChordDiagramData,
    ChordPositionData,
    ChordTheory,
    DisplaySettings,
    FingerDesignator,
    FretPosition,
    NamedTuning,
    NoteAnnotation,
    PositionedNote,
    RenderOptions,
    Tuning,
    TuningNotes,
)

# Fret values that mean "string not played"
MUTED_FRET_VALUES = frozenset({"x", "X", "-1"})

LABEL_TYPES = frozenset({"none", "finger", "tone", "interval", "degree"})
FRET_NUMBER_POSITIONS = frozenset({"left", "right", "none"})


def parse_fret(value: Any) -> int:
    """Convert a fret value to an integer.

    Parameters
    ----------
    value : Any
        An int, a digit string, or "x"/"X" for a muted string.

    Returns
    -------
    int
        The fret, -1 for muted strings.

    Raises
    ------
    ValueError
        If the value is not a fret.

    Examples
    --------
    >>> parse_fret("x"), parse_fret("3"), parse_fret(0)
    (-1, 3, 0)
    """
    if isinstance(value, bool):
        msg = f"Invalid fret: {value!r}"
        raise ValueError(msg)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if text in MUTED_FRET_VALUES:
            return MUTED_FRET
        if text.isdigit():
            return int(text)
    msg = f"Invalid fret: {value!r}"
    raise ValueError(msg)


def parse_finger(value: Any) -> FingerDesignator | None:
    """Convert a finger value, turning digit strings into ints.

    0 means "no finger" in chord libraries and gives None.

    Examples
    --------
    >>> parse_finger("2"), parse_finger("T"), parse_finger(""), parse_finger(0)
    (2, 'T', None, None)
    """
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value or None
    text = str(value).strip()
    if not text:
        return None
    if text.isdigit():
        return int(text) or None
    return text


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value)
    return text if text.strip() else None


def parse_annotation(data: dict[str, Any] | None) -> NoteAnnotation | None:
    """Convert an annotation dict; empty or missing dicts give None."""
    if not data:
        return None
    return NoteAnnotation(
        tone=_optional_str(data.get("tone")),
        interval=_optional_str(data.get("interval")),
        degree=_optional_str(data.get("degree")),
        finger=parse_finger(data.get("finger")),
        highlight=bool(data.get("highlight", False)),
    )


def parse_note(data: dict[str, Any]) -> PositionedNote:
    """Convert a note dict in either the nested or the flat shape.

    A flat note's ``label`` becomes its finger annotation, except the "X"
    that only repeats the muted status.

    Raises
    ------
    ValueError
        If the string or fret is missing or invalid.

    Examples
    --------
    >>> parse_note({"string": 6, "fret": "x", "label": "X"})
    PositionedNote(position=FretPosition(string=6, fret=-1), annotation=None)
    >>> parse_note({"position": {"string": 2, "fret": 1}, "annotation": {"finger": 1}}).annotation.finger
    1
    """
    position = data.get("position", data)
    if "string" not in position or "fret" not in position:
        msg = f"Note needs a string and a fret: {data!r}"
        raise ValueError(msg)
    try:
        string = int(position["string"])
    except (TypeError, ValueError) as e:
        msg = f"Invalid string: {position['string']!r}"
        raise ValueError(msg) from e
    fret = parse_fret(position["fret"])

    annotation = parse_annotation(data.get("annotation"))
    if annotation is None and "label" in data:
        label = parse_finger(data["label"])
        if label is not None and not (fret == MUTED_FRET and str(label).upper() == "X"):
            annotation = NoteAnnotation(finger=label)
    return PositionedNote(position=FretPosition(string=string, fret=fret), annotation=annotation)


def notes_from_frets(frets: list[Any]) -> tuple[PositionedNote, ...]:
    """Build notes from a frets array listed from the lowest-pitched string.

    Examples
    --------
    >>> notes = notes_from_frets(["x", 3, 2, 0, 1, 0])
    >>> [(n.string, n.fret) for n in notes][:2]
    [(6, -1), (5, 3)]
    """
    total = len(frets)
    return tuple(
        PositionedNote(position=FretPosition(string=total - index, fret=parse_fret(fret)))
        for index, fret in enumerate(frets)
    )


def parse_barre(data: dict[str, Any]) -> Barre:
    """Convert a barre dict.

    Raises
    ------
    ValueError
        If a string number or the fret is missing.
    """
    try:
        return Barre(
            from_string=int(data["fromString"]),
            to_string=int(data["toString"]),
            fret=parse_fret(data["fret"]),
            finger=parse_finger(data.get("finger")),
        )
    except KeyError as e:
        msg = f"Barre is missing {e.args[0]!r}: {data!r}"
        raise ValueError(msg) from e


def _label_array(values: Any, parse=_optional_str, string_count: int | None = None) -> tuple | None:
    if values is None:
        return None
    parsed = tuple(parse(value) for value in values)
    if string_count is None:
        return parsed
    # Re-index a lowest-string-first array so index 0 is string 1
    return tuple(
        parsed[string_count - string] if string_count - string < len(parsed) else None
        for string in range(1, string_count + 1)
    )


def parse_position(data: dict[str, Any]) -> ChordPositionData:
    """Convert one position dict.

    Parallel ``fingers``/``tones``/``intervals``/``degrees`` arrays follow
    the order of the notes they label: next to a ``frets`` array they list
    the lowest-pitched string first, otherwise string 1 comes first.

    Raises
    ------
    ValueError
        If ``notes`` or ``barres`` is not a list, or an entry is invalid.
    """
    raw_notes = data.get("notes")
    string_count = None
    if raw_notes is None and "frets" in data:
        notes = notes_from_frets(list(data["frets"]))
        string_count = len(notes)
    else:
        raw_notes = raw_notes or []
        if not isinstance(raw_notes, list):
            msg = f"Position notes must be a list, got {type(raw_notes).__name__}"
            raise ValueError(msg)
        notes = tuple(parse_note(note) for note in raw_notes)

    raw_barres = data.get("barres") or []
    if not isinstance(raw_barres, list):
        msg = f"Position barres must be a list, got {type(raw_barres).__name__}"
        raise ValueError(msg)

    return ChordPositionData(
        base_fret=int(data.get("baseFret", 1)),
        notes=notes,
        barres=tuple(parse_barre(barre) for barre in raw_barres),
        name=data.get("name"),
        fingers=_label_array(data.get("fingers"), parse_finger, string_count),
        tones=_label_array(data.get("tones"), string_count=string_count),
        intervals=_label_array(data.get("intervals"), string_count=string_count),
        degrees=_label_array(data.get("degrees"), string_count=string_count),
    )


def parse_tuning(data: Any) -> Tuning | None:
    """Convert a tuning given as a note list or a named-tuning dict.

    Examples
    --------
    >>> parse_tuning(["E", "A", "D", "G"])
    TuningNotes(notes=('E', 'A', 'D', 'G'))
    >>> parse_tuning({"name": "Drop D", "notes": ["D", "A", "D", "G", "B", "E"]}).name
    'Drop D'
    """
    if data is None:
        return None
    if isinstance(data, list):
        return TuningNotes(notes=tuple(str(note) for note in data))
    if isinstance(data, dict):
        notes = tuple(str(note) for note in data.get("notes", []))
        string_count = data.get("stringCount")
        return NamedTuning(
            name=str(data.get("name", "")),
            notes=notes,
            instrument=data.get("instrument"),
            string_count=int(string_count) if string_count is not None else None,
        )
    msg = f"Invalid tuning: {data!r}"
    raise ValueError(msg)


def parse_bottom_labels(data: dict[str, Any] | None) -> BottomLabels | None:
    """Convert bottom-label toggles; missing keys keep the defaults."""
    if data is None:
        return None
    defaults = BottomLabels()
    return BottomLabels(
        show_fingers=bool(data.get("showFingers", defaults.show_fingers)),
        show_tones=bool(data.get("showTones", defaults.show_tones)),
        show_intervals=bool(data.get("showIntervals", defaults.show_intervals)),
    )


def _choice(value: Any, allowed: frozenset[str], key: str) -> Any:
    if value is None:
        return None
    if value not in allowed:
        msg = f"Invalid {key}: {value!r} (expected one of {sorted(allowed)})"
        raise ValueError(msg)
    return value


def parse_display(data: dict[str, Any] | None) -> DisplaySettings | None:
    """Convert per-chord display settings.

    Raises
    ------
    ValueError
        If ``labelType`` or ``fretNumberPosition`` is not a known value.
    """
    if data is None:
        return None
    return DisplaySettings(
        label_type=_choice(data.get("labelType"), LABEL_TYPES, "labelType"),
        show_fret_numbers=data.get("showFretNumbers"),
        fret_number_position=_choice(
            data.get("fretNumberPosition"), FRET_NUMBER_POSITIONS, "fretNumberPosition"
        ),
        show_string_names=data.get("showStringNames"),
        bottom_labels=parse_bottom_labels(data.get("bottomLabels")),
    )


def parse_theory(data: dict[str, Any] | None) -> ChordTheory | None:
    if data is None:
        return None
    return ChordTheory(
        formula=data.get("formula"),
        intervals=tuple(data.get("intervals") or ()),
        chord_tones=tuple(data.get("chordTones") or ()),
    )


def chord_from_dict(data: dict[str, Any]) -> ChordDiagramData:
    """Convert a chord JSON document into ``ChordDiagramData``.

    Parameters
    ----------
    data : dict[str, Any]
        Chord document with at least ``name`` and ``positions``.

    Returns
    -------
    ChordDiagramData
        The chord model.

    Raises
    ------
    ValueError
        If the name is missing, ``positions`` is missing or not a list, or
        any nested value is invalid.

    Examples
    --------
    >>> chord = chord_from_dict({
    ...     "name": "Am",
    ...     "positions": [{"frets": ["x", 0, 2, 2, 1, 0]}],
    ... })
    >>> chord.name, len(chord.positions[0].notes)
    ('Am', 6)
    """
    name = data.get("name")
    if not isinstance(name, str):
        msg = f"Chord needs a name, got {name!r}"
        raise ValueError(msg)
    positions = data.get("positions")
    if not isinstance(positions, list):
        msg = f"Chord {name!r} needs a positions list, got {type(positions).__name__}"
        raise ValueError(msg)

    return ChordDiagramData(
        name=name,
        positions=tuple(parse_position(position) for position in positions),
        theory=parse_theory(data.get("theory")),
        tuning=parse_tuning(data.get("tuning")),
        display=parse_display(data.get("display")),
        instrument=data.get("instrument"),
        comments=data.get("comments"),
        full_name=data.get("fullName"),
        aliases=tuple(data.get("aliases") or ()),
    )


def _number(value: Any, key: str, convert: type) -> Any:
    if value is None:
        return None
    if isinstance(value, bool):
        msg = f"Invalid {key}: {value!r}"
        raise ValueError(msg)
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        msg = f"Invalid {key}: {value!r}"
        raise ValueError(msg) from e
    if not math.isfinite(number) or (convert is int and not number.is_integer()):
        msg = f"Invalid {key}: {value!r}"
        raise ValueError(msg)
    return convert(number)


def options_from_dict(data: dict[str, Any] | None) -> RenderOptions:
    """Convert camelCase render options into ``RenderOptions``.

    Numeric values may be given as numbers or numeric strings.

    Raises
    ------
    ValueError
        If a choice is not a known value or a numeric value is not a number.

    Examples
    --------
    >>> options_from_dict({"labelType": "tone", "positionIndex": 1})
    RenderOptions(position_index=1, label_type='tone', show_fret_numbers=None, fret_number_position=None, show_string_names=None, width=None, height=None, num_strings=None, num_frets=None, tuning=None, bottom_labels=None)
    """
    data = data or {}
    tuning = data.get("tuning")
    return RenderOptions(
        position_index=_number(data.get("positionIndex"), "positionIndex", int) or 0,
        label_type=_choice(data.get("labelType"), LABEL_TYPES, "labelType"),
        show_fret_numbers=data.get("showFretNumbers"),
        fret_number_position=_choice(
            data.get("fretNumberPosition"), FRET_NUMBER_POSITIONS, "fretNumberPosition"
        ),
        show_string_names=data.get("showStringNames"),
        width=_number(data.get("width"), "width", float),
        height=_number(data.get("height"), "height", float),
        num_strings=_number(data.get("numStrings"), "numStrings", int),
        num_frets=_number(data.get("numFrets"), "numFrets", int),
        tuning=tuple(tuning) if tuning is not None else None,
        bottom_labels=parse_bottom_labels(data.get("bottomLabels")),
    )
