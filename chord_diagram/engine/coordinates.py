"""Mapping of string and fret numbers to grid coordinates.

String 1 (highest pitch) is drawn rightmost and string N (lowest pitch)
leftmost. Coordinates are relative to the top-left corner of the grid.
"""

from __future__ import annotations

from chord_diagram.models import OPEN_FRET

# Open and muted markers sit this many fret bands above the top line
OPEN_STRING_OFFSET = 0.75


def string_x(string_number: int, total_strings: int, string_spacing: float) -> float:
    """Return the x coordinate of a string.

    Parameters
    ----------
    string_number : int
        1-based string number (1 is the highest-pitched string).
    total_strings : int
        Number of strings on the instrument.
    string_spacing : float
        Distance between adjacent strings.

    Returns
    -------
    float
        Horizontal position of the string.

    Examples
    --------
    >>> string_x(1, 6, 10.0)
    50.0
    >>> string_x(6, 6, 10.0)
    0.0
    """
    visual_index = total_strings - string_number
    return visual_index * string_spacing


def open_string_y(fret_spacing: float) -> float:
    """Return the y coordinate of open-string and muted-string markers.

    Examples
    --------
    >>> open_string_y(40.0)
    -30.0
    """
    return -fret_spacing * OPEN_STRING_OFFSET


def fret_y(fret: int, start_fret: int, fret_spacing: float) -> float:
    """Return the y coordinate of a note marker.

    Fretted notes are centred in their fret band; the band of
    ``start_fret`` is always the first one drawn.

    Parameters
    ----------
    fret : int
        Absolute fret number (0 for an open string).
    start_fret : int
        Fret shown at the top of the diagram.
    fret_spacing : float
        Height of one fret band.

    Returns
    -------
    float
        Vertical position of the marker centre.

    Raises
    ------
    ValueError
        If the fret is negative (muted strings have no fret position).

    Examples
    --------
    >>> fret_y(1, 1, 40.0)
    20.0
    >>> fret_y(5, 5, 40.0)
    20.0
    >>> fret_y(0, 3, 40.0)
    -30.0
    """
    if fret < OPEN_FRET:
        msg = f"Muted strings have no fret position (fret={fret})"
        raise ValueError(msg)
    if fret == OPEN_FRET:
        return open_string_y(fret_spacing)

    y = (fret - 0.5) * fret_spacing
    if start_fret > 1:
        y -= (start_fret - 1) * fret_spacing
    return y
