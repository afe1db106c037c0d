"""Aspect-ratio constrained sizing of the diagram and its grid.

The requested width and height are hints: the diagram always keeps the
content aspect ratio ``CONTENT_MIN_WIDTH / CONTENT_MIN_HEIGHT`` so the
fretboard never looks stretched.
"""

from __future__ import annotations

from dataclasses import dataclass

CONTENT_MIN_WIDTH = 200.0
CONTENT_MIN_HEIGHT = 250.0
CONTENT_ASPECT_RATIO = CONTENT_MIN_WIDTH / CONTENT_MIN_HEIGHT

ABSOLUTE_MIN_WIDTH = 50.0
ABSOLUTE_MIN_HEIGHT = 50.0

SIDE_PADDING = 80.0
TOP_PADDING = 80.0
BOTTOM_PADDING = 80.0
# The grid is narrower than the diagram by this many side paddings
SIDE_PADDING_FACTOR = 1.7

# Space reserved under the grid for the bottom labels
LABEL_AREA_HEIGHT = 30.0
NOTE_RADIUS_FACTOR = 0.4


@dataclass(frozen=True)
class Dimensions:
    """Pixel dimensions of a diagram.

    Parameters
    ----------
    diagram_width, diagram_height : float
        Outer size; their ratio is always ``CONTENT_ASPECT_RATIO``.
    padded_width, padded_height : float
        Drawable area left for the grid and its bottom labels.
    side_padding, top_padding, bottom_padding : float
        Offsets of the drawable area.
    """

    diagram_width: float
    diagram_height: float
    padded_width: float
    padded_height: float
    side_padding: float
    top_padding: float
    bottom_padding: float


@dataclass(frozen=True)
class GridMetrics:
    """Spacing of the fretboard grid inside the padded area.

    Parameters
    ----------
    width : float
        Horizontal extent of the strings.
    height : float
        Vertical extent of the strings (padded height minus label area).
    string_spacing : float
        Distance between adjacent strings.
    fret_spacing : float
        Height of one fret band.
    note_radius : float
        Radius of note markers and half the barre thickness.
    """

    width: float
    height: float
    string_spacing: float
    fret_spacing: float
    note_radius: float


def compute_dimensions(requested_width: float, requested_height: float) -> Dimensions:
    """Fit the content aspect ratio into the requested box.

    Starts from the requested width; when the matching height exceeds the
    requested height, the height is capped and the width recomputed. The
    result is then scaled up, ratio intact, until both sides reach the
    absolute minimum.

    Parameters
    ----------
    requested_width : float
        Width hint in pixels.
    requested_height : float
        Height cap in pixels.

    Returns
    -------
    Dimensions
        Final diagram size and padded drawable area.

    Examples
    --------
    >>> dims = compute_dimensions(200, 300)
    >>> dims.diagram_width, dims.diagram_height
    (200.0, 250.0)
    >>> dims = compute_dimensions(400, 250)
    >>> dims.diagram_width, dims.diagram_height
    (200.0, 250.0)
    """
    width = float(requested_width)
    height = width / CONTENT_ASPECT_RATIO

    if height > requested_height:
        height = float(requested_height)
        width = height * CONTENT_ASPECT_RATIO

    if width <= 0 or height <= 0:
        width = ABSOLUTE_MIN_WIDTH
        height = width / CONTENT_ASPECT_RATIO
    scale = max(1.0, ABSOLUTE_MIN_WIDTH / width, ABSOLUTE_MIN_HEIGHT / height)
    width *= scale
    height *= scale

    return Dimensions(
        diagram_width=width,
        diagram_height=height,
        padded_width=max(0.0, width - SIDE_PADDING * SIDE_PADDING_FACTOR),
        padded_height=max(0.0, height - TOP_PADDING - BOTTOM_PADDING),
        side_padding=SIDE_PADDING,
        top_padding=TOP_PADDING,
        bottom_padding=BOTTOM_PADDING,
    )


def compute_grid(dimensions: Dimensions, num_strings: int, num_frets: int) -> GridMetrics:
    """Compute string and fret spacing for the padded area.

    One extra fret band is reserved above the grid for open and muted
    string markers.

    Examples
    --------
    >>> grid = compute_grid(compute_dimensions(400, 600), 6, 5)
    >>> round(grid.string_spacing, 2), round(grid.fret_spacing, 2)
    (52.8, 51.67)
    """
    grid_height = max(0.0, dimensions.padded_height - LABEL_AREA_HEIGHT)
    width = dimensions.padded_width
    string_spacing = width / (num_strings - 1) if num_strings > 1 else width
    fret_spacing = grid_height / (num_frets + 1)
    return GridMetrics(
        width=width,
        height=grid_height,
        string_spacing=string_spacing,
        fret_spacing=fret_spacing,
        note_radius=min(string_spacing, fret_spacing) * NOTE_RADIUS_FACTOR,
    )
