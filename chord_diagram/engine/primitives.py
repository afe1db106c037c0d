"""Declarative drawing primitives produced by the engine.

Every primitive carries resolved pixel coordinates, a ``kind`` tag and a
``style`` intent. Colours are left to the drawing backend.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import TYPE_CHECKING, Any, Literal

if TYPE_CHECKING:
    from chord_diagram.engine.geometry import Dimensions, GridMetrics
    from chord_diagram.theory import ChordInfo

StyleIntent = Literal["primary", "muted", "highlight", "accent"]
FillIntent = Literal["solid", "hollow"]
TextRole = Literal["fret-number", "note", "bottom", "placeholder"]


@dataclass(frozen=True)
class StringLine:
    """A vertical string line."""

    x: float
    y1: float
    y2: float
    stroke_width: float
    string: int
    style: StyleIntent = "primary"
    kind: Literal["string-line"] = field(default="string-line", init=False)


@dataclass(frozen=True)
class FretLine:
    """A horizontal fret line; ``index`` 0 is the top line."""

    y: float
    x1: float
    x2: float
    stroke_width: float
    index: int
    style: StyleIntent = "primary"
    kind: Literal["fret-line"] = field(default="fret-line", init=False)


@dataclass(frozen=True)
class Nut:
    """The thick bar at the top of a first-position diagram."""

    x: float
    y: float
    width: float
    height: float
    style: StyleIntent = "primary"
    kind: Literal["nut"] = field(default="nut", init=False)


@dataclass(frozen=True)
class BarreRect:
    """A rounded bar spanning the strings of a barre."""

    x: float
    y: float
    width: float
    height: float
    corner_radius: float
    fret: int
    start_string: int
    end_string: int
    style: StyleIntent = "primary"
    kind: Literal["barre-rect"] = field(default="barre-rect", init=False)


@dataclass(frozen=True)
class BarreLabel:
    """Text drawn on a barre.

    ``marker_radius`` is set for per-string labels, which sit on a small
    circle of their own; ``string`` is None for the centred finger label.
    """

    x: float
    y: float
    text: str
    font_size: float
    marker_radius: float | None = None
    string: int | None = None
    style: StyleIntent = "primary"
    kind: Literal["barre-label"] = field(default="barre-label", init=False)


@dataclass(frozen=True)
class NoteCircle:
    """A note marker: solid for fretted notes, hollow for open strings."""

    x: float
    y: float
    radius: float
    fill: FillIntent
    stroke_width: float
    string: int
    fret: int
    style: StyleIntent = "primary"
    kind: Literal["note-circle"] = field(default="note-circle", init=False)


@dataclass(frozen=True)
class MutedGlyph:
    """The "X" drawn above a muted string."""

    x: float
    y: float
    font_size: float
    string: int
    text: str = "X"
    style: StyleIntent = "muted"
    kind: Literal["muted-glyph"] = field(default="muted-glyph", init=False)


@dataclass(frozen=True)
class LabelText:
    """A text label.

    ``inverse`` marks text drawn on a solid marker, which the backend
    paints in the contrasting colour.
    """

    x: float
    y: float
    text: str
    font_size: float
    role: TextRole
    string: int | None = None
    row: int | None = None
    inverse: bool = False
    style: StyleIntent = "primary"
    kind: Literal["label-text"] = field(default="label-text", init=False)


Primitive = StringLine | FretLine | Nut | BarreRect | BarreLabel | NoteCircle | MutedGlyph | LabelText


@dataclass(frozen=True)
class BottomLabelRow:
    """One resolved row of bottom labels, indexed by string - 1."""

    name: str
    labels: tuple[str, ...]


@dataclass(frozen=True)
class DiagramPrimitives:
    """The render-ready output of one engine call.

    Parameters
    ----------
    width : float
        Diagram width in pixels.
    height : float
        Diagram height in pixels.
    primitives : tuple[Primitive, ...]
        Primitives in back-to-front drawing order.
    labels : tuple[str, ...]
        In-marker labels, indexed by string - 1.
    bottom_rows : tuple[BottomLabelRow, ...]
        Bottom label rows when multi-row mode is enabled.
    dimensions : Dimensions | None
        Geometry used for the layout (None for placeholders).
    grid : GridMetrics | None
        Grid spacing used for the layout (None for placeholders).
    info : ChordInfo | None
        Chord info panel data.
    placeholder : bool
        True when no position data could be rendered.
    """

    width: float
    height: float
    primitives: tuple[Primitive, ...]
    labels: tuple[str, ...] = ()
    bottom_rows: tuple[BottomLabelRow, ...] = ()
    dimensions: Dimensions | None = None
    grid: GridMetrics | None = None
    info: ChordInfo | None = None
    placeholder: bool = False

    def of_kind(self, kind: str) -> tuple[Primitive, ...]:
        """Return the primitives of one kind, in drawing order."""
        return tuple(p for p in self.primitives if p.kind == kind)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dict."""
        return {
            "width": self.width,
            "height": self.height,
            "placeholder": self.placeholder,
            "labels": list(self.labels),
            "bottomRows": [{"name": row.name, "labels": list(row.labels)} for row in self.bottom_rows],
            "info": asdict(self.info) if self.info is not None else None,
            "primitives": [asdict(p) for p in self.primitives],
        }
