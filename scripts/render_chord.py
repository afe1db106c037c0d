#!/usr/bin/env python3
"""CLI tool to lay out chord diagrams from a JSON chord file.

The input holds either a single chord document or ``{"chords": [...]}``.
The output is the list of resolved diagrams, each with its primitives.

Usage:
    python scripts/render_chord.py <input_file> [-o output_file]

Examples:
    python scripts/render_chord.py testdata/chords.json --pretty
    python scripts/render_chord.py testdata/chords.json --chord "F" --label-type tone
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from chord_diagram import chord_from_dict, render_diagram
from chord_diagram.converter import FRET_NUMBER_POSITIONS, LABEL_TYPES
from chord_diagram.models import BottomLabels, RenderOptions

logger = logging.getLogger(__name__)


def load_chords(path: Path) -> list[dict[str, Any]]:
    """Load chord documents from a JSON file."""
    with open(path) as f:
        data = json.load(f)
    if isinstance(data, dict) and "chords" in data:
        return list(data["chords"])
    if isinstance(data, list):
        return data
    return [data]


def build_options(args: argparse.Namespace, position_index: int) -> RenderOptions:
    """Build render options from the parsed command line."""
    bottom_labels = None
    if args.bottom_rows:
        rows = set(args.bottom_rows)
        bottom_labels = BottomLabels(
            show_fingers="fingers" in rows,
            show_tones="tones" in rows,
            show_intervals="intervals" in rows,
        )
    return RenderOptions(
        position_index=position_index,
        label_type=args.label_type,
        fret_number_position=args.fret_numbers,
        width=args.width,
        height=args.height,
        num_frets=args.num_frets,
        bottom_labels=bottom_labels,
    )


def render_file(path: Path, args: argparse.Namespace) -> list[dict[str, Any]]:
    """Render every selected chord and position in a file."""
    results = []
    for document in load_chords(path):
        chord = chord_from_dict(document)
        if args.chord is not None and chord.name != args.chord:
            continue
        indices = [args.position] if args.position is not None else range(max(len(chord.positions), 1))
        for index in indices:
            diagram = render_diagram(chord, build_options(args, index))
            results.append({"chord": chord.name, "position": index, "diagram": diagram.to_dict()})
    logger.info("Rendered %d diagram(s) from %s", len(results), path)
    return results


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Lay out chord diagrams and export their primitives as JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s testdata/chords.json --pretty
  %(prog)s testdata/chords.json --chord F --label-type tone
  %(prog)s testdata/chords.json --bottom-rows fingers tones -o out.json
        """,
    )
    parser.add_argument("input", type=Path, help="Input chord JSON file")
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Output JSON file (default: stdout)",
    )
    parser.add_argument("--chord", default=None, help="Only render the chord with this name")
    parser.add_argument("--position", type=int, default=None, help="Position index (default: all)")
    parser.add_argument("--label-type", choices=sorted(LABEL_TYPES), default=None)
    parser.add_argument("--fret-numbers", choices=sorted(FRET_NUMBER_POSITIONS), default=None)
    parser.add_argument(
        "--bottom-rows",
        nargs="+",
        choices=["fingers", "tones", "intervals"],
        default=None,
        help="Draw these label rows below the grid",
    )
    parser.add_argument("--width", type=float, default=None)
    parser.add_argument("--height", type=float, default=None)
    parser.add_argument("--num-frets", type=int, default=None)
    parser.add_argument("--pretty", action="store_true", help="Pretty-print JSON output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log recoveries")

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.input.exists():
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        return 1

    try:
        data = render_file(args.input, args)
    except ValueError as e:
        print(f"Error reading chords: {e}", file=sys.stderr)
        return 1

    indent = 2 if args.pretty else None
    json_output = json.dumps(data, indent=indent, ensure_ascii=False)

    if args.output:
        args.output.write_text(json_output)
        print(f"Wrote output to {args.output}")
    else:
        print(json_output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
