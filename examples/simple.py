import sys

from chord_diagram import RenderOptions, chord_from_dict, render_diagram

chord = chord_from_dict({
    "name": "F",
    "positions": [{
        "baseFret": 1,
        "barres": [{"fromString": 6, "toString": 1, "fret": 1, "finger": 1}],
        "notes": [
            {"position": {"string": 6, "fret": 1}, "annotation": {"tone": "F"}},
            {"position": {"string": 5, "fret": 3}, "annotation": {"tone": "C", "finger": 3}},
            {"position": {"string": 4, "fret": 3}, "annotation": {"tone": "F", "finger": 4}},
            {"position": {"string": 3, "fret": 2}, "annotation": {"tone": "A", "finger": 2}},
            {"position": {"string": 2, "fret": 1}, "annotation": {"tone": "C"}},
            {"position": {"string": 1, "fret": 1}, "annotation": {"tone": "F"}},
        ],
    }],
})

# Finger numbers inside the markers
diagram = render_diagram(chord)
sys.stdout.write(f"{diagram.width:.0f}x{diagram.height:.0f}, labels {diagram.labels}\n")

# Note names; the barre gets one labelled marker per covered string
diagram = render_diagram(chord, RenderOptions(label_type="tone"))
for primitive in diagram.of_kind("barre-label"):
    sys.stdout.write(f"string {primitive.string}: {primitive.text}\n")
