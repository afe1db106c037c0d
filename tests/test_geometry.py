"""Tests for diagram sizing and coordinate mapping."""

import pytest

from chord_diagram.engine.coordinates import fret_y, open_string_y, string_x
from chord_diagram.engine.geometry import (
    ABSOLUTE_MIN_HEIGHT,
    ABSOLUTE_MIN_WIDTH,
    CONTENT_ASPECT_RATIO,
    compute_dimensions,
    compute_grid,
)

REQUESTS = [
    (200, 300),
    (400, 250),
    (1000, 100),
    (100, 1000),
    (10, 10),
    (30, 2000),
    (0, 300),
    (-50, -50),
    (1e6, 1e6),
]


class TestComputeDimensions:
    """Test the aspect-ratio clamp."""

    @pytest.mark.parametrize(("width", "height"), REQUESTS)
    def test_ratio_is_fixed(self, width: float, height: float) -> None:
        dims = compute_dimensions(width, height)
        assert dims.diagram_width / dims.diagram_height == pytest.approx(CONTENT_ASPECT_RATIO)

    @pytest.mark.parametrize(("width", "height"), REQUESTS)
    def test_minimum_floor(self, width: float, height: float) -> None:
        dims = compute_dimensions(width, height)
        assert dims.diagram_width >= ABSOLUTE_MIN_WIDTH - 1e-9
        assert dims.diagram_height >= ABSOLUTE_MIN_HEIGHT - 1e-9
        assert dims.padded_width >= 0
        assert dims.padded_height >= 0

    def test_default_size(self) -> None:
        dims = compute_dimensions(200, 300)
        assert (dims.diagram_width, dims.diagram_height) == (200.0, 250.0)

    def test_height_caps_width(self) -> None:
        dims = compute_dimensions(1000, 100)
        assert dims.diagram_height == pytest.approx(100.0)
        assert dims.diagram_width == pytest.approx(80.0)

    def test_padded_area(self) -> None:
        dims = compute_dimensions(400, 600)
        assert dims.padded_width == pytest.approx(400 - 80 * 1.7)
        assert dims.padded_height == pytest.approx(500 - 160)

    def test_tiny_request_scaled_up(self) -> None:
        dims = compute_dimensions(10, 10)
        assert dims.diagram_width == pytest.approx(50.0)
        assert dims.diagram_height == pytest.approx(62.5)


class TestComputeGrid:
    """Test grid spacing."""

    def test_spacing(self) -> None:
        grid = compute_grid(compute_dimensions(400, 600), 6, 5)
        assert grid.width == pytest.approx(264.0)
        assert grid.height == pytest.approx(310.0)
        assert grid.string_spacing == pytest.approx(52.8)
        assert grid.fret_spacing == pytest.approx(310 / 6)
        assert grid.note_radius == pytest.approx(310 / 6 * 0.4)

    def test_single_string(self) -> None:
        grid = compute_grid(compute_dimensions(400, 600), 1, 5)
        assert grid.string_spacing == pytest.approx(grid.width)

    def test_degenerate_size_does_not_fail(self) -> None:
        grid = compute_grid(compute_dimensions(10, 10), 6, 5)
        assert grid.height == 0
        assert grid.note_radius == 0


class TestStringX:
    """Test the string ordering."""

    @pytest.mark.parametrize("total", [2, 4, 6, 7, 12])
    def test_string_one_is_rightmost(self, total: int) -> None:
        xs = [string_x(string, total, 10.0) for string in range(1, total + 1)]
        assert xs[0] > xs[-1]
        assert xs == sorted(xs, reverse=True)

    def test_lowest_string_at_origin(self) -> None:
        assert string_x(6, 6, 12.5) == 0.0


class TestFretY:
    """Test vertical note placement."""

    def test_open_string_above_grid(self) -> None:
        assert fret_y(0, 1, 40.0) == open_string_y(40.0) == -30.0

    @pytest.mark.parametrize(("fret", "start", "expected"), [(1, 1, 20.0), (3, 1, 100.0), (5, 5, 20.0), (7, 5, 100.0)])
    def test_band_centres(self, fret: int, start: int, expected: float) -> None:
        assert fret_y(fret, start, 40.0) == pytest.approx(expected)

    def test_muted_has_no_position(self) -> None:
        with pytest.raises(ValueError, match="Muted strings"):
            fret_y(-1, 1, 40.0)
