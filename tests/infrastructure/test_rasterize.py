"""rasterize.py のテスト。"""

import numpy as np
import pytest

from blurhash_algebra.domain.coefficient_grid import CoefficientGrid
from blurhash_algebra.domain.color import LinearRGB
from blurhash_algebra.domain.generation import blending_colours_top, from_colour
from blurhash_algebra.infrastructure.rasterize import (
    components_array,
    render_linear,
    render_srgb,
)


def _sample_grid() -> CoefficientGrid:
    return CoefficientGrid.from_rows(
        [
            [(0.4, 0.3, 0.2), (0.1, -0.05, 0.02), (-0.03, 0.04, 0.01)],
            [(0.05, 0.02, -0.03), (0.01, 0.0, 0.0), (0.0, 0.03, 0.01)],
        ]
    )


class TestComponentsArray:
    def test_shape(self) -> None:
        arr = components_array(_sample_grid())
        assert arr.shape == (2, 3, 3)
        assert arr[1, 2, 1] == pytest.approx(0.03)


class TestRenderLinear:
    def test_shape(self) -> None:
        result = render_linear(_sample_grid(), 7, 5)
        assert result.shape == (5, 7, 3)
        assert result.dtype == np.float64

    def test_flat_grid_is_constant(self) -> None:
        result = render_linear(from_colour(LinearRGB(0.2, 0.4, 0.6)), 4, 3)
        np.testing.assert_allclose(result, np.broadcast_to([0.2, 0.4, 0.6], (3, 4, 3)))

    def test_matches_point_samples(self) -> None:
        """画素 (px, py) は linear_rgb_at(px / W, py / H) と一致。"""
        grid = _sample_grid()
        width, height = 6, 4
        result = render_linear(grid, width, height)
        for py in range(height):
            for px in range(width):
                expected = grid.linear_rgb_at(px / width, py / height).to_tuple()
                np.testing.assert_allclose(result[py, px], expected, atol=1e-12)

    def test_punch_scales_ac(self) -> None:
        grid = _sample_grid()
        np.testing.assert_allclose(
            render_linear(grid, 5, 5, punch=2.0),
            render_linear(grid.punch(2.0), 5, 5),
        )

    def test_top_row_is_top_colour(self) -> None:
        grid = blending_colours_top(LinearRGB(1.0, 0.0, 0.0), LinearRGB(0.0, 0.0, 1.0))
        result = render_linear(grid, 3, 8)
        np.testing.assert_allclose(result[0], np.broadcast_to([1.0, 0.0, 0.0], (3, 3)), atol=1e-12)


class TestRenderSrgb:
    def test_dtype_and_shape(self) -> None:
        result = render_srgb(_sample_grid(), 8, 6)
        assert result.shape == (6, 8, 3)
        assert result.dtype == np.uint8

    def test_out_of_gamut_is_clamped(self) -> None:
        grid = CoefficientGrid.from_rows([[(1.5, -0.5, 0.5)]])
        result = render_srgb(grid, 2, 2)
        assert result[0, 0, 0] == 255
        assert result[0, 0, 1] == 0
