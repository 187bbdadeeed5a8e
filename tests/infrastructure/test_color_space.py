"""color_space.py のテスト。"""

import numpy as np
import pytest

from blurhash_algebra.domain.color import RGB, LinearRGB, linear_to_rgb, rgb_to_linear
from blurhash_algebra.infrastructure.color_space import (
    linear_to_srgb_batch,
    srgb_to_linear_batch,
)


class TestSrgbToLinearBatch:
    def test_matches_scalar(self) -> None:
        """全 256 値でスカラー版と一致。"""
        values = np.arange(256, dtype=np.uint8)
        batch = srgb_to_linear_batch(np.stack([values, values, values], axis=-1))
        for v in range(256):
            expected = rgb_to_linear(RGB(v, v, v)).r
            assert batch[v, 0] == pytest.approx(expected, abs=1e-12)

    def test_shape_and_dtype(self) -> None:
        arr = np.zeros((4, 5, 3), dtype=np.uint8)
        result = srgb_to_linear_batch(arr)
        assert result.shape == (4, 5, 3)
        assert result.dtype == np.float64

    def test_extremes(self) -> None:
        arr = np.array([[0, 255, 0]], dtype=np.uint8)
        np.testing.assert_allclose(srgb_to_linear_batch(arr), [[0.0, 1.0, 0.0]])


class TestLinearToSrgbBatch:
    def test_roundtrip(self) -> None:
        values = np.arange(256, dtype=np.uint8)
        arr = np.stack([values, values[::-1], values], axis=-1)
        np.testing.assert_array_equal(linear_to_srgb_batch(srgb_to_linear_batch(arr)), arr)

    def test_clamps_out_of_range(self) -> None:
        arr = np.array([[-0.5, 1.5, 0.0]])
        np.testing.assert_array_equal(linear_to_srgb_batch(arr), [[0, 255, 0]])

    def test_matches_scalar(self) -> None:
        samples = [(0.0, 0.5, 1.0), (0.002, 0.2, 0.7), (0.18, 0.3, 0.9)]
        result = linear_to_srgb_batch(np.array(samples))
        for row, (r, g, b) in zip(result, samples):
            assert tuple(int(v) for v in row) == linear_to_rgb(LinearRGB(r, g, b)).to_tuple()

    def test_dtype(self) -> None:
        assert linear_to_srgb_batch(np.zeros((2, 2, 3))).dtype == np.uint8
