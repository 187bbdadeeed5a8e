"""画素配列からコサイン基底係数への射影（NumPy）。

文字列エンコードの前段にあたる DCT 部分のみ。
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from blurhash_algebra.domain.coefficient_grid import CoefficientGrid, check_component_count
from blurhash_algebra.infrastructure.color_space import srgb_to_linear_batch


def project_linear(
    linear: npt.NDArray[np.float64],
    x_components: int,
    y_components: int,
) -> CoefficientGrid:
    """リニアRGB画像 (H, W, 3) を係数グリッドに射影。

    係数 (i, j) = norm / (W·H) · Σ pixel · cos(π·i·x/W) · cos(π·j·y/H)、
    norm は DC で 1、それ以外 2。DC は画素の平均色に一致する。

    Raises:
        InvalidComponentCount: 成分数が 1〜9 の範囲外
    """
    check_component_count(x_components, "horizontal")
    check_component_count(y_components, "vertical")
    h, w = linear.shape[:2]

    basis_x = np.cos(np.pi * np.outer(np.arange(x_components), np.arange(w)) / w)
    basis_y = np.cos(np.pi * np.outer(np.arange(y_components), np.arange(h)) / h)
    coefficients = np.einsum("jy,ix,yxc->jic", basis_y, basis_x, linear) / (w * h)

    normalisation = np.full((y_components, x_components), 2.0)
    normalisation[0, 0] = 1.0
    coefficients *= normalisation[:, :, np.newaxis]
    return CoefficientGrid.from_rows(coefficients.tolist())


def project_image(
    rgb_array: npt.NDArray[np.uint8],
    x_components: int,
    y_components: int,
) -> CoefficientGrid:
    """sRGB画像 (H, W, 3) uint8 を係数グリッドに射影。"""
    return project_linear(srgb_to_linear_batch(rgb_array), x_components, y_components)
