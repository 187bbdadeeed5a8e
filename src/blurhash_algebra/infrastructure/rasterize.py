"""係数グリッドのラスタライズ（NumPy）。

基底行列を作って einsum で全画素を一括評価する。
画素 (px, py) は x = px / width, y = py / height で評価する
（コンパクト文字列形式のデコーダと同じ座標系）。
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from blurhash_algebra.domain.coefficient_grid import CoefficientGrid
from blurhash_algebra.infrastructure.color_space import linear_to_srgb_batch


def components_array(grid: CoefficientGrid) -> npt.NDArray[np.float64]:
    """係数を (rows, cols, 3) の float64 配列に変換。"""
    return np.array(grid.to_lists(), dtype=np.float64)


def _basis_matrix(count: int, size: int) -> npt.NDArray[np.float64]:
    """(size, count) の cos(π·k·p/size) 行列。"""
    positions = np.arange(size, dtype=np.float64) / size
    frequencies = np.arange(count, dtype=np.float64)
    return np.cos(np.pi * np.outer(positions, frequencies))


def render_linear(
    grid: CoefficientGrid,
    width: int,
    height: int,
    punch: float = 1.0,
) -> npt.NDArray[np.float64]:
    """リニアRGBの画素配列を生成。

    Args:
        grid: 係数グリッド
        width: 出力幅
        height: 出力高さ
        punch: AC 成分の倍率（1.0 で無調整）

    Returns:
        (height, width, 3) の float64 配列。クランプなし
    """
    coefficients = components_array(grid.punch(punch) if punch != 1.0 else grid)
    rows, cols = grid.shape
    basis_x = _basis_matrix(cols, width)
    basis_y = _basis_matrix(rows, height)
    return np.einsum("yj,xi,jic->yxc", basis_y, basis_x, coefficients)


def render_srgb(
    grid: CoefficientGrid,
    width: int,
    height: int,
    punch: float = 1.0,
) -> npt.NDArray[np.uint8]:
    """8bit sRGB の画素配列 (height, width, 3) を生成。"""
    return linear_to_srgb_batch(render_linear(grid, width, height, punch))
