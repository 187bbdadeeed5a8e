"""係数グリッドから表示用の代表色を求める。

平均色と、平均色から色度平面上で最も離れたコントラスト色。
"""

from __future__ import annotations

import math

from blurhash_algebra.domain.coefficient_grid import CoefficientGrid
from blurhash_algebra.domain.color import RGB, LinearRGB, chroma_uv, linear_to_rgb

DEFAULT_PROBES = 10


def contrast_linear_rgb(grid: CoefficientGrid, probes: int = DEFAULT_PROBES) -> LinearRGB:
    """平均色から色度 (U, V) が最も離れた色をグリッド探索で求める。

    probes × probes 個の点 (k / (probes-1)) を y 外側・x 内側の順に走査し、
    距離が厳密に大きい点だけで更新する（同距離なら先に見つかった点）。
    厳密解ではないが走査順が固定なので結果は決定的。

    Args:
        grid: 係数グリッド
        probes: 1軸あたりのプローブ数。1 以下なら平均色を返す

    Returns:
        コントラスト色（リニアRGB）
    """
    average = grid.average_linear_rgb
    if probes <= 1:
        return average

    average_u, average_v = chroma_uv(average)
    maximum_distance = 0.0
    maximum_contrast = average
    for y in range(probes):
        fy = y / (probes - 1)
        for x in range(probes):
            fx = x / (probes - 1)
            probe = grid.linear_rgb_at(fx, fy)
            probe_u, probe_v = chroma_uv(probe)
            distance = math.hypot(average_u - probe_u, average_v - probe_v)
            if distance > maximum_distance:
                maximum_distance = distance
                maximum_contrast = probe
    return maximum_contrast


def average_colour(grid: CoefficientGrid) -> RGB:
    """平均色の 8bit sRGB 表現。"""
    return linear_to_rgb(grid.average_linear_rgb)


def contrast_colour(grid: CoefficientGrid, probes: int = DEFAULT_PROBES) -> RGB:
    return linear_to_rgb(contrast_linear_rgb(grid, probes))
