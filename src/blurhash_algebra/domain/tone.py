"""明るさの調整（darken / lighten / 目標明るさへのリマップ）。

係数上の代数演算だけで明るさを変える。目標明るさへのリマップは
暗くする方向では乗算、明るくする方向ではスクリーン（白への補間）を使い、
それぞれの式が発散する側 (L → 1 / L → 0) を避ける。
"""

from __future__ import annotations

import logging

from blurhash_algebra.domain.coefficient_grid import WHITE_GRID, CoefficientGrid
from blurhash_algebra.domain.color import DEFAULT_MIDPOINT, brightness_exponent

logger = logging.getLogger(__name__)


def _ratio(numerator: float, denominator: float, singular: float) -> float:
    """numerator / denominator。分母ゼロのときは singular を返す。"""
    if denominator == 0.0:
        return singular
    return numerator / denominator


def darken(grid: CoefficientGrid, factor: float) -> CoefficientGrid:
    """暗くする。DC は (1 - f) 倍、AC は (1 - f²) 倍。"""
    return grid.dc * (1 - factor) + grid.ac * (1 - factor * factor)


def _darken_quartic(grid: CoefficientGrid, factor: float) -> CoefficientGrid:
    # AC の減衰を4乗にした darken（lighten 専用）
    return grid.dc * (1 - factor) + grid.ac * (1 - factor**4)


def lighten(grid: CoefficientGrid, factor: float) -> CoefficientGrid:
    """明るくする。色を反転した空間で darken してから戻す。"""
    return WHITE_GRID - _darken_quartic(WHITE_GRID - grid, factor)


def _remap_terms(
    grid: CoefficientGrid,
    new_brightness: float,
    midpoint: float,
) -> tuple[float, float, float]:
    """(現在の輝度 L, 目標輝度 L', AC 倍率) を求める。

    AC 倍率は輝度→明るさ曲線の傾きの比 L'^(e-1) / L^(e-1)。
    L = 0 では傾きが定義できないため AC は変えず、L' = 0 では AC も消す。
    """
    exponent = brightness_exponent(midpoint)
    current = max(grid.luminance, 0.0)
    target = max(new_brightness, 0.0) ** exponent
    if current == 0.0:
        ac_scale = 1.0
    elif target == 0.0:
        ac_scale = 0.0
    else:
        ac_scale = target ** (exponent - 1) / current ** (exponent - 1)
    return current, target, ac_scale


def set_brightness_by_multiplying(
    grid: CoefficientGrid,
    new_brightness: float,
    midpoint: float = DEFAULT_MIDPOINT,
) -> CoefficientGrid:
    """DC を L'/L 倍して目標明るさにする。

    L → 0 では安定（黒へ滑らかに収束）、L → 1 で明るくする方向には発散する。
    """
    current, target, ac_scale = _remap_terms(grid, new_brightness, midpoint)
    return grid.dc * _ratio(target, current, 0.0) + grid.ac * ac_scale


def set_brightness_by_screening(
    grid: CoefficientGrid,
    new_brightness: float,
    midpoint: float = DEFAULT_MIDPOINT,
) -> CoefficientGrid:
    """DC を白へスクリーンして目標明るさにする。

    1 - (1 - L)·c = L' を解いて c = (1 - L') / (1 - L)。
    L → 1 では安定、L → 0 で暗くする方向には発散する。
    """
    current, target, ac_scale = _remap_terms(grid, new_brightness, midpoint)
    c = _ratio(1 - target, 1 - current, 0.0)
    new_dc = WHITE_GRID - (WHITE_GRID - grid.dc) * c
    return new_dc + grid.ac * ac_scale


def set_brightness(
    grid: CoefficientGrid,
    new_brightness: float,
    midpoint: float = DEFAULT_MIDPOINT,
) -> CoefficientGrid:
    """知覚的な明るさを new_brightness にする。

    目標が現在より暗ければ乗算、そうでなければスクリーンを使う。
    """
    current = grid.brightness(midpoint)
    if new_brightness < current:
        logger.debug("set_brightness %.4f -> %.4f: multiplying", current, new_brightness)
        return set_brightness_by_multiplying(grid, new_brightness, midpoint)
    logger.debug("set_brightness %.4f -> %.4f: screening", current, new_brightness)
    return set_brightness_by_screening(grid, new_brightness, midpoint)


def invert_brightness(grid: CoefficientGrid, midpoint: float = DEFAULT_MIDPOINT) -> CoefficientGrid:
    """明るさ b を 1 - b に反転（色相と構造は保つ）。"""
    return set_brightness(grid, 1 - grid.brightness(midpoint), midpoint)
