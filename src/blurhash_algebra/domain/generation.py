"""単色・グラデーションから係数グリッドを生成。"""

from __future__ import annotations

import math
from typing import Sequence

from blurhash_algebra.domain.coefficient_grid import CoefficientGrid, check_component_count
from blurhash_algebra.domain.color import RGB, ZERO, LinearRGB, rgb_to_linear
from blurhash_algebra.domain.errors import PreconditionViolation

Colour = RGB | LinearRGB


def _linear(colour: Colour) -> LinearRGB:
    """8bit sRGB 色ならリニアRGBに変換。"""
    if isinstance(colour, RGB):
        return rgb_to_linear(colour)
    return colour


def from_colour(colour: Colour) -> CoefficientGrid:
    """単色の 1×1 グリッド。"""
    return CoefficientGrid(((_linear(colour),),))


def blending_top(top: CoefficientGrid, bottom: CoefficientGrid) -> CoefficientGrid:
    """上から下へ線形に移り変わるグリッド。

    1行目に2つの行の平均、2行目に半差 (top - bottom) / 2 を置く。
    列数が異なる場合は combine と同様にゼロ成分で揃える。

    Raises:
        PreconditionViolation: どちらかの垂直成分数が 1 でない
    """
    if top.number_of_vertical_components != 1 or bottom.number_of_vertical_components != 1:
        raise PreconditionViolation(
            "blended grids must have exactly one vertical component, got "
            f"{top.number_of_vertical_components} and {bottom.number_of_vertical_components}"
        )
    average = top.combine(bottom, lambda a, b: (a + b) / 2)
    difference = top.combine(bottom, lambda a, b: (a - b) / 2)
    return CoefficientGrid((average[0], difference[0]))


def blending_left(left: CoefficientGrid, right: CoefficientGrid) -> CoefficientGrid:
    """左から右へ線形に移り変わるグリッド。

    Raises:
        PreconditionViolation: どちらかの水平成分数が 1 でない
    """
    if left.number_of_horizontal_components != 1 or right.number_of_horizontal_components != 1:
        raise PreconditionViolation(
            "blended grids must have exactly one horizontal component, got "
            f"{left.number_of_horizontal_components} and {right.number_of_horizontal_components}"
        )
    return blending_top(left.transposed, right.transposed).transposed


def blending_colours_top(top: Colour, bottom: Colour) -> CoefficientGrid:
    return blending_top(from_colour(top), from_colour(bottom))


def blending_colours_left(left: Colour, right: Colour) -> CoefficientGrid:
    return blending_left(from_colour(left), from_colour(right))


def blending_corners(
    top_left: Colour,
    top_right: Colour,
    bottom_left: Colour,
    bottom_right: Colour,
) -> CoefficientGrid:
    """四隅の色からの双線形的なブレンド（2×2 グリッド）。

    上辺・下辺をそれぞれ水平グラデーションにしてから垂直方向にブレンドする。
    """
    return blending_top(
        blending_colours_top(top_left, top_right).transposed,
        blending_colours_top(bottom_left, bottom_right).transposed,
    )


def from_horizontal_colours(
    colours: Sequence[Colour],
    number_of_components: int,
) -> CoefficientGrid:
    """水平方向に等間隔に並んだ色列をコサイン基底へ射影（1行のグリッド）。

    成分 i の係数 = (norm / n) · Σ_x colours[x] · cos(π·i·x / (n-1))、
    norm は i=0 で 1、それ以外 2。

    Args:
        colours: 左端から右端までの色列
        number_of_components: 水平成分数 (1〜9)

    Raises:
        InvalidComponentCount: number_of_components が範囲外
        PreconditionViolation: colours が空
    """
    check_component_count(number_of_components, "horizontal")
    if not colours:
        raise PreconditionViolation("at least one colour is required")

    linear = [_linear(c) for c in colours]
    n = len(linear)
    if n == 1:
        # 位置が1点しかないので AC 成分は定義できない
        return CoefficientGrid(((linear[0],) + (ZERO,) * (number_of_components - 1),))

    row = []
    for i in range(number_of_components):
        normalisation = 1.0 if i == 0 else 2.0
        total = ZERO
        for x, colour in enumerate(linear):
            total = total + colour * (normalisation * math.cos(math.pi * i * x / (n - 1)))
        row.append(total / n)
    return CoefficientGrid((tuple(row),))
