"""コサイン基底係数グリッド（BlurHash 形式の画像表現）。

画素バッファを持たず、係数のみから色の復元（点・線・矩形平均）と
係数上の代数的な編集（加減算、DC/AC 分解、パンチ、反転、転置）を行う。
domain層のためPure Python（math のみ）。
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

from blurhash_algebra.domain.color import (
    DEFAULT_DARK_THRESHOLD,
    DEFAULT_MIDPOINT,
    WHITE,
    ZERO,
    LinearRGB,
    brightness_from_luminance,
    is_dark as rgb_is_dark,
    luminance as rgb_luminance,
)
from blurhash_algebra.domain.errors import InvalidComponentCount

MIN_COMPONENTS = 1
MAX_COMPONENTS = 9

Point = tuple[float, float]
ColorFn = Callable[[LinearRGB], LinearRGB]
CombineFn = Callable[[LinearRGB, LinearRGB], LinearRGB]


def _as_linear(value: LinearRGB | Sequence[float]) -> LinearRGB:
    if isinstance(value, LinearRGB):
        return value
    r, g, b = value
    return LinearRGB(float(r), float(g), float(b))


def check_component_count(count: int, axis: str) -> None:
    """成分数が 1〜9 に収まっているか検証。

    Raises:
        InvalidComponentCount: 範囲外
    """
    if not MIN_COMPONENTS <= count <= MAX_COMPONENTS:
        raise InvalidComponentCount(
            f"number of {axis} components must be between "
            f"{MIN_COMPONENTS} and {MAX_COMPONENTS}, got {count}"
        )


def _basis(count: int, t: float) -> list[float]:
    """cos(π·k·t) を k = 0..count-1 について並べる。"""
    return [math.cos(math.pi * k * t) for k in range(count)]


def _box_average(count: int, t0: float, t1: float) -> list[float]:
    """区間 [t0, t1] における cos(π·k·t) の平均。

    幅ゼロの区間はゼロ除算せず点での値（極限）を返す。
    """
    if t1 == t0:
        return _basis(count, t0)
    weights = [1.0]
    for k in range(1, count):
        weights.append(
            (math.sin(math.pi * k * t1) - math.sin(math.pi * k * t0))
            / (math.pi * k * (t1 - t0))
        )
    return weights


def _padded(
    rows: tuple[tuple[LinearRGB, ...], ...],
    n_rows: int,
    n_cols: int,
) -> list[list[LinearRGB]]:
    """ゼロ成分で n_rows × n_cols に拡張。"""
    result = [list(row) + [ZERO] * (n_cols - len(row)) for row in rows]
    result.extend([ZERO] * n_cols for _ in range(n_rows - len(rows)))
    return result


@dataclass(frozen=True)
class CoefficientGrid:
    """リニアRGB係数の2次元グリッド。

    ``components[j][i]`` の j は垂直周波数、i は水平周波数。
    ``components[0][0]`` (DC) は画像全体の平均色に等しい。
    すべての操作は新しいグリッドを返し、自身は変更しない。

    Raises:
        InvalidComponentCount: 行数・列数が 1〜9 の範囲外、または行の長さが不揃い
    """

    components: tuple[tuple[LinearRGB, ...], ...]

    def __post_init__(self) -> None:
        rows = tuple(tuple(_as_linear(c) for c in row) for row in self.components)
        check_component_count(len(rows), "vertical")
        n_cols = len(rows[0])
        check_component_count(n_cols, "horizontal")
        for j, row in enumerate(rows):
            if len(row) != n_cols:
                raise InvalidComponentCount(
                    f"row {j} has {len(row)} components, expected {n_cols}"
                )
        object.__setattr__(self, "components", rows)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[LinearRGB | Sequence[float]]]) -> CoefficientGrid:
        """入れ子のシーケンス（rows × cols × 3 の float 等）から生成。"""
        return cls(tuple(tuple(row) for row in rows))

    # --- 形状 ---

    @property
    def number_of_horizontal_components(self) -> int:
        return len(self.components[0])

    @property
    def number_of_vertical_components(self) -> int:
        return len(self.components)

    @property
    def shape(self) -> tuple[int, int]:
        """(行数, 列数)。"""
        return (self.number_of_vertical_components, self.number_of_horizontal_components)

    def __getitem__(self, row: int) -> tuple[LinearRGB, ...]:
        return self.components[row]

    def to_lists(self) -> list[list[tuple[float, float, float]]]:
        """rows × cols × 3 の float リストに変換（エンコーダ受け渡し用）。"""
        return [[c.to_tuple() for c in row] for row in self.components]

    def allclose(self, other: CoefficientGrid, abs_tol: float = 1e-9) -> bool:
        """同形状かつ全成分が abs_tol 以内で一致するか。"""
        if self.shape != other.shape:
            return False
        for row_a, row_b in zip(self.components, other.components):
            for a, b in zip(row_a, row_b):
                if not all(
                    math.isclose(x, y, rel_tol=0.0, abs_tol=abs_tol)
                    for x, y in zip(a.to_tuple(), b.to_tuple())
                ):
                    return False
        return True

    # --- 復元 ---

    def _weighted_sum(self, horizontal: Sequence[float], vertical: Sequence[float]) -> LinearRGB:
        """Σ components[j][i] · horizontal[i] · vertical[j]。"""
        r = g = b = 0.0
        for row, v in zip(self.components, vertical):
            for component, h in zip(row, horizontal):
                weight = h * v
                r += component.r * weight
                g += component.g * weight
                b += component.b * weight
        return LinearRGB(r, g, b)

    def linear_rgb_at(self, x: float, y: float) -> LinearRGB:
        """点 (x, y) ∈ [0,1]² の色。連続座標での逆DCT。"""
        return self._weighted_sum(
            _basis(self.number_of_horizontal_components, x),
            _basis(self.number_of_vertical_components, y),
        )

    def linear_rgb_at_x(self, x: float) -> LinearRGB:
        """水平方向のみの1次元復元（0行目の係数のみ使用）。"""
        return self._weighted_sum(_basis(self.number_of_horizontal_components, x), (1.0,))

    def linear_rgb_at_y(self, y: float) -> LinearRGB:
        """垂直方向のみの1次元復元（0列目の係数のみ使用）。"""
        return self._weighted_sum((1.0,), _basis(self.number_of_vertical_components, y))

    def linear_rgb_between(self, upper_left: Point, lower_right: Point) -> LinearRGB:
        """矩形領域の平均色。

        各基底関数の区間平均を閉形式で求めて係数に掛ける。
        幅または高さがゼロの軸はその座標での基底値（区間平均の極限）を使う。
        両軸ともゼロなら linear_rgb_at と同じ点サンプルになるが、
        片軸だけゼロの場合は点ではなく、もう一方の軸に沿った線分の平均になる。

        Args:
            upper_left: (x0, y0)
            lower_right: (x1, y1)
        """
        (x0, y0), (x1, y1) = upper_left, lower_right
        return self._weighted_sum(
            _box_average(self.number_of_horizontal_components, x0, x1),
            _box_average(self.number_of_vertical_components, y0, y1),
        )

    def linear_rgb_in(self, upper_left: Point, size: Point) -> LinearRGB:
        """左上座標とサイズで指定した矩形の平均色。"""
        x, y = upper_left
        width, height = size
        return self.linear_rgb_between((x, y), (x + width, y + height))

    @property
    def average_linear_rgb(self) -> LinearRGB:
        return self.components[0][0]

    @property
    def left_edge_linear_rgb(self) -> LinearRGB:
        return self.linear_rgb_at_x(0.0)

    @property
    def right_edge_linear_rgb(self) -> LinearRGB:
        return self.linear_rgb_at_x(1.0)

    @property
    def top_edge_linear_rgb(self) -> LinearRGB:
        return self.linear_rgb_at_y(0.0)

    @property
    def bottom_edge_linear_rgb(self) -> LinearRGB:
        return self.linear_rgb_at_y(1.0)

    @property
    def top_left_corner_linear_rgb(self) -> LinearRGB:
        return self.linear_rgb_at(0.0, 0.0)

    @property
    def top_right_corner_linear_rgb(self) -> LinearRGB:
        return self.linear_rgb_at(1.0, 0.0)

    @property
    def bottom_left_corner_linear_rgb(self) -> LinearRGB:
        return self.linear_rgb_at(0.0, 1.0)

    @property
    def bottom_right_corner_linear_rgb(self) -> LinearRGB:
        return self.linear_rgb_at(1.0, 1.0)

    # --- 輝度指標 ---

    @property
    def luminance(self) -> float:
        """平均色（DC）の輝度。"""
        return rgb_luminance(self.average_linear_rgb)

    def brightness(self, midpoint: float = DEFAULT_MIDPOINT) -> float:
        return brightness_from_luminance(self.luminance, midpoint)

    def is_dark(self, threshold: float = DEFAULT_DARK_THRESHOLD) -> bool:
        return rgb_is_dark(self.average_linear_rgb, threshold)

    def is_dark_at(self, x: float, y: float, threshold: float = DEFAULT_DARK_THRESHOLD) -> bool:
        return rgb_is_dark(self.linear_rgb_at(x, y), threshold)

    def is_dark_at_x(self, x: float, threshold: float = DEFAULT_DARK_THRESHOLD) -> bool:
        return rgb_is_dark(self.linear_rgb_at_x(x), threshold)

    def is_dark_at_y(self, y: float, threshold: float = DEFAULT_DARK_THRESHOLD) -> bool:
        return rgb_is_dark(self.linear_rgb_at_y(y), threshold)

    def is_dark_between(
        self,
        upper_left: Point,
        lower_right: Point,
        threshold: float = DEFAULT_DARK_THRESHOLD,
    ) -> bool:
        return rgb_is_dark(self.linear_rgb_between(upper_left, lower_right), threshold)

    def is_dark_in(
        self,
        upper_left: Point,
        size: Point,
        threshold: float = DEFAULT_DARK_THRESHOLD,
    ) -> bool:
        return rgb_is_dark(self.linear_rgb_in(upper_left, size), threshold)

    @property
    def is_left_edge_dark(self) -> bool:
        return self.is_dark_at_x(0.0)

    @property
    def is_right_edge_dark(self) -> bool:
        return self.is_dark_at_x(1.0)

    @property
    def is_top_edge_dark(self) -> bool:
        return self.is_dark_at_y(0.0)

    @property
    def is_bottom_edge_dark(self) -> bool:
        return self.is_dark_at_y(1.0)

    @property
    def is_top_left_corner_dark(self) -> bool:
        return self.is_dark_at(0.0, 0.0)

    @property
    def is_top_right_corner_dark(self) -> bool:
        return self.is_dark_at(1.0, 0.0)

    @property
    def is_bottom_left_corner_dark(self) -> bool:
        return self.is_dark_at(0.0, 1.0)

    @property
    def is_bottom_right_corner_dark(self) -> bool:
        return self.is_dark_at(1.0, 1.0)

    # --- 代数演算 ---

    def transform(self, fn: ColorFn) -> CoefficientGrid:
        """全係数に fn を適用。"""
        return CoefficientGrid(tuple(tuple(fn(c) for c in row) for row in self.components))

    def transform_parts(
        self,
        dc: ColorFn | None = None,
        ac: ColorFn | None = None,
    ) -> CoefficientGrid:
        """DC には dc、それ以外の係数には ac を適用。None の側は変更しない。"""
        rows = []
        for j, row in enumerate(self.components):
            new_row = []
            for i, component in enumerate(row):
                fn = dc if i == 0 and j == 0 else ac
                new_row.append(fn(component) if fn is not None else component)
            rows.append(tuple(new_row))
        return CoefficientGrid(tuple(rows))

    def combine(self, other: CoefficientGrid, fn: CombineFn) -> CoefficientGrid:
        """成分ごとに fn で合成。

        解像度が異なる場合は両方をゼロ成分で大きい方の形状まで拡張してから
        合成する（大きい側の高周波成分は失われない）。
        """
        n_rows = max(self.number_of_vertical_components, other.number_of_vertical_components)
        n_cols = max(self.number_of_horizontal_components, other.number_of_horizontal_components)
        lhs = _padded(self.components, n_rows, n_cols)
        rhs = _padded(other.components, n_rows, n_cols)
        return CoefficientGrid(
            tuple(
                tuple(fn(a, b) for a, b in zip(row_a, row_b))
                for row_a, row_b in zip(lhs, rhs)
            )
        )

    def __add__(self, other: CoefficientGrid) -> CoefficientGrid:
        return self.combine(other, lambda a, b: a + b)

    def __sub__(self, other: CoefficientGrid) -> CoefficientGrid:
        return self.combine(other, lambda a, b: a - b)

    def __neg__(self) -> CoefficientGrid:
        return self.transform(lambda c: -c)

    def __mul__(self, factor: float) -> CoefficientGrid:
        return self.transform(lambda c: c * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> CoefficientGrid:
        return self.transform(lambda c: c / divisor)

    @property
    def dc(self) -> CoefficientGrid:
        """DC 成分のみの 1×1 グリッド。"""
        return CoefficientGrid(((self.components[0][0],),))

    @property
    def ac(self) -> CoefficientGrid:
        """DC をゼロにした同形状のグリッド。dc + ac == self。"""
        return self.transform_parts(dc=lambda _: ZERO)

    def punch(self, factor: float) -> CoefficientGrid:
        """AC 成分のみを factor 倍（平均色を保ったままコントラストを調整）。

        dc + ac * factor と等価。
        """
        return self.transform_parts(ac=lambda c: c * factor)

    @property
    def mirrored_horizontally(self) -> CoefficientGrid:
        """左右反転。奇数次の水平成分の符号を反転する。"""
        return CoefficientGrid(
            tuple(
                tuple(-c if i % 2 else c for i, c in enumerate(row))
                for row in self.components
            )
        )

    @property
    def mirrored_vertically(self) -> CoefficientGrid:
        """上下反転。奇数次の垂直成分の符号を反転する。"""
        return CoefficientGrid(
            tuple(
                tuple(-c for c in row) if j % 2 else row
                for j, row in enumerate(self.components)
            )
        )

    @property
    def transposed(self) -> CoefficientGrid:
        return CoefficientGrid(tuple(zip(*self.components)))

    def simplify(self, max_horizontal: int, max_vertical: int) -> CoefficientGrid:
        """先頭 max_horizontal × max_vertical の係数だけを残す（高周波を切り捨て）。

        再射影ではないため非可逆。
        """
        return CoefficientGrid(
            tuple(row[:max_horizontal] for row in self.components[:max_vertical])
        )


WHITE_GRID = CoefficientGrid(((WHITE,),))
BLACK_GRID = CoefficientGrid(((ZERO,),))
