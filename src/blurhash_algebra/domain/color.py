"""リニアRGB色の値型と色空間変換、輝度指標。

Pure Pythonで実装（外部ライブラリ依存なし）。
"""

from __future__ import annotations

import math
from dataclasses import dataclass

# --- 既定値 ---

DEFAULT_MIDPOINT = 0.3
"""明るさ 0.5 に対応付ける輝度。"""

DEFAULT_DARK_THRESHOLD = 0.3

# BT.601 輝度係数（合計 1.0）
LUMA_R = 0.299
LUMA_G = 0.587
LUMA_B = 0.114


@dataclass(frozen=True)
class RGB:
    """sRGB色空間の色。各チャンネル 0-255。"""

    r: int
    g: int
    b: int

    def to_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


@dataclass(frozen=True)
class LinearRGB:
    """リニアRGBの3成分。演算中は値域の制限なし。"""

    r: float
    g: float
    b: float

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.r, self.g, self.b)

    def __add__(self, other: LinearRGB) -> LinearRGB:
        return LinearRGB(self.r + other.r, self.g + other.g, self.b + other.b)

    def __sub__(self, other: LinearRGB) -> LinearRGB:
        return LinearRGB(self.r - other.r, self.g - other.g, self.b - other.b)

    def __neg__(self) -> LinearRGB:
        return LinearRGB(-self.r, -self.g, -self.b)

    def __mul__(self, factor: float) -> LinearRGB:
        return LinearRGB(self.r * factor, self.g * factor, self.b * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> LinearRGB:
        return LinearRGB(self.r / divisor, self.g / divisor, self.b / divisor)


ZERO = LinearRGB(0.0, 0.0, 0.0)
WHITE = LinearRGB(1.0, 1.0, 1.0)


# --- sRGB ↔ リニアRGB 変換 ---


def srgb_to_linear(value: float) -> float:
    """sRGB値(0-1)をリニア値に変換。"""
    if value <= 0.04045:
        return value / 12.92
    return ((value + 0.055) / 1.055) ** 2.4


def linear_to_srgb(value: float) -> float:
    """リニア値をsRGB値(0-1)に変換。入力は [0, 1] にクランプ。"""
    v = max(0.0, min(1.0, value))
    if v <= 0.0031308:
        return v * 12.92
    return 1.055 * v ** (1.0 / 2.4) - 0.055


def linear_to_srgb8(value: float) -> int:
    """リニア値を 8bit sRGB (0-255) に変換。四捨五入。"""
    return int(linear_to_srgb(value) * 255 + 0.5)


def rgb_to_linear(color: RGB) -> LinearRGB:
    """8bit sRGB色をリニアRGBに変換。"""
    return LinearRGB(
        srgb_to_linear(color.r / 255.0),
        srgb_to_linear(color.g / 255.0),
        srgb_to_linear(color.b / 255.0),
    )


def linear_to_rgb(color: LinearRGB) -> RGB:
    """リニアRGBを 8bit sRGB色に変換。"""
    return RGB(
        linear_to_srgb8(color.r),
        linear_to_srgb8(color.g),
        linear_to_srgb8(color.b),
    )


# --- 輝度と知覚的な明るさ ---


def luminance(rgb: LinearRGB) -> float:
    """リニアRGBの輝度（BT.601 係数）。"""
    return LUMA_R * rgb.r + LUMA_G * rgb.g + LUMA_B * rgb.b


def brightness_exponent(midpoint: float = DEFAULT_MIDPOINT) -> float:
    """輝度 midpoint を明るさ 0.5 に写すべき指数。-log2(midpoint)。

    Raises:
        ValueError: midpoint が (0, 1) の範囲外
    """
    if not 0.0 < midpoint < 1.0:
        raise ValueError(f"midpoint must be between 0 and 1 exclusive, got {midpoint}")
    return -math.log2(midpoint)


def brightness_from_luminance(value: float, midpoint: float = DEFAULT_MIDPOINT) -> float:
    """輝度を知覚的な明るさに変換。負の輝度は 0 として扱う。"""
    return max(value, 0.0) ** (1.0 / brightness_exponent(midpoint))


def brightness(rgb: LinearRGB, midpoint: float = DEFAULT_MIDPOINT) -> float:
    """知覚的な明るさ (0〜1)。luminance == midpoint のとき 0.5。"""
    return brightness_from_luminance(luminance(rgb), midpoint)


def is_dark(rgb: LinearRGB, threshold: float = DEFAULT_DARK_THRESHOLD) -> bool:
    return luminance(rgb) < threshold


# --- 色度平面 ---


def chroma_uv(rgb: LinearRGB) -> tuple[float, float]:
    """簡易色度平面への射影。U = R - G/2 - B/2, V = 0.866 (G - B)。"""
    u = rgb.r - rgb.g * 0.5 - rgb.b * 0.5
    v = rgb.g * 0.866 - rgb.b * 0.866
    return (u, v)
