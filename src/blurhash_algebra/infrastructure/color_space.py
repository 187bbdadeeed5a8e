"""色空間変換（NumPyベースのバッチ処理）。

sRGB↔リニアRGB変換を画像全体に対して高速に実行する。
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt


def srgb_to_linear_batch(rgb_array: npt.NDArray[np.uint8]) -> npt.NDArray[np.float64]:
    """sRGB画像配列をリニアRGBに一括変換。

    Args:
        rgb_array: (..., 3) の uint8 配列 (sRGB)

    Returns:
        (..., 3) の float64 配列 (リニアRGB, 0〜1)
    """
    rgb_float = rgb_array.astype(np.float64) / 255.0
    mask = rgb_float <= 0.04045
    return np.where(mask, rgb_float / 12.92, ((rgb_float + 0.055) / 1.055) ** 2.4)


def linear_to_srgb_batch(linear: npt.NDArray[np.float64]) -> npt.NDArray[np.uint8]:
    """リニアRGB配列を 8bit sRGB に一括変換。範囲外は [0, 1] にクランプ。

    Args:
        linear: (..., 3) の float64 配列 (リニアRGB)

    Returns:
        (..., 3) の uint8 配列 (sRGB)
    """
    c = np.clip(linear, 0.0, 1.0)
    srgb = np.where(c <= 0.0031308, 12.92 * c, 1.055 * c ** (1.0 / 2.4) - 0.055)
    return np.clip(srgb * 255.0 + 0.5, 0, 255).astype(np.uint8)
