"""画像I/O（Pillow ベース）。

射影の入力となる sRGB 画素配列の読み込みと縮小、
ラスタライズ済みプレビューの書き出しを担当。
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import numpy.typing as npt
from PIL import Image


def load_image(path: str | Path) -> npt.NDArray[np.uint8]:
    """射影用の sRGB 画素配列を読み込む。

    パレット・グレースケール・アルファ付きの画像も 3 チャンネルに揃える
    （アルファは捨てる）。

    Args:
        path: 入力画像のパス。形式は Pillow が判別する

    Returns:
        (H, W, 3) の uint8 配列

    Raises:
        OSError: ファイルがない、または画像として読めない
    """
    with Image.open(path) as source:
        return np.asarray(source.convert("RGB"), dtype=np.uint8).copy()


def save_image(array: npt.NDArray[np.uint8], path: str | Path) -> None:
    """プレビュー画素配列を書き出す。形式は拡張子で決まる。

    Raises:
        OSError: 書き込み先がない
        ValueError: 拡張子から形式を判別できない
    """
    Image.fromarray(array).save(path)


def thumbnail(array: npt.NDArray[np.uint8], max_size: int) -> npt.NDArray[np.uint8]:
    """アスペクト比を保って長辺が max_size 以下になるよう縮小。

    射影コストは画素数に比例するため、エンコード前に使う。
    拡大はしない。

    Returns:
        縮小済みの (H, W, 3) uint8 配列
    """
    img = Image.fromarray(array)
    img.thumbnail((max_size, max_size), Image.Resampling.LANCZOS)
    return np.array(img, dtype=np.uint8)
