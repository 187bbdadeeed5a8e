"""プレビュー生成ユースケース。

画像 → 係数グリッドへの射影、係数上の編集、ラスタライズ、保存をまとめる。
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

import numpy as np
import numpy.typing as npt

from blurhash_algebra.domain import tone
from blurhash_algebra.domain.coefficient_grid import CoefficientGrid
from blurhash_algebra.domain.color import DEFAULT_MIDPOINT
from blurhash_algebra.domain.image_model import Adjustment, RenderSpec
from blurhash_algebra.infrastructure.image_io import load_image, save_image, thumbnail
from blurhash_algebra.infrastructure.projection import project_image
from blurhash_algebra.infrastructure.rasterize import render_srgb

logger = logging.getLogger(__name__)

AdjustmentStep = tuple[Adjustment, float | None]

# 射影前の縮小サイズ（長辺）
ENCODE_MAX_SIZE = 64


class PreviewService:
    """係数グリッドのプレビューサービス。"""

    def __init__(self, midpoint: float = DEFAULT_MIDPOINT, encode_max_size: int = ENCODE_MAX_SIZE) -> None:
        self._midpoint = midpoint
        self._encode_max_size = encode_max_size

    def encode_array(self, rgb_array: npt.NDArray[np.uint8], spec: RenderSpec) -> CoefficientGrid:
        """画素配列を spec の成分数で係数グリッドに射影。"""
        small = thumbnail(rgb_array, self._encode_max_size)
        logger.debug(
            "Projecting %dx%d image onto %dx%d components",
            small.shape[1], small.shape[0], spec.x_components, spec.y_components,
        )
        return project_image(small, spec.x_components, spec.y_components)

    def encode_file(self, path: str | Path, spec: RenderSpec) -> CoefficientGrid:
        logger.info("Loading %s", path)
        return self.encode_array(load_image(path), spec)

    def apply(self, grid: CoefficientGrid, steps: Sequence[AdjustmentStep]) -> CoefficientGrid:
        """編集操作を順に適用。

        Args:
            grid: 入力グリッド
            steps: (操作, 値) の列。値を取らない操作は None

        Raises:
            ValueError: 値が必要な操作に値がない
        """
        for adjustment, value in steps:
            if adjustment.takes_value and value is None:
                raise ValueError(f"{adjustment.value} requires a value")
            logger.debug("Applying %s (%s)", adjustment.value, value)
            grid = self._apply_one(grid, adjustment, value)
        return grid

    def _apply_one(
        self,
        grid: CoefficientGrid,
        adjustment: Adjustment,
        value: float | None,
    ) -> CoefficientGrid:
        if adjustment is Adjustment.DARKEN:
            return tone.darken(grid, value)
        if adjustment is Adjustment.LIGHTEN:
            return tone.lighten(grid, value)
        if adjustment is Adjustment.PUNCH:
            return grid.punch(value)
        if adjustment is Adjustment.BRIGHTNESS:
            return tone.set_brightness(grid, value, self._midpoint)
        if adjustment is Adjustment.INVERT:
            return tone.invert_brightness(grid, self._midpoint)
        if adjustment is Adjustment.MIRROR_HORIZONTALLY:
            return grid.mirrored_horizontally
        if adjustment is Adjustment.MIRROR_VERTICALLY:
            return grid.mirrored_vertically
        return grid.transposed

    def render(self, grid: CoefficientGrid, spec: RenderSpec) -> npt.NDArray[np.uint8]:
        """(height, width, 3) uint8 のプレビュー画像を生成。"""
        return render_srgb(grid, spec.width, spec.height, spec.punch)

    def render_to_file(self, grid: CoefficientGrid, spec: RenderSpec, path: str | Path) -> None:
        save_image(self.render(grid, spec), path)
        logger.info("Saved %dx%d preview to %s", spec.width, spec.height, path)
