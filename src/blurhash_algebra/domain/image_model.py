"""プレビュー生成のドメインモデル。"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from blurhash_algebra.domain.coefficient_grid import check_component_count


class Adjustment(Enum):
    """係数グリッドに適用する編集操作。"""

    DARKEN = "darken"
    LIGHTEN = "lighten"
    PUNCH = "punch"
    BRIGHTNESS = "brightness"
    INVERT = "invert"
    MIRROR_HORIZONTALLY = "mirror-h"
    MIRROR_VERTICALLY = "mirror-v"
    TRANSPOSE = "transpose"

    @property
    def takes_value(self) -> bool:
        return self in (Adjustment.DARKEN, Adjustment.LIGHTEN, Adjustment.PUNCH, Adjustment.BRIGHTNESS)


@dataclass(frozen=True)
class RenderSpec:
    """射影とラスタライズの仕様。"""

    width: int = 128
    height: int = 128
    x_components: int = 4
    y_components: int = 3
    punch: float = 1.0

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Render size must be positive, got {self.width}x{self.height}")
        check_component_count(self.x_components, "horizontal")
        check_component_count(self.y_components, "vertical")

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)
