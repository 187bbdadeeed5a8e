"""係数グリッド操作の例外。"""

from __future__ import annotations


class BlurHashError(ValueError):
    """blurhash_algebra が送出する例外の基底クラス。"""


class InvalidComponentCount(BlurHashError):
    """成分数が 1〜9 の範囲外、または行ごとの成分数が揃っていない。"""


class PreconditionViolation(BlurHashError):
    """ブレンド等の前提条件（行数・列数など）を満たさない入力。"""
