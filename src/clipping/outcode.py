"""
どこで: `clipping.outcode`
何を: 点が窓のどの辺の外側にあるかを 4 ビットの領域コード（Outcode）で表す。
なぜ: 両端点のコードの OR/AND だけで自明受理/自明棄却を O(1) で判定するため。

ビット割り当て:
- LEFT   = 0b0001（x < x_min）
- RIGHT  = 0b0010（x > x_max）
- BOTTOM = 0b0100（y < y_min）
- TOP    = 0b1000（y > y_max）

境界上の点はその軸について内側（ビットは立たない）。
"""

from __future__ import annotations

from enum import IntFlag

from geometry.primitives import Point, Window


class Outcode(IntFlag):
    """Cohen-Sutherland の領域コード。"""

    INSIDE = 0
    LEFT = 0b0001
    RIGHT = 0b0010
    BOTTOM = 0b0100
    TOP = 0b1000

    @property
    def is_outside(self) -> bool:
        return self != Outcode.INSIDE


# 刻む境界の優先順（先に立っているビットの境界で切る）
CLIP_PRIORITY: tuple[Outcode, ...] = (Outcode.TOP, Outcode.BOTTOM, Outcode.RIGHT, Outcode.LEFT)


def compute_outcode(point: Point, window: Window) -> Outcode:
    """点と窓から領域コードを計算する（全域関数、例外なし）。

    各軸の判定は独立に行い、ビット OR で合成する。
    """
    code = Outcode.INSIDE
    if point.x < window.x_min:
        code |= Outcode.LEFT
    if point.x > window.x_max:
        code |= Outcode.RIGHT
    if point.y < window.y_min:
        code |= Outcode.BOTTOM
    if point.y > window.y_max:
        code |= Outcode.TOP
    return code


__all__ = ["Outcode", "CLIP_PRIORITY", "compute_outcode"]
