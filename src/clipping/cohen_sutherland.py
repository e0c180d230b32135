from __future__ import annotations

"""
どこで: `clipping.cohen_sutherland`（LineSegment×Window→LineSegment|None の純関数）
何を: Cohen-Sutherland 法で線分を軸平行の矩形窓にクリップする。
なぜ: 領域コードのビット演算で大半のケースを O(1) で受理/棄却し、残りも高々 4 回の刻みで確定させるため。

アルゴリズム:
1. 両端点の領域コード oc1, oc2 を求める。
2. 反復:
   a. `oc1 | oc2 == 0` なら両端点が窓内（境界含む）→ 現在の端点で受理。
   b. `oc1 & oc2 != 0` なら同じ辺の外側に揃っている → `None`（棄却）。
   c. 外側にある端点を 1 つ選び（p1 優先）、TOP→BOTTOM→RIGHT→LEFT の順で最初に
      立っているビットの境界直線との交点へ置き換え、コードを再計算して a へ戻る。

非目標:
- 凸多角形窓（Cyrus-Beck 等）、ポリライン/ポリゴンのクリップ、3D。
- NaN/Inf を含む座標（結果は未規定）。
- 交点式の積 `(p2.y - p1.y) * (x_b - p1.x)` が float64 の範囲を超える巨大座標（概ね 1e154 超）。
  積が inf に溢れると交点が NaN になり、結果の端点が窓内にある保証は失われる。

実装メモ:
- 交点は「現在の」p1, p2 を通る直線のパラメトリック式で求める。
  - 縦の境界 x = x_b: `y = p1.y + (p2.y - p1.y) * (x_b - p1.x) / (p2.x - p1.x)`
  - 横の境界 y = y_b: `x = p1.x + (p2.x - p1.x) * (y_b - p1.y) / (p2.y - p1.y)`
- 分母 0 は起こらない。選ばれた境界のビットは選ばれた端点にだけ立っており
  （両方に立っていれば b で棄却済み）、その軸の座標差は必ず非 0。
- 刻むたびに選んだ境界のビットが落ちるため、刻みは高々 4 回。設定
  `CLIP_MAX_ITERATIONS` を超えた場合は不変条件違反として `ClipInvariantError`。
"""

import logging

from common import settings
from geometry.primitives import LineSegment, Point, Window

from .outcode import CLIP_PRIORITY, Outcode, compute_outcode
from .registry import algorithm

logger = logging.getLogger(__name__)


class ClipInvariantError(RuntimeError):
    """反復上限を超えても受理/棄却が確定しなかった場合に送出される。"""


def _select_boundary(code: Outcode) -> Outcode:
    for side in CLIP_PRIORITY:
        if code & side:
            return side
    raise ClipInvariantError(f"窓の外側にない端点を刻もうとしました: outcode={code!r}")


def _intersect(p1: Point, p2: Point, side: Outcode, window: Window) -> Point:
    """線分 (p1, p2) を通る直線と、窓の辺 `side` の境界直線との交点。"""
    if side == Outcode.TOP or side == Outcode.BOTTOM:
        y_b = window.y_max if side == Outcode.TOP else window.y_min
        x = p1.x + (p2.x - p1.x) * (y_b - p1.y) / (p2.y - p1.y)
        return Point(x, y_b)
    x_b = window.x_max if side == Outcode.RIGHT else window.x_min
    y = p1.y + (p2.y - p1.y) * (x_b - p1.x) / (p2.x - p1.x)
    return Point(x_b, y)


@algorithm("cohen_sutherland")
def clip_line(segment: LineSegment, window: Window) -> LineSegment | None:
    """線分を窓にクリップする。

    Parameters
    ----------
    segment : LineSegment
        対象の有向線分。向き（p1→p2）は結果でも保存される。
    window : Window
        クリップ窓（境界を含む）。上下限の逆転は呼び出し側の前提違反
        （設定 `CHECK_WINDOW` が真なら `InvalidWindowError`）。

    Returns
    -------
    LineSegment | None
        窓と交わる部分。窓の完全に外側なら `None`。
        1 回も刻まずに受理した場合は入力の `segment` をそのまま返す。
        NaN/Inf を含む座標、および交点式の積が float64 を溢れる巨大座標
        （概ね 1e154 超）では結果は未規定（端点が NaN になりうる）。

    Raises
    ------
    ClipInvariantError
        反復上限を超えた場合（通常の有限入力では起こらない）。

    使用例:
        >>> clip_line(
        ...     LineSegment(Point(0.0, 0.0), Point(10.0, 10.0)),
        ...     Window(1.0, 9.0, 1.0, 9.0),
        ... )
        LineSegment(p1=Point(x=1.0, y=1.0), p2=Point(x=9.0, y=9.0))
    """
    cfg = settings.get()
    if cfg.CHECK_WINDOW:
        window.validate()

    p1, p2 = segment.p1, segment.p2
    oc1 = compute_outcode(p1, window)
    oc2 = compute_outcode(p2, window)

    steps = 0
    while True:
        if not (oc1 | oc2):
            if steps == 0:
                return segment
            return LineSegment(p1, p2)
        if oc1 & oc2:
            return None
        if steps >= cfg.CLIP_MAX_ITERATIONS:
            logger.error(
                "cohen_sutherland: %d 回刻んでも確定しません segment=%r window=%r",
                steps,
                segment,
                window,
            )
            raise ClipInvariantError(
                f"クリップが {cfg.CLIP_MAX_ITERATIONS} 回の反復で収束しませんでした"
            )
        steps += 1
        if oc1:
            p1 = _intersect(p1, p2, _select_boundary(oc1), window)
            oc1 = compute_outcode(p1, window)
        else:
            p2 = _intersect(p1, p2, _select_boundary(oc2), window)
            oc2 = compute_outcode(p2, window)


__all__ = ["clip_line", "ClipInvariantError"]
