"""
2D 幾何プリミティブ（点・線分・クリップ窓）

本モジュールは、クリッピング処理の入出力となる値型を提供する。

データモデル（不変条件）:
- `Point(x, y)` — 座標は常に Python `float` に正規化される。等価性は浮動小数点の厳密一致。
- `LineSegment(p1, p2)` — 順序付きの端点対。クリップ後も向き（p1→p2）は保存される。
- `Window(x_min, x_max, y_min, y_max)` — 軸平行の矩形。境界上の点は内側とみなす。

方針:
- すべて frozen dataclass（生成後の変更不可）で、同一性を持たない純粋な値。
- `Window` は生成時に上下限を検証しない（`x_min > x_max` 等は呼び出し側の前提違反）。
  検証が必要な場合は `Window.validate()`、または設定 `CHECK_WINDOW` を使う。

直感図（窓と領域コード）:

    1001 | 1000 | 1010
    -----+------+-----
    0001 | 0000 | 0010
    -----+------+-----
    0101 | 0100 | 0110

    中央 0000 が窓（境界を含む）。ビットは上位から TOP/BOTTOM/RIGHT/LEFT。

使用例:
    from geometry import LineSegment, Point, Window
    seg = LineSegment(Point(0.0, 0.0), Point(10.0, 10.0))
    win = Window(1.0, 9.0, 1.0, 9.0)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

import numpy as np

from common.types import FloatArray, Vec2


class InvalidWindowError(ValueError):
    """クリップ窓の上下限が逆転している場合に送出される。"""


@dataclass(slots=True, frozen=True)
class Point:
    """2D 空間上の点。"""

    x: float
    y: float

    ORIGIN: ClassVar[Point]

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def as_tuple(self) -> Vec2:
        return (self.x, self.y)


Point.ORIGIN = Point(0.0, 0.0)


@dataclass(slots=True, frozen=True)
class LineSegment:
    """2D 空間上の有向線分（p1 → p2）。"""

    p1: Point
    p2: Point

    def reversed(self) -> LineSegment:
        """端点を入れ替えた線分を返す。"""
        return LineSegment(self.p2, self.p1)

    def as_array(self) -> FloatArray:
        """`[[x1, y1], [x2, y2]]` 形状 (2, 2) の float64 配列を返す。"""
        return np.array(
            [[self.p1.x, self.p1.y], [self.p2.x, self.p2.y]],
            dtype=np.float64,
        )

    @classmethod
    def from_array(cls, arr: object) -> LineSegment:
        """配列から線分を生成する。

        Parameters
        ----------
        arr : array-like
            形状 `(2, 2)`（`[[x1, y1], [x2, y2]]`）または `(4,)`（`[x1, y1, x2, y2]`）。

        Raises
        ------
        ValueError
            上記いずれの形状にも適合しない場合。
        """
        a = np.asarray(arr, dtype=np.float64)
        if a.shape == (4,):
            a = a.reshape(2, 2)
        if a.shape != (2, 2):
            raise ValueError(f"線分配列は形状 (2, 2) または (4,) である必要があります: got {a.shape}")
        return cls(Point(a[0, 0], a[0, 1]), Point(a[1, 0], a[1, 1]))


@dataclass(slots=True, frozen=True)
class Window:
    """線分をクリップする軸平行の矩形窓。"""

    x_min: float
    x_max: float
    y_min: float
    y_max: float

    def __post_init__(self) -> None:
        for name in ("x_min", "x_max", "y_min", "y_max"):
            object.__setattr__(self, name, float(getattr(self, name)))

    @property
    def is_valid(self) -> bool:
        """上下限が逆転していなければ True（幅/高さ 0 は有効）。"""
        return self.x_min <= self.x_max and self.y_min <= self.y_max

    def validate(self) -> Window:
        """有効なら自身を返し、そうでなければ `InvalidWindowError` を送出する。"""
        if not self.is_valid:
            raise InvalidWindowError(
                "クリップ窓の上下限が逆転しています: "
                f"x=[{self.x_min}, {self.x_max}], y=[{self.y_min}, {self.y_max}]"
            )
        return self

    def contains(self, point: Point) -> bool:
        """点が窓の内側（境界を含む）にあるか。"""
        return self.x_min <= point.x <= self.x_max and self.y_min <= point.y <= self.y_max


__all__ = ["Point", "LineSegment", "Window", "InvalidWindowError"]
