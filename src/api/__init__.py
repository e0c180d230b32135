"""
どこで: `api` 入口（高レベル公開 API）。
何を: 点・線分・窓の値型と、クリッピング関数・レジストリ・ロギング補助を再輸出。
なぜ: 利用者が単一名前空間から窓の定義→クリップ→結果の受け取りまで完結できるようにするため。

Usage:
    from api import LineSegment, Point, Window, clip_line

    seg = LineSegment(Point(-10.0, -10.0), Point(20.0, 20.0))
    clipped = clip_line(seg, Window(0.0, 10.0, 0.0, 10.0))
    # -> LineSegment(Point(0, 0), Point(10, 10))、窓の外なら None
"""

from clipping import (
    ClipInvariantError,
    Outcode,
    algorithm,
    clip_line,
    clip_segments,
    compute_outcode,
    get_algorithm,
    list_algorithms,
)
from common.logging import setup_default_logging
from geometry import InvalidWindowError, LineSegment, Point, Window

__all__ = [
    # 値型
    "Point",
    "LineSegment",
    "Window",
    # クリッピング
    "clip_line",
    "clip_segments",
    "Outcode",
    "compute_outcode",
    # 拡張/選択
    "algorithm",
    "get_algorithm",
    "list_algorithms",
    # 例外
    "InvalidWindowError",
    "ClipInvariantError",
    # 補助
    "setup_default_logging",
]
