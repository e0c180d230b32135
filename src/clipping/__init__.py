"""
どこで: `clipping` パッケージ。
何を: 領域コード・Cohen-Sutherland 法（単体/一括）・アルゴリズムレジストリを提供。
なぜ: 幾何プリミティブの上にクリッピングの計算層をまとめ、`api` から名前で選べるようにするため。
"""

from .batch import clip_segments
from .cohen_sutherland import ClipInvariantError, clip_line
from .outcode import CLIP_PRIORITY, Outcode, compute_outcode
from .registry import (
    algorithm,
    get_algorithm,
    is_algorithm_registered,
    list_algorithms,
)

__all__ = [
    "Outcode",
    "CLIP_PRIORITY",
    "compute_outcode",
    "clip_line",
    "clip_segments",
    "ClipInvariantError",
    "algorithm",
    "get_algorithm",
    "is_algorithm_registered",
    "list_algorithms",
]
