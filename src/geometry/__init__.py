"""
どこで: `geometry` パッケージ。
何を: 点・線分・クリップ窓の値型を提供。
なぜ: アルゴリズム層（`clipping`）と利用側が共有する最内層の表現を 1 か所にまとめるため。
"""

from .primitives import InvalidWindowError, LineSegment, Point, Window

__all__ = ["Point", "LineSegment", "Window", "InvalidWindowError"]
