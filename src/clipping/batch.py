from __future__ import annotations

"""
どこで: `clipping.batch`（ndarray → ndarray の一括クリップ）
何を: 多数の線分を同じ窓に対して Cohen-Sutherland 法でまとめてクリップする。
なぜ: `LineSegment` を 1 本ずつ生成するオーバーヘッドを避け、Numba で行ごとのループを高速化するため。

入出力:
- 入力 `segments`: 形状 `(N, 2, 2)`（`[[x1, y1], [x2, y2]]`）または `(N, 4)`（`x1, y1, x2, y2`）。
- 出力 `clipped: float64 (N, 2, 2)` と `accepted: bool (N,)`。棄却行は NaN で埋める。

実装メモ:
- カーネルは `clip_line` と同じ優先順（TOP→BOTTOM→RIGHT→LEFT）・同じ p1 優先・同じ交点式。
  行ごとの結果は `clip_line` と一致する。
- IEEE の比較/丸めを変えないよう `fastmath` は使わない。
- 設定 `USE_NUMBA` が偽なら、同じカーネルを `py_func` 経由で純 Python として実行する。
- 座標の適用範囲は `clip_line` と同じ（NaN/Inf や 1e154 を超える巨大座標では結果は未規定）。
"""

import logging

import numpy as np
from numba import njit  # type: ignore[attr-defined]

from common import settings
from common.types import BoolArray, FloatArray
from geometry.primitives import Window

from .cohen_sutherland import ClipInvariantError

logger = logging.getLogger(__name__)

_LEFT = 1
_RIGHT = 2
_BOTTOM = 4
_TOP = 8

_STATUS_REJECTED = 0
_STATUS_ACCEPTED = 1
_STATUS_DIVERGED = -1


@njit(cache=True)
def _clip_segments_kernel(
    segs: np.ndarray,
    x_min: float,
    x_max: float,
    y_min: float,
    y_max: float,
    max_iter: int,
    out: np.ndarray,
    status: np.ndarray,
) -> None:
    n = segs.shape[0]
    for i in range(n):
        x1 = segs[i, 0, 0]
        y1 = segs[i, 0, 1]
        x2 = segs[i, 1, 0]
        y2 = segs[i, 1, 1]

        oc1 = 0
        if x1 < x_min:
            oc1 |= _LEFT
        if x1 > x_max:
            oc1 |= _RIGHT
        if y1 < y_min:
            oc1 |= _BOTTOM
        if y1 > y_max:
            oc1 |= _TOP
        oc2 = 0
        if x2 < x_min:
            oc2 |= _LEFT
        if x2 > x_max:
            oc2 |= _RIGHT
        if y2 < y_min:
            oc2 |= _BOTTOM
        if y2 > y_max:
            oc2 |= _TOP

        steps = 0
        st = _STATUS_DIVERGED
        while True:
            if (oc1 | oc2) == 0:
                st = _STATUS_ACCEPTED
                break
            if (oc1 & oc2) != 0:
                st = _STATUS_REJECTED
                break
            if steps >= max_iter:
                break
            steps += 1

            code = oc1 if oc1 != 0 else oc2
            if code & _TOP:
                nx = x1 + (x2 - x1) * (y_max - y1) / (y2 - y1)
                ny = y_max
            elif code & _BOTTOM:
                nx = x1 + (x2 - x1) * (y_min - y1) / (y2 - y1)
                ny = y_min
            elif code & _RIGHT:
                ny = y1 + (y2 - y1) * (x_max - x1) / (x2 - x1)
                nx = x_max
            else:
                ny = y1 + (y2 - y1) * (x_min - x1) / (x2 - x1)
                nx = x_min

            oc = 0
            if nx < x_min:
                oc |= _LEFT
            if nx > x_max:
                oc |= _RIGHT
            if ny < y_min:
                oc |= _BOTTOM
            if ny > y_max:
                oc |= _TOP

            if oc1 != 0:
                x1 = nx
                y1 = ny
                oc1 = oc
            else:
                x2 = nx
                y2 = ny
                oc2 = oc

        status[i] = st
        if st == _STATUS_ACCEPTED:
            out[i, 0, 0] = x1
            out[i, 0, 1] = y1
            out[i, 1, 0] = x2
            out[i, 1, 1] = y2


def _as_segment_array(segments: object) -> np.ndarray:
    arr = np.asarray(segments, dtype=np.float64)
    if arr.size == 0:
        return np.zeros((0, 2, 2), dtype=np.float64)
    if arr.ndim == 2 and arr.shape[1] == 4:
        arr = arr.reshape(-1, 2, 2)
    if arr.ndim != 3 or arr.shape[1:] != (2, 2):
        raise ValueError(
            f"segments は形状 (N, 2, 2) または (N, 4) である必要があります: got {arr.shape}"
        )
    return np.ascontiguousarray(arr)


def clip_segments(segments: object, window: Window) -> tuple[FloatArray, BoolArray]:
    """線分配列を窓でクリップする。

    Parameters
    ----------
    segments : array-like
        形状 `(N, 2, 2)` または `(N, 4)` の線分配列。
    window : Window
        クリップ窓（境界を含む）。

    Returns
    -------
    clipped, accepted
        - clipped: `float64 (N, 2, 2)`。棄却行は NaN。
        - accepted: `bool (N,)`。窓と交わる行が True。

    Raises
    ------
    ValueError
        入力形状が不正な場合。
    ClipInvariantError
        いずれかの行が反復上限内に確定しなかった場合。
    """
    cfg = settings.get()
    if cfg.CHECK_WINDOW:
        window.validate()

    segs = _as_segment_array(segments)
    n = segs.shape[0]
    out = np.full((n, 2, 2), np.nan, dtype=np.float64)
    status = np.zeros(n, dtype=np.int8)
    if n == 0:
        return out, status.astype(np.bool_)

    kernel = _clip_segments_kernel if cfg.USE_NUMBA else _clip_segments_kernel.py_func
    logger.debug("clip_segments: n=%d numba=%s", n, cfg.USE_NUMBA)
    kernel(
        segs,
        window.x_min,
        window.x_max,
        window.y_min,
        window.y_max,
        int(cfg.CLIP_MAX_ITERATIONS),
        out,
        status,
    )

    diverged = np.flatnonzero(status == _STATUS_DIVERGED)
    if diverged.size:
        logger.error("clip_segments: %d 行が収束しませんでした (先頭 index=%d)", diverged.size, diverged[0])
        raise ClipInvariantError(
            f"{diverged.size} 本の線分が {cfg.CLIP_MAX_ITERATIONS} 回の反復で収束しませんでした"
        )
    return out, status == _STATUS_ACCEPTED


__all__ = ["clip_segments"]
