"""
ライブラリ利用側向けの軽量ロギングユーティリティ。

要点:
- ライブラリ内の各モジュールは `logging.getLogger(__name__)` でロガーを取得するだけで、
  ハンドラは一切設定しない。
- 利用側に設定が無い場合のために、最小構成を 1 度だけ適用するヘルパーを提供する。
"""

from __future__ import annotations

import logging

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_default_logging(level: int | str = "INFO") -> None:
    """最小限のロギング設定を 1 度だけ適用する。

    - ルートロガーにハンドラが既にあれば何もしない（no-op）
    - 文字列のレベル名が不明な場合は INFO とみなす
    """
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), logging.INFO)
    else:
        lvl = int(level)

    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(level=lvl, format=_FORMAT)


__all__ = ["setup_default_logging"]
