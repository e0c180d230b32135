"""
どこで: `common.env`
何を: `LCLIP_*` 環境変数を型付きで読み取るパースヘルパ。
なぜ: `common.settings` 以外で `os.getenv` と例外ガードを書かずに済ませるため。
"""

from __future__ import annotations

import os
from typing import Optional

_TRUE_WORDS = frozenset({"true", "t", "yes", "y", "on"})
_FALSE_WORDS = frozenset({"false", "f", "no", "n", "off"})


def env_int(
    name: str, default: Optional[int] = None, *, min_value: Optional[int] = None
) -> Optional[int]:
    """整数の環境変数を読む。

    Parameters
    ----------
    name : str
        環境変数名（例: `LCLIP_MAX_ITERATIONS`）。
    default : Optional[int]
        未設定、または整数として解釈できない場合に返す値。
    min_value : Optional[int]
        下限。読み取った値がこれを下回る場合は下限へ切り上げる。

    Returns
    -------
    Optional[int]
        解釈済みの整数、または `default`。
    """
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        val = int(raw.strip())
    except ValueError:
        return default
    if min_value is not None and val < min_value:
        val = min_value
    return val


def env_bool(name: str, default: bool = False) -> bool:
    """真偽の環境変数を読む（数値 0/1 と true/false 系の語を許容）。"""
    raw = os.getenv(name)
    if raw is None:
        return bool(default)
    word = raw.strip().lower()
    try:
        return int(word) != 0
    except ValueError:
        pass
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    return bool(default)


__all__ = ["env_int", "env_bool"]
