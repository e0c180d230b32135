"""
どこで: `clipping` のレジストリ層（関数専用）。
何を: `@algorithm` デコレータによる登録と取得/一覧/検査を提供（キーは正規化）。
なぜ: クリッピングアルゴリズムを名前で解決できるようにし、`api` から一貫 API で選択させるため。

公開 API 概要:
- `algorithm`（デコレータ）: `(LineSegment, Window) -> LineSegment | None` の関数を登録
- `get_algorithm(name)` / `list_algorithms()` / `is_algorithm_registered(name)`
- `unregister_algorithm(name)`: テスト用の登録解除

キー正規化:
- `"CohenSutherland"` / `"cohen-sutherland"` / `"Cohen-Sutherland"` / `"COHEN_SUTHERLAND"`
  はいずれも `"cohen_sutherland"` になる（連続する `_` は 1 つに畳む）。
"""

from __future__ import annotations

import inspect
import re
from typing import Any, Callable, Optional

from geometry.primitives import LineSegment, Window

ClipFn = Callable[[LineSegment, Window], Optional[LineSegment]]

_CAMEL_HEAD = re.compile(r"(.)([A-Z][a-z]+)")
_CAMEL_TAIL = re.compile(r"([a-z0-9])([A-Z])")
_UNDERSCORES = re.compile(r"_+")


def normalize_key(name: str) -> str:
    """アルゴリズム名を snake_case のキーへ正規化する。

    例外:
    - TypeError: `name` が str でない場合。
    - ValueError: 空文字、または区切り文字だけの場合。
    """
    if not isinstance(name, str):
        raise TypeError("アルゴリズム名は str である必要があります")
    key = name.replace("-", "_")
    key = _CAMEL_TAIL.sub(r"\1_\2", _CAMEL_HEAD.sub(r"\1_\2", key))
    key = _UNDERSCORES.sub("_", key.lower())
    if key.strip("_") == "":
        raise ValueError(f"アルゴリズム名は空であってはなりません: {name!r}")
    return key


class AlgorithmRegistry:
    """名前 → クリッピング関数の対応表。"""

    def __init__(self) -> None:
        self._fns: dict[str, ClipFn] = {}

    def register(self, fn: ClipFn, name: str | None = None) -> ClipFn:
        """関数を登録して返す。同一関数の再登録は許容し、別関数の同名登録は拒否する。"""
        if not inspect.isfunction(fn):
            raise TypeError(f"@algorithm は関数のみ登録可能です: got {fn!r}")
        key = normalize_key(name if name else fn.__name__)
        if key in self._fns and self._fns[key] is not fn:
            raise ValueError(f"'{key}' は既に登録されています")
        self._fns[key] = fn
        return fn

    def get(self, name: str) -> ClipFn:
        key = normalize_key(name)
        if key not in self._fns:
            raise KeyError(f"'{name}' は登録されていません")
        return self._fns[key]

    def names(self) -> list[str]:
        return sorted(self._fns)

    def __contains__(self, name: str) -> bool:
        return normalize_key(name) in self._fns

    def unregister(self, name: str) -> None:
        """登録を解除する（未登録名は無視）。"""
        self._fns.pop(normalize_key(name), None)


_algorithm_registry = AlgorithmRegistry()


def algorithm(arg: Any | None = None, /, name: str | None = None):
    """クリッピング関数を登録するデコレータ。

    使用例:
    - `@algorithm` / `@algorithm()`                  → 関数名から自動推論。
    - `@algorithm("custom")` / `@algorithm(name="custom")` → 明示名で登録。

    例外:
    - TypeError: 関数以外を登録しようとした場合。
    - ValueError: 別の関数が同名で登録済みの場合。
    """
    # 直付け (@algorithm)
    if inspect.isfunction(arg) and name is None:
        return _algorithm_registry.register(arg)

    # 位置引数で名前を渡した (@algorithm("name"))
    resolved = arg if isinstance(arg, str) and name is None else name

    def _decorator(obj: Any):
        return _algorithm_registry.register(obj, resolved)

    return _decorator


def get_algorithm(name: str) -> ClipFn:
    """登録されたクリッピング関数を取得。

    例外:
    - KeyError: 未登録名の場合。
    """
    return _algorithm_registry.get(name)


def list_algorithms() -> list[str]:
    """登録済みアルゴリズム名をソートして返す。"""
    return _algorithm_registry.names()


def is_algorithm_registered(name: str) -> bool:
    """名前が登録済みかを返す。"""
    return name in _algorithm_registry


def unregister_algorithm(name: str) -> None:
    _algorithm_registry.unregister(name)


__all__ = [
    "ClipFn",
    "AlgorithmRegistry",
    "normalize_key",
    "algorithm",
    "get_algorithm",
    "list_algorithms",
    "is_algorithm_registered",
    "unregister_algorithm",
]
