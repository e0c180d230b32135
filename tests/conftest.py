"""共通フィクスチャ。

- 単位窓 [-1, 1] x [-1, 1]
- 設定スナップショットの差し替え
"""

from __future__ import annotations

import numpy as np
import pytest

from common import settings
from geometry import Window


@pytest.fixture(scope="session", autouse=True)
def np_seed() -> None:
    """NumPy の乱数を固定。"""
    np.random.seed(12345)


@pytest.fixture()
def unit_window() -> Window:
    return Window(-1.0, 1.0, -1.0, 1.0)


@pytest.fixture()
def ten_window() -> Window:
    return Window(0.0, 10.0, 0.0, 10.0)


@pytest.fixture()
def cfg(monkeypatch: pytest.MonkeyPatch):
    """設定オブジェクトを返す。属性の変更は `monkeypatch.setattr` 経由で行い、テスト後に戻す。"""
    current = settings.get()

    class _Patcher:
        def set(self, name: str, value: object) -> None:
            monkeypatch.setattr(current, name, value)

    return _Patcher()
