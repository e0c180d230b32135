"""
どこで: `common.settings`
何を: クリッピング処理の挙動を切り替える設定値を一元管理し、起動時に環境変数から読み込む。
なぜ: 反復上限・窓の検証・Numba 利用有無をテストから差し替えやすくするため。

環境変数:
- `LCLIP_MAX_ITERATIONS`: Cohen-Sutherland の反復上限（既定 8、下限 4）。
- `LCLIP_CHECK_WINDOW`: 真なら `clip_line`/`clip_segments` が窓の上下限を事前検証する。
- `LCLIP_USE_NUMBA`: 偽ならバッチ処理のカーネルを純 Python で実行する。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_int

# 4 本の境界それぞれで高々 1 回ずつ刻むため、これ未満にはしない
MIN_CLIP_ITERATIONS = 4


@dataclass
class _Settings:
    # Cohen-Sutherland
    CLIP_MAX_ITERATIONS: int = 8
    CHECK_WINDOW: bool = False

    # Batch
    USE_NUMBA: bool = True


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込する。

    - int は `env_int`（下限丸めあり）、bool は `env_bool` を使用。
    """
    _settings.CLIP_MAX_ITERATIONS = (
        env_int("LCLIP_MAX_ITERATIONS", 8, min_value=MIN_CLIP_ITERATIONS) or 8
    )
    _settings.CHECK_WINDOW = env_bool("LCLIP_CHECK_WINDOW", False)
    _settings.USE_NUMBA = env_bool("LCLIP_USE_NUMBA", True)


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings", "MIN_CLIP_ITERATIONS"]
