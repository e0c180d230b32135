from __future__ import annotations

import pytest

from common import settings
from common.env import env_bool, env_int

# What this tests
# - env_int: 未設定/不正値は既定値、下限丸め。
# - env_bool: 数値と語の両方を解釈、不明語は既定値。
# - reload_from_env: LCLIP_* が設定へ反映され、反復上限は 4 未満にならない。


def test_env_int_default_invalid_and_min(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LCLIP_TEST_INT", raising=False)
    assert env_int("LCLIP_TEST_INT", 7) == 7

    monkeypatch.setenv("LCLIP_TEST_INT", "abc")
    assert env_int("LCLIP_TEST_INT", 7) == 7

    monkeypatch.setenv("LCLIP_TEST_INT", " 12 ")
    assert env_int("LCLIP_TEST_INT", 7) == 12

    monkeypatch.setenv("LCLIP_TEST_INT", "-3")
    assert env_int("LCLIP_TEST_INT", 7, min_value=0) == 0


@pytest.mark.parametrize(
    "raw, expected",
    [("1", True), ("0", False), ("yes", True), ("OFF", False), (" true ", True), ("n", False)],
)
def test_env_bool_words_and_numbers(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("LCLIP_TEST_BOOL", raw)
    assert env_bool("LCLIP_TEST_BOOL", not expected) is expected


def test_env_bool_unknown_word_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LCLIP_TEST_BOOL", "maybe")
    assert env_bool("LCLIP_TEST_BOOL", True) is True
    monkeypatch.delenv("LCLIP_TEST_BOOL")
    assert env_bool("LCLIP_TEST_BOOL") is False


def test_reload_from_env_applies_lclip_vars(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LCLIP_MAX_ITERATIONS", "16")
    monkeypatch.setenv("LCLIP_CHECK_WINDOW", "1")
    monkeypatch.setenv("LCLIP_USE_NUMBA", "false")
    try:
        settings.reload_from_env()
        s = settings.get()
        assert s.CLIP_MAX_ITERATIONS == 16
        assert s.CHECK_WINDOW is True
        assert s.USE_NUMBA is False

        monkeypatch.setenv("LCLIP_MAX_ITERATIONS", "1")
        settings.reload_from_env()
        assert settings.get().CLIP_MAX_ITERATIONS == settings.MIN_CLIP_ITERATIONS
    finally:
        monkeypatch.delenv("LCLIP_MAX_ITERATIONS")
        monkeypatch.delenv("LCLIP_CHECK_WINDOW")
        monkeypatch.delenv("LCLIP_USE_NUMBA")
        settings.reload_from_env()


def test_defaults_without_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("LCLIP_MAX_ITERATIONS", "LCLIP_CHECK_WINDOW", "LCLIP_USE_NUMBA"):
        monkeypatch.delenv(name, raising=False)
    settings.reload_from_env()
    s = settings.get()
    assert s.CLIP_MAX_ITERATIONS == 8
    assert s.CHECK_WINDOW is False
    assert s.USE_NUMBA is True
