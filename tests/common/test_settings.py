from __future__ import annotations

import pytest

from common import settings
from common.env import env_float, env_int, env_str


def test_defaults() -> None:
    cfg = settings.get()
    assert cfg.SPLASH_DURATION == 1.0
    assert cfg.SPLASH_SETTLE_DELAY == 1.0
    assert cfg.SPLASH_EASING == "ease_in_out"
    assert cfg.SPLASH_CIRCLE_SEGMENTS == 64
    assert cfg.SPLASH_MAX_PENDING is None


def test_reload_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SPLASH_DURATION", "0.3")
    monkeypatch.setenv("SPLASH_SETTLE_DELAY", "2")
    monkeypatch.setenv("SPLASH_EASING", " linear ")
    monkeypatch.setenv("SPLASH_CIRCLE_SEGMENTS", "128")
    monkeypatch.setenv("SPLASH_MAX_PENDING", "4")
    settings.reload_from_env()
    cfg = settings.get()
    assert cfg.SPLASH_DURATION == 0.3
    assert cfg.SPLASH_SETTLE_DELAY == 2.0
    assert cfg.SPLASH_EASING == "linear"
    assert cfg.SPLASH_CIRCLE_SEGMENTS == 128
    assert cfg.SPLASH_MAX_PENDING == 4


def test_invalid_and_out_of_range_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SPLASH_DURATION", "-1")
    monkeypatch.setenv("SPLASH_SETTLE_DELAY", "nan")
    monkeypatch.setenv("SPLASH_CIRCLE_SEGMENTS", "2")
    monkeypatch.setenv("SPLASH_MAX_PENDING", "abc")
    settings.reload_from_env()
    cfg = settings.get()
    assert cfg.SPLASH_DURATION == 0.0
    assert cfg.SPLASH_SETTLE_DELAY == 1.0
    assert cfg.SPLASH_CIRCLE_SEGMENTS == 3
    assert cfg.SPLASH_MAX_PENDING is None


def test_env_helpers(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("X_INT", " 7 ")
    monkeypatch.setenv("X_FLOAT", "inf")
    monkeypatch.setenv("X_STR", "   ")
    assert env_int("X_INT", 0) == 7
    assert env_int("X_MISSING", None) is None
    assert env_float("X_FLOAT", 0.5) == 0.5
    assert env_str("X_STR", "dflt") == "dflt"
