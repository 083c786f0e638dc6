from __future__ import annotations

import logging

import pytest

from common.logging import resolve_level, setup_default_logging


def test_resolve_level_names_and_numbers(monkeypatch: pytest.MonkeyPatch) -> None:
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level(logging.ERROR) == logging.ERROR
    assert resolve_level("nonsense") == logging.INFO
    monkeypatch.setenv("SPLASH_LOG_LEVEL", "WARNING")
    assert resolve_level() == logging.WARNING


def test_setup_respects_existing_handlers() -> None:
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    sentinel = logging.NullHandler()
    root.addHandler(sentinel)
    try:
        setup_default_logging("DEBUG")
        assert root.handlers == before + [sentinel]
        assert root.level == level
    finally:
        root.removeHandler(sentinel)
