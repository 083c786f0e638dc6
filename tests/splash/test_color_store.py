from __future__ import annotations

import pytest

from engine.splash.color_store import ColorStore
from engine.splash.sequencer import SplashSequencer


def test_set_color_publishes_every_time() -> None:
    store = ColorStore("red")
    seen: list[str] = []
    store.subscribe(seen.append)

    store.set_color("blue")
    store.set_color("blue")
    store.color = "green"

    assert seen == ["blue", "blue", "green"]
    assert store.color == "green"


def test_subscribe_does_not_replay_current_value() -> None:
    store = ColorStore("red")
    seen: list[str] = []
    store.subscribe(seen.append)
    assert seen == []


def test_unsubscribe_stops_delivery() -> None:
    store = ColorStore("red")
    seen: list[str] = []
    unsubscribe = store.subscribe(seen.append)
    unsubscribe()
    unsubscribe()
    store.set_color("blue")
    assert seen == []
    assert len(store) == 0


def test_subscriber_errors_propagate() -> None:
    store = ColorStore("red")

    def _boom(color: str) -> None:
        raise RuntimeError(color)

    store.subscribe(_boom)
    with pytest.raises(RuntimeError):
        store.set_color("blue")


def test_sequencer_bind_enqueues_published_colors() -> None:
    store = ColorStore("red")
    seq = SplashSequencer(store.color, max_pending=None)
    unbind = seq.bind(store)

    store.set_color("blue")
    store.set_color("green")
    assert [layer.color for layer in seq.layers] == ["blue", "green"]

    unbind()
    store.set_color("yellow")
    assert len(seq) == 2
