from __future__ import annotations

import pytest

import api
from api import S, SplashAnimation, splash_shape
from engine.core.mask_path import ArcPath, PolygonPath, Rect
from shapes.registry import unregister


def test_public_surface_exports() -> None:
    for name in api.__all__:
        assert hasattr(api, name), name
    assert api.__version__ == "2026.10"


def test_path_accepts_every_animation_form() -> None:
    a = S.path((200, 100), 0.5, "left_to_right")
    b = S.path(Rect(200, 100), 0.5, api.SplashKind.LEFT_TO_RIGHT)
    c = S.path((200, 100), 0.5, SplashAnimation.left_to_right())
    assert a == b == c
    assert isinstance(a, PolygonPath)


def test_attribute_dispatch_to_registered_shapes() -> None:
    c = S.circle((100, 100), 1.0)
    assert isinstance(c, ArcPath)
    assert c.radius == pytest.approx(70.7106781, rel=1e-6)

    w = S.angle((100, 100), 0.5, angle=45)
    assert w == S.path((100, 100), 0.5, "angle:45")


def test_unknown_attribute_raises() -> None:
    with pytest.raises(AttributeError):
        S.diamond  # noqa: B018
    with pytest.raises(AttributeError):
        S._private  # noqa: B018


def test_custom_shape_is_reachable_then_dropped() -> None:
    @splash_shape("full_flash")
    def full_flash(rect: Rect, progress: float) -> PolygonPath:
        w, h = rect.width, rect.height
        return PolygonPath.from_points((0, 0), (w, 0), (w, h), (0, h))

    try:
        assert "full_flash" in S.list_shapes()
        assert S.coverage(S.full_flash((10, 10), 0.0), (10, 10)) == pytest.approx(1.0)
    finally:
        unregister("full_flash")

    with pytest.raises(AttributeError):
        S.full_flash((10, 10), 0.0)
    with pytest.raises(AttributeError):
        S.full_flash  # noqa: B018


def test_coverage_via_api() -> None:
    path = S.path((200, 100), 0.25, "bottom_to_top")
    assert S.coverage(path, (200, 100)) == pytest.approx(0.25)
