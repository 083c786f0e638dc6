from __future__ import annotations

import numpy as np
import pytest

from engine.core.geometry import Geometry


def test_from_lines_builds_offsets() -> None:
    tri = [(0, 0), (1, 0), (0, 1), (0, 0)]
    quad = np.array([[0, 0], [2, 0], [2, 2], [0, 2], [0, 0]], dtype=np.float64)
    g = Geometry.from_lines([tri, quad])
    coords, offsets = g.as_arrays()

    assert coords.shape == (9, 2)
    assert coords.dtype == np.float32
    assert offsets.tolist() == [0, 4, 9]
    assert len(g) == 2
    assert g.n_vertices == 9


def test_empty_geometry() -> None:
    g = Geometry.from_lines([])
    assert g.is_empty
    assert g.as_arrays()[1].tolist() == [0]
    assert len(g) == 0
    assert g.bounds() is None


def test_as_arrays_view_is_read_only() -> None:
    g = Geometry.from_lines([[(0, 0), (1, 1)]])
    coords, _ = g.as_arrays()
    with pytest.raises(ValueError):
        coords[0, 0] = 5.0
    copied, _ = g.as_arrays(copy=True)
    copied[0, 0] = 5.0
    assert g.coords[0, 0] == 0.0


def test_invalid_shapes_raise() -> None:
    with pytest.raises(ValueError):
        Geometry.from_lines([[(0, 0, 0), (1, 1, 1)]])
    with pytest.raises(ValueError):
        Geometry(np.zeros((2, 2)), np.array([1, 2]))
    with pytest.raises(ValueError):
        Geometry(np.zeros((2, 2)), np.array([0, 3]))


def test_translate_and_bounds() -> None:
    g = Geometry.from_lines([[(0, 0), (10, 0), (10, 5)]]).translate(3, 4)
    assert g.bounds() == pytest.approx((3.0, 4.0, 13.0, 9.0))


def test_concat_shifts_offsets() -> None:
    a = Geometry.from_lines([[(0, 0), (1, 0)]])
    b = Geometry.from_lines([[(0, 1), (1, 1), (2, 1)]])
    c = a + b
    assert c.as_arrays()[1].tolist() == [0, 2, 5]
    assert [line.shape[0] for line in c.lines()] == [2, 3]
    assert (Geometry.empty() + a).n_vertices == 2
