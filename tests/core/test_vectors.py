from __future__ import annotations

import dataclasses

import numpy as np
import pytest

from engine.core.vectors import Vector2, Vector3, Vector4


def test_vector3_componentwise_ops() -> None:
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(4.0, -5.0, 0.5)
    assert a + b == Vector3(5.0, -3.0, 3.5)
    assert a - b == Vector3(-3.0, 7.0, 2.5)
    # 同型との積は成分ごと
    assert a * b == Vector3(4.0, -10.0, 1.5)
    assert a * 2 == Vector3(2.0, 4.0, 6.0)
    assert 2 * a == Vector3(2.0, 4.0, 6.0)
    assert a / 2 == Vector3(0.5, 1.0, 1.5)
    assert -a == Vector3(-1.0, -2.0, -3.0)


def test_vector3_dot_cross() -> None:
    x = Vector3(1.0, 0.0, 0.0)
    y = Vector3(0.0, 1.0, 0.0)
    assert x.dot(y) == 0.0
    assert x.cross(y) == Vector3(0.0, 0.0, 1.0)
    assert y.cross(x) == Vector3(0.0, 0.0, -1.0)


def test_vectors_are_immutable_and_unpackable() -> None:
    v = Vector2(0.25, 0.75)
    with pytest.raises(dataclasses.FrozenInstanceError):
        v.x = 1.0  # type: ignore[misc]
    x, y = v
    assert (x, y) == (0.25, 0.75)
    r, g, b, a = Vector4(0.1, 0.2, 0.3, 0.4)
    assert a == 0.4


def test_factories_and_array_conversion() -> None:
    assert Vector2.center() == Vector2(0.5, 0.5)
    assert Vector3.zero() == Vector3(0.0, 0.0, 0.0)
    assert Vector4.one() == Vector4(1.0, 1.0, 1.0, 1.0)

    arr = Vector3(1.0, 2.0, 3.0).to_array()
    assert arr.dtype == np.float32
    assert Vector3.from_array(arr) == Vector3(1.0, 2.0, 3.0)
    assert Vector4.from_array(np.array([1, 2, 3, 4])) == Vector4(1.0, 2.0, 3.0, 4.0)
