import pytest

hypothesis = pytest.importorskip("hypothesis", reason="hypothesis is a dev optional dependency")
from hypothesis import given, settings, strategies as st  # type: ignore

from engine.core.vectors import Vector2, Vector3
from engine.ui.component import compose_ui_transform

unit = st.floats(0.0, 1.0)
positive = st.floats(0.1, 4.0)
angle = st.floats(-180.0, 180.0)


@settings(max_examples=60, deadline=None)
@given(
    aspect=positive,
    bs=st.tuples(positive, positive, positive),
    pos=st.tuples(unit, unit, st.floats(-1.0, 1.0)),
    s=st.tuples(positive, positive, positive),
    rot=st.tuples(angle, angle, angle),
    sp=st.tuples(unit, unit),
    rp=st.tuples(unit, unit),
)
def test_rotation_pivot_stays_fixed(aspect, bs, pos, s, rot, sp, rp):
    args = (0.866, aspect, Vector3(*bs), Vector3(*pos), Vector3(*s))
    pivots = (Vector2(0.5, 0.5), Vector2(*sp), Vector2(*rp))
    plain = compose_ui_transform(*args, Vector3.zero(), *pivots)
    rotated = compose_ui_transform(*args, Vector3(*rot), *pivots)

    # ノード中心からのピボット位置（スケール後の実寸）
    final_w = 2 * 0.866 * aspect * bs[0] * s[0]
    final_h = 2 * 0.866 * bs[1] * s[1]
    p = Vector3((rp[0] - 0.5) * final_w, (0.5 - rp[1]) * final_h, 0.0)
    before = plain.position + p
    after = rotated.position + rotated.orientation.act(p)
    assert list(after) == pytest.approx(list(before), abs=1e-9)


@settings(max_examples=60, deadline=None)
@given(
    aspect=positive,
    pos=st.tuples(unit, unit, st.floats(-1.0, 1.0)),
    s=st.tuples(positive, positive, positive),
    rot=st.tuples(angle, angle, angle),
)
def test_center_pivots_do_not_move_position(aspect, pos, s, rot):
    c = Vector2(0.5, 0.5)
    base = compose_ui_transform(0.866, aspect, Vector3.one(), Vector3(*pos), Vector3.one(), Vector3.zero(), c, c, c)
    moved = compose_ui_transform(0.866, aspect, Vector3.one(), Vector3(*pos), Vector3(*s), Vector3(*rot), c, c, c)
    assert list(moved.position) == pytest.approx(list(base.position), abs=1e-12)
