import math

import pytest

from sectorcaster.player import Key, Player


def make_player(angle=0.0):
    return Player(40.0, 40.0, 4800.0, angle)


def displacement(player, start=(40.0, 40.0)):
    return player.position.x - start[0], player.position.y - start[1]


def test_constructor_sets_state():
    p = Player(1.0, 2.0, 3.0, 0.5)
    assert (p.position.x, p.position.y, p.z, p.angle) == (1.0, 2.0, 3.0, 0.5)


def test_no_keys_leaves_player_unchanged():
    p = make_player(1.0)
    p.update(set(), 0.5)
    assert (p.position.x, p.position.y, p.z, p.angle) == (40.0, 40.0, 4800.0, 1.0)


@pytest.mark.parametrize("angle", [0.0, math.pi / 3, -2.0])
@pytest.mark.parametrize("dt", [0.1, 1 / 60])
def test_forward_moves_along_heading(angle, dt):
    p = make_player(angle)
    p.update({Key.FORWARD}, dt)
    dx, dy = displacement(p)
    assert math.hypot(dx, dy) == pytest.approx(150.0 * dt)
    assert math.atan2(dy, dx) == pytest.approx(math.atan2(math.sin(angle), math.cos(angle)))


def test_backward_is_opposite_of_forward():
    ahead = make_player(0.7)
    behind = make_player(0.7)
    ahead.update({Key.FORWARD}, 0.2)
    behind.update({Key.BACKWARD}, 0.2)
    fx, fy = displacement(ahead)
    bx, by = displacement(behind)
    assert (fx, fy) == (pytest.approx(-bx), pytest.approx(-by))


def test_forward_and_backward_cancel():
    p = make_player(1.1)
    p.update({Key.FORWARD, Key.BACKWARD}, 0.3)
    assert p.position.x == pytest.approx(40.0)
    assert p.position.y == pytest.approx(40.0)


def test_strafe_left_is_perpendicular_to_heading():
    angle = 0.4
    p = make_player(angle)
    p.update({Key.STRAFE_LEFT}, 0.25)
    dx, dy = displacement(p)
    dot = dx * math.cos(angle) + dy * math.sin(angle)
    assert dot == pytest.approx(0.0, abs=1e-9)
    assert math.hypot(dx, dy) == pytest.approx(150.0 * 0.25)
    cross = math.cos(angle) * dy - math.sin(angle) * dx
    assert cross > 0


def test_strafe_right_opposes_strafe_left():
    left = make_player(2.0)
    right = make_player(2.0)
    left.update({Key.STRAFE_LEFT}, 0.1)
    right.update({Key.STRAFE_RIGHT}, 0.1)
    lx, ly = displacement(left)
    rx, ry = displacement(right)
    assert (lx, ly) == (pytest.approx(-rx), pytest.approx(-ry))


def test_rise_and_sink_change_height():
    up = make_player()
    down = make_player()
    up.update({Key.RISE}, 0.01)
    down.update({Key.SINK}, 0.01)
    assert up.z == pytest.approx(5300.0)
    assert down.z == pytest.approx(4300.0)


def test_turning_changes_angle():
    left = make_player(1.0)
    right = make_player(1.0)
    left.update({Key.TURN_LEFT}, 0.5)
    right.update({Key.TURN_RIGHT}, 0.5)
    assert left.angle == pytest.approx(3.0)
    assert right.angle == pytest.approx(-1.0)


def test_movement_uses_angle_before_turning():
    p = make_player(0.0)
    p.update({Key.FORWARD, Key.TURN_LEFT}, 0.1)
    assert p.position.y == pytest.approx(40.0)
    assert p.position.x == pytest.approx(55.0)
    assert p.angle == pytest.approx(0.4)


def test_keys_may_be_any_container():
    p = make_player(0.0)
    p.update([Key.RISE], 0.02)
    assert p.z == pytest.approx(5800.0)