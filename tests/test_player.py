import math

import pytest

from raycub.player import Controls, Key, Player, move, step

OPEN = ["11111", "10001", "10001", "10001", "11111"]
BOX = ["111", "101", "111"]


def test_key_on_and_off():
    controls = Controls()
    controls.key_on(Key.W)
    controls.key_on(Key.LEFT)
    assert controls.forward and controls.turn_left
    controls.key_off(Key.W)
    assert controls.forward is False
    assert controls.turn_left is True


def test_escape_requests_quit():
    controls = Controls()
    controls.key_on(Key.ESC)
    assert controls.quit_requested is True


def test_spacebar_requests_door_on_press_only():
    controls = Controls()
    controls.key_off(Key.SPACEBAR)
    assert controls.door_requested is False
    controls.key_on(Key.SPACEBAR)
    assert controls.door_requested is True


def test_raw_keysym_accepted():
    controls = Controls()
    controls.key_on(int(Key.D))
    assert controls.right is True


def test_move_in_open_space():
    player = Player(1.5, 1.5)
    move(player, OPEN, 0.0, 0.1)
    assert player.x == pytest.approx(1.5 + 0.1)
    assert player.y == pytest.approx(1.5)


def test_move_blocked_by_wall():
    player = Player(1.5, 1.5)
    move(player, BOX, 0.0, 0.6)
    assert (player.x, player.y) == (1.5, 1.5)


def test_move_blocked_by_door():
    player = Player(1.5, 1.5)
    move(player, ["1111", "10D1", "1111"], 0.0, 0.6)
    assert player.x == 1.5


def test_move_slides_along_wall():
    grid = ["1111", "1001", "1001", "1111"]
    player = Player(1.5, 1.5)
    move(player, grid, math.radians(135), 0.8)
    assert player.x == 1.5
    assert player.y > 1.5


def test_step_mouse_centered_keeps_view():
    player = Player(2.5, 2.5, pov=10.0)
    step(player, Controls(), OPEN, 0.1, 2.0, 400, 800)
    assert player.pov == 10.0
    assert (player.x, player.y) == (2.5, 2.5)


def test_step_turning():
    player = Player(2.5, 2.5)
    step(player, Controls(turn_left=True), OPEN, 0.1, 2.0, 400, 800)
    assert player.pov == -2.0
    step(player, Controls(), OPEN, 0.1, 2.0, 500, 800)
    assert player.pov == 0.0


def test_step_forward_follows_view():
    player = Player(2.5, 2.5, pov=90.0)
    step(player, Controls(forward=True), OPEN, 0.1, 2.0, 400, 800)
    assert player.x == pytest.approx(2.5)
    assert player.y == pytest.approx(2.5 + 0.1)


def test_step_forward_and_back_cancel():
    player = Player(2.5, 2.5)
    step(player, Controls(forward=True, back=True), OPEN, 0.1, 2.0, 400, 800)
    assert player.x == pytest.approx(2.5)
    assert player.y == pytest.approx(2.5)