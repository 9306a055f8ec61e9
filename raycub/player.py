"""Player position, key state and movement on the map grid."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum

_BLOCKING = frozenset("1D")


class Key(IntEnum):
    """Key symbols the game reacts to."""

    SPACEBAR = 0x20
    A = 0x61
    D = 0x64
    S = 0x73
    W = 0x77
    ESC = 0xFF1B
    LEFT = 0xFF51
    RIGHT = 0xFF53


_HELD_KEYS = {
    Key.W: "forward",
    Key.A: "left",
    Key.S: "back",
    Key.D: "right",
    Key.LEFT: "turn_left",
    Key.RIGHT: "turn_right",
}


@dataclass
class Player:
    """Position on the grid and view direction in degrees."""

    x: float
    y: float
    pov: float = 0.0


@dataclass
class Controls:
    """Which movement keys are held, plus pending quit and door requests."""

    forward: bool = False
    left: bool = False
    back: bool = False
    right: bool = False
    turn_left: bool = False
    turn_right: bool = False
    quit_requested: bool = False
    door_requested: bool = False

    def key_on(self, key: int) -> None:
        """Record a key press."""
        if key == Key.ESC:
            self.quit_requested = True
        attr = _HELD_KEYS.get(key)
        if attr is not None:
            setattr(self, attr, True)
        if key == Key.SPACEBAR:
            self.door_requested = True

    def key_off(self, key: int) -> None:
        """Record a key release."""
        if key == Key.ESC:
            self.quit_requested = True
        attr = _HELD_KEYS.get(key)
        if attr is not None:
            setattr(self, attr, False)


def _walkable(grid: Sequence[str], x: float, y: float) -> bool:
    row, col = int(y), int(x)
    if not 0 <= row < len(grid):
        return False
    line = grid[row]
    if not 0 <= col < len(line):
        return False
    return line[col] not in _BLOCKING


def move(player: Player, grid: Sequence[str], angle: float, speed: float) -> None:
    """Move the player ``speed`` along ``angle`` (radians), axis by axis.

    Each axis moves only if the cell it leads into is not a wall (``1``)
    or a door (``D``); cells outside the grid block movement.
    """
    new_x = player.x + math.cos(angle) * speed
    if _walkable(grid, new_x, player.y):
        player.x = new_x
    new_y = player.y + math.sin(angle) * speed
    if _walkable(grid, player.x, new_y):
        player.y = new_y


def step(
    player: Player,
    controls: Controls,
    grid: Sequence[str],
    speed: float,
    sensitivity: float,
    mouse_x: int,
    screen_width: int,
) -> None:
    """Apply one frame of held keys and mouse position to the player."""
    for active, offset in (
        (controls.forward, 0),
        (controls.left, -90),
        (controls.back, -180),
        (controls.right, 90),
    ):
        if active:
            move(player, grid, math.radians(player.pov + offset), speed)
    half = screen_width // 2
    if controls.turn_left or mouse_x < half:
        player.pov -= sensitivity
    if controls.turn_right or mouse_x > half:
        player.pov += sensitivity