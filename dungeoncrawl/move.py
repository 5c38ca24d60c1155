"""Player movement commands."""

from __future__ import annotations

from dataclasses import replace

from . import text
from .console import Console, InputState
from .model import Coord, GameMap

_STEPS = {
    "w": (0, 1),
    "s": (0, -1),
    "a": (-1, 0),
    "d": (1, 0),
}


def next_location(location: Coord, command: str) -> Coord:
    """The position one step from ``location`` in the direction of ``command``.

    Raises ValueError for a key that is not a direction.
    """
    try:
        dx, dy = _STEPS[command.lower()]
    except KeyError:
        raise ValueError(f"invalid direction: {command!r}") from None
    return replace(location, x=location.x + dx, y=location.y + dy)


def is_valid_location(location: Coord, game_map: GameMap, console: Console) -> bool:
    """Whether the player may stand at ``location``; explains when not."""
    if not game_map.in_bounds(location.x, location.y):
        console.write(text.MOVE_VALID_1)
        return False
    if game_map.tile(location.x, location.y) == "x":
        console.write(text.MOVE_VALID_2)
        return False
    return True


def describe_moves(console: Console) -> None:
    """Explain the movement keys."""
    console.print_slow(text.MOVE_DESCRIPTION, 100)


def read_command(console: Console) -> str:
    """Prompt for and return a movement key."""
    console.write(text.MOVE_INPUT)
    return console.read_input(InputState.MOVE)