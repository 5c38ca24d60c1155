"""Core data: coordinates, rooms, the player and enemies."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Union

ESCAPE_KEY_COUNT = 14
"""Number of keys needed to open the exit."""

MAX_DOOR_ID = 31

Tile = Union[str, int]
"""A map tile: a one-character string, or an integer door id (0..31)."""


@dataclass(frozen=True)
class Coord:
    """A position on a room's coordinate plane; y grows upwards."""

    x: int
    y: int


@dataclass
class GameMap:
    """A rectangular room.

    ``rows`` are given top row first; ``(0, 0)`` is the bottom-left tile.
    """

    name: str
    rows: list[list[Tile]]
    revealed: set[Coord] = field(default_factory=set)

    def __post_init__(self) -> None:
        self.rows = [list(row) for row in self.rows]
        if not self.rows or not self.rows[0]:
            raise ValueError("a map needs at least one tile")
        if any(len(row) != len(self.rows[0]) for row in self.rows):
            raise ValueError("all map rows must have the same length")

    @property
    def width(self) -> int:
        return len(self.rows[0])

    @property
    def height(self) -> int:
        return len(self.rows)

    def in_bounds(self, x: int, y: int) -> bool:
        """Whether (x, y) lies inside the room."""
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside {self.name!r}")

    def tile(self, x: int, y: int) -> Tile:
        """The tile at (x, y)."""
        self._check(x, y)
        return self.rows[self.height - 1 - y][x]

    def set_tile(self, x: int, y: int, value: Tile) -> None:
        """Replace the tile at (x, y)."""
        self._check(x, y)
        self.rows[self.height - 1 - y][x] = value

    def is_revealed(self, x: int, y: int) -> bool:
        """Whether the player has seen the tile at (x, y)."""
        return Coord(x, y) in self.revealed

    def reveal(self, x: int, y: int) -> None:
        """Mark the tile at (x, y) as seen."""
        self._check(x, y)
        self.revealed.add(Coord(x, y))

    def doors(self) -> Iterator[tuple[int, Coord]]:
        """Yield ``(door_id, position)`` for every door, column by column."""
        for x in range(self.width):
            for y in range(self.height):
                tile = self.tile(x, y)
                if isinstance(tile, int) and 0 <= tile <= MAX_DOOR_ID:
                    yield tile, Coord(x, y)


@dataclass
class Player:
    """The adventurer's state."""

    hp: int = 10
    mp: int = 10
    atk: int = 3
    defense: int = 0
    keys: int = 0
    current_map: Optional[GameMap] = None
    location: Coord = Coord(1, 1)
    game_over: bool = False


@dataclass
class Enemy:
    """A monster met in battle; the defaults describe the goblin."""

    atk: int = 5
    mp: int = 0
    hp: int = 2
    defense: int = 0