"""The dungeon's rooms, the doors between them and map rendering."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from .model import ESCAPE_KEY_COUNT, Coord, GameMap, Player, Tile

log = logging.getLogger(__name__)

Endpoint = tuple[GameMap, Coord]


@dataclass
class DoorLink:
    """The two ends of a door: the room on each side and the door tile there."""

    door: int
    ends: list[Optional[Endpoint]] = field(default_factory=lambda: [None, None])


@dataclass
class World:
    """All rooms of the dungeon and the door links found between them."""

    maps: list[GameMap]
    links: dict[int, DoorLink] = field(init=False, default_factory=dict)

    def __post_init__(self) -> None:
        for game_map in self.maps:
            self._register(game_map)
        for link in self.links.values():
            log.debug(
                "door %d: %s",
                link.door,
                ", ".join(
                    f"{end[0].name} ({end[1].x}, {end[1].y})"
                    for end in link.ends
                    if end is not None
                ),
            )

    def _register(self, game_map: GameMap) -> None:
        for door, position in game_map.doors():
            link = self.links.get(door)
            if link is None:
                link = self.links[door] = DoorLink(door)
                side = 0
            else:
                side = 1
            link.ends[side] = (game_map, position)

    def destination(self, current: GameMap, door: int) -> Optional[Endpoint]:
        """The room and position reached through ``door`` from ``current``.

        Returns None when the door leads nowhere.
        """
        link = self.links.get(door)
        if link is None:
            return None
        first = link.ends[0]
        side = 1 if first is not None and first[0] is current else 0
        return link.ends[side]

    def map_named(self, name: str) -> GameMap:
        """The room called ``name``; raises KeyError if there is none."""
        for game_map in self.maps:
            if game_map.name == name:
                return game_map
        raise KeyError(name)


def create_map(name: str, rows: Sequence[Sequence[Tile]]) -> GameMap:
    """Build a room from rows given top row first."""
    return GameMap(name, [list(row) for row in rows])


_ROOMS: tuple[tuple[str, list[list[Tile]]], ...] = (
    (
        "Kitchen",
        [
            [*"xxx", 0, *"xxx"],
            [*"x00000x"],
            [*"x00000x"],
            [*"x00K00x"],
            [*"x00000x"],
            [*"x00000x"],
            [*"xxxxxxx"],
        ],
    ),
    (
        "Main Hole",
        [
            [*"xxx", 3, *"xxx"],
            [*"x000xKx"],
            [*"x0xxx0x"],
            [1, *"00?00", 2],
            [*"xx0xx0x"],
            [*"xK00x0x"],
            [*"xxx", 0, *"xxx"],
        ],
    ),
    (
        "Safe Room",
        [
            [*"xxxxxxx"],
            [*"xK0000x"],
            [*"xK0000x"],
            [*"xK0000", 1],
            [*"xK0000x"],
            [*"xK0000x"],
            [*"xxxxxxx"],
        ],
    ),
    (
        "Bedroom",
        [
            [*"xxxxxxx"],
            [*"xKxKxKx"],
            [*"x0x0x0x"],
            [2, *"00000x"],
            [*"x0x0x0x"],
            [*"xKxKxKx"],
            [*"xxxxxxx"],
        ],
    ),
    (
        "Exit Room",
        [
            [*"xxxxxxx"],
            [*"x00000x"],
            [*"x00000x"],
            [*"x00@00x"],
            [*"x00000x"],
            [*"x00000x"],
            [*"xxx", 3, *"xxx"],
        ],
    ),
)


def build_world() -> World:
    """Create the five rooms of the dungeon, the kitchen first."""
    return World([create_map(name, rows) for name, rows in _ROOMS])


def reveal_nearby(game_map: GameMap, location: Coord) -> None:
    """Reveal the tile at ``location`` and its four neighbours."""
    for dx, dy in ((0, 0), (-1, 0), (0, -1), (1, 0), (0, 1)):
        x, y = location.x + dx, location.y + dy
        if game_map.in_bounds(x, y):
            game_map.reveal(x, y)


_COLORS = {"x": "91", "0": "97", "?": "93", "P": "92", "@": "94", "k": "94"}
_DIM = "90"


def _cell(char: str, y: int, color: bool) -> str:
    if not color:
        return f"{char} "
    code = _COLORS.get(char, _DIM)
    if y == 0:
        code += ";4"
    return f"\x1b[{code}m{char} \x1b[0m"


def _display_char(game_map: GameMap, player: Player, x: int, y: int) -> str:
    if player.location == Coord(x, y):
        return "P"
    if not game_map.is_revealed(x, y):
        return " "
    tile = game_map.tile(x, y)
    return "@" if isinstance(tile, int) else tile


def render_map(player: Player, color: bool = False) -> str:
    """Reveal the player's surroundings and draw the current room with stats."""
    game_map = player.current_map
    if game_map is None:
        raise ValueError("the player is not in any room")
    reveal_nearby(game_map, player.location)

    top = game_map.height - 1
    status = {
        top: f"    Keys {player.keys}/{ESCAPE_KEY_COUNT}",
        top - 1: f"    HP: {player.hp}, MP: {player.mp}",
        top - 2: f"    ATK: {player.atk}, DEF: {player.defense}",
    }
    lines = [game_map.name]
    for y in range(top, -1, -1):
        cells = "".join(
            _cell(_display_char(game_map, player, x, y), y, color)
            for x in range(game_map.width)
        )
        lines.append(cells + status.get(y, ""))
    return "\n".join(lines) + "\n\n"