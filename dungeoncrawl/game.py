"""The game loop and the events that tiles trigger."""

from __future__ import annotations

import argparse
import random
import sys
import time
from typing import Callable, Optional

from . import text
from .battle import Outcome, read_action
from .console import Console, InputState
from .maps import World, build_world, render_map
from .model import ESCAPE_KEY_COUNT, Coord, Enemy, GameMap, Player
from .move import describe_moves, is_valid_location, next_location, read_command

TREASURE_BONUS = 3


class Game:
    """One playthrough: the world, the player and the console they share."""

    def __init__(
        self,
        console: Optional[Console] = None,
        world: Optional[World] = None,
        rng: Optional[random.Random] = None,
        sleep: Callable[[float], None] = time.sleep,
        color: bool = False,
    ) -> None:
        self.console = console if console is not None else Console(sleep=sleep)
        self.world = world if world is not None else build_world()
        self.rng = rng if rng is not None else random.Random()
        self.color = color
        self._sleep = sleep
        self.player = Player(current_map=self.world.maps[0])

    @property
    def _room(self) -> GameMap:
        room = self.player.current_map
        if room is None:
            raise ValueError("the player is not in any room")
        return room

    def _collapse_here(self) -> None:
        location = self.player.location
        self._room.set_tile(location.x, location.y, "0")

    def start(self) -> None:
        """Open the game and wait for the player to search the room."""
        self.console.print_slow(text.GAME_START_1, 100)
        self.console.print_slow(text.GAME_START_2, 100)
        self.console.read_input(InputState.START_END)
        self.console.write(text.GAME_START_3)
        self._sleep(1.0)
        self.console.print_slow(text.GAME_START_4, 1000)
        self.console.write("\n\n")
        self.console.print_slow(text.GAME_START_5, 100)

    def describe(self) -> None:
        """Explain the map symbols and the goal."""
        for line in (
            text.GAME_DESCRIPTION_1,
            text.GAME_DESCRIPTION_2,
            text.GAME_DESCRIPTION_3,
            text.GAME_DESCRIPTION_4,
        ):
            self.console.print_slow(line, 100)

    def random_event(self) -> None:
        """Trigger one random encounter, after which the tile collapses."""
        events = (
            self.treasure_ring,
            self.treasure_armor,
            self.enemy_encounter,
            self.nothing,
        )
        events[self.rng.randrange(len(events))]()
        self._collapse_here()

    def treasure_ring(self) -> None:
        """Find a ring that raises attack."""
        self.console.print_slow(text.RANDOM_EVENT_RING_1, 100)
        self.console.print_slow(text.RANDOM_EVENT_RING_2, 100)
        self.console.print_slow(text.RANDOM_EVENT_RING_3, 10)
        self.player.atk += TREASURE_BONUS
        self.console.print_slow(text.RANDOM_EVENT_RING_4.format(self.player.atk), 100)

    def treasure_armor(self) -> None:
        """Find armour that raises defence."""
        self.console.print_slow(text.RANDOM_EVENT_ARMOR_1, 100)
        self.console.print_slow(text.RANDOM_EVENT_ARMOR_2, 100)
        self.console.print_slow(text.RANDOM_EVENT_ARMOR_3, 10)
        self.player.defense += TREASURE_BONUS
        self.console.print_slow(
            text.RANDOM_EVENT_ARMOR_4.format(self.player.defense), 100
        )

    def enemy_encounter(self) -> None:
        """Fight a goblin until someone wins or the player runs."""
        mob = Enemy()
        self.console.print_slow(text.RANDOM_EVENT_ENEMY_1, 100)
        while True:
            try:
                action = read_action(self.console)
            except ValueError:
                self.console.write(text.RANDOM_EVENT_ENEMY_2 + "\n")
                continue
            outcome = action(self.player, mob, self.console)
            if outcome is Outcome.NOTHING:
                continue
            if outcome is Outcome.LOSE:
                self.console.print_slow(text.RANDOM_EVENT_ENEMY_6, 100)
                self.player.game_over = True
                return
            if outcome is Outcome.WIN:
                self.console.print_slow(text.RANDOM_EVENT_ENEMY_3, 100)
            else:
                self.console.print_slow(text.RANDOM_EVENT_ENEMY_4, 100)
            self.console.print_slow(text.RANDOM_EVENT_ENEMY_5, 100)
            return

    def nothing(self) -> None:
        """An empty room."""
        self.console.print_slow(text.RANDOM_EVENT_NOTHING_1, 100)
        self.console.print_slow(text.RANDOM_EVENT_NOTHING_2, 100)

    def open_exit(self) -> None:
        """Escape if every key has been found."""
        if self.player.keys == ESCAPE_KEY_COUNT:
            self.console.print_slow(text.EVENT_EXIT_1, 100)
            self.console.print_slow(text.EVENT_EXIT_2, 100)
            self.player.game_over = True
            self.console.read_input(InputState.START_END)
        else:
            self.console.write(text.EVENT_EXIT_FAIL)

    def find_key(self) -> None:
        """Pick up the key on the current tile."""
        self.console.write(text.EVENT_KEY)
        self.player.keys += 1
        self._collapse_here()

    def default_event(self) -> None:
        """Nothing special on this tile."""
        self.console.write(text.EVENT_DEFAULT)

    def _tile_here(self):
        location = self.player.location
        return self._room.tile(location.x, location.y)

    def execute_tile_event(self) -> None:
        """Run whatever the player's current tile triggers."""
        tile = self._tile_here()
        if tile == "?":
            self.random_event()
            return
        if isinstance(tile, int):
            target = self.world.destination(self._room, tile)
            if target is None:
                self.move_to_room(None, self.player.location)
            else:
                self.move_to_room(*target)
            tile = self._tile_here()
        if tile == "@":
            self.open_exit()
            return
        if tile == "K":
            self.find_key()
            return
        self.default_event()

    def move_to_room(self, target: Optional[GameMap], location: Coord) -> None:
        """Put the player into ``target`` at ``location``; None means locked."""
        if target is None:
            self.console.write(text.MAP_DOOR_FAIL)
            return
        self.console.write(text.MAP_MOVE.format(target.name))
        self.player.current_map = target
        self.player.location = location

    def step(self, command: str) -> None:
        """Apply one movement key."""
        try:
            location = next_location(self.player.location, command)
        except ValueError:
            self.console.write(text.MOVE_CHECK + "\n")
            return
        if not is_valid_location(location, self._room, self.console):
            return
        self.player.location = location
        self.execute_tile_event()

    def run(self) -> None:
        """Play until the game is over."""
        self.start()
        self.describe()
        self.console.write(render_map(self.player, self.color))
        describe_moves(self.console)
        while not self.player.game_over:
            self.step(read_command(self.console))
            self.console.write(render_map(self.player, self.color))


def _no_sleep(_seconds: float) -> None:
    return None


def main(argv: Optional[list[str]] = None) -> int:
    """Play the game in the terminal."""
    parser = argparse.ArgumentParser(
        prog="dungeoncrawl",
        description="Escape the dungeon by collecting every key.",
    )
    parser.add_argument("--fast", action="store_true", help="print text without delays")
    parser.add_argument("--no-color", action="store_true", help="draw the map without colours")
    parser.add_argument("--seed", type=int, help="seed for random encounters")
    args = parser.parse_args(argv)

    sleep = _no_sleep if args.fast else time.sleep
    interactive = sys.stdout.isatty()
    console = Console(sleep=sleep)
    if interactive:
        console.write(f"\x1b]0;{text.GAME_TITLE}\x07")
    game = Game(
        console=console,
        rng=random.Random(args.seed),
        sleep=sleep,
        color=interactive and not args.no_color,
    )
    try:
        game.run()
    except (EOFError, KeyboardInterrupt):
        console.write("\n")
        return 1
    return 0