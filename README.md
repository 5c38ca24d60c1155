# dungeoncrawl

A small text-mode dungeon crawler for the terminal. You wake up in a strange
kitchen and have to find your way out: explore five connected rooms, collect
all 14 keys, survive random encounters and unlock the exit.

## Installing

```
pip install .
```

## Playing

```
dungeoncrawl
```

Options:

| Option       | Effect                                                    |
|--------------|-----------------------------------------------------------|
| `--fast`     | print all text at once instead of a character at a time   |
| `--no-color` | draw the map without ANSI colours                         |
| `--seed N`   | seed the random number generator used for encounters      |

Colours and the window title are only used when standard output is a
terminal. Keys are read one at a time from the terminal; when standard input
is not a terminal, characters are read from it instead, so a game can be
replayed from a file. The command exits with status 0 when the game ends and
1 when input runs out or it is interrupted with Ctrl-C.

When you start, press `s` to search the room. After that, move with:

| Key | Direction |
|-----|-----------|
| `w` | up        |
| `a` | left      |
| `s` | down      |
| `d` | right     |

## The map

After each move the current room is drawn, with your keys, HP, MP, ATK and
DEF beside it. Only the tiles you have stood on or next to are shown:

- `P`: your position
- `x`: a wall
- `0`: open floor
- `K`: a key. Picking it up turns the tile into floor.
- `?`: a random encounter: a ring (ATK +3), armour (DEF +3), a goblin, or
  nothing. The tile becomes floor afterwards.
- `@`: a door to another room, or the exit itself in the Exit Room

Stepping onto a door takes you to the matching door in the connected room.
The exit opens only when you hold all 14 keys.

## Fighting

When you meet a goblin, press a number:

1. Attack. You deal your ATK minus the goblin's DEF; if it survives, it hits
   back.
2. Heal. Costs 3 MP and restores 5 HP; the goblin still hits back. With less
   than 3 MP nothing happens and you choose again.
3. Run. You escape from the fight.

If your HP drops to zero, the game is over.

## Using it as a library

`dungeoncrawl.game.Game` holds one playthrough. It takes an optional
`Console`, `World`, `random.Random`, sleep function and a `color` flag.
`dungeoncrawl.console.Console` accepts any iterable of keys and any text
stream, which makes scripted games easy:

```python
import io
from dungeoncrawl.console import Console
from dungeoncrawl.game import Game

out = io.StringIO()
game = Game(console=Console(keys="sww", output=out, sleep=lambda s: None),
            sleep=lambda s: None)
game.start()
game.step("w")
```

Other building blocks: `dungeoncrawl.maps.build_world()` creates the five
rooms and their door links, `render_map(player, color)` returns a room as
text, and `dungeoncrawl.battle` provides `attack`, `heal`, `run` and
`resolve`.

## Limitations

- Slow text cannot be skipped while it is being printed; use `--fast` to
  turn the delays off.
- There is no saving or loading of a game in progress.

## Development

```
pip install -e ".[test]"
pytest
```