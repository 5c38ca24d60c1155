"""Turn-based fights between the player and an enemy."""

from __future__ import annotations

import enum
from typing import Callable

from . import text
from .console import Console, InputState
from .model import Enemy, Player


class Outcome(enum.Enum):
    """Result of one battle action."""

    NOTHING = 0
    WIN = 1
    LOSE = 2
    RUN = 3


HEAL_COST = 3
HEAL_AMOUNT = 5

Action = Callable[[Player, Enemy, Console], Outcome]


def resolve(player: Player, enemy: Enemy) -> Outcome:
    """Decide whether the fight has been won or lost."""
    if enemy.hp <= 0:
        return Outcome.WIN
    if player.hp <= 0:
        return Outcome.LOSE
    return Outcome.NOTHING


def attack(player: Player, enemy: Enemy, console: Console) -> Outcome:
    """Strike the enemy; if it survives, it strikes back."""
    console.print_slow(text.BATTLE_ATTACK_1, 100)
    enemy.hp -= player.atk - enemy.defense
    console.print_slow(text.BATTLE_ATTACK_2.format(max(enemy.hp, 0)), 100)

    if enemy.hp <= 0:
        console.write("\n")
        return resolve(player, enemy)

    console.print_slow(text.BATTLE_ATTACK_ENEMY_1, 100)
    player.hp -= enemy.atk - player.defense
    console.print_slow(text.BATTLE_ATTACK_ENEMY_2.format(max(player.hp, 0)), 100)
    console.write("\n")
    return resolve(player, enemy)


def heal(player: Player, enemy: Enemy, console: Console) -> Outcome:
    """Spend MP to restore HP; the enemy then attacks."""
    if player.mp < HEAL_COST:
        console.print_slow(text.BATTLE_HEAL_FAIL_1, 100)
        console.print_slow(text.BATTLE_HEAL_FAIL_2.format(player.mp), 100)
        return Outcome.NOTHING

    console.print_slow(text.BATTLE_HEAL_1, 100)
    player.hp += HEAL_AMOUNT
    player.mp -= HEAL_COST
    console.print_slow(text.BATTLE_HEAL_2.format(player.hp), 100)
    console.print_slow(text.BATTLE_HEAL_3.format(player.mp), 100)
    console.write("\n")

    console.print_slow(text.BATTLE_ATTACK_ENEMY_1, 100)
    player.hp -= enemy.atk - player.defense
    console.print_slow(text.BATTLE_ATTACK_ENEMY_2.format(player.hp), 100)
    return resolve(player, enemy)


def run(player: Player, enemy: Enemy, console: Console) -> Outcome:
    """Flee from the fight."""
    return Outcome.RUN


_ACTIONS: dict[str, Action] = {"1": attack, "2": heal, "3": run}


def action_for_key(key: str) -> Action:
    """Map a command key ('1', '2' or '3') to its battle action."""
    try:
        return _ACTIONS[key]
    except KeyError:
        raise ValueError(f"invalid battle action: {key!r}") from None


def read_action(console: Console) -> Action:
    """Prompt for and return the player's next battle action."""
    console.print_slow(text.BATTLE_INPUT_1, 10)
    return action_for_key(console.read_input(InputState.BATTLE))