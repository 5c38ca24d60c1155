import io

import pytest

from dungeoncrawl import text
from dungeoncrawl.battle import (
    Outcome,
    action_for_key,
    attack,
    heal,
    read_action,
    resolve,
    run,
)
from dungeoncrawl.console import Console
from dungeoncrawl.model import Enemy, Player


def make_console(keys=""):
    out = io.StringIO()
    return Console(keys=keys, output=out, sleep=lambda _s: None), out


def test_resolve_win_takes_priority():
    assert resolve(Player(hp=0), Enemy(hp=0)) is Outcome.WIN


def test_resolve_lose():
    assert resolve(Player(hp=-1), Enemy(hp=2)) is Outcome.LOSE


def test_resolve_nothing():
    assert resolve(Player(), Enemy()) is Outcome.NOTHING


def test_attack_kills_goblin_and_clamps_display():
    console, out = make_console()
    player = Player()
    enemy = Enemy()
    assert attack(player, enemy, console) is Outcome.WIN
    assert enemy.hp <= 0
    assert player.hp == Player().hp
    assert text.BATTLE_ATTACK_2.format(0) in out.getvalue()
    assert text.BATTLE_ATTACK_ENEMY_1 not in out.getvalue()


def test_attack_survivor_strikes_back():
    console, out = make_console()
    player = Player(hp=10, defense=0)
    enemy = Enemy(hp=10, atk=5)
    assert attack(player, enemy, console) is Outcome.NOTHING
    assert enemy.hp == 7
    assert player.hp == 5
    assert text.BATTLE_ATTACK_ENEMY_1 in out.getvalue()


def test_attack_can_lose():
    console, out = make_console()
    player = Player(hp=1)
    enemy = Enemy(hp=100, atk=5)
    assert attack(player, enemy, console) is Outcome.LOSE
    assert text.BATTLE_ATTACK_ENEMY_2.format(0) in out.getvalue()


def test_heal_spends_mp():
    console, out = make_console()
    player = Player(hp=10, mp=10)
    enemy = Enemy(atk=0)
    assert heal(player, enemy, console) is Outcome.NOTHING
    assert player.mp == 7
    assert player.hp == 15
    assert text.BATTLE_HEAL_1 in out.getvalue()


def test_heal_without_mp_changes_nothing():
    console, out = make_console()
    player = Player(hp=4, mp=2)
    enemy = Enemy()
    assert heal(player, enemy, console) is Outcome.NOTHING
    assert (player.hp, player.mp) == (4, 2)
    assert out.getvalue() == text.BATTLE_HEAL_FAIL_1 + text.BATTLE_HEAL_FAIL_2.format(2)


def test_run_leaves_state_alone():
    console, out = make_console()
    player = Player()
    enemy = Enemy()
    assert run(player, enemy, console) is Outcome.RUN
    assert player == Player()
    assert enemy == Enemy()
    assert out.getvalue() == ""


def test_action_for_key():
    assert action_for_key("1") is attack
    assert action_for_key("2") is heal
    assert action_for_key("3") is run


def test_action_for_invalid_key():
    with pytest.raises(ValueError):
        action_for_key("4")


def test_read_action_prompts_and_waits_for_battle_key():
    console, out = make_console("wq3")
    assert read_action(console) is run
    assert out.getvalue() == text.BATTLE_INPUT_1