import io

import pytest

from dungeoncrawl.console import Console, InputState


def make_console(keys=""):
    delays = []
    out = io.StringIO()
    console = Console(keys=keys, output=out, sleep=delays.append)
    return console, out, delays


def test_write_goes_to_output():
    console, out, delays = make_console()
    console.write("hello")
    assert out.getvalue() == "hello"
    assert delays == []


def test_print_slow_pauses_after_each_character():
    console, out, delays = make_console()
    console.print_slow("abc", 100)
    assert out.getvalue() == "abc"
    assert delays == [0.1, 0.1, 0.1]


def test_print_slow_stops_pausing_after_skip():
    out = io.StringIO()
    delays = []
    console = None

    def sleep(seconds):
        delays.append(seconds)
        console.process_input("\r")

    console = Console(keys="", output=out, sleep=sleep)
    console.print_slow("abcd", 50)
    assert out.getvalue() == "abcd"
    assert len(delays) == 1


def test_print_slow_clears_stale_skip():
    console, out, delays = make_console()
    console.process_input("\r")
    console.print_slow("ab", 10)
    assert len(delays) == 2


@pytest.mark.parametrize("key", ["1", "2", "3"])
def test_battle_keys(key):
    console, _, _ = make_console()
    console.process_input(key)
    assert console.flags == InputState.BATTLE


@pytest.mark.parametrize("key", ["w", "W", "a", "A", "d", "D"])
def test_move_keys(key):
    console, _, _ = make_console()
    console.process_input(key)
    assert console.flags == InputState.MOVE


def test_s_starts_then_moves():
    console, _, _ = make_console()
    console.process_input("s")
    assert console.flags == InputState.START_END
    console.process_input("S")
    assert console.flags == InputState.START_END | InputState.MOVE


def test_other_keys_change_nothing():
    console, _, _ = make_console()
    console.process_input("q")
    assert console.flags == InputState.NONE


def test_read_input_skips_unrelated_keys():
    console, _, _ = make_console("q1w")
    assert console.read_input(InputState.MOVE) == "w"
    assert console.last_key == "w"


def test_read_input_clears_state_before_waiting():
    console, _, _ = make_console("d")
    console.process_input("w")
    assert console.read_input(InputState.MOVE) == "d"


def test_read_input_raises_on_exhaustion():
    console, _, _ = make_console("xyz")
    with pytest.raises(EOFError):
        console.read_input(InputState.BATTLE)