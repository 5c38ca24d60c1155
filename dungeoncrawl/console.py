"""Slow text output and key-driven input states."""

from __future__ import annotations

import enum
import sys
import time
from typing import Callable, Iterable, Iterator, Optional, TextIO


class InputState(enum.Flag):
    """Conditions that incoming keys can satisfy."""

    NONE = 0
    PRINT_SKIP = enum.auto()
    START_END = enum.auto()
    MOVE = enum.auto()
    BATTLE = enum.auto()


_MOVE_KEYS = frozenset("wWaAdD")
_BATTLE_KEYS = frozenset("123")


def _terminal_keys() -> Iterator[str]:
    """Yield single key presses from the terminal, or characters from stdin."""
    try:
        import msvcrt
    except ImportError:
        msvcrt = None

    if msvcrt is not None:
        while True:
            key = msvcrt.getwch()
            if key in ("\x00", "\xe0"):
                key = msvcrt.getwch()
            yield key
        return

    stream = sys.stdin
    if stream.isatty():
        import termios
        import tty

        fd = stream.fileno()
        saved = termios.tcgetattr(fd)
        try:
            tty.setcbreak(fd)
            while key := stream.read(1):
                yield "\r" if key == "\n" else key
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)
    else:
        while key := stream.read(1):
            yield "\r" if key == "\n" else key


class Console:
    """Writes text to the player and waits for keys that satisfy a state."""

    def __init__(
        self,
        keys: Optional[Iterable[str]] = None,
        output: Optional[TextIO] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._keys = iter(keys) if keys is not None else _terminal_keys()
        self.output = output if output is not None else sys.stdout
        self._sleep = sleep
        self.flags = InputState.NONE
        self.last_key: Optional[str] = None

    def write(self, text: str) -> None:
        """Write text immediately."""
        self.output.write(text)
        self.output.flush()

    def print_slow(self, text: str, delay: int) -> None:
        """Write text one character at a time, pausing ``delay`` ms after each.

        The pauses stop once a carriage return has been processed.
        """
        self.flags &= ~InputState.PRINT_SKIP
        for char in text:
            self.write(char)
            if not self.flags & InputState.PRINT_SKIP:
                self._sleep(delay / 1000)

    def process_input(self, key: str) -> None:
        """Update the input state flags for one key press."""
        if key == "\r":
            self.flags |= InputState.PRINT_SKIP
        elif key in _BATTLE_KEYS:
            self.flags |= InputState.BATTLE
        elif key in ("s", "S") and not self.flags & InputState.START_END:
            self.flags |= InputState.START_END
        elif key in ("s", "S") or key in _MOVE_KEYS:
            self.flags |= InputState.MOVE

    def read_input(self, state: InputState) -> str:
        """Wait until a key satisfies ``state`` and return that key.

        Raises EOFError when no keys remain.
        """
        self.flags &= ~state
        while not self.flags & state:
            try:
                key = next(self._keys)
            except StopIteration:
                raise EOFError("no more input") from None
            self.last_key = key
            self.process_input(key)
        assert self.last_key is not None
        return self.last_key