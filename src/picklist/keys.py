"""Key sources: where the engines read key presses from."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import AbstractContextManager, contextmanager
from typing import Protocol, runtime_checkable

import readchar

try:
    import termios
except ImportError:  # Windows
    termios = None  # type: ignore[assignment]

logger = logging.getLogger("picklist.keys")


@runtime_checkable
class KeySource(Protocol):
    """Protocol for anything that can feed key presses to an engine."""

    def isatty(self) -> bool:
        """Return True if keys come from an interactive terminal."""
        ...

    def raw_mode(self) -> AbstractContextManager[None]:
        """Context manager holding the terminal in raw input mode."""
        ...

    def read_key(self) -> str:
        """Block until the next key press and return its identity.

        Raises:
            OSError: If the input cannot be read.
        """
        ...


class TerminalKeySource:
    """Reads key presses from the process stdin with readchar."""

    def isatty(self) -> bool:
        try:
            return sys.stdin.isatty()
        except (AttributeError, ValueError):
            # Closed or replaced stdin
            return False

    @contextmanager
    def raw_mode(self) -> Iterator[None]:
        """Turn off echo, line buffering and Ctrl-C signals until exit.

        readchar switches the terminal per key; holding the mode for the whole
        session keeps keys typed between reads from echoing over the list.
        """
        if termios is None:
            yield
            return

        fd = sys.stdin.fileno()
        try:
            saved = termios.tcgetattr(fd)
            raw = termios.tcgetattr(fd)
            raw[3] &= ~(termios.ECHO | termios.ICANON | termios.ISIG)
            termios.tcsetattr(fd, termios.TCSADRAIN, raw)
        except termios.error as e:
            raise OSError(f"Cannot enter raw mode: {e}") from e
        logger.debug("Raw mode entered on fd %d", fd)
        try:
            yield
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)
            logger.debug("Raw mode restored on fd %d", fd)

    def read_key(self) -> str:
        try:
            key = readchar.readkey()
        except KeyboardInterrupt:
            # readchar raises on Ctrl-C; hand it to the keymap like any other key
            return readchar.key.CTRL_C
        if not key:
            raise OSError("End of input")
        return key
