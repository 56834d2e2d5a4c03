"""Event loop shared by the single- and multi-select engines.

Lifecycle of a run:
    1. Check preconditions (items present, keys come from a terminal)
    2. Enter the terminal session (raw mode, hidden cursor)
    3. Draw, then read one key at a time: look it up, dispatch, redraw
    4. Leave the session on every exit path, then return or raise
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from contextlib import ExitStack, contextmanager
from typing import Any, Generic, TypeVar

from .errors import EmptyListError, NotATerminalError, SelectionCanceled, TerminalIOError
from .items import Item
from .keymap import Keymap
from .keys import KeySource, TerminalKeySource
from .ui.base import Renderer, Row

T = TypeVar("T")
A = TypeVar("A")

logger = logging.getLogger("picklist.engine")


@contextmanager
def io_errors(operation: str) -> Iterator[None]:
    """Re-raise OSError from terminal I/O as TerminalIOError."""
    try:
        yield
    except OSError as e:
        raise TerminalIOError(f"Failed to {operation}: {e}") from e


class TerminalSession:
    """Scoped hold on the terminal: raw input mode plus the renderer.

    Exiting always releases the renderer (showing the cursor again) and then
    leaves raw mode, whatever exception is propagating.
    """

    def __init__(self, keys: KeySource, renderer: Renderer):
        self.keys = keys
        self.renderer = renderer
        self._stack = ExitStack()

    def __enter__(self) -> TerminalSession:
        try:
            with io_errors("set up terminal"):
                self._stack.enter_context(self.keys.raw_mode())
                self._stack.callback(self.renderer.close)
                self.renderer.open()
        except BaseException:
            self._stack.close()
            raise
        logger.debug("Terminal session started")
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        with io_errors("restore terminal"):
            self._stack.close()
        logger.debug("Terminal session ended")


class SelectEngine(ABC, Generic[T, A]):
    """Cursor state and the key loop, independent of selection mode.

    Subclasses supply the action dispatch, the rows to draw and the result.
    The item sequence is only ever read.
    """

    def __init__(
        self,
        items: Sequence[Item[T]],
        keymap: Keymap[A],
        renderer: Renderer | None = None,
    ):
        self.items = items
        # Own copy, so bind/unbind never leak into the caller's keymap
        self.keymap = keymap.copy()
        self.renderer = renderer
        self.cursor = 0
        self.canceled = False

    def bind(self, key: str, action: A) -> None:
        """Bind key to action, replacing any existing binding."""
        self.keymap.insert(key, action)

    def unbind(self, key: str) -> None:
        """Remove the binding for key, if any."""
        self.keymap.remove(key)

    def move_up(self) -> None:
        self.cursor = max(self.cursor - 1, 0)

    def move_down(self) -> None:
        self.cursor = min(self.cursor + 1, len(self.items) - 1)

    def reset(self) -> None:
        """Put the cursor back on the first row and clear the outcome."""
        self.cursor = 0
        self.canceled = False

    def handle_key(self, key: str) -> bool:
        """Apply one key press. Returns True when the selection is over."""
        action = self.keymap.lookup(key)
        if action is None:
            logger.debug("Ignoring unbound key %r", key)
            return False
        logger.debug("Key %r -> %r at row %d", key, action, self.cursor)
        return self.dispatch(action)

    @abstractmethod
    def dispatch(self, action: A) -> bool:
        """Apply an action. Returns True when the selection is over."""
        ...

    @abstractmethod
    def rows(self) -> list[Row]:
        """Rows describing the current state."""
        ...

    @abstractmethod
    def result(self) -> Any:
        """Value returned by a run that was not canceled."""
        ...

    def run(self, keys: KeySource | None = None) -> Any:
        """Run the selection loop until a terminating action.

        Args:
            keys: Where key presses come from. Defaults to the terminal.

        Raises:
            EmptyListError: If there are no items.
            NotATerminalError: If keys do not come from a terminal.
            SelectionCanceled: If the user canceled.
            TerminalIOError: If reading keys or drawing fails.
        """
        if not self.items:
            raise EmptyListError()
        keys = keys if keys is not None else TerminalKeySource()
        if not keys.isatty():
            raise NotATerminalError()
        renderer = self.renderer if self.renderer is not None else self._default_renderer()

        self.reset()
        logger.debug("Selecting from %d items", len(self.items))
        with TerminalSession(keys, renderer):
            self._draw(renderer)
            while True:
                with io_errors("read key"):
                    key = keys.read_key()
                if self.handle_key(key):
                    break
                self._draw(renderer)

        if self.canceled:
            logger.debug("Selection canceled at row %d", self.cursor)
            raise SelectionCanceled()
        return self.result()

    def _draw(self, renderer: Renderer) -> None:
        with io_errors("draw list"):
            renderer.draw(self.rows())

    @staticmethod
    def _default_renderer() -> Renderer:
        from .ui.rich_renderer import RichRenderer

        return RichRenderer.from_config()
