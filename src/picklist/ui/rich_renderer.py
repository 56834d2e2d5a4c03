"""Rich Live implementation of the renderer."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from rich.console import Console
from rich.live import Live
from rich.text import Text

from .base import Emphasis, Row

if TYPE_CHECKING:
    from picklist.config import Config

DEFAULT_CURSOR_STYLE = "white on black"
DEFAULT_SELECTED_STYLE = "white on blue"


class RichRenderer:
    """Draws rows in place with rich.live.Live.

    Each draw replaces the whole block: Live moves the cursor back up over
    the previous render and clears it before writing the new one.
    """

    def __init__(
        self,
        console: Console | None = None,
        cursor_style: str = DEFAULT_CURSOR_STYLE,
        selected_style: str = DEFAULT_SELECTED_STYLE,
        transient: bool = False,
    ):
        self.console = console or Console()
        self.styles = {
            Emphasis.NORMAL: "",
            Emphasis.CURSOR: cursor_style,
            Emphasis.SELECTED: selected_style,
        }
        self.transient = transient
        self._live: Live | None = None

    @classmethod
    def from_config(
        cls, config: Config | None = None, console: Console | None = None
    ) -> RichRenderer:
        """Build a renderer using configured styles."""
        if config is None:
            from picklist.config import Config

            config = Config.load()
        return cls(
            console=console,
            cursor_style=config.cursor_style,
            selected_style=config.selected_style,
            transient=config.transient,
        )

    def render(self, rows: Sequence[Row]) -> Text:
        """Build the renderable for rows."""
        text = Text()
        for i, row in enumerate(rows):
            if i:
                text.append("\n")
            text.append(row.label, style=self.styles[row.emphasis])
        return text

    def open(self) -> None:
        if self._live is not None:
            return
        self.console.show_cursor(False)
        self._live = Live(
            Text(),
            console=self.console,
            auto_refresh=False,
            transient=self.transient,
        )
        self._live.start()

    def draw(self, rows: Sequence[Row]) -> None:
        if self._live is None:
            raise RuntimeError("Renderer is not open")
        self._live.update(self.render(rows), refresh=True)

    def close(self) -> None:
        live, self._live = self._live, None
        try:
            if live is not None:
                live.stop()
                if not self.console.is_terminal and not self.transient:
                    # Live leaves the final frame unterminated off a terminal
                    self.console.line()
        finally:
            self.console.show_cursor(True)
