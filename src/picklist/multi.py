"""Multi-select engine: toggle any number of items, then finish."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from .actions import MultiAction, MultiBinding, SelectionCallback
from .engine import SelectEngine
from .items import Item
from .keymap import Keymap, default_multi_keymap
from .keys import KeySource
from .ui.base import Renderer, Row, build_rows

T = TypeVar("T")


class MultiSelect(SelectEngine[T, MultiBinding]):
    """Choose any number of items with the keyboard.

    Results come back in list order, not in the order they were toggled.
    Finishing with nothing toggled returns an empty list.
    """

    def __init__(
        self,
        items: Sequence[Item[T]],
        keymap: Keymap[MultiBinding] | None = None,
        renderer: Renderer | None = None,
    ):
        super().__init__(
            items,
            keymap if keymap is not None else default_multi_keymap(),
            renderer,
        )
        self.selected: set[int] = set()

    def reset(self) -> None:
        super().reset()
        self.selected = set()

    def toggle(self) -> None:
        """Flip selection of the row under the cursor."""
        if self.cursor in self.selected:
            self.selected.remove(self.cursor)
        else:
            self.selected.add(self.cursor)

    def selected_values(self) -> list[T]:
        """Values of the selected items in list order."""
        return [self.items[i].value for i in sorted(self.selected)]

    def dispatch(self, action: MultiBinding) -> bool:
        if action is MultiAction.MOVE_UP:
            self.move_up()
        elif action is MultiAction.MOVE_DOWN:
            self.move_down()
        elif action is MultiAction.TOGGLE_SELECT:
            self.toggle()
        elif action is MultiAction.FINISH:
            return True
        elif action is MultiAction.CANCEL:
            self.canceled = True
            return True
        elif isinstance(action, SelectionCallback):
            action.trigger(self.selected_values())
        else:
            raise TypeError(f"Not a multi-select action: {action!r}")
        return False

    def rows(self) -> list[Row]:
        return build_rows(self.items, self.cursor, self.selected)

    def result(self) -> list[T]:
        return self.selected_values()

    def run(self, keys: KeySource | None = None) -> list[T]:
        """Run until the user finishes and return the selected values.

        Raises:
            EmptyListError: If there are no items.
            NotATerminalError: If keys do not come from a terminal.
            SelectionCanceled: If the user canceled.
            TerminalIOError: If reading keys or drawing fails.
        """
        return super().run(keys)


def select_many(
    items: Sequence[Item[T]],
    keymap: Keymap[MultiBinding] | None = None,
    keys: KeySource | None = None,
    renderer: Renderer | None = None,
) -> list[T]:
    """Let the user pick any number of items and return their values.

    The list is new but its elements are the items' own values, not copies.
    """
    return MultiSelect(items, keymap, renderer).run(keys)
