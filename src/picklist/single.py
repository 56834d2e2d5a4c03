"""Single-select engine: pick exactly one value."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from .actions import ItemCallback, SingleAction, SingleBinding
from .engine import SelectEngine
from .items import Item
from .keymap import Keymap, default_single_keymap
from .keys import KeySource
from .ui.base import Renderer, Row, build_rows

T = TypeVar("T")


class SingleSelect(SelectEngine[T, SingleBinding]):
    """Choose one item with the keyboard.

    Example:
        items = items_from_labels(["apple", "banana", "berry"])
        select = SingleSelect(items)
        select.bind("o", ItemCallback(lambda value: print(value)))
        fruit = select.run()
    """

    def __init__(
        self,
        items: Sequence[Item[T]],
        keymap: Keymap[SingleBinding] | None = None,
        renderer: Renderer | None = None,
    ):
        super().__init__(
            items,
            keymap if keymap is not None else default_single_keymap(),
            renderer,
        )

    @property
    def current(self) -> T:
        """Value of the item under the cursor."""
        return self.items[self.cursor].value

    def dispatch(self, action: SingleBinding) -> bool:
        if action is SingleAction.MOVE_UP:
            self.move_up()
        elif action is SingleAction.MOVE_DOWN:
            self.move_down()
        elif action is SingleAction.SELECT:
            return True
        elif action is SingleAction.CANCEL:
            self.canceled = True
            return True
        elif isinstance(action, ItemCallback):
            action.trigger(self.current)
        else:
            raise TypeError(f"Not a single-select action: {action!r}")
        return False

    def rows(self) -> list[Row]:
        return build_rows(self.items, self.cursor)

    def result(self) -> T:
        return self.current

    def run(self, keys: KeySource | None = None) -> T:
        """Run until an item is selected and return its value.

        Raises:
            EmptyListError: If there are no items.
            NotATerminalError: If keys do not come from a terminal.
            SelectionCanceled: If the user canceled.
            TerminalIOError: If reading keys or drawing fails.
        """
        return super().run(keys)


def select_one(
    items: Sequence[Item[T]],
    keymap: Keymap[SingleBinding] | None = None,
    keys: KeySource | None = None,
    renderer: Renderer | None = None,
) -> T:
    """Let the user pick one item and return its value.

    Uses the default single-select keymap when keymap is omitted and the
    process terminal when keys is omitted. The returned object is the
    item's own value, not a copy, so mutating it changes the item too.
    """
    return SingleSelect(items, keymap, renderer).run(keys)
