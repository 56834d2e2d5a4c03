"""Actions that keys can be bound to.

Single-select and multi-select have separate action sets because their
custom callbacks receive different payloads: the value under the cursor
versus the ordered list of selected values.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


class SingleAction(Enum):
    """Built-in single-select actions."""

    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    SELECT = "select"
    CANCEL = "cancel"


class MultiAction(Enum):
    """Built-in multi-select actions."""

    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    TOGGLE_SELECT = "toggle_select"
    CANCEL = "cancel"
    FINISH = "finish"


@dataclass(frozen=True)
class ItemCallback(Generic[T]):
    """Custom single-select action, called with the value under the cursor.

    Does not end the selection.
    """

    callback: Callable[[T], Any]

    def trigger(self, value: T) -> None:
        self.callback(value)


@dataclass(frozen=True)
class SelectionCallback(Generic[T]):
    """Custom multi-select action, called with the selected values in list order.

    Does not end the selection.
    """

    callback: Callable[[list[T]], Any]

    def trigger(self, values: list[T]) -> None:
        self.callback(values)


SingleBinding = Union[SingleAction, ItemCallback]
MultiBinding = Union[MultiAction, SelectionCallback]
