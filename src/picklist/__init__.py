"""Interactive terminal list selection."""

from .actions import ItemCallback, MultiAction, SelectionCallback, SingleAction
from .errors import (
    EmptyListError,
    NotATerminalError,
    SelectionCanceled,
    SelectionError,
    TerminalIOError,
)
from .items import Item, items_from_labels
from .keymap import Keymap, default_multi_keymap, default_single_keymap
from .keys import KeySource, TerminalKeySource
from .multi import MultiSelect, select_many
from .single import SingleSelect, select_one

__version__ = "0.1.0"

__all__ = [
    "EmptyListError",
    "Item",
    "ItemCallback",
    "KeySource",
    "Keymap",
    "MultiAction",
    "MultiSelect",
    "NotATerminalError",
    "SelectionCallback",
    "SelectionCanceled",
    "SelectionError",
    "SingleAction",
    "SingleSelect",
    "TerminalIOError",
    "TerminalKeySource",
    "default_multi_keymap",
    "default_single_keymap",
    "items_from_labels",
    "select_many",
    "select_one",
]
