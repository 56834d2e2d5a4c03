"""Key to action mappings and the default bindings."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Generic, TypeVar

import readchar

from .actions import MultiAction, MultiBinding, SingleAction, SingleBinding

A = TypeVar("A")

# Enter arrives as LF when the terminal maps CR to NL (icrnl), as CR otherwise
ENTER_KEYS = (readchar.key.CR, readchar.key.LF)


class Keymap(Generic[A]):
    """Mapping from key identity to exactly one action.

    Key identities are the strings returned by `readchar.readkey()`, so
    `readchar.key` constants and plain characters can be used directly.

    Example:
        keymap = default_single_keymap()
        keymap.insert("o", ItemCallback(lambda value: print(value)))
        keymap.remove("j")
    """

    def __init__(self, bindings: Mapping[str, A] | None = None):
        self._bindings: dict[str, A] = dict(bindings or {})

    def lookup(self, key: str) -> A | None:
        """Return the action bound to key, or None if unbound."""
        return self._bindings.get(key)

    def insert(self, key: str, action: A) -> None:
        """Bind key to action, replacing any existing binding."""
        self._bindings[key] = action

    def remove(self, key: str) -> None:
        """Unbind key. Unbound keys are ignored."""
        self._bindings.pop(key, None)

    def copy(self) -> Keymap[A]:
        return Keymap(self._bindings)

    def keys(self) -> list[str]:
        return list(self._bindings)

    def __contains__(self, key: object) -> bool:
        return key in self._bindings

    def __len__(self) -> int:
        return len(self._bindings)

    def __iter__(self) -> Iterator[str]:
        return iter(self._bindings)

    def __repr__(self) -> str:
        return f"Keymap({self._bindings!r})"


def default_single_keymap() -> Keymap[SingleBinding]:
    """Default single-select bindings.

    Up/k and Down/j move, Enter selects, Ctrl-C cancels.
    """
    keymap: Keymap[SingleBinding] = Keymap()
    keymap.insert(readchar.key.UP, SingleAction.MOVE_UP)
    keymap.insert(readchar.key.DOWN, SingleAction.MOVE_DOWN)
    keymap.insert("k", SingleAction.MOVE_UP)
    keymap.insert("j", SingleAction.MOVE_DOWN)
    for key in ENTER_KEYS:
        keymap.insert(key, SingleAction.SELECT)
    keymap.insert(readchar.key.CTRL_C, SingleAction.CANCEL)
    return keymap


def default_multi_keymap() -> Keymap[MultiBinding]:
    """Default multi-select bindings.

    Up/k and Down/j move, Space toggles, Enter finishes, Ctrl-C cancels.
    """
    keymap: Keymap[MultiBinding] = Keymap()
    keymap.insert(readchar.key.UP, MultiAction.MOVE_UP)
    keymap.insert(readchar.key.DOWN, MultiAction.MOVE_DOWN)
    keymap.insert("k", MultiAction.MOVE_UP)
    keymap.insert("j", MultiAction.MOVE_DOWN)
    keymap.insert(readchar.key.SPACE, MultiAction.TOGGLE_SELECT)
    for key in ENTER_KEYS:
        keymap.insert(key, MultiAction.FINISH)
    keymap.insert(readchar.key.CTRL_C, MultiAction.CANCEL)
    return keymap
