"""Renderer protocol and the row model it draws."""

from collections.abc import Collection, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from picklist.items import Item


class Emphasis(Enum):
    """How a row stands out."""

    NORMAL = "normal"
    CURSOR = "cursor"
    SELECTED = "selected"


@dataclass(frozen=True)
class Row:
    """One drawn line of the list."""

    label: str
    emphasis: Emphasis = Emphasis.NORMAL


def build_rows(
    items: Sequence[Item],
    cursor: int,
    selected: Collection[int] | None = None,
) -> list[Row]:
    """Compute the rows for the current cursor and selection.

    The cursor row is always drawn as CURSOR, even when it is also selected.
    """
    selected = selected or ()
    rows = []
    for i, item in enumerate(items):
        if i == cursor:
            emphasis = Emphasis.CURSOR
        elif i in selected:
            emphasis = Emphasis.SELECTED
        else:
            emphasis = Emphasis.NORMAL
        rows.append(Row(item.label, emphasis))
    return rows


class Renderer(Protocol):
    """Protocol for swappable list renderers."""

    def open(self) -> None:
        """Take over the output region and hide the cursor."""
        ...

    def draw(self, rows: Sequence[Row]) -> None:
        """Clear the previously drawn rows and draw these instead."""
        ...

    def close(self) -> None:
        """Show the cursor and release the output region."""
        ...
