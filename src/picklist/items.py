"""Data models for picklist."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Item(Generic[T]):
    """Immutable selectable item.

    `label` is what gets drawn, `value` is what the caller gets back.
    """

    label: str
    value: T

    @classmethod
    def from_label(cls, label: str) -> "Item[str]":
        """Build an item whose value is its own label."""
        return cls(label=label, value=label)


def items_from_labels(labels: Iterable[str]) -> list[Item[str]]:
    """Build items for plain string choices."""
    return [Item.from_label(label) for label in labels]
