"""Function store items and lookup by name."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass
class StoreItem:
    """A function offered by a function store."""

    name: str
    image: str = ""
    fprocess: str = ""
    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)
    environment: dict[str, str] = field(default_factory=dict)


class StoreItemNotFound(LookupError):
    """No store item carries the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"unable to find '{name}' in store")


def filter_store_item(items: Iterable[StoreItem], from_store: str) -> StoreItem:
    """Return the first item named ``from_store``, raising ``StoreItemNotFound`` otherwise."""
    for item in items:
        if item.name == from_store:
            return item
    raise StoreItemNotFound(from_store)