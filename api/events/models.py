"""
Domain events emitted after successful item mutations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from items.models import Item, ItemId


@dataclass(frozen=True)
class ItemAdded:
    item: Item


@dataclass(frozen=True)
class ItemDeleted:
    item_id: ItemId


DomainEvent = Union[ItemAdded, ItemDeleted]
