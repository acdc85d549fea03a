"""
Item domain types.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, NewType

ItemId = NewType("ItemId", int)

# items.id is a Postgres bigint.
ITEM_ID_MIN = -(2**63)
ITEM_ID_MAX = 2**63 - 1


@dataclass(frozen=True)
class Item:
    id: ItemId
    name: str
    price: Decimal

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> Item:
        return cls(
            id=ItemId(int(row["id"])),
            name=str(row["name"]),
            price=Decimal(row["price"]),
        )


def check_price(value: Decimal) -> Decimal:
    """
    Reject prices the API cannot hand back unchanged.

    Prices leave the API as JSON numbers, so a price must be finite and
    survive a round trip through a binary float.
    """
    if not value.is_finite():
        raise ValueError("Price must be a finite number.")
    if Decimal(repr(float(value))) != value:
        raise ValueError("Price has more precision than a JSON number can carry.")
    return value
