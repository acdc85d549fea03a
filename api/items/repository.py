"""
Item persistence (raw SQL).

One statement per operation. Database failures surface as
`core.db.StorageError`.
"""

from __future__ import annotations

from decimal import Decimal

from core import db

from .models import Item, ItemId


async def create_item(*, name: str, price: Decimal) -> ItemId:
    row = await db.fetch_one(
        """
        INSERT INTO items (name, price)
        VALUES ($1, $2)
        RETURNING id
        """,
        name,
        price,
    )
    if row is None or "id" not in row:
        raise db.StorageError("Failed to insert item.")
    return ItemId(int(row["id"]))


async def get_item(item_id: ItemId) -> Item | None:
    row = await db.fetch_one(
        """
        SELECT id, name, price
        FROM items
        WHERE id = $1
        """,
        item_id,
    )
    return Item.from_row(row) if row is not None else None


async def list_items() -> list[Item]:
    rows = await db.fetch_all(
        """
        SELECT id, name, price
        FROM items
        ORDER BY id
        """
    )
    return [Item.from_row(row) for row in rows]


async def get_items_by_name(name: str) -> list[Item]:
    """
    Exact, case-sensitive match on `name`.
    """
    rows = await db.fetch_all(
        """
        SELECT id, name, price
        FROM items
        WHERE name = $1
        ORDER BY id
        """,
        name,
    )
    return [Item.from_row(row) for row in rows]


async def get_items_cheaper_than(price: Decimal) -> list[Item]:
    rows = await db.fetch_all(
        """
        SELECT id, name, price
        FROM items
        WHERE price < $1
        ORDER BY id
        """,
        price,
    )
    return [Item.from_row(row) for row in rows]


async def delete_item(item_id: ItemId) -> None:
    # Deleting a missing id is not an error.
    await db.execute(
        """
        DELETE FROM items
        WHERE id = $1
        """,
        item_id,
    )
