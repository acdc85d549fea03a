"""
GraphQL schema over the item service.

Resolvers call `items.service` directly.
"""

from decimal import Decimal, InvalidOperation
from typing import NewType

import strawberry
from strawberry.fastapi import GraphQLRouter
from strawberry.schema.config import StrawberryConfig

from items import service
from items.models import ITEM_ID_MAX, ITEM_ID_MIN, Item, ItemId, check_price
from items.schemas import json_number

Long = NewType("Long", int)
BigDecimal = NewType("BigDecimal", Decimal)


def _parse_long(value: object) -> Long:
    # Same rules as the built-in Int, widened to the bigint range.
    if isinstance(value, bool):
        raise ValueError(f"Long cannot represent non-integer value: {value!r}")
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not isinstance(value, int):
        raise ValueError(f"Long cannot represent non-integer value: {value!r}")
    if not ITEM_ID_MIN <= value <= ITEM_ID_MAX:
        raise ValueError(f"Long cannot represent value outside the 64-bit range: {value!r}")
    return Long(value)


def _parse_decimal(value: object) -> BigDecimal:
    if isinstance(value, bool):
        raise ValueError(f"BigDecimal cannot represent value: {value!r}")
    try:
        parsed = Decimal(str(value))
    except InvalidOperation as exc:
        raise ValueError(f"BigDecimal cannot represent value: {value!r}") from exc
    return BigDecimal(check_price(parsed))


SCALARS = {
    Long: strawberry.scalar(
        name="Long",
        serialize=int,
        parse_value=_parse_long,
        description="64-bit integer.",
    ),
    BigDecimal: strawberry.scalar(
        name="BigDecimal",
        serialize=json_number,
        parse_value=_parse_decimal,
        description="Decimal number, sent as a JSON number.",
    ),
}


@strawberry.type(name="Item")
class ItemType:
    id: Long
    name: str
    price: BigDecimal

    @classmethod
    def from_item(cls, item: Item) -> "ItemType":
        return cls(id=Long(int(item.id)), name=item.name, price=BigDecimal(item.price))


@strawberry.type
class Query:
    @strawberry.field
    async def all_items(self) -> list[ItemType]:
        return [ItemType.from_item(item) for item in await service.list_items()]

    @strawberry.field
    async def item(self, value: Long) -> ItemType | None:
        item = await service.get_item(ItemId(int(value)))
        return ItemType.from_item(item) if item is not None else None

    @strawberry.field
    async def item_by_name(self, name: str) -> list[ItemType]:
        return [ItemType.from_item(item) for item in await service.get_items_by_name(name)]

    @strawberry.field
    async def cheaper_than(self, price: BigDecimal) -> list[ItemType]:
        return [ItemType.from_item(item) for item in await service.get_items_cheaper_than(price)]


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def add_item(self, name: str, price: BigDecimal) -> Long:
        item_id = await service.add_item(name=name, price=price)
        return Long(int(item_id))

    @strawberry.mutation
    async def delete_item(self, value: Long) -> None:
        await service.delete_item(ItemId(int(value)))


schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
    config=StrawberryConfig(scalar_map=SCALARS),
)


def build_router() -> GraphQLRouter:
    return GraphQLRouter(schema)
