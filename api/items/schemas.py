"""
Pydantic schemas for item endpoints.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, Field, PlainSerializer, field_validator

from .models import Item, check_price


def json_number(value: Decimal) -> int | float:
    """
    Prices stay exact in Python and go out as JSON numbers.
    """
    if value == value.to_integral_value():
        return int(value)
    return float(value)


JsonDecimal = Annotated[Decimal, PlainSerializer(json_number, when_used="json")]


class CreateItemRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    price: Decimal

    @field_validator("price")
    @classmethod
    def _price_round_trips(cls, value: Decimal) -> Decimal:
        return check_price(value)


class ItemResponse(BaseModel):
    id: int
    name: str
    price: JsonDecimal

    @classmethod
    def from_item(cls, item: Item) -> ItemResponse:
        return cls(id=int(item.id), name=item.name, price=item.price)


class DeleteItemResponse(BaseModel):
    ok: bool = True
    id: int
