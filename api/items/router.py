"""
Item REST endpoints.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, HTTPException, Path, status

from . import schemas, service
from .models import ITEM_ID_MAX, ITEM_ID_MIN, ItemId

router = APIRouter()

ItemIdPath = Annotated[int, Path(ge=ITEM_ID_MIN, le=ITEM_ID_MAX)]


@router.get("/items")
async def list_items() -> list[schemas.ItemResponse]:
    items = await service.list_items()
    return [schemas.ItemResponse.from_item(item) for item in items]


@router.get("/items/{item_id}")
async def get_item(item_id: ItemIdPath) -> schemas.ItemResponse:
    item = await service.get_item(ItemId(item_id))
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not found.")
    return schemas.ItemResponse.from_item(item)


@router.post("/items", status_code=status.HTTP_201_CREATED)
async def create_item(request: schemas.CreateItemRequest) -> schemas.ItemResponse:
    item_id = await service.add_item(name=request.name, price=request.price)
    return schemas.ItemResponse(id=int(item_id), name=request.name, price=request.price)


@router.delete("/items/{item_id}")
async def delete_item(item_id: ItemIdPath) -> schemas.DeleteItemResponse:
    """
    Delete an item. Succeeds whether or not the item existed.
    """
    await service.delete_item(ItemId(item_id))
    return schemas.DeleteItemResponse(id=item_id)
