"""
Item application service.

Reads go straight to the repository. Mutations publish a domain event to
the subscriber once the repository call has succeeded; publishing is
fire-and-forget and never undoes the mutation.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from events import subscriber
from events.models import DomainEvent, ItemAdded, ItemDeleted

from . import repository
from .models import Item, ItemId

logger = logging.getLogger(__name__)


def _publish(event: DomainEvent) -> None:
    try:
        subscriber.notify(event)
    except Exception:
        logger.exception("event_publish_failed event=%s", type(event).__name__)


async def add_item(*, name: str, price: Decimal) -> ItemId:
    item_id = await repository.create_item(name=name, price=price)
    _publish(ItemAdded(Item(id=item_id, name=name, price=price)))
    return item_id


async def delete_item(item_id: ItemId) -> None:
    await repository.delete_item(item_id)
    _publish(ItemDeleted(item_id))


async def get_item(item_id: ItemId) -> Item | None:
    return await repository.get_item(item_id)


async def list_items() -> list[Item]:
    return await repository.list_items()


async def get_items_by_name(name: str) -> list[Item]:
    return await repository.get_items_by_name(name)


async def get_items_cheaper_than(price: Decimal) -> list[Item]:
    return await repository.get_items_cheaper_than(price)
