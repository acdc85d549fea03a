"""
Event subscriber: writes one log line per domain event.

No acknowledgement, retry or persistence.
"""

from __future__ import annotations

import logging

from .models import DomainEvent, ItemAdded, ItemDeleted

logger = logging.getLogger(__name__)


def notify(event: DomainEvent) -> None:
    if isinstance(event, ItemAdded):
        item = event.item
        logger.info("Item added: id=%s name=%r price=%s", item.id, item.name, item.price)
        return None

    if isinstance(event, ItemDeleted):
        logger.info("Item deleted: id=%s", event.item_id)
        return None

    raise TypeError(f"Unsupported event type: {type(event).__name__}")
