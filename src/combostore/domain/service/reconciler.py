"""Domain service: change-feed Reconciler.

Merges one change event into an ordered, id-keyed collection. The merge
is pure: it returns a new list and never moves records the event does
not touch. Collections are newest-first, so fresh inserts go on top.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Protocol, TypeVar

from combostore.domain.model.change_event import ChangeEvent, EventType

logger = logging.getLogger(__name__)


class _Identified(Protocol):
    id: str


T = TypeVar("T", bound=_Identified)


def reconcile(
    collection: list[T],
    event: ChangeEvent,
    from_record: Callable[[dict[str, Any]], T],
) -> list[T]:
    """Return *collection* with *event* applied.

    - INSERT: prepend, or overwrite in place on redelivery
    - UPDATE: overwrite in place; dropped if the id is not present
    - DELETE: remove by ``old.id``; no-op if not present
    """
    if event.event_type == EventType.DELETE:
        if event.old_id is None:
            logger.warning("DELETE event without an id, ignoring")
            return list(collection)
        return [item for item in collection if item.id != event.old_id]

    if event.new is None:
        logger.warning("%s event without a record, ignoring", event.event_type.value)
        return list(collection)

    record = from_record(event.new)
    index = _index_of(collection, record.id)

    if index is None:
        if event.event_type == EventType.UPDATE:
            # Racing an INSERT we have not seen yet; not buffered.
            logger.warning("Dropping UPDATE for unknown id %s", record.id)
            return list(collection)
        return [record, *collection]

    merged = list(collection)
    merged[index] = record
    return merged


def _index_of(collection: list[T], item_id: str) -> int | None:
    for i, item in enumerate(collection):
        if item.id == item_id:
            return i
    return None
