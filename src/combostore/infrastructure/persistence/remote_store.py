"""Remote implementation of PersistenceGateway.

Translates gateway calls into StorageClient table operations and
forwards row changes from the backend's change feed as ChangeEvents.

Reads never raise: a failed fetch falls back to the seed catalog
(designs) or an empty list (orders). Writes raise PersistenceError.
"""

from __future__ import annotations

import logging
from typing import Any

from combostore.domain.exceptions import PersistenceError, ValidationError
from combostore.domain.model.change_event import ChangeEvent
from combostore.domain.model.design import Design
from combostore.domain.model.order import Order, OrderStatus
from combostore.domain.model.records import (
    UNMAPPABLE_ROW,
    design_from_record,
    design_to_record,
    map_rows,
    order_from_record,
    order_to_record,
)
from combostore.domain.repository.persistence_gateway import (
    ChangeCallback,
    PersistenceGateway,
    Unsubscribe,
)
from combostore.infrastructure.persistence.seed_catalog import seed_designs
from combostore.infrastructure.persistence.storage_client import (
    StorageClient,
    StorageError,
)

logger = logging.getLogger(__name__)

DESIGNS_TABLE = "designs"
ORDERS_TABLE = "orders"
ORDER_COLUMN = "createdat"


class RemoteStore(PersistenceGateway):

    pushes_changes = True

    def __init__(self, client: StorageClient) -> None:
        super().__init__()
        self._client = client

    # --- Designs --------------------------------------------------------------

    async def fetch_designs(self) -> list[Design]:
        try:
            rows = await self._client.select(DESIGNS_TABLE, ORDER_COLUMN)
        except StorageError as exc:
            logger.error("Error fetching designs: %s", exc)
            self.read_error = str(exc)
            return seed_designs()
        return map_rows(rows, design_from_record)

    async def upsert_design(self, design: Design) -> None:
        await self._write("sync design", self._client.upsert(DESIGNS_TABLE, design_to_record(design)))

    async def remove_design(self, design_id: str) -> None:
        await self._write("remove design", self._client.delete(DESIGNS_TABLE, {"id": design_id}))

    # --- Orders ---------------------------------------------------------------

    async def fetch_orders(self) -> list[Order]:
        try:
            rows = await self._client.select(ORDERS_TABLE, ORDER_COLUMN)
        except StorageError as exc:
            logger.error("Error fetching orders: %s", exc)
            self.read_error = str(exc)
            return []
        return map_rows(rows, order_from_record)

    async def insert_order(self, order: Order) -> None:
        await self._write("submit order", self._client.insert(ORDERS_TABLE, order_to_record(order)))

    async def update_order_status(self, order_id: str, status: OrderStatus) -> None:
        await self._write(
            "update order status",
            self._client.update(ORDERS_TABLE, {"status": status.value}, {"id": order_id}),
        )

    # --- Change feed ----------------------------------------------------------

    async def subscribe_to_designs(self, callback: ChangeCallback) -> Unsubscribe:
        return await self._subscribe("designs_channel", DESIGNS_TABLE, callback)

    async def subscribe_to_orders(self, callback: ChangeCallback) -> Unsubscribe:
        return await self._subscribe("orders_channel", ORDERS_TABLE, callback)

    async def _subscribe(self, channel: str, table: str, callback: ChangeCallback) -> Unsubscribe:
        def on_payload(payload: dict[str, Any]) -> None:
            try:
                event = ChangeEvent.from_payload(payload)
            except ValidationError as exc:
                logger.warning("Ignoring %s feed payload: %s", table, exc)
                return
            try:
                callback(event)
            except UNMAPPABLE_ROW as exc:
                logger.warning("Skipping malformed %s row %s: %s", table, event.record_id, exc)

        try:
            return await self._client.subscribe(channel, table, on_payload)
        except StorageError as exc:
            raise PersistenceError(str(exc)) from exc

    # --- Helpers --------------------------------------------------------------

    @staticmethod
    async def _write(action: str, operation) -> None:
        try:
            await operation
        except StorageError as exc:
            logger.error("Error during %s: %s", action, exc)
            raise PersistenceError(f"Sync Error: {exc}") from exc
