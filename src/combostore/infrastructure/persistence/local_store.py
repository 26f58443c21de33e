"""JSON-file-backed implementation of PersistenceGateway.

Each collection lives under a fixed key as one JSON document holding the
whole newest-first list of storage-shaped records. Every mutation is a
read-modify-write of that full list. There is no change feed.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Callable

from combostore.domain.exceptions import PersistenceError
from combostore.domain.model.design import Design
from combostore.domain.model.order import Order, OrderStatus
from combostore.domain.model.records import (
    design_from_record,
    design_to_record,
    map_rows,
    order_from_record,
    order_to_record,
)
from combostore.domain.repository.persistence_gateway import PersistenceGateway
from combostore.infrastructure.persistence.seed_catalog import seed_designs

logger = logging.getLogger(__name__)

DESIGNS_KEY = "tailor_store_designs_v2"
ORDERS_KEY = "tailor_store_orders_v1"


class LocalStore(PersistenceGateway):

    pushes_changes = False

    def __init__(self, data_dir: Path) -> None:
        super().__init__()
        self._data_dir = data_dir

    # --- Designs --------------------------------------------------------------

    async def fetch_designs(self) -> list[Design]:
        records = self._read_or_default(DESIGNS_KEY, None)
        if records is None:
            return seed_designs()
        return map_rows(records, design_from_record)

    async def upsert_design(self, design: Design) -> None:
        records = self._design_records()
        self._write(DESIGNS_KEY, _upsert(records, design_to_record(design)))
        logger.debug("Saved design %s locally", design.id)

    async def remove_design(self, design_id: str) -> None:
        records = self._design_records()
        self._write(DESIGNS_KEY, [raw for raw in records if raw["id"] != design_id])
        logger.debug("Removed design %s locally", design_id)

    def _design_records(self) -> list[dict]:
        # The first write materializes the seed catalog alongside the change.
        if not self._path(DESIGNS_KEY).exists():
            return [design_to_record(d) for d in seed_designs()]
        return self._read_strict(DESIGNS_KEY)

    # --- Orders ---------------------------------------------------------------

    async def fetch_orders(self) -> list[Order]:
        records = self._read_or_default(ORDERS_KEY, [])
        return map_rows(records, order_from_record)

    async def insert_order(self, order: Order) -> None:
        records = self._read_strict(ORDERS_KEY)
        self._write(ORDERS_KEY, _upsert(records, order_to_record(order)))
        logger.debug("Saved order %s locally", order.id)

    async def update_order_status(self, order_id: str, status: OrderStatus) -> None:
        records = self._read_strict(ORDERS_KEY)
        self._write(
            ORDERS_KEY,
            _map_matching(records, order_id, lambda raw: {**raw, "status": status.value}),
        )
        logger.debug("Order %s marked %s locally", order_id, status.value)

    # --- File helpers ---------------------------------------------------------

    def _path(self, key: str) -> Path:
        return self._data_dir / f"{key}.json"

    def _read_or_default(self, key: str, default: list[dict] | None) -> list[dict] | None:
        """Read a collection; a missing or unreadable document yields *default*."""
        path = self._path(key)
        if not path.exists():
            return default
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.error("Could not read %s: %s", path, exc)
            self.read_error = f"Could not read local data ({key})"
            return default

    def _read_strict(self, key: str) -> list[dict]:
        path = self._path(key)
        if not path.exists():
            return []
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise PersistenceError(f"Could not read local data ({key}): {exc}") from exc

    def _write(self, key: str, records: list[dict]) -> None:
        path = self._path(key)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(records, indent=2) + "\n", encoding="utf-8")
        except OSError as exc:
            raise PersistenceError(f"Could not write local data ({key}): {exc}") from exc


def _upsert(records: list[dict], record: dict) -> list[dict]:
    """Replace the record with the same id, otherwise prepend it."""
    if any(raw["id"] == record["id"] for raw in records):
        return _map_matching(records, record["id"], lambda _: record)
    return [record, *records]


def _map_matching(
    records: list[dict], record_id: str, change: Callable[[dict], dict]
) -> list[dict]:
    return [change(raw) if raw["id"] == record_id else raw for raw in records]
