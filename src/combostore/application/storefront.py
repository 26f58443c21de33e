"""Storefront: owner of the in-memory design and order collections.

Every mutation of ``designs`` and ``orders`` goes through this object:
either a write path mirroring what was just persisted, or a change-feed
event merged by the reconciler. Use cases receive the storefront rather
than reaching for module-level state.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable

from combostore.domain.model.change_event import ChangeEvent
from combostore.domain.model.design import Design
from combostore.domain.model.order import Order, OrderStatus
from combostore.domain.model.records import design_from_record, order_from_record
from combostore.domain.model.value_objects import UNKNOWN_DESIGN
from combostore.domain.repository.persistence_gateway import (
    PersistenceGateway,
    Unsubscribe,
)
from combostore.domain.service.reconciler import reconcile

logger = logging.getLogger(__name__)

ChangeListener = Callable[[str, ChangeEvent], None]

CONNECTION_NOTICE = "Failed to connect to database. Falling back to local mode."


class Storefront:

    def __init__(self, gateway: PersistenceGateway) -> None:
        self.gateway = gateway
        self.designs: list[Design] = []
        self.orders: list[Order] = []
        self.notice: str | None = None
        self._unsubscribers: list[Unsubscribe] = []
        self._listeners: list[ChangeListener] = []

    # --- Lifecycle ------------------------------------------------------------

    async def load(self) -> None:
        """Fetch both collections; sets ``notice`` if a read degraded."""
        self.gateway.read_error = None
        self.designs = await self.gateway.fetch_designs()
        self.orders = await self.gateway.fetch_orders()
        if self.gateway.read_error is not None:
            logger.warning("Initial load degraded: %s", self.gateway.read_error)
            self.notice = CONNECTION_NOTICE

    async def start_sync(self) -> None:
        """Subscribe both collections to the backend change feed."""
        self._unsubscribers.append(
            await self.gateway.subscribe_to_orders(self.apply_order_event)
        )
        self._unsubscribers.append(
            await self.gateway.subscribe_to_designs(self.apply_design_event)
        )

    async def stop_sync(self) -> None:
        unsubscribers, self._unsubscribers = self._unsubscribers, []
        for unsubscribe in unsubscribers:
            await unsubscribe()

    def take_notice(self) -> str | None:
        """Return the pending notice once, then clear it."""
        notice, self.notice = self.notice, None
        return notice

    # --- Feed path ------------------------------------------------------------

    def add_listener(self, listener: ChangeListener) -> None:
        """Call *listener(collection, event)* after each merged feed event."""
        self._listeners.append(listener)

    def apply_design_event(self, event: ChangeEvent) -> None:
        self.designs = reconcile(self.designs, event, design_from_record)
        self._notify("designs", event)

    def apply_order_event(self, event: ChangeEvent) -> None:
        self.orders = reconcile(self.orders, event, order_from_record)
        self._notify("orders", event)

    def _notify(self, collection: str, event: ChangeEvent) -> None:
        for listener in self._listeners:
            listener(collection, event)

    # --- Write path -----------------------------------------------------------

    def mirror_design(self, design: Design) -> None:
        """Replace the design with the same id, or prepend it."""
        for i, existing in enumerate(self.designs):
            if existing.id == design.id:
                self.designs = [*self.designs[:i], design, *self.designs[i + 1:]]
                return
        self.designs = [design, *self.designs]

    def forget_design(self, design_id: str) -> None:
        self.designs = [d for d in self.designs if d.id != design_id]

    def mark_order_status(self, order_id: str, status: OrderStatus) -> None:
        self.orders = [
            replace(o, status=status) if o.id == order_id else o for o in self.orders
        ]

    async def refresh_orders(self) -> None:
        self.orders = await self.gateway.fetch_orders()

    # --- Queries --------------------------------------------------------------

    def find_design(self, design_id: str) -> Design | None:
        for design in self.designs:
            if design.id == design_id:
                return design
        return None

    def find_order(self, order_id: str) -> Order | None:
        for order in self.orders:
            if order.id == order_id:
                return order
        return None

    def design_name_for(self, order: Order) -> str:
        design = self.find_design(order.design_id)
        return design.name if design is not None else UNKNOWN_DESIGN

    @property
    def pending_orders(self) -> list[Order]:
        return [o for o in self.orders if o.status == OrderStatus.PENDING]
