"""Abstract persistence gateway for designs and orders.

Defined in the domain layer so the application never depends on which
backend is running. The composition root picks one implementation at
startup; business code only ever sees this interface and the
``pushes_changes`` capability flag.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Awaitable, Callable

from combostore.domain.model.change_event import ChangeEvent
from combostore.domain.model.design import Design
from combostore.domain.model.order import Order, OrderStatus

ChangeCallback = Callable[[ChangeEvent], None]
Unsubscribe = Callable[[], Awaitable[None]]


async def _noop() -> None:
    return None


class PersistenceGateway(ABC):

    #: True if the backend echoes writes back through the change feed.
    pushes_changes: bool = False

    def __init__(self) -> None:
        self.read_error: str | None = None

    # --- Designs --------------------------------------------------------------

    @abstractmethod
    async def fetch_designs(self) -> list[Design]:
        """Return all designs newest-first, or the seed catalog."""

    @abstractmethod
    async def upsert_design(self, design: Design) -> None:
        """Persist a whole design record (insert or replace by id)."""

    @abstractmethod
    async def remove_design(self, design_id: str) -> None:
        """Delete a design by id."""

    # --- Orders ---------------------------------------------------------------

    @abstractmethod
    async def fetch_orders(self) -> list[Order]:
        """Return all orders newest-first, or an empty list."""

    @abstractmethod
    async def insert_order(self, order: Order) -> None:
        """Persist a newly submitted order."""

    @abstractmethod
    async def update_order_status(self, order_id: str, status: OrderStatus) -> None:
        """Change the status of one order."""

    # --- Change feed ----------------------------------------------------------

    async def subscribe_to_designs(self, callback: ChangeCallback) -> Unsubscribe:
        """Listen for design changes. Backends without a feed never call back."""
        return _noop

    async def subscribe_to_orders(self, callback: ChangeCallback) -> Unsubscribe:
        """Listen for order changes. Backends without a feed never call back."""
        return _noop
