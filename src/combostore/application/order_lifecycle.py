"""Application service: Order lifecycle (accept / reject).

Accepting an order takes one unit of stock per member who picked a size,
then marks the order accepted. Each decrement is persisted before the
next member is handled, and the design is re-read from the storefront
every time, so a change-feed event landing between two writes is seen.

There is no compensation: if a write fails mid-way, the decrements
already persisted stay and the error reaches the caller.
"""

from __future__ import annotations

import logging

from combostore.application.storefront import Storefront
from combostore.domain.exceptions import EntityNotFoundError
from combostore.domain.model.order import Order, OrderStatus
from combostore.domain.service import stock_ledger
from combostore.domain.service.combo_mapper import member_to_category

logger = logging.getLogger(__name__)


class OrderLifecycleController:

    def __init__(self, storefront: Storefront) -> None:
        self._storefront = storefront

    async def accept(self, order: Order) -> None:
        """Deduct stock for every chosen size and mark the order accepted.

        Raises OrderAlreadyProcessedError, before touching anything, if
        the order is not pending.
        """
        current = self._storefront.find_order(order.id) or order
        current.ensure_pending()

        for member, size in current.chosen_sizes:
            category = member_to_category(member)
            design = self._storefront.find_design(current.design_id)
            if design is None:
                logger.warning(
                    "Order %s references missing design %s; skipping %s",
                    current.id, current.design_id, member,
                )
                continue

            updated = stock_ledger.decrement(design, category, size, 1)
            self._storefront.mirror_design(updated)
            await self._storefront.gateway.upsert_design(updated)
            logger.debug(
                "Order %s: %s %s/%s -> %d",
                current.id, member, category.value, size,
                updated.inventory.count(category, size),
            )

        await self._finish(current.id, OrderStatus.ACCEPTED)
        logger.info("Order %s accepted", current.id)

    async def reject(self, order_id: str) -> None:
        """Mark a pending order rejected. Inventory is untouched."""
        order = self._storefront.find_order(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        order.ensure_pending()

        await self._finish(order_id, OrderStatus.REJECTED)
        logger.info("Order %s rejected", order_id)

    async def _finish(self, order_id: str, status: OrderStatus) -> None:
        gateway = self._storefront.gateway
        await gateway.update_order_status(order_id, status)

        if gateway.pushes_changes:
            # The feed will echo this; apply it now so the UI does not wait.
            self._storefront.mark_order_status(order_id, status)
        else:
            await self._storefront.refresh_orders()
