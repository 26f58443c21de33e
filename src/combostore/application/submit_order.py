"""Application service: Submit Order use case (customer-facing)."""

from __future__ import annotations

import logging

from combostore.application.dto import CustomerDetails, OrderDTO
from combostore.application.storefront import Storefront
from combostore.domain.model.order import Order

logger = logging.getLogger(__name__)


class SubmitOrderHandler:

    def __init__(self, storefront: Storefront) -> None:
        self._storefront = storefront

    async def handle(
        self,
        design_id: str,
        combo_type: str,
        selected_sizes: dict[str, str],
        customer: CustomerDetails,
        notes: dict[str, str] | None = None,
    ) -> OrderDTO:
        """Place a new pending order.

        The design is not required to exist any more; staff will see
        "Unknown Design" for it.
        """
        order = Order.create(
            design_id=design_id,
            combo_type=combo_type,
            selected_sizes=selected_sizes,
            customer_name=customer.name,
            customer_phone=customer.phone,
            customer_address=customer.address,
            customer_country_code=customer.country_code,
            customer_email=customer.email,
            notes=notes,
        )
        gateway = self._storefront.gateway
        await gateway.insert_order(order)
        logger.info("Order %s submitted for design %s", order.id, design_id)

        # Remote mode: the feed delivers the INSERT.
        if not gateway.pushes_changes:
            await self._storefront.refresh_orders()

        return OrderDTO.from_order(order, self._storefront.design_name_for(order))
