"""Application service: Show Order use case (query)."""

from __future__ import annotations

from combostore.application.dto import OrderDTO
from combostore.application.storefront import Storefront
from combostore.domain.exceptions import EntityNotFoundError
from combostore.domain.model.order import OrderStatus


class ShowOrderHandler:

    def __init__(self, storefront: Storefront) -> None:
        self._storefront = storefront

    def handle(self, order_id: str) -> OrderDTO:
        order = self._storefront.find_order(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return OrderDTO.from_order(order, self._storefront.design_name_for(order))

    def list_all(self, status: str | None = None) -> list[OrderDTO]:
        """Orders newest-first, optionally only those in *status*."""
        wanted = OrderStatus(status) if status else None
        return [
            OrderDTO.from_order(order, self._storefront.design_name_for(order))
            for order in self._storefront.orders
            if wanted is None or order.status == wanted
        ]
