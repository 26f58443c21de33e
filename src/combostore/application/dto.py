"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from combostore.domain.model.order import Order
from combostore.domain.model.value_objects import DEFAULT_COUNTRY_CODE
from combostore.domain.service.combo_mapper import combo_label


@dataclass(frozen=True)
class CustomerDetails:
    """Input: who is ordering and where it ships."""

    name: str
    phone: str
    address: str
    country_code: str = DEFAULT_COUNTRY_CODE
    email: str | None = None


@dataclass(frozen=True)
class OrderDTO:
    """Output: an order as displayed to staff."""

    id: str
    design_id: str
    design_name: str
    combo_type: str
    combo_label: str
    selected_sizes: dict[str, str]
    customer_name: str
    customer_phone: str  # includes the country code, e.g. "+91 9876543210"
    customer_address: str
    customer_email: str | None
    status: str
    created_at: str
    notes: dict[str, str] = field(default_factory=dict)

    @staticmethod
    def from_order(order: Order, design_name: str) -> OrderDTO:
        return OrderDTO(
            id=order.id,
            design_id=order.design_id,
            design_name=design_name,
            combo_type=order.combo_type.value,
            combo_label=combo_label(order.combo_type),
            selected_sizes=dict(order.selected_sizes),
            customer_name=order.customer_name,
            customer_phone=f"{order.customer_country_code} {order.customer_phone}",
            customer_address=order.customer_address,
            customer_email=order.customer_email,
            status=order.status.value,
            created_at=_format_ms(order.created_at),
            notes=dict(order.notes or {}),
        )


@dataclass(frozen=True)
class InventoryLineDTO:
    """Output: one stock cell of one design."""

    design_name: str
    category: str
    size: str
    stock: int


@dataclass(frozen=True)
class InventorySummaryDTO:
    total_designs: int
    total_stock: int
    low_stock_count: int
    pending_orders: int


def _format_ms(timestamp_ms: int) -> str:
    moment = datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc)
    return moment.strftime("%Y-%m-%d %H:%M UTC")
