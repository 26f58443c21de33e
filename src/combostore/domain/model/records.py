"""Storage record shapes.

Both stores persist the same flat, lower-case/snake-case rows. These
functions are the only place the logical field names are translated to
and from that shape.

    Design                      Order
    image_url   -> imageurl     design_id             -> designid
    child_type  -> childtype    combo_type            -> combotype
    created_at  -> createdat    selected_sizes        -> selectedsizes
                                customer_name         -> customer_name
                                customer_phone        -> customer_phone
                                customer_country_code -> customer_country_code
                                customer_address      -> customer_address
                                customer_email        -> customer_email (only when set)
                                created_at            -> createdat
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, TypeVar

from combostore.domain.exceptions import DomainException
from combostore.domain.model.design import Design, Inventory, parse_child_type
from combostore.domain.model.order import Order, OrderStatus
from combostore.domain.model.value_objects import (
    DEFAULT_COUNTRY_CODE,
    NOT_APPLICABLE,
    ComboType,
    now_ms,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

# What a row with missing or garbage fields can raise while being mapped.
UNMAPPABLE_ROW = (DomainException, ValueError, KeyError, TypeError)


# ---------------------------------------------------------------------------
# Design
# ---------------------------------------------------------------------------


def design_to_record(design: Design) -> dict[str, Any]:
    return {
        "id": design.id,
        "name": design.name,
        "color": design.color,
        "fabric": design.fabric,
        "imageurl": design.image_url,
        "inventory": design.inventory.to_dict(),
        "childtype": design.child_type.value if design.child_type else None,
        "label": design.label,
        "createdat": design.created_at,
    }


def design_from_record(raw: dict[str, Any]) -> Design:
    return Design(
        id=str(raw["id"]),
        name=raw.get("name") or "",
        color=raw.get("color") or "",
        fabric=raw.get("fabric") or "",
        image_url=_first(raw, "imageurl", "imageUrl") or "",
        inventory=Inventory.from_dict(raw.get("inventory")),
        label=raw.get("label"),
        child_type=parse_child_type(_first(raw, "childtype", "childType") or None),
        created_at=_timestamp(_first(raw, "createdat", "createdAt")),
    )


# ---------------------------------------------------------------------------
# Order
# ---------------------------------------------------------------------------


def order_to_record(order: Order) -> dict[str, Any]:
    record = {
        "id": order.id,
        "designid": order.design_id,
        "combotype": order.combo_type.value,
        "selectedsizes": dict(order.selected_sizes),
        "customer_name": order.customer_name,
        "customer_phone": order.customer_phone,
        "customer_country_code": order.customer_country_code,
        "customer_address": order.customer_address,
        "notes": order.notes,
        "status": order.status.value,
        "createdat": order.created_at,
    }
    # Optional column; rows without an email never send the key.
    if order.customer_email:
        record["customer_email"] = order.customer_email
    return record


def order_from_record(raw: dict[str, Any]) -> Order:
    """Rebuild an Order; tolerates camel-case rows written by older clients."""
    return Order(
        id=str(raw["id"]),
        design_id=str(_first(raw, "designid", "designId") or ""),
        combo_type=ComboType.parse(_first(raw, "combotype", "comboType")),
        selected_sizes=dict(_first(raw, "selectedsizes", "selectedSizes") or {}),
        customer_name=_first(raw, "customer_name", "customerName") or NOT_APPLICABLE,
        customer_phone=_phone(_first(raw, "customer_phone", "customerPhone")),
        customer_country_code=(
            _first(raw, "customer_country_code", "customerCountryCode")
            or DEFAULT_COUNTRY_CODE
        ),
        customer_address=_first(raw, "customer_address", "customerAddress") or NOT_APPLICABLE,
        customer_email=_first(raw, "customer_email", "customerEmail") or None,
        notes=raw.get("notes") or None,
        status=OrderStatus(raw.get("status") or OrderStatus.PENDING.value),
        created_at=_timestamp(_first(raw, "createdat", "createdAt")),
    )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _first(raw: dict[str, Any], *keys: str) -> Any:
    for key in keys:
        value = raw.get(key)
        if value is not None:
            return value
    return None


def _timestamp(value: Any) -> int:
    # bigint columns can arrive as strings
    if value is None or value == "":
        return now_ms()
    try:
        return int(value)
    except ValueError:
        return int(float(value))


def _phone(value: Any) -> str:
    """Phones are opaque strings; the column is numeric so undo float noise."""
    if value is None or value == "":
        return NOT_APPLICABLE
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def map_rows(
    rows: Iterable[dict[str, Any]], from_record: Callable[[dict[str, Any]], T]
) -> list[T]:
    """Map every row that can be mapped; malformed rows are logged and skipped."""
    result = []
    for raw in rows:
        try:
            result.append(from_record(raw))
        except UNMAPPABLE_ROW as exc:
            logger.warning("Skipping malformed row %r: %s", raw.get("id"), exc)
    return result
