"""Order aggregate.

An order records which design a family wants, in which combo, and the
size each member picked. It is created ``pending`` and moves exactly once
to ``accepted`` or ``rejected``; nothing else about it ever changes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from combostore.domain.exceptions import OrderAlreadyProcessedError, ValidationError
from combostore.domain.model.value_objects import (
    DEFAULT_COUNTRY_CODE,
    NOT_APPLICABLE,
    ComboType,
    new_id,
    now_ms,
)
from combostore.domain.service.combo_mapper import combo_members, is_valid_size


class OrderStatus(Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use the ``Order.create()`` factory for new orders. The ``__init__``
    stays permissive so stores can reconstitute records (including ones
    written by older clients) without re-validating.
    """

    id: str
    design_id: str
    combo_type: ComboType
    selected_sizes: dict[str, str]
    customer_name: str
    customer_phone: str
    customer_address: str
    customer_country_code: str = DEFAULT_COUNTRY_CODE
    customer_email: str | None = None
    notes: dict[str, str] | None = None
    status: OrderStatus = OrderStatus.PENDING
    created_at: int = field(default_factory=now_ms)

    # --- Factory (submission path only) ---------------------------------------

    @staticmethod
    def create(
        design_id: str,
        combo_type: str | ComboType,
        selected_sizes: dict[str, str],
        customer_name: str,
        customer_phone: str,
        customer_address: str,
        customer_country_code: str | None = None,
        customer_email: str | None = None,
        notes: dict[str, str] | None = None,
    ) -> Order:
        """Create a new pending order, enforcing submission rules."""
        if not design_id:
            raise ValidationError("Design is required")

        required = {
            "Customer name": customer_name,
            "Phone number": customer_phone,
            "Address": customer_address,
        }
        for label, value in required.items():
            if not value or not str(value).strip():
                raise ValidationError(f"{label} is required")

        combo = ComboType.parse(combo_type)

        # Only the combo's members are kept; anyone not mentioned opts out.
        sizes: dict[str, str] = {}
        for member in combo_members(combo):
            size = (selected_sizes.get(member.value) or NOT_APPLICABLE).strip()
            if not is_valid_size(member, size):
                raise ValidationError(
                    f"Size '{size}' is not available for {member.value}"
                )
            sizes[member.value] = size

        return Order(
            id=new_id(),
            design_id=design_id,
            combo_type=combo,
            selected_sizes=sizes,
            customer_name=customer_name.strip(),
            customer_phone=str(customer_phone).strip(),
            customer_address=customer_address.strip(),
            customer_country_code=(customer_country_code or DEFAULT_COUNTRY_CODE).strip(),
            customer_email=(customer_email or "").strip() or None,
            notes=notes or None,
        )

    # --- State transitions ----------------------------------------------------

    @property
    def is_pending(self) -> bool:
        return self.status == OrderStatus.PENDING

    def ensure_pending(self) -> None:
        if not self.is_pending:
            raise OrderAlreadyProcessedError(self.id, self.status.value)

    def accept(self) -> None:
        """Transition pending -> accepted.

        Stock decrements happen *before* this, coordinated by the
        order lifecycle controller.
        """
        self.ensure_pending()
        self.status = OrderStatus.ACCEPTED

    def reject(self) -> None:
        """Transition pending -> rejected. No inventory effect."""
        self.ensure_pending()
        self.status = OrderStatus.REJECTED

    # --- Computed properties --------------------------------------------------

    @property
    def chosen_sizes(self) -> list[tuple[str, str]]:
        """(member, size) pairs that affect stock, in selection order."""
        return [
            (member, size)
            for member, size in self.selected_sizes.items()
            if size != NOT_APPLICABLE
        ]
