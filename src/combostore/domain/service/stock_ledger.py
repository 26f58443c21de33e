"""Domain service: Stock Ledger.

Both operations clamp at zero instead of failing: a stale read can
never drive a cell negative. They return a whole new Design so callers
persist with a single upsert, which makes a retried write harmless.
"""

from __future__ import annotations

from dataclasses import replace

from combostore.domain.exceptions import ValidationError
from combostore.domain.model.design import Design
from combostore.domain.model.value_objects import Category


def decrement(design: Design, category: str | Category, size: str, amount: int = 1) -> Design:
    """Return *design* with ``max(0, count - amount)`` at (category, size)."""
    if amount < 0:
        raise ValidationError("Decrement amount cannot be negative")
    current = design.inventory.count(category, size)
    return _with_cell(design, category, size, max(0, current - amount))


def set_value(design: Design, category: str | Category, size: str, value: int) -> Design:
    """Return *design* with the cell set to ``max(0, value)``.

    Used for direct staff edits; negative input is treated as zero.
    """
    return _with_cell(design, category, size, max(0, int(value)))


def _with_cell(design: Design, category: str | Category, size: str, value: int) -> Design:
    return replace(design, inventory=design.inventory.with_count(category, size, value))
