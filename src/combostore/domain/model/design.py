"""Design aggregate and its per-size inventory.

A Design is one printed/fabric combination offered to families. Its
inventory is a fixed grid: every category has every size of its ladder,
so a missing cell always means "0 in stock", never "unknown".
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from combostore.domain.exceptions import ValidationError
from combostore.domain.model.value_objects import (
    Category,
    ChildType,
    new_id,
    now_ms,
)
from combostore.domain.service.combo_mapper import valid_sizes


def _full_row(category: Category, counts: dict | None) -> dict[str, int]:
    counts = counts or {}
    row: dict[str, int] = {}
    for size in valid_sizes(category):
        try:
            value = int(counts.get(size, 0) or 0)
        except (TypeError, ValueError):
            value = 0
        row[size] = max(0, value)
    return row


@dataclass(frozen=True)
class Inventory:
    """Stock counts per category and size.

    Invariants:
    - every size of a category's ladder is present
    - every count is an int >= 0
    """

    men: dict[str, int] = field(default_factory=lambda: _full_row(Category.MEN, None))
    women: dict[str, int] = field(default_factory=lambda: _full_row(Category.WOMEN, None))
    boys: dict[str, int] = field(default_factory=lambda: _full_row(Category.BOYS, None))
    girls: dict[str, int] = field(default_factory=lambda: _full_row(Category.GIRLS, None))

    @staticmethod
    def from_dict(raw: dict | None) -> Inventory:
        """Build a complete grid from a possibly partial mapping."""
        raw = raw or {}
        return Inventory(
            **{c.value: _full_row(c, raw.get(c.value)) for c in Category}
        )

    def to_dict(self) -> dict[str, dict[str, int]]:
        return {c.value: dict(self.row(c)) for c in Category}

    def row(self, category: str | Category) -> dict[str, int]:
        return getattr(self, Category.parse(category).value)

    def count(self, category: str | Category, size: str) -> int:
        category = Category.parse(category)
        row = self.row(category)
        if size not in row:
            raise ValidationError(
                f"Size '{size}' is not stocked for category '{category.value}'"
            )
        return row[size]

    def with_count(self, category: str | Category, size: str, value: int) -> Inventory:
        """Return a copy with one cell replaced; the original is untouched."""
        category = Category.parse(category)
        self.count(category, size)
        row = dict(self.row(category))
        row[size] = value
        return replace(self, **{category.value: row})

    def cells(self) -> list[tuple[Category, str, int]]:
        return [
            (category, size, count)
            for category in Category
            for size, count in self.row(category).items()
        ]

    @property
    def total(self) -> int:
        return sum(count for _, _, count in self.cells())


@dataclass
class Design:
    """Aggregate root for a catalog design.

    Use ``Design.create()`` for new designs. The plain constructor is
    left for reconstituting persisted records.
    """

    id: str
    name: str
    color: str
    fabric: str
    image_url: str
    inventory: Inventory = field(default_factory=Inventory)
    label: str | None = None
    child_type: ChildType | None = None
    created_at: int = field(default_factory=now_ms)

    @staticmethod
    def create(
        name: str,
        color: str = "",
        fabric: str = "",
        image_url: str = "",
        inventory: Inventory | None = None,
        label: str | None = None,
        child_type: str | ChildType | None = None,
    ) -> Design:
        if not name or not name.strip():
            raise ValidationError("Design name is required")
        return Design(
            id=new_id(),
            name=name.strip(),
            color=color.strip(),
            fabric=fabric.strip(),
            image_url=image_url.strip(),
            inventory=inventory or Inventory(),
            label=label,
            child_type=parse_child_type(child_type),
        )


def parse_child_type(value: str | ChildType | None) -> ChildType | None:
    if value is None or isinstance(value, ChildType):
        return value
    try:
        return ChildType(value)
    except ValueError as exc:
        raise ValidationError(f"Unknown child type: {value!r}") from exc
