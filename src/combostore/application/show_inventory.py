"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from combostore.application.dto import InventoryLineDTO, InventorySummaryDTO
from combostore.application.storefront import Storefront
from combostore.domain.model.design import Design

# A cell holding this many or fewer (but some) units is "low".
LOW_STOCK_LIMIT = 1


def is_low_stock(count: int) -> bool:
    return 0 < count <= LOW_STOCK_LIMIT


class ShowInventoryHandler:

    def __init__(self, storefront: Storefront) -> None:
        self._storefront = storefront

    def handle(self, search: str = "", low_stock_only: bool = False) -> list[InventoryLineDTO]:
        return [
            InventoryLineDTO(
                design_name=design.name,
                category=category.value,
                size=size,
                stock=count,
            )
            for design in self.designs(search, low_stock_only)
            for category, size, count in design.inventory.cells()
        ]

    def designs(self, search: str = "", low_stock_only: bool = False) -> list[Design]:
        """Designs matching *search* on name, color or fabric."""
        term = search.strip().lower()
        result = []
        for design in self._storefront.designs:
            haystack = (design.name, design.color, design.fabric)
            if term and not any(term in field.lower() for field in haystack):
                continue
            if low_stock_only and not _has_low_stock(design):
                continue
            result.append(design)
        return result

    def search(self, term: str) -> list[Design]:
        return self.designs(search=term)

    def low_stock_designs(self) -> list[Design]:
        """Designs with at least one nearly sold-out size."""
        return self.designs(low_stock_only=True)

    def summary(self) -> InventorySummaryDTO:
        cells = [
            count
            for design in self._storefront.designs
            for _, _, count in design.inventory.cells()
        ]
        return InventorySummaryDTO(
            total_designs=len(self._storefront.designs),
            total_stock=sum(cells),
            low_stock_count=sum(1 for count in cells if is_low_stock(count)),
            pending_orders=len(self._storefront.pending_orders),
        )


def _has_low_stock(design: Design) -> bool:
    return any(is_low_stock(count) for _, _, count in design.inventory.cells())
