"""Application services: staff catalog edits.

Each edit updates the storefront first and then persists the whole
design. A failed write leaves the local change in place and the error
reaches the caller, who may reload.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from combostore.application.storefront import Storefront
from combostore.domain.exceptions import EntityNotFoundError, ValidationError
from combostore.domain.model.design import Design, Inventory, parse_child_type
from combostore.domain.service import stock_ledger

logger = logging.getLogger(__name__)


class UpdateStockHandler:

    def __init__(self, storefront: Storefront) -> None:
        self._storefront = storefront

    async def handle(self, design_id: str, category: str, size: str, value: int) -> Design:
        """Set one stock cell. Negative values are stored as 0."""
        design = self._storefront.find_design(design_id)
        if design is None:
            raise EntityNotFoundError(f"Design '{design_id}' not found")

        updated = stock_ledger.set_value(design, category, size, value)
        self._storefront.mirror_design(updated)
        await self._storefront.gateway.upsert_design(updated)
        return updated


class SaveDesignHandler:

    def __init__(self, storefront: Storefront) -> None:
        self._storefront = storefront

    async def handle(
        self,
        name: str,
        color: str | None = None,
        fabric: str | None = None,
        image_url: str | None = None,
        label: str | None = None,
        child_type: str | None = None,
        inventory: dict | None = None,
        design_id: str | None = None,
    ) -> Design:
        """Create a design, or edit the one with *design_id*.

        Edits keep the id and creation time. Any field left as None
        keeps its current value; an empty string clears it.
        """
        if design_id is None:
            design = Design.create(
                name=name,
                color=color or "",
                fabric=fabric or "",
                image_url=image_url or "",
                inventory=Inventory.from_dict(inventory),
                label=label,
                child_type=child_type,
            )
        else:
            existing = self._storefront.find_design(design_id)
            if existing is None:
                raise EntityNotFoundError(f"Design '{design_id}' not found")
            design = replace(
                existing,
                name=_required_name(name),
                color=_merged(color, existing.color),
                fabric=_merged(fabric, existing.fabric),
                image_url=_merged(image_url, existing.image_url),
                label=label if label is not None else existing.label,
                child_type=parse_child_type(child_type) if child_type else existing.child_type,
                inventory=(
                    Inventory.from_dict(inventory) if inventory is not None
                    else existing.inventory
                ),
            )

        self._storefront.mirror_design(design)
        await self._storefront.gateway.upsert_design(design)
        logger.info("Design %s saved", design.id)
        return design


class DeleteDesignHandler:

    def __init__(self, storefront: Storefront) -> None:
        self._storefront = storefront

    async def handle(self, design_id: str) -> None:
        if self._storefront.find_design(design_id) is None:
            raise EntityNotFoundError(f"Design '{design_id}' not found")

        self._storefront.forget_design(design_id)
        await self._storefront.gateway.remove_design(design_id)
        logger.info("Design %s deleted", design_id)


def _required_name(name: str) -> str:
    if not name or not name.strip():
        raise ValidationError("Design name is required")
    return name.strip()


def _merged(value: str | None, current: str) -> str:
    return current if value is None else value.strip()
