"""Tests for the inventory queries."""

import pytest

from combostore.application.show_inventory import ShowInventoryHandler, is_low_stock
from combostore.application.storefront import Storefront
from combostore.domain.model.order import OrderStatus
from tests.fakes import make_design, make_order, remote_store


async def _handler():
    designs = [
        make_design("a", "Garden Leaf", men={"XL": 3}, boys={"4-5": 1}),
        make_design("b", "Paisley", women={"M": 2}),
    ]
    orders = [make_order("o1"), make_order("o2", status=OrderStatus.ACCEPTED)]
    store, _ = remote_store(designs, orders)
    front = Storefront(store)
    await front.load()
    return ShowInventoryHandler(front)


def test_low_stock_threshold():
    assert not is_low_stock(0)
    assert is_low_stock(1)
    assert not is_low_stock(2)


class TestShowInventory:

    @pytest.mark.asyncio
    async def test_lines_cover_every_cell(self):
        handler = await _handler()

        lines = handler.handle()

        assert len(lines) == 2 * (5 + 5 + 11 + 11)
        stocked = {(l.design_name, l.category, l.size, l.stock) for l in lines if l.stock}
        assert stocked == {
            ("Garden Leaf", "men", "XL", 3),
            ("Garden Leaf", "boys", "4-5", 1),
            ("Paisley", "women", "M", 2),
        }

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive(self):
        handler = await _handler()

        assert [d.id for d in handler.designs("paisley")] == ["b"]
        assert {d.id for d in handler.designs("organza")} == {"a", "b"}
        assert handler.designs("velvet") == []

    @pytest.mark.asyncio
    async def test_low_stock_filter(self):
        handler = await _handler()

        assert [d.id for d in handler.designs(low_stock_only=True)] == ["a"]

    @pytest.mark.asyncio
    async def test_summary(self):
        handler = await _handler()

        summary = handler.summary()

        assert summary.total_designs == 2
        assert summary.total_stock == 6
        assert summary.low_stock_count == 1
        assert summary.pending_orders == 1

    @pytest.mark.asyncio
    async def test_named_queries(self):
        handler = await _handler()

        assert [d.id for d in handler.search("GARDEN")] == ["a"]
        assert [d.id for d in handler.low_stock_designs()] == ["a"]
