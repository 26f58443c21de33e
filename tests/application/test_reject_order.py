"""Integration tests for rejecting an order."""

import pytest

from combostore.application.order_lifecycle import OrderLifecycleController
from combostore.application.storefront import Storefront
from combostore.domain.exceptions import EntityNotFoundError, OrderAlreadyProcessedError
from combostore.domain.model.order import OrderStatus
from tests.fakes import local_store, make_design, make_order, remote_store


class TestRejectOrder:

    @pytest.mark.asyncio
    async def test_reject_leaves_stock_alone(self):
        store, client = remote_store([make_design(men={"XL": 3})], [make_order()])
        front = Storefront(store)
        await front.load()

        await OrderLifecycleController(front).reject("o1")

        assert front.find_order("o1").status == OrderStatus.REJECTED
        assert front.find_design("d1").inventory.count("men", "XL") == 3
        assert client.row("orders", "o1")["status"] == "rejected"
        assert ("upsert", "designs") not in client.writes

    @pytest.mark.asyncio
    async def test_reject_in_local_mode(self, tmp_path):
        front = Storefront(local_store(tmp_path, [make_design()], [make_order()]))
        await front.load()

        await OrderLifecycleController(front).reject("o1")

        reloaded = await front.gateway.fetch_orders()
        assert reloaded[0].status == OrderStatus.REJECTED
        assert front.pending_orders == []

    @pytest.mark.asyncio
    async def test_reject_unknown_order(self):
        store, _ = remote_store()
        front = Storefront(store)
        await front.load()

        with pytest.raises(EntityNotFoundError, match="not found"):
            await OrderLifecycleController(front).reject("nope")

    @pytest.mark.asyncio
    async def test_reject_accepted_order_is_refused(self):
        store, client = remote_store([], [make_order(status=OrderStatus.ACCEPTED)])
        front = Storefront(store)
        await front.load()

        with pytest.raises(OrderAlreadyProcessedError):
            await OrderLifecycleController(front).reject("o1")
        assert client.writes == []
