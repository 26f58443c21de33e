"""Tests for loading, change-feed sync and queries on the Storefront."""

import pytest

from combostore.application.storefront import CONNECTION_NOTICE, Storefront
from combostore.domain.model.order import OrderStatus
from combostore.domain.model.records import design_to_record, order_to_record
from combostore.infrastructure.persistence.local_store import LocalStore
from combostore.infrastructure.persistence.seed_catalog import seed_designs
from tests.fakes import make_design, make_order, remote_store


async def _synced(designs=(), orders=()):
    store, client = remote_store(designs, orders)
    front = Storefront(store)
    await front.load()
    await front.start_sync()
    return front, client


class TestLoad:

    @pytest.mark.asyncio
    async def test_load_reads_both_collections(self):
        store, _ = remote_store(
            [make_design("a"), make_design("b")], [make_order("o1"), make_order("o2")]
        )
        front = Storefront(store)
        await front.load()

        assert {d.id for d in front.designs} == {"a", "b"}
        assert {o.id for o in front.orders} == {"o1", "o2"}
        assert front.take_notice() is None

    @pytest.mark.asyncio
    async def test_unreachable_backend_falls_back(self):
        store, client = remote_store([make_design()], [make_order()])
        client.fail_reads = True
        front = Storefront(store)
        await front.load()

        assert front.designs == seed_designs()
        assert front.orders == []
        assert front.take_notice() == CONNECTION_NOTICE
        assert front.take_notice() is None

    @pytest.mark.asyncio
    async def test_fresh_local_store_shows_seed(self, tmp_path):
        front = Storefront(LocalStore(tmp_path))
        await front.load()

        assert front.designs == seed_designs()
        assert front.orders == []
        assert front.notice is None


class TestChangeFeed:

    @pytest.mark.asyncio
    async def test_insert_from_another_session_is_prepended(self):
        front, client = await _synced([make_design("old")])

        client.emit("designs", {
            "eventType": "INSERT", "new": design_to_record(make_design("new")), "old": {},
        })

        assert [d.id for d in front.designs] == ["new", "old"]

    @pytest.mark.asyncio
    async def test_realtime_envelope_is_understood(self):
        front, client = await _synced([], [make_order()])
        accepted = order_to_record(make_order(status=OrderStatus.ACCEPTED))

        client.emit("orders", {
            "data": {"type": "UPDATE", "record": accepted, "old_record": {"id": "o1"}},
        })

        assert front.find_order("o1").status == OrderStatus.ACCEPTED

    @pytest.mark.asyncio
    async def test_delete_of_unknown_id_changes_nothing(self):
        front, client = await _synced([make_design("a"), make_design("b")])
        before = list(front.designs)

        client.emit("designs", {"eventType": "DELETE", "new": {}, "old": {"id": "zzz"}})

        assert front.designs == before

    @pytest.mark.asyncio
    async def test_malformed_payload_is_ignored(self):
        front, client = await _synced([make_design()])

        client.emit("designs", {"eventType": "TRUNCATE"})

        assert [d.id for d in front.designs] == ["d1"]

    @pytest.mark.asyncio
    async def test_listeners_hear_merged_events(self):
        front, client = await _synced([make_design()])
        heard = []
        front.add_listener(lambda collection, event: heard.append((collection, event.record_id)))

        client.emit("designs", {"eventType": "DELETE", "new": {}, "old": {"id": "d1"}})

        assert heard == [("designs", "d1")]
        assert front.designs == []

    @pytest.mark.asyncio
    async def test_stop_sync_closes_both_channels(self):
        front, client = await _synced()
        assert client.subscriber_count("designs") == 1
        assert client.subscriber_count("orders") == 1

        await front.stop_sync()

        assert client.subscriber_count("designs") == 0
        assert client.subscriber_count("orders") == 0
        assert sorted(client.closed_channels) == ["designs_channel", "orders_channel"]

    @pytest.mark.asyncio
    async def test_local_mode_sync_is_a_no_op(self, tmp_path):
        front = Storefront(LocalStore(tmp_path))
        await front.load()

        await front.start_sync()
        await front.stop_sync()

        assert front.designs == seed_designs()


class TestQueries:

    @pytest.mark.asyncio
    async def test_design_name_for_dangling_reference(self):
        store, _ = remote_store([make_design()], [make_order(design_id="gone")])
        front = Storefront(store)
        await front.load()

        assert front.design_name_for(front.orders[0]) == "Unknown Design"

    @pytest.mark.asyncio
    async def test_pending_orders(self):
        store, _ = remote_store([], [
            make_order("o1"),
            make_order("o2", status=OrderStatus.ACCEPTED),
            make_order("o3", status=OrderStatus.REJECTED),
        ])
        front = Storefront(store)
        await front.load()

        assert [o.id for o in front.pending_orders] == ["o1"]
