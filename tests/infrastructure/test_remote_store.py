"""Tests for the remote store over a fake storage client."""

import pytest

from combostore.application.storefront import Storefront
from combostore.domain.exceptions import PersistenceError
from combostore.domain.model.change_event import EventType
from combostore.domain.model.order import OrderStatus
from combostore.domain.model.records import design_to_record, order_to_record
from combostore.infrastructure.persistence.remote_store import RemoteStore
from combostore.infrastructure.persistence.seed_catalog import seed_designs
from tests.fakes import FakeStorageClient, make_design, make_order, remote_store


class TestReads:

    @pytest.mark.asyncio
    async def test_rows_come_back_newest_first(self):
        store, _ = remote_store([], [
            make_order("old", created_at=1),
            make_order("new", created_at=3),
            make_order("mid", created_at=2),
        ])

        assert [o.id for o in await store.fetch_orders()] == ["new", "mid", "old"]

    @pytest.mark.asyncio
    async def test_camel_case_rows_are_read(self):
        client = FakeStorageClient({"designs": [
            {"id": 7, "name": "Legacy", "imageUrl": "u", "createdAt": 5, "inventory": {}},
        ]})

        designs = await RemoteStore(client).fetch_designs()

        assert designs[0].id == "7"
        assert designs[0].image_url == "u"
        assert designs[0].created_at == 5

    @pytest.mark.asyncio
    async def test_read_failure_falls_back(self):
        store, client = remote_store([make_design()], [make_order()])
        client.fail_reads = True

        assert await store.fetch_designs() == seed_designs()
        assert await store.fetch_orders() == []
        assert "connection refused" in store.read_error


class TestWrites:

    @pytest.mark.asyncio
    async def test_writes_translate_to_table_operations(self):
        store, client = remote_store()

        await store.upsert_design(make_design())
        await store.insert_order(make_order())
        await store.update_order_status("o1", OrderStatus.REJECTED)
        await store.remove_design("d1")

        assert client.writes == [
            ("upsert", "designs"),
            ("insert", "orders"),
            ("update", "orders"),
            ("delete", "designs"),
        ]
        assert client.row("designs", "d1") is None
        assert client.row("orders", "o1")["status"] == "rejected"

    @pytest.mark.asyncio
    async def test_write_failure_raises(self):
        store, client = remote_store()
        client.writes_before_failure = 0

        with pytest.raises(PersistenceError, match="Sync Error"):
            await store.insert_order(make_order())


class TestSubscriptions:

    @pytest.mark.asyncio
    async def test_payloads_become_change_events(self):
        store, client = remote_store()
        received = []
        unsubscribe = await store.subscribe_to_designs(received.append)

        client.emit("designs", {
            "eventType": "INSERT", "new": design_to_record(make_design()), "old": {},
        })
        client.emit("designs", {"eventType": "DELETE", "new": {}, "old": {"id": "d1"}})
        await unsubscribe()

        assert [(e.event_type, e.record_id) for e in received] == [
            (EventType.INSERT, "d1"),
            (EventType.DELETE, "d1"),
        ]
        assert received[1].new is None
        assert client.closed_channels == ["designs_channel"]

    @pytest.mark.asyncio
    async def test_invalid_payload_is_skipped(self):
        store, client = remote_store()
        received = []
        await store.subscribe_to_orders(received.append)

        client.emit("orders", {"eventType": "WHATEVER"})

        assert received == []
        assert store.pushes_changes is True


class TestMalformedRows:

    @pytest.mark.asyncio
    async def test_fetch_skips_unmappable_rows(self):
        store, client = remote_store([], [make_order("o1", created_at=2)])
        client.tables["orders"].append({
            **order_to_record(make_order("o2", created_at=1)), "combotype": None,
        })

        orders = await store.fetch_orders()

        assert [o.id for o in orders] == ["o1"]
        assert store.read_error is None

    @pytest.mark.asyncio
    async def test_load_survives_a_bad_design_row(self):
        store, client = remote_store([make_design("a")])
        client.tables["designs"].append({"name": "no id", "createdat": 1})
        front = Storefront(store)

        await front.load()

        assert [d.id for d in front.designs] == ["a"]

    @pytest.mark.asyncio
    async def test_feed_row_with_unknown_status_is_skipped(self):
        store, client = remote_store([], [make_order()])
        front = Storefront(store)
        await front.load()
        await front.start_sync()
        shipped = {**order_to_record(make_order("o2")), "status": "shipped"}

        client.emit("orders", {"eventType": "INSERT", "new": shipped, "old": {}})

        assert [o.id for o in front.orders] == ["o1"]
        await front.stop_sync()
