"""Integration tests for staff catalog edits."""

import pytest

from combostore.application.manage_catalog import (
    DeleteDesignHandler,
    SaveDesignHandler,
    UpdateStockHandler,
)
from combostore.application.storefront import Storefront
from combostore.domain.exceptions import EntityNotFoundError, PersistenceError, ValidationError
from combostore.domain.model.value_objects import ChildType
from tests.fakes import local_store, make_design, remote_store


async def _front(tmp_path, designs):
    front = Storefront(local_store(tmp_path, designs))
    await front.load()
    return front


class TestUpdateStock:

    @pytest.mark.asyncio
    async def test_sets_and_persists_one_cell(self, tmp_path):
        front = await _front(tmp_path, [make_design(men={"XL": 3})])

        await UpdateStockHandler(front).handle("d1", "men", "XL", 7)

        assert front.find_design("d1").inventory.count("men", "XL") == 7
        stored = await front.gateway.fetch_designs()
        assert stored[0].inventory.count("men", "XL") == 7

    @pytest.mark.asyncio
    async def test_negative_value_stored_as_zero(self, tmp_path):
        front = await _front(tmp_path, [make_design(men={"XL": 3})])

        design = await UpdateStockHandler(front).handle("d1", "men", "XL", -4)

        assert design.inventory.count("men", "XL") == 0

    @pytest.mark.asyncio
    async def test_unknown_design(self, tmp_path):
        front = await _front(tmp_path, [])

        with pytest.raises(EntityNotFoundError):
            await UpdateStockHandler(front).handle("nope", "men", "XL", 1)

    @pytest.mark.asyncio
    async def test_size_outside_ladder(self, tmp_path):
        front = await _front(tmp_path, [make_design()])

        with pytest.raises(ValidationError, match="not stocked"):
            await UpdateStockHandler(front).handle("d1", "boys", "XL", 1)

    @pytest.mark.asyncio
    async def test_remote_write_failure_keeps_local_change(self):
        store, client = remote_store([make_design(men={"XL": 3})])
        front = Storefront(store)
        await front.load()
        client.writes_before_failure = 0

        with pytest.raises(PersistenceError):
            await UpdateStockHandler(front).handle("d1", "men", "XL", 5)

        assert front.find_design("d1").inventory.count("men", "XL") == 5
        assert client.row("designs", "d1")["inventory"]["men"]["XL"] == 3


class TestSaveDesign:

    @pytest.mark.asyncio
    async def test_new_design_is_prepended_with_empty_stock(self, tmp_path):
        front = await _front(tmp_path, [make_design()])

        design = await SaveDesignHandler(front).handle(
            name="Paisley", color="Blue", fabric="Cotton", child_type="boys"
        )

        assert [d.id for d in front.designs] == [design.id, "d1"]
        assert design.inventory.total == 0
        assert design.child_type == ChildType.BOYS
        stored = await front.gateway.fetch_designs()
        assert stored[0].name == "Paisley"

    @pytest.mark.asyncio
    async def test_edit_keeps_id_created_at_and_stock(self, tmp_path):
        original = make_design(men={"XL": 3})
        front = await _front(tmp_path, [original])

        edited = await SaveDesignHandler(front).handle(
            name="Garden Leaf II", label="NEW", design_id="d1"
        )

        assert edited.id == "d1"
        assert edited.created_at == original.created_at
        assert edited.color == original.color
        assert edited.inventory.count("men", "XL") == 3
        assert edited.label == "NEW"
        assert len(front.designs) == 1

    @pytest.mark.asyncio
    async def test_edit_can_clear_text_fields(self, tmp_path):
        front = await _front(tmp_path, [make_design()])

        edited = await SaveDesignHandler(front).handle(
            name="Garden Leaf", color="", image_url="", design_id="d1"
        )

        assert edited.color == ""
        assert edited.image_url == ""
        assert edited.fabric == "Organza"
        stored = await front.gateway.fetch_designs()
        assert stored[0].color == ""

    @pytest.mark.asyncio
    async def test_blank_name_rejected(self, tmp_path):
        front = await _front(tmp_path, [make_design()])

        with pytest.raises(ValidationError, match="name is required"):
            await SaveDesignHandler(front).handle(name="  ", design_id="d1")
        with pytest.raises(ValidationError, match="name is required"):
            await SaveDesignHandler(front).handle(name="")


class TestDeleteDesign:

    @pytest.mark.asyncio
    async def test_delete_removes_everywhere(self, tmp_path):
        front = await _front(tmp_path, [make_design("a"), make_design("b")])

        await DeleteDesignHandler(front).handle("a")

        assert [d.id for d in front.designs] == ["b"]
        stored = await front.gateway.fetch_designs()
        assert [d.id for d in stored] == ["b"]

    @pytest.mark.asyncio
    async def test_delete_unknown(self, tmp_path):
        front = await _front(tmp_path, [])

        with pytest.raises(EntityNotFoundError):
            await DeleteDesignHandler(front).handle("a")
