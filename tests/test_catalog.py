"""
tests/test_catalog.py – ItemStore + ExcelImporter.
items.json read/append, demo fallback, Excel row mapping.
"""
import asyncio
import io
import json

import pytest
from openpyxl import Workbook

from hackapi.core.catalog import DEMO_STORE, ItemStore
from hackapi.core.excel import ExcelImporter
from tests.conftest import make_item

HEADERS = ["Store name", "Store address", "Food name", "Qty available",
           "Original price (Php)", "Discounted price (Php)", "Surprise Me"]


def _xlsx(rows, headers=HEADERS) -> bytes:
    wb = Workbook()
    ws = wb.active
    ws.append(headers)
    for row in rows:
        ws.append(row)
    buf = io.BytesIO()
    wb.save(buf)
    return buf.getvalue()


# ── ItemStore ──────────────────────────────────────────────────────────────────

class TestItemStore:
    @pytest.mark.asyncio
    async def test_missing_file_gives_demo(self, item_store):
        items = await item_store.list_items()
        assert len(items) == 10
        assert {i.store_name for i in items} == {DEMO_STORE}
        assert items[0].food_name == "Mini Signature Black Forest"

    @pytest.mark.asyncio
    async def test_invalid_json_gives_demo(self, item_store, tmp_path):
        (tmp_path / "items.json").write_text("{not json", encoding="utf-8")
        assert len(await item_store.list_items()) == 10

    @pytest.mark.asyncio
    async def test_empty_list_is_empty_catalog(self, item_store, tmp_path):
        (tmp_path / "items.json").write_text("[]", encoding="utf-8")
        assert await item_store.list_items() == []

    @pytest.mark.asyncio
    async def test_append_keeps_existing(self, item_store, sample_items, tmp_path):
        assert await item_store.append_items(sample_items[:2]) == 2
        assert await item_store.append_items(sample_items[2:]) == 1
        items = await item_store.list_items()
        assert [i.food_name for i in items] == ["Red Velvet", "Mango Bravo", "Pandesal Box"]

        raw = json.loads((tmp_path / "items.json").read_text(encoding="utf-8"))
        assert raw[2]["storeName"] == "Pan de Manila"
        assert raw[2]["surpriseGroup"] == "bread"

    @pytest.mark.asyncio
    async def test_bad_rows_skipped(self, item_store, tmp_path):
        good = make_item().model_dump(by_alias=True)
        (tmp_path / "items.json").write_text(json.dumps([good, {"qty": "lots"}]), encoding="utf-8")
        items = await item_store.list_items()
        assert len(items) == 1

    @pytest.mark.asyncio
    async def test_append_creates_data_dir(self, tmp_path):
        store = ItemStore(data_dir=tmp_path / "nested" / "data")
        await store.append_items([make_item()])
        assert store.path.exists()

    @pytest.mark.asyncio
    async def test_append_leaves_no_temp_files(self, item_store, tmp_path):
        await item_store.append_items([make_item()])
        assert [p.name for p in tmp_path.iterdir()] == ["items.json"]

    @pytest.mark.asyncio
    async def test_failed_write_keeps_old_file(self, item_store, tmp_path, monkeypatch):
        await item_store.append_items([make_item(food_name="Ube Cake")])

        def boom(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr("hackapi.core.catalog.os.replace", boom)
        with pytest.raises(OSError):
            await item_store.append_items([make_item(food_name="Mango Bravo")])
        assert [i.food_name for i in await item_store.list_items()] == ["Ube Cake"]
        assert [p.name for p in tmp_path.iterdir()] == ["items.json"]

    @pytest.mark.asyncio
    async def test_reads_during_appends_never_fall_back_to_demo(self, item_store):
        await item_store.append_items([make_item(store_name="Pan de Manila", food_name="Pandesal")])
        batch = [make_item(store_name="Pan de Manila", food_name=f"Bun {n}") for n in range(50)]
        results = await asyncio.gather(*(
            item_store.append_items(batch) if n % 3 == 0 else item_store.list_items()
            for n in range(30)
        ))
        reads = [r for r in results if isinstance(r, list)]
        assert reads
        assert all(r and {i.store_name for i in r} == {"Pan de Manila"} for r in reads)
        assert len(await item_store.list_items()) == 1 + 50 * 10


# ── ExcelImporter ──────────────────────────────────────────────────────────────

class TestExcelImporter:
    def test_maps_columns(self):
        items = ExcelImporter().parse(_xlsx([
            ["Pan de Manila", "https://maps.example/pan", "Pandesal Box", 3, 120, 60, "bread"],
        ]))
        assert len(items) == 1
        it = items[0]
        assert it.store_name == "Pan de Manila"
        assert it.store_address_url == "https://maps.example/pan"
        assert it.qty == 3
        assert it.original_price_php == 120
        assert it.discounted_price_php == 60
        assert it.surprise_group == "bread"

    def test_blank_numbers_default_to_zero(self):
        items = ExcelImporter().parse(_xlsx([["Pan de Manila", None, "Ensaymada", None, None, None, None]]))
        assert items[0].qty == 0
        assert items[0].discounted_price_php == 0
        assert items[0].surprise_group is None

    def test_rows_without_store_or_food_dropped(self):
        items = ExcelImporter().parse(_xlsx([
            [None, "", "Ensaymada", 1, 10, 5, None],
            ["Pan de Manila", "", None, 1, 10, 5, None],
            ["Pan de Manila", "", "Ensaymada", 1, 10, 5, None],
        ]))
        assert [i.food_name for i in items] == ["Ensaymada"]

    @pytest.mark.parametrize("row", [
        ["Pan de Manila", "", "Ensaymada", "many", 10, 5, None],
        ["Pan de Manila", "", "Ensaymada", 1, -10, 5, None],
    ])
    def test_bad_numbers_dropped(self, row):
        assert ExcelImporter().parse(_xlsx([row])) == []

    def test_header_only(self):
        assert ExcelImporter().parse(_xlsx([])) == []

    def test_not_a_workbook(self):
        with pytest.raises(ValueError, match="Could not read Excel file"):
            ExcelImporter().parse(b"definitely not xlsx")
