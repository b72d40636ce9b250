"""Unit tests for JsonFileInvoiceRepository

Tests cover:
- Load from missing / corrupt / valid file
- Append persists the whole collection
- Reload restores stored fields verbatim
- Creation order and lookup by ID
- Write failures are logged, memory stays authoritative
- Concurrent appends lose nothing
"""

import asyncio
import json
import logging
import pytest
from decimal import Decimal

from src.adapter.repositories.invoice_repository import JsonFileInvoiceRepository
from src.domain.exceptions import InvoiceNotFoundError
from src.domain.pricing import price_invoice, price_line_item


@pytest.fixture
def storage_path(tmp_path):
    return tmp_path / "invoices.json"


@pytest.fixture
def make_invoice(sample_customer):
    def _make(description="Widget", quantity=2, unit_price=Decimal("9.99"), tax_rate=None):
        items = [price_line_item(description, quantity, unit_price)]
        return price_invoice(sample_customer, items, tax_rate=tax_rate)
    return _make


@pytest.mark.asyncio
class TestLoad:
    async def test_missing_file_starts_empty(self, storage_path):
        repo = JsonFileInvoiceRepository(storage_path)

        await repo.load()

        assert await repo.find_all() == []
        assert not storage_path.exists()

    async def test_corrupt_file_starts_empty_and_logs(self, storage_path, caplog):
        storage_path.write_text("{not json", encoding="utf-8")
        repo = JsonFileInvoiceRepository(storage_path)

        with caplog.at_level(logging.ERROR):
            await repo.load()

        assert await repo.find_all() == []
        assert "Error loading invoices" in caplog.text

    async def test_invalid_records_start_empty(self, storage_path):
        storage_path.write_text(json.dumps([{"id": "only-an-id"}]), encoding="utf-8")
        repo = JsonFileInvoiceRepository(storage_path)

        await repo.load()

        assert await repo.find_all() == []


@pytest.mark.asyncio
class TestAppend:
    async def test_append_writes_json_array(self, storage_path, make_invoice):
        repo = JsonFileInvoiceRepository(storage_path)
        invoice = make_invoice()

        await repo.append(invoice)

        stored = json.loads(storage_path.read_text(encoding="utf-8"))
        assert isinstance(stored, list)
        assert len(stored) == 1
        assert stored[0]["id"] == invoice.id
        assert stored[0]["invoice_number"] == invoice.invoice_number
        assert stored[0]["customer"]["email"] == "a@acme.com"
        assert stored[0]["line_items"][0]["description"] == "Widget"
        assert Decimal(stored[0]["total"]) == Decimal("21.978")

    async def test_find_all_in_creation_order(self, storage_path, make_invoice):
        repo = JsonFileInvoiceRepository(storage_path)
        invoices = [make_invoice(description=f"Item {i}") for i in range(3)]

        for invoice in invoices:
            await repo.append(invoice)

        assert [inv.id for inv in await repo.find_all()] == [inv.id for inv in invoices]

    async def test_find_by_id(self, storage_path, make_invoice):
        repo = JsonFileInvoiceRepository(storage_path)
        first, second = make_invoice(), make_invoice(description="Gadget")
        await repo.append(first)
        await repo.append(second)

        found = await repo.find_by_id(second.id)

        assert found.id == second.id
        assert found.line_items[0].description == "Gadget"

    async def test_find_by_id_not_found(self, storage_path):
        repo = JsonFileInvoiceRepository(storage_path)

        with pytest.raises(InvoiceNotFoundError) as exc_info:
            await repo.find_by_id("does-not-exist")

        assert exc_info.value.status_code == 404

    async def test_write_failure_is_logged_not_raised(self, tmp_path, make_invoice, caplog):
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory", encoding="utf-8")
        repo = JsonFileInvoiceRepository(blocker / "invoices.json")
        invoice = make_invoice()

        with caplog.at_level(logging.ERROR):
            await repo.append(invoice)

        assert "Error saving invoices" in caplog.text
        assert [inv.id for inv in await repo.find_all()] == [invoice.id]

    async def test_concurrent_appends_are_all_persisted(self, storage_path, make_invoice):
        repo = JsonFileInvoiceRepository(storage_path)
        invoices = [make_invoice(description=f"Item {i}") for i in range(20)]

        await asyncio.gather(*(repo.append(invoice) for invoice in invoices))

        reloaded = JsonFileInvoiceRepository(storage_path)
        await reloaded.load()
        assert len(await reloaded.find_all()) == 20


@pytest.mark.asyncio
class TestRoundTrip:
    async def test_reload_restores_identity_totals_and_timestamps(self, storage_path, make_invoice):
        repo = JsonFileInvoiceRepository(storage_path)
        originals = [make_invoice(), make_invoice(quantity=3, unit_price=Decimal("0.333"), tax_rate=Decimal("0.07"))]
        for invoice in originals:
            await repo.append(invoice)

        reloaded = JsonFileInvoiceRepository(storage_path)
        await reloaded.load()
        restored = await reloaded.find_all()

        assert len(restored) == len(originals)
        for original, copy in zip(originals, restored):
            assert copy.id == original.id
            assert copy.invoice_number == original.invoice_number
            assert copy.subtotal == original.subtotal
            assert copy.tax_amount == original.tax_amount
            assert copy.total == original.total
            assert copy.tax_rate == original.tax_rate
            assert copy.created_at == original.created_at
            assert copy.due_date == original.due_date
            assert [item.id for item in copy.line_items] == [item.id for item in original.line_items]

    async def test_reload_keeps_stored_totals_over_line_items(self, storage_path, make_invoice):
        repo = JsonFileInvoiceRepository(storage_path)
        await repo.append(make_invoice())

        stored = json.loads(storage_path.read_text(encoding="utf-8"))
        stored[0]["line_items"][0]["unit_price"] = "100.00"
        storage_path.write_text(json.dumps(stored), encoding="utf-8")

        reloaded = JsonFileInvoiceRepository(storage_path)
        await reloaded.load()
        invoice = (await reloaded.find_all())[0]

        assert invoice.line_items[0].unit_price == Decimal("100.00")
        assert invoice.subtotal == Decimal("19.98")
        assert invoice.total == Decimal("21.978")
