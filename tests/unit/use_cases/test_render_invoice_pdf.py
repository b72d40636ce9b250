"""Unit tests for RenderInvoicePdf use case

Tests cover:
- PDF generation for an existing invoice
- Invoice not found error
- Render failure reported separately from not-found
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.invoicing.render_invoice_pdf import RenderInvoicePdf
from src.domain.exceptions import InvoiceNotFoundError


@pytest.fixture
def mock_invoice_repo():
    """Mock invoice repository"""
    return MagicMock()


@pytest.fixture
def mock_pdf_service():
    """Mock PDF service"""
    return MagicMock()


@pytest.fixture
def render_use_case(mock_invoice_repo, mock_pdf_service):
    return RenderInvoicePdf(invoice_repo=mock_invoice_repo, pdf_service=mock_pdf_service)


@pytest.fixture
def sample_pdf_bytes():
    """Sample PDF bytes for testing"""
    return b"%PDF-1.4\nTest PDF content"


@pytest.mark.asyncio
class TestRenderInvoicePdf:
    async def test_render_existing_invoice(
        self, render_use_case, mock_invoice_repo, mock_pdf_service, sample_invoice, sample_pdf_bytes
    ):
        """
        Given: Invoice exists
        When: render is called
        Then: PDF bytes are returned with the attachment filename
        """
        mock_invoice_repo.find_by_id = AsyncMock(return_value=sample_invoice)
        mock_pdf_service.render_invoice = MagicMock(return_value=sample_pdf_bytes)

        result = await render_use_case.execute(sample_invoice.id)

        assert result.is_ok()
        assert result.value.content == sample_pdf_bytes
        assert result.value.invoice_number == sample_invoice.invoice_number
        assert result.value.filename == f"invoice-{sample_invoice.invoice_number}.pdf"
        mock_pdf_service.render_invoice.assert_called_once_with(sample_invoice)

    async def test_invoice_not_found(self, render_use_case, mock_invoice_repo, mock_pdf_service):
        mock_invoice_repo.find_by_id = AsyncMock(side_effect=InvoiceNotFoundError("nope"))

        result = await render_use_case.execute("nope")

        assert result.is_err()
        assert result.error.code == "INVOICE_NOT_FOUND"
        mock_pdf_service.render_invoice.assert_not_called()

    async def test_render_failure_is_not_reported_as_not_found(
        self, render_use_case, mock_invoice_repo, mock_pdf_service, sample_invoice
    ):
        mock_invoice_repo.find_by_id = AsyncMock(return_value=sample_invoice)
        mock_pdf_service.render_invoice = MagicMock(side_effect=ValueError("bad font"))

        result = await render_use_case.execute(sample_invoice.id)

        assert result.is_err()
        assert result.error.code == "INVOICE_RENDER_FAILED"
        assert result.error.reason == "bad font"
        assert sample_invoice.invoice_number in result.error.message
