"""RenderInvoicePdf Use Case

Renders a stored invoice as a downloadable PDF document.
"""

import logging
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.services.pdf_service import PdfService
from src.domain.exceptions import InvoiceNotFoundError, RenderError
from .dtos import InvoicePdfDTO

logger = logging.getLogger(__name__)


class RenderInvoicePdf:
    """
    Use Case: Render invoice PDF

    Business Rules:
    1. Invoice must exist (INVOICE_NOT_FOUND otherwise)
    2. A failure inside the PDF service is reported as INVOICE_RENDER_FAILED,
       never as a missing invoice
    3. Attachment name is invoice-<invoice_number>.pdf

    Flow:
    1. Retrieve invoice by ID
    2. Render PDF using PDF service
    3. Return document bytes with filename
    """

    def __init__(self, invoice_repo: InvoiceRepository, pdf_service: PdfService):
        self.invoice_repo = invoice_repo
        self.pdf_service = pdf_service

    async def execute(self, invoice_id: str) -> Result[InvoicePdfDTO]:
        """
        Execute invoice rendering

        Args:
            invoice_id: Invoice ID to render

        Returns:
            Result[InvoicePdfDTO]: Success with PDF bytes or error
        """
        # Step 1: Retrieve invoice
        try:
            invoice = await self.invoice_repo.find_by_id(invoice_id)
        except InvoiceNotFoundError as e:
            return Return.err(
                Error(
                    code=e.code,
                    message=e.message,
                    reason="Invoice does not exist",
                )
            )

        # Step 2: Render PDF
        try:
            pdf_bytes = self.pdf_service.render_invoice(invoice)
        except Exception as e:
            logger.exception(f"Rendering invoice {invoice.invoice_number} failed")
            error = RenderError(f"Failed to render invoice {invoice.invoice_number}")
            return Return.err(
                Error(
                    code=error.code,
                    message=error.message,
                    reason=str(e),
                )
            )

        # Step 3: Build response
        return Return.ok(
            InvoicePdfDTO(
                invoice_id=invoice.id,
                invoice_number=invoice.invoice_number,
                filename=f"invoice-{invoice.invoice_number}.pdf",
                content=pdf_bytes,
            )
        )
