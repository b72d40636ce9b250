"""ListInvoices Use Case

Returns every stored invoice in creation order.
"""

from typing import List
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from .dtos import InvoiceResponseDTO


class ListInvoices:
    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self) -> Result[List[InvoiceResponseDTO]]:
        try:
            invoices = await self.invoice_repo.find_all()
            return Return.ok([InvoiceResponseDTO.from_entity(invoice) for invoice in invoices])
        except Exception as e:
            return Return.err(
                Error(
                    code="LIST_INVOICES_FAILED",
                    message="Failed to list invoices",
                    reason=str(e),
                )
            )
