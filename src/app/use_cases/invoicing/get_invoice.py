"""GetInvoice Use Case

Retrieves a single invoice by ID.
"""

from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.exceptions import InvoiceNotFoundError
from .dtos import InvoiceResponseDTO


class GetInvoice:
    """
    Use Case: Get invoice by ID

    Returns INVOICE_NOT_FOUND when no invoice has the given ID.
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self, invoice_id: str) -> Result[InvoiceResponseDTO]:
        try:
            invoice = await self.invoice_repo.find_by_id(invoice_id)
            return Return.ok(InvoiceResponseDTO.from_entity(invoice))

        except InvoiceNotFoundError as e:
            return Return.err(
                Error(
                    code=e.code,
                    message=e.message,
                    reason="Invoice does not exist",
                )
            )
        except Exception as e:
            return Return.err(
                Error(
                    code="GET_INVOICE_FAILED",
                    message="Failed to retrieve invoice",
                    reason=str(e),
                )
            )
