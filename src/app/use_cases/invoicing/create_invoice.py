"""CreateInvoice Use Case

Prices submitted line items into a new invoice and stores it.
"""

import logging
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.exceptions import InvoiceValidationError
from src.domain.invoice import CustomerDetails
from src.domain.pricing import price_invoice, price_line_item
from .dtos import CreateInvoiceCommandDTO, InvoiceResponseDTO

logger = logging.getLogger(__name__)


class CreateInvoice:
    """
    Use Case: Create a priced invoice

    Business Rules:
    1. At least one line item is required
    2. Quantities, unit prices and tax rate must be positive
    3. Tax rate defaults to 0.10 when omitted
    4. Invoice number and ID are auto-generated

    Flow:
    1. Price each line item
    2. Price the invoice (subtotal, tax, total, due date)
    3. Append to repository (persists the collection)
    4. Return response
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self, command: CreateInvoiceCommandDTO) -> Result[InvoiceResponseDTO]:
        """
        Execute invoice creation

        Args:
            command: CreateInvoiceCommandDTO with customer, line items, tax rate

        Returns:
            Result[InvoiceResponseDTO]: Success with invoice details or error
        """
        try:
            # Step 1: Price line items in submission order
            line_items = [
                price_line_item(item.description, item.quantity, item.unit_price)
                for item in command.line_items
            ]

            # Step 2: Price the invoice
            customer = CustomerDetails(**command.customer.model_dump())
            invoice = price_invoice(customer, line_items, tax_rate=command.tax_rate)

            # Step 3: Store
            await self.invoice_repo.append(invoice)

            logger.info(
                f"Created invoice {invoice.invoice_number} "
                f"({len(line_items)} items, total={invoice.total})"
            )

            return Return.ok(InvoiceResponseDTO.from_entity(invoice))

        except InvoiceValidationError as e:
            return Return.err(
                Error(
                    code=e.code,
                    message=e.message,
                    reason="Invalid invoice input",
                )
            )
        except Exception as e:
            logger.exception("Invoice creation failed")
            return Return.err(
                Error(
                    code="CREATE_INVOICE_FAILED",
                    message="Failed to create invoice",
                    reason=str(e),
                )
            )
