"""PDF Generation Service Interface

Defines the contract for PDF generation operations.
"""

from abc import ABC, abstractmethod
from src.domain.invoice import Invoice


class PdfService(ABC):
    """
    Service interface for PDF generation

    Provides PDF generation capabilities for invoices.
    """

    @abstractmethod
    def render_invoice(self, invoice: Invoice) -> bytes:
        """
        Render an invoice as a PDF document

        Args:
            invoice: Priced invoice with customer and line items

        Returns:
            Complete PDF document as bytes
        """
        pass
