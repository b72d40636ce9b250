"""Invoice Repository Interface

Defines the contract for invoice persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List
from src.domain.invoice import Invoice


class InvoiceRepository(ABC):
    """
    Repository interface for Invoice persistence

    Ordered, durable store of all issued invoices. Invoices are only ever
    appended; there is no update or delete.
    """

    @abstractmethod
    async def load(self) -> None:
        """
        Load the collection from the backing store

        A missing or unreadable store results in an empty collection.
        """
        pass

    @abstractmethod
    async def append(self, invoice: Invoice) -> None:
        """
        Add an invoice and persist the whole collection

        Args:
            invoice: Newly priced invoice
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Invoice]:
        """
        Retrieve all invoices

        Returns:
            Invoices in creation order
        """
        pass

    @abstractmethod
    async def find_by_id(self, invoice_id: str) -> Invoice:
        """
        Retrieve invoice by ID

        Args:
            invoice_id: Invoice ID

        Returns:
            The matching Invoice

        Raises:
            InvoiceNotFoundError: no invoice with that ID exists
        """
        pass
