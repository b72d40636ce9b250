from .base import BaseModel, generate_uuid
from .line_item import LineItem
from .invoice import Invoice, CustomerDetails
from .exceptions import (
    InvoiceError,
    InvoiceValidationError,
    InvoiceNotFoundError,
    RenderError,
    PersistenceError,
)

__all__ = [
    "BaseModel",
    "generate_uuid",
    "LineItem",
    "Invoice",
    "CustomerDetails",
    "InvoiceError",
    "InvoiceValidationError",
    "InvoiceNotFoundError",
    "RenderError",
    "PersistenceError",
]
