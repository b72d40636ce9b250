"""Data Transfer Objects for Invoicing Use Cases

Pydantic models for command inputs and response outputs. Field names are
snake_case in Python and camelCase on the wire.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.domain.invoice import Invoice


class CamelCaseDTO(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CustomerCommandDTO(CamelCaseDTO):
    name: str
    email: str
    address: str
    phone: Optional[str] = None
    company: Optional[str] = None


class LineItemCommandDTO(CamelCaseDTO):
    description: str
    quantity: Decimal
    unit_price: Decimal


class CreateInvoiceCommandDTO(CamelCaseDTO):
    """
    Command DTO for creating an invoice

    Used as input to CreateInvoice use case. Values are checked again by the
    pricing functions, so positivity is not enforced here.
    """

    customer: CustomerCommandDTO

    line_items: List[LineItemCommandDTO] = Field(
        ...,
        description="Line items in submission order"
    )

    tax_rate: Optional[Decimal] = Field(
        default=None,
        description="Tax rate; None applies the default 0.10"
    )


class CustomerDTO(CamelCaseDTO):
    name: str
    email: str
    address: str
    phone: Optional[str] = None
    company: Optional[str] = None


class LineItemDTO(CamelCaseDTO):
    id: str
    description: str
    quantity: Decimal
    unit_price: Decimal
    total: Decimal


class InvoiceResponseDTO(CamelCaseDTO):
    """
    Response DTO for invoice operations

    Full invoice aggregate including derived fields. Returned by
    CreateInvoice, GetInvoice and ListInvoices.
    """

    id: str = Field(..., description="Invoice ID")
    invoice_number: str = Field(..., description="Human-readable invoice number")
    customer: CustomerDTO
    line_items: List[LineItemDTO]
    tax_rate: Decimal
    subtotal: Decimal
    tax_amount: Decimal
    total: Decimal
    created_at: datetime
    due_date: datetime

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "7c9e6679-7425-40de-944b-e07fc1f90ae7",
                "invoiceNumber": "INV-1760869200000-3fa9c2d1",
                "customer": {
                    "name": "Acme",
                    "email": "a@acme.com",
                    "address": "1 Main St",
                    "phone": None,
                    "company": None,
                },
                "lineItems": [
                    {
                        "id": "0f8fad5b-d9cb-469f-a165-70867728950e",
                        "description": "Widget",
                        "quantity": "2",
                        "unitPrice": "9.99",
                        "total": "19.98",
                    }
                ],
                "taxRate": "0.10",
                "subtotal": "19.98",
                "taxAmount": "1.9980",
                "total": "21.9780",
                "createdAt": "2025-10-19T10:20:00Z",
                "dueDate": "2025-11-18T10:20:00Z",
            }
        },
    )

    @classmethod
    def from_entity(cls, invoice: Invoice) -> "InvoiceResponseDTO":
        return cls.model_validate(invoice.model_dump())


class InvoicePdfDTO(BaseModel):
    """Rendered invoice document, ready to be sent as an attachment"""

    invoice_id: str
    invoice_number: str
    filename: str
    content: bytes
