"""Invoice Domain Entity

Priced invoice aggregate: customer, ordered line items and the totals
derived from them at creation time.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import ConfigDict, Field
from src.domain.base import BaseModel
from src.domain.line_item import LineItem


class CustomerDetails(BaseModel):
    """Bill-to party of an invoice"""

    name: str = Field(description="Customer name")
    email: str = Field(description="Customer email address")
    address: str = Field(description="Postal address")
    phone: Optional[str] = Field(default=None, description="Phone number")
    company: Optional[str] = Field(default=None, description="Company name")


class Invoice(BaseModel):
    """
    Invoice - Priced invoice aggregate

    Domain Rules:
    - id and invoice_number are assigned once, at creation
    - subtotal is the sum of all line_items.total
    - tax_amount = subtotal * tax_rate, total = subtotal + tax_amount
    - due_date is exactly 30 days after created_at
    - Read-only after creation. Rebuilding an Invoice from stored data keeps
      the stored totals; only the pricing functions compute them.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "7c9e6679-7425-40de-944b-e07fc1f90ae7",
                "invoice_number": "INV-1760869200000-3fa9c2d1",
                "customer": {
                    "name": "Acme",
                    "email": "a@acme.com",
                    "address": "1 Main St",
                    "phone": None,
                    "company": None,
                },
                "line_items": [
                    {
                        "id": "0f8fad5b-d9cb-469f-a165-70867728950e",
                        "description": "Widget",
                        "quantity": "2",
                        "unit_price": "9.99",
                        "total": "19.98",
                    }
                ],
                "tax_rate": "0.10",
                "subtotal": "19.98",
                "tax_amount": "1.9980",
                "total": "21.9780",
                "created_at": "2025-10-19T10:20:00Z",
                "due_date": "2025-11-18T10:20:00Z",
            }
        },
    )

    id: str = Field(
        description="Unique invoice identifier"
    )

    invoice_number: str = Field(
        description="Human-readable unique invoice number (INV-<epoch-millis>-<hex>)"
    )

    customer: CustomerDetails = Field(
        description="Bill-to customer, owned by this invoice"
    )

    line_items: List[LineItem] = Field(
        min_length=1,
        description="Line items in submission order"
    )

    tax_rate: Decimal = Field(
        gt=0,
        description="Tax rate applied to the subtotal (0.10 = 10%)"
    )

    subtotal: Decimal = Field(
        description="Sum of line item totals"
    )

    tax_amount: Decimal = Field(
        description="subtotal * tax_rate"
    )

    total: Decimal = Field(
        description="subtotal + tax_amount"
    )

    created_at: datetime = Field(
        description="Invoice creation timestamp (UTC)"
    )

    due_date: datetime = Field(
        description="Payment due timestamp (created_at + 30 days)"
    )
