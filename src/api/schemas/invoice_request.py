"""Request schemas for Invoice API

Pydantic models for validating incoming HTTP requests. Keys are accepted
in camelCase (lineItems, unitPrice, taxRate) or snake_case; unknown keys
are rejected.
"""

from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel


class RequestSchema(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )


class CustomerRequestSchema(RequestSchema):
    name: str = Field(..., min_length=1, description="Customer name")
    email: EmailStr = Field(..., description="Customer email address")
    address: str = Field(..., min_length=1, description="Postal address")
    phone: Optional[str] = Field(default=None, description="Phone number")
    company: Optional[str] = Field(default=None, description="Company name")


class LineItemRequestSchema(RequestSchema):
    description: str = Field(
        ...,
        description="Line item description"
    )

    quantity: Decimal = Field(
        ...,
        gt=0,
        description="Quantity (must be > 0)"
    )

    unit_price: Decimal = Field(
        ...,
        gt=0,
        description="Price per unit (must be > 0)"
    )


class CreateInvoiceRequestSchema(RequestSchema):
    """
    Request schema for creating an invoice

    Used for POST /invoices endpoint.
    """

    customer: CustomerRequestSchema

    line_items: List[LineItemRequestSchema] = Field(
        ...,
        min_length=1,
        description="Line items in submission order (at least one)"
    )

    tax_rate: Optional[Decimal] = Field(
        default=None,
        gt=0,
        description="Tax rate (must be > 0, defaults to 0.10)"
    )

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        json_schema_extra={
            "example": {
                "customer": {
                    "name": "Acme",
                    "email": "a@acme.com",
                    "address": "1 Main St",
                },
                "lineItems": [
                    {"description": "Widget", "quantity": 2, "unitPrice": 9.99}
                ],
                "taxRate": 0.1,
            }
        },
    )
