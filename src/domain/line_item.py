"""Line Item Domain Entity

Tracks individual priced entries within an invoice.
"""

from decimal import Decimal
from pydantic import ConfigDict, Field
from src.domain.base import BaseModel


class LineItem(BaseModel):
    """
    Line Item - One priced entry on an invoice

    Domain Rules:
    - Each line item belongs to exactly one invoice
    - total = quantity * unit_price, computed once at pricing time
    - Immutable once created; total is never recomputed
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "0f8fad5b-d9cb-469f-a165-70867728950e",
                "description": "Widget",
                "quantity": "2",
                "unit_price": "9.99",
                "total": "19.98",
            }
        },
    )

    id: str = Field(
        description="Unique line item identifier"
    )

    description: str = Field(
        description="Line item description (e.g., 'Consulting hours')"
    )

    quantity: Decimal = Field(
        gt=0,
        description="Quantity (e.g., number of units, hours)"
    )

    unit_price: Decimal = Field(
        gt=0,
        description="Price per unit"
    )

    total: Decimal = Field(
        description="Total price (quantity * unit_price), full precision"
    )
