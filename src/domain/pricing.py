"""Invoice pricing

Pure computation that turns line items and a tax rate into a priced
Invoice. All arithmetic is done on Decimal at full precision; rounding to
cents only happens when amounts are formatted for output.
"""

import secrets
from datetime import datetime, timedelta, timezone
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional, Sequence, Union

from src.domain.base import generate_uuid
from src.domain.exceptions import InvoiceValidationError
from src.domain.invoice import CustomerDetails, Invoice
from src.domain.line_item import LineItem

Number = Union[Decimal, int, float, str]

DEFAULT_TAX_RATE = Decimal("0.10")
PAYMENT_TERMS_DAYS = 30
INVOICE_NUMBER_PREFIX = "INV"

_CENT = Decimal("0.01")
_TENTH = Decimal("0.1")


def to_decimal(value: Number, field: str) -> Decimal:
    """Coerce a numeric input to Decimal. Floats go through str() so 9.99 stays 9.99."""
    if isinstance(value, bool):
        raise InvoiceValidationError(f"{field} must be a number")
    try:
        if isinstance(value, float):
            result = Decimal(str(value))
        else:
            result = Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise InvoiceValidationError(f"{field} must be a number")
    if not result.is_finite():
        raise InvoiceValidationError(f"{field} must be a finite number")
    return result


def _require_positive(value: Number, field: str) -> Decimal:
    amount = to_decimal(value, field)
    if amount <= 0:
        raise InvoiceValidationError(f"{field} must be greater than 0")
    return amount


def generate_invoice_number(created_at: datetime) -> str:
    """
    Generate a human-readable invoice number

    Format: INV-<epoch-millis>-<8 hex digits>. The random suffix keeps
    numbers distinct for invoices created within the same millisecond.
    """
    epoch_millis = int(created_at.timestamp() * 1000)
    return f"{INVOICE_NUMBER_PREFIX}-{epoch_millis}-{secrets.token_hex(4)}"


def price_line_item(description: str, quantity: Number, unit_price: Number) -> LineItem:
    """
    Price a single line item

    Args:
        description: Line item description
        quantity: Quantity, must be > 0
        unit_price: Price per unit, must be > 0

    Returns:
        LineItem with a fresh id and total = quantity * unit_price

    Raises:
        InvoiceValidationError: quantity or unit_price is not a positive number
    """
    qty = _require_positive(quantity, "quantity")
    price = _require_positive(unit_price, "unit_price")

    return LineItem(
        id=generate_uuid(),
        description=description,
        quantity=qty,
        unit_price=price,
        total=qty * price,
    )


def price_invoice(
    customer: CustomerDetails,
    line_items: Sequence[LineItem],
    tax_rate: Optional[Number] = None,
    now: Optional[datetime] = None,
) -> Invoice:
    """
    Build a priced Invoice aggregate

    Args:
        customer: Bill-to customer
        line_items: Non-empty ordered sequence of priced line items
        tax_rate: Positive tax rate; None applies DEFAULT_TAX_RATE
        now: Creation timestamp (defaults to current UTC time)

    Returns:
        Invoice with id, invoice number, totals and due date assigned

    Raises:
        InvoiceValidationError: empty line items or non-positive tax rate
    """
    if not line_items:
        raise InvoiceValidationError("An invoice requires at least one line item")

    rate = DEFAULT_TAX_RATE if tax_rate is None else _require_positive(tax_rate, "tax_rate")

    # No intermediate rounding: subtotal is the exact sum
    subtotal = sum((item.total for item in line_items), Decimal("0"))
    tax_amount = subtotal * rate
    total = subtotal + tax_amount

    created_at = now or datetime.now(timezone.utc)

    return Invoice(
        id=generate_uuid(),
        invoice_number=generate_invoice_number(created_at),
        customer=customer,
        line_items=list(line_items),
        tax_rate=rate,
        subtotal=subtotal,
        tax_amount=tax_amount,
        total=total,
        created_at=created_at,
        due_date=created_at + timedelta(days=PAYMENT_TERMS_DAYS),
    )


def round_currency(amount: Decimal) -> Decimal:
    return amount.quantize(_CENT, rounding=ROUND_HALF_UP)


def format_currency(amount: Decimal) -> str:
    """Format an amount as dollars with two decimals (e.g., $1,234.50)"""
    return f"${round_currency(amount):,.2f}"


def format_tax_rate(rate: Decimal) -> str:
    """Format a tax rate as a percentage with one decimal (0.1 -> 10.0%)"""
    percent = (rate * 100).quantize(_TENTH, rounding=ROUND_HALF_UP)
    return f"{percent}%"
