import pytest
from datetime import datetime, timezone
from decimal import Decimal

from src.domain.invoice import CustomerDetails
from src.domain.pricing import price_invoice, price_line_item


@pytest.fixture
def sample_customer():
    """Customer with only the required fields"""
    return CustomerDetails(name="Acme", email="a@acme.com", address="1 Main St")


@pytest.fixture
def full_customer():
    """Customer with optional company and phone"""
    return CustomerDetails(
        name="Jane Roe",
        email="jane@initech.com",
        address="42 Elm St",
        phone="555-0100",
        company="Initech",
    )


@pytest.fixture
def fixed_now():
    return datetime(2025, 10, 19, 10, 20, 0, tzinfo=timezone.utc)


@pytest.fixture
def sample_invoice(sample_customer, fixed_now):
    """Widget x2 at 9.99, default tax"""
    items = [price_line_item("Widget", Decimal("2"), Decimal("9.99"))]
    return price_invoice(sample_customer, items, now=fixed_now)
