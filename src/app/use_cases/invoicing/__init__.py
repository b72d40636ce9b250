"""Invoicing domain use cases"""
from .create_invoice import CreateInvoice
from .list_invoices import ListInvoices
from .get_invoice import GetInvoice
from .render_invoice_pdf import RenderInvoicePdf
from .dtos import (
    CreateInvoiceCommandDTO,
    CustomerCommandDTO,
    LineItemCommandDTO,
    InvoiceResponseDTO,
    CustomerDTO,
    LineItemDTO,
    InvoicePdfDTO,
)

__all__ = [
    "CreateInvoice",
    "ListInvoices",
    "GetInvoice",
    "RenderInvoicePdf",
    "CreateInvoiceCommandDTO",
    "CustomerCommandDTO",
    "LineItemCommandDTO",
    "InvoiceResponseDTO",
    "CustomerDTO",
    "LineItemDTO",
    "InvoicePdfDTO",
]
