from fastapi import Request
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.services.pdf_service import PdfService
from src.adapter.services.pdf_service import ReportLabPdfService


def get_invoice_repository(request: Request) -> InvoiceRepository:
    """Repository created once by create_app and loaded at startup"""
    return request.app.state.invoice_repository


def get_pdf_service() -> PdfService:
    return ReportLabPdfService()
