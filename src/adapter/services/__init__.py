from .pdf_service import ReportLabPdfService

__all__ = [
    "ReportLabPdfService",
]
