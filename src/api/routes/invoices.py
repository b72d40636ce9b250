"""Invoice API Routes

FastAPI routes for invoice creation, retrieval and PDF download.
"""

from typing import List
from fastapi import APIRouter, Depends, status
from fastapi.responses import Response

from src.api.schemas.invoice_request import CreateInvoiceRequestSchema
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.services.pdf_service import PdfService
from src.app.use_cases.invoicing.dtos import CreateInvoiceCommandDTO, InvoiceResponseDTO
from src.app.use_cases.invoicing.create_invoice import CreateInvoice
from src.app.use_cases.invoicing.list_invoices import ListInvoices
from src.app.use_cases.invoicing.get_invoice import GetInvoice
from src.app.use_cases.invoicing.render_invoice_pdf import RenderInvoicePdf
from src.depends import get_invoice_repository, get_pdf_service
from src.api.error import ClientError

router = APIRouter(prefix="/invoices", tags=["Invoices"])

NOT_FOUND_RESPONSE = {
    "description": "Invoice not found",
    "content": {
        "application/json": {
            "example": {
                "error": {
                    "code": "INVOICE_NOT_FOUND",
                    "message": "Invoice with ID 123 not found",
                    "status_code": 404,
                }
            }
        }
    }
}

ERROR_STATUS = {
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "INVOICE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "INVOICE_RENDER_FAILED": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _raise_for(error) -> None:
    raise ClientError(
        error,
        status_code=ERROR_STATUS.get(error.code, status.HTTP_500_INTERNAL_SERVER_ERROR),
    )


@router.post(
    "",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_201_CREATED,
)
async def create_invoice(
    request: CreateInvoiceRequestSchema,
    invoice_repo: InvoiceRepository = Depends(get_invoice_repository),
):
    """
    Create a priced invoice.

    **Request body:**
    - `customer` (required): `name`, `email`, `address`, optional `phone`, `company`
    - `lineItems` (required): at least one `{description, quantity > 0, unitPrice > 0}`
    - `taxRate` (optional): must be > 0, defaults to 0.10

    **Returns:**
    - 201: Invoice created, with subtotal, tax, total and due date
    - 422: Missing, malformed or unknown fields
    """
    command = CreateInvoiceCommandDTO.model_validate(request.model_dump())

    use_case = CreateInvoice(invoice_repo)
    result = await use_case.execute(command)

    if result.is_err():
        _raise_for(result.error)

    return result.value


@router.get(
    "",
    response_model=List[InvoiceResponseDTO],
    status_code=status.HTTP_200_OK,
)
async def list_invoices(
    invoice_repo: InvoiceRepository = Depends(get_invoice_repository),
):
    """List all invoices in creation order."""
    result = await ListInvoices(invoice_repo).execute()

    if result.is_err():
        _raise_for(result.error)

    return result.value


@router.get(
    "/{invoice_id}",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={404: NOT_FOUND_RESPONSE},
)
async def get_invoice(
    invoice_id: str,
    invoice_repo: InvoiceRepository = Depends(get_invoice_repository),
):
    """Get one invoice by ID."""
    result = await GetInvoice(invoice_repo).execute(invoice_id)

    if result.is_err():
        _raise_for(result.error)

    return result.value


@router.get(
    "/{invoice_id}/pdf",
    responses={
        200: {
            "content": {"application/pdf": {}},
            "description": "PDF document"
        },
        404: NOT_FOUND_RESPONSE,
        500: {"description": "PDF rendering failed"},
    }
)
async def download_invoice_pdf(
    invoice_id: str,
    invoice_repo: InvoiceRepository = Depends(get_invoice_repository),
    pdf_service: PdfService = Depends(get_pdf_service),
):
    """
    Download invoice as PDF file.

    **Path parameters:**
    - `invoice_id` (required): Invoice ID

    **Returns:**
    - 200: PDF file as binary attachment `invoice-<invoiceNumber>.pdf`
    - 404: Invoice not found
    - 500: Invoice exists but the PDF could not be rendered
    """
    use_case = RenderInvoicePdf(invoice_repo, pdf_service)
    result = await use_case.execute(invoice_id)

    if result.is_err():
        _raise_for(result.error)

    document = result.value
    return Response(
        content=document.content,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'attachment; filename="{document.filename}"',
            "Content-Length": str(len(document.content)),
        }
    )
