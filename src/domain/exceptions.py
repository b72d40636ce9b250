"""Invoice domain exceptions

Each error carries a machine-checkable code and the HTTP status it maps to.
"""


class InvoiceError(Exception):
    code = "INVOICE_ERROR"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvoiceValidationError(InvoiceError):
    """Malformed input reached the pricing functions"""

    code = "VALIDATION_ERROR"
    status_code = 400


class InvoiceNotFoundError(InvoiceError):
    code = "INVOICE_NOT_FOUND"
    status_code = 404

    def __init__(self, invoice_id: str):
        super().__init__(f"Invoice with ID {invoice_id} not found")
        self.invoice_id = invoice_id


class RenderError(InvoiceError):
    """PDF generation failed for an existing invoice"""

    code = "INVOICE_RENDER_FAILED"
    status_code = 500


class PersistenceError(InvoiceError):
    """Backing store read or write failed. Logged, never returned to callers."""

    code = "PERSISTENCE_ERROR"
    status_code = 500
