"""ReportLab PDF Generation Service Implementation

Implements invoice PDF rendering using ReportLab library.
"""

from io import BytesIO
from decimal import Decimal
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import (
    SimpleDocTemplate,
    Table,
    TableStyle,
    Paragraph,
    Spacer,
)

from src.app.services.pdf_service import PdfService
from src.domain.invoice import Invoice
from src.domain.pricing import format_currency, format_tax_rate

# Description | Qty | Unit Price | Total
ITEM_COL_WIDTHS = [80 * mm, 25 * mm, 30 * mm, 35 * mm]
DATE_FORMAT = "%Y-%m-%d"


def _format_quantity(quantity: Decimal) -> str:
    return f"{quantity:,.6f}".rstrip("0").rstrip(".")


class ReportLabPdfService(PdfService):
    """
    ReportLab implementation of PdfService

    Output is deterministic for a given invoice (invariant mode) and page
    streams are left uncompressed so the document text stays searchable.
    """

    def render_invoice(self, invoice: Invoice) -> bytes:
        """
        Render an invoice as a PDF document

        Args:
            invoice: Priced invoice with customer and line items

        Returns:
            Complete PDF document as bytes
        """
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=20 * mm,
            leftMargin=20 * mm,
            topMargin=20 * mm,
            bottomMargin=20 * mm,
            title=f"Invoice {invoice.invoice_number}",
            invariant=1,
            pageCompression=0,
        )

        styles = getSampleStyleSheet()
        elements = []

        title_style = ParagraphStyle(
            "TitleStyle",
            parent=styles["Heading1"],
            fontSize=24,
            alignment=TA_CENTER,
            spaceAfter=10,
            textColor=colors.HexColor("#2C3E50"),
        )
        section_style = ParagraphStyle(
            "SectionStyle",
            parent=styles["Heading2"],
            fontSize=14,
            spaceAfter=6,
            textColor=colors.HexColor("#2C3E50"),
        )
        normal_style = ParagraphStyle(
            "NormalStyle",
            parent=styles["Normal"],
            fontSize=11,
        )

        # Title
        elements.append(Paragraph("INVOICE", title_style))
        elements.append(Spacer(1, 5 * mm))

        # Invoice Details Table
        invoice_info = [
            ["Invoice Number:", invoice.invoice_number],
            ["Date:", invoice.created_at.strftime(DATE_FORMAT)],
            ["Due Date:", invoice.due_date.strftime(DATE_FORMAT)],
        ]

        invoice_table = Table(invoice_info, colWidths=[40 * mm, 100 * mm], hAlign="LEFT")
        invoice_table.setStyle(
            TableStyle(
                [
                    ("FONTNAME", (0, 0), (0, -1), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, -1), 11),
                    ("TEXTCOLOR", (0, 0), (0, -1), colors.HexColor("#7F8C8D")),
                    ("VALIGN", (0, 0), (-1, -1), "TOP"),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
                ]
            )
        )

        elements.append(invoice_table)
        elements.append(Spacer(1, 8 * mm))

        # Bill To
        customer = invoice.customer
        bill_to = [customer.name]
        if customer.company:
            bill_to.append(customer.company)
        bill_to.append(customer.address)
        bill_to.append(f"Email: {customer.email}")
        if customer.phone:
            bill_to.append(f"Phone: {customer.phone}")

        elements.append(Paragraph("Bill To:", section_style))
        for line in bill_to:
            elements.append(Paragraph(escape(line), normal_style))
        elements.append(Spacer(1, 8 * mm))

        # Line Items Table
        elements.append(Paragraph("Items:", section_style))
        line_data = [["Description", "Qty", "Unit Price", "Total"]]
        for item in invoice.line_items:
            line_data.append(
                [
                    Paragraph(escape(item.description), normal_style),
                    _format_quantity(item.quantity),
                    format_currency(item.unit_price),
                    format_currency(item.total),
                ]
            )

        line_table = Table(line_data, colWidths=ITEM_COL_WIDTHS, repeatRows=1)
        line_table.setStyle(
            TableStyle(
                [
                    # Header row
                    ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#2C3E50")),
                    ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, 0), 10),
                    ("ALIGN", (0, 0), (-1, 0), "CENTER"),
                    # Data rows
                    ("FONTSIZE", (0, 1), (-1, -1), 10),
                    ("ALIGN", (1, 1), (-1, -1), "RIGHT"),
                    ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
                    # Grid
                    ("GRID", (0, 0), (-1, -1), 0.5, colors.HexColor("#BDC3C7")),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 6),
                    ("TOPPADDING", (0, 0), (-1, -1), 6),
                    (
                        "ROWBACKGROUNDS",
                        (0, 1),
                        (-1, -1),
                        [colors.white, colors.HexColor("#F8F9F9")],
                    ),
                ]
            )
        )

        elements.append(line_table)
        elements.append(Spacer(1, 5 * mm))

        # Summary, aligned under the Unit Price / Total columns
        summary_data = [
            ["", "", "Subtotal:", format_currency(invoice.subtotal)],
            ["", "", f"Tax ({format_tax_rate(invoice.tax_rate)}):", format_currency(invoice.tax_amount)],
            ["", "", "Total:", format_currency(invoice.total)],
        ]
        summary_table = Table(summary_data, colWidths=ITEM_COL_WIDTHS)
        summary_table.setStyle(
            TableStyle(
                [
                    ("FONTSIZE", (0, 0), (-1, -1), 10),
                    ("ALIGN", (2, 0), (-1, -1), "RIGHT"),
                    ("FONTNAME", (2, -1), (-1, -1), "Helvetica-Bold"),
                    ("FONTSIZE", (2, -1), (-1, -1), 12),
                    ("LINEABOVE", (2, -1), (-1, -1), 1.5, colors.HexColor("#2C3E50")),
                    ("TOPPADDING", (0, 0), (-1, -1), 4),
                ]
            )
        )

        elements.append(summary_table)

        # Build PDF
        doc.build(elements)
        pdf_bytes = buffer.getvalue()
        buffer.close()

        return pdf_bytes
