# services/receipt_service.py
"""
Payment receipt PDF rendering.

Consumes an already computed invoice and one of its payments; performs no
money calculation of its own beyond the running balance at that payment.
"""
import logging
from decimal import Decimal
from io import BytesIO

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import cm, mm
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle

from models import Invoice, Payment
from services import invoice_calculator as calc
from services.formatting import format_currency

logger = logging.getLogger(__name__)


def receipt_filename(invoice: Invoice, payment: Payment) -> str:
     return f"Receipt_{invoice.id}_{payment.paid_at:%Y%m%d}.pdf"


def balance_after(invoice: Invoice, payment: Payment) -> Decimal:
     """Grand total minus every payment made up to and including `payment`."""
     paid = sum(
          (p.amount for p in invoice.payments if (p.paid_at, p.id) <= (payment.paid_at, payment.id)),
          Decimal("0"),
     )
     return calc.grand_total(invoice) - paid


def _page_footer(canvas, doc):
     canvas.saveState()
     canvas.setFont("Helvetica", 9)
     canvas.drawCentredString(A4[0] / 2, 1 * cm, f"Page {doc.page}")
     canvas.restoreState()


def generate_receipt_pdf(invoice: Invoice, payment: Payment) -> bytes:
     """
     Render a receipt for `payment` on `invoice`.

     Args:
          invoice (Invoice): The invoice the payment was recorded against.
          payment (Payment): The payment being acknowledged.

     Returns:
          bytes: The PDF document.
     """
     buffer = BytesIO()
     doc = SimpleDocTemplate(buffer, pagesize=A4,
                             rightMargin=2 * cm, leftMargin=2 * cm,
                             topMargin=2 * cm, bottomMargin=2 * cm)
     elements = []
     styles = getSampleStyleSheet()

     # --- Header ---
     title_style = styles['h1']
     title_style.alignment = 1  # centre
     title_style.textColor = colors.HexColor('#2196F3')
     elements.append(Paragraph("PAYMENT RECEIPT", title_style))
     elements.append(Spacer(1, 0.5 * cm))

     # --- Receipt / invoice details ---
     details = Table([
          [f"Receipt #: {payment.id}", f"Invoice #: {invoice.id}"],
          [f"Date: {payment.paid_at:%Y-%m-%d %H:%M}", f"Client: {invoice.client_name}"],
          [f"Payment Method: {payment.method}", ""],
     ], colWidths=[8.5 * cm, 8.5 * cm])
     details.setStyle(TableStyle([
          ('ALIGN', (0, 0), (-1, -1), 'LEFT'),
          ('LINEBELOW', (0, -1), (-1, -1), 1, colors.lightgrey),
          ('BOTTOMPADDING', (0, -1), (-1, -1), 10),
     ]))
     elements.append(details)
     elements.append(Spacer(1, 0.4 * cm))

     # --- Items Table ---
     elements.append(Paragraph("<b>ITEMS</b>", styles['Normal']))
     elements.append(Spacer(1, 0.2 * cm))
     data = [['#', 'Description', 'Qty', 'Unit Price', 'Amount']]
     for number, item in enumerate(invoice.items, start=1):
          data.append([
               str(number),
               Paragraph(item.name, styles['Normal']),
               str(item.quantity),
               format_currency(item.unit_price),
               format_currency(item.unit_price * item.quantity),
          ])
     item_table = Table(data, colWidths=[10 * mm, 7 * cm, 2 * cm, 3 * cm, 3 * cm])
     item_table.setStyle(TableStyle([
          ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
          ('LINEBELOW', (0, 0), (-1, 0), 1, colors.grey),
          ('LINEBELOW', (0, 1), (-1, -1), 0.5, colors.lightgrey),
          ('ALIGN', (2, 0), (-1, -1), 'RIGHT'),
          ('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),
          ('TOPPADDING', (0, 1), (-1, -1), 5),
          ('BOTTOMPADDING', (0, 1), (-1, -1), 5),
     ]))
     elements.append(item_table)
     elements.append(Spacer(1, 0.3 * cm))

     # --- Totals ---
     tax_percent = calc.effective_tax_rate(invoice) * 100
     totals_data = [
          ['Subtotal:', format_currency(calc.subtotal(invoice))],
          [f"Tax ({invoice.region or ''} {tax_percent:.0f}%):", format_currency(calc.tax(invoice))],
          ['Total:', format_currency(calc.grand_total(invoice))],
          ['Amount Paid:', format_currency(payment.amount)],
          ['Balance Due:', format_currency(balance_after(invoice, payment))],
     ]
     totals_table = Table(totals_data, colWidths=[13 * cm, 4 * cm])
     totals_table.setStyle(TableStyle([
          ('ALIGN', (0, 0), (-1, -1), 'RIGHT'),
          ('FONTNAME', (0, 0), (0, -1), 'Helvetica-Bold'),
          ('TOPPADDING', (0, 0), (-1, -1), 4),
          ('BOTTOMPADDING', (0, 0), (-1, -1), 4),
     ]))
     elements.append(totals_table)
     elements.append(Spacer(1, 0.8 * cm))

     # --- Footer ---
     thanks_style = styles['Italic']
     thanks_style.alignment = 1
     elements.append(Paragraph("Thank you for your business!", thanks_style))

     doc.build(elements, onFirstPage=_page_footer, onLaterPages=_page_footer)
     logger.info(f"Rendered receipt for payment {payment.id} on invoice {invoice.id}")
     return buffer.getvalue()
