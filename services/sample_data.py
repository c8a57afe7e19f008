# services/sample_data.py
"""Demo records for a fresh store (enabled with SEED_SAMPLE_DATA=true)."""
import logging
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from models import Cost, Invoice, InvoiceItem, Payment
from models.invoice import DiscountType, InvoiceStatus

logger = logging.getLogger(__name__)


def seed_sample_data(db: Session, now: Optional[datetime] = None) -> bool:
     """
     Insert one cost, one invoice and one payment if there are no invoices yet.

     Returns:
          bool: True if the sample records were added
     """
     if db.query(Invoice).first() is not None:
          return False

     now = now or datetime.now()
     db.add(Cost(
          description="Office supplies",
          amount=Decimal("125.50"),
          date=now - timedelta(days=10),
          category="Office",
     ))

     invoice = Invoice(
          client_id=1001,
          client_name="Sample Client",
          client_email="client@example.com",
          client_phone="+1234567890",
          region="PS",
          discount=Decimal("10.00"),
          discount_kind=DiscountType.PERCENTAGE,
          created_at=now,
          due_date=now + timedelta(days=30),
          status=InvoiceStatus.SENT,
          items=[
               InvoiceItem(name="Website Design", unit_price=Decimal("500"), quantity=1),
               InvoiceItem(name="Hosting (1 year)", unit_price=Decimal("120"), quantity=1),
          ],
     )
     invoice.payments.append(Payment(
          amount=Decimal("300"),
          paid_at=now - timedelta(days=5),
          method="Bank Transfer",
     ))
     db.add(invoice)
     db.flush()

     logger.info(f"Seeded sample invoice {invoice.id}")
     return True
