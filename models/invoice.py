# models/invoice.py
import enum
from sqlalchemy import Column, Integer, String, Numeric, DateTime, ForeignKey, Enum, func
from sqlalchemy.orm import relationship
from .base import Base


class InvoiceStatus(str, enum.Enum):
     """Lifecycle status of an invoice, derived by the status engine."""
     DRAFT = "Draft"
     SENT = "Sent"
     PARTIAL = "Partial"
     OVERDUE = "Overdue"
     PAID = "Paid"


class DiscountType(str, enum.Enum):
     """How the invoice discount is applied after tax."""
     FIXED = "Fixed"
     PERCENTAGE = "Percentage"


class Invoice(Base):
     """
     Invoice model - a bill to a client made of line items.

     Money values (subtotal, tax, grand total, paid, due) are never stored;
     the properties below recompute them from the current items, payments,
     region and discount on every read.
     """

     id = Column(Integer, primary_key=True, autoincrement=True)

     # Client identity
     client_id = Column(Integer, nullable=False, index=True)
     client_name = Column(String(200), nullable=False, index=True)
     client_email = Column(String(255), nullable=True)
     client_phone = Column(String(50), nullable=True)

     # Pricing rules
     region = Column(String(10), nullable=True)
     discount_kind = Column(
          Enum(DiscountType, name="discount_type", create_constraint=True),
          default=DiscountType.FIXED,
          nullable=False
     )
     discount = Column(Numeric(12, 2), default=0, nullable=False)

     # Lifecycle
     status = Column(
          Enum(InvoiceStatus, name="invoice_status", create_constraint=True),
          default=InvoiceStatus.DRAFT,
          nullable=False,
          index=True
     )
     created_at = Column(DateTime, server_default=func.now(), nullable=False, index=True)
     due_date = Column(DateTime, nullable=False, index=True)

     # Relationships
     items = relationship(
          "InvoiceItem",
          back_populates="invoice",
          cascade="all, delete-orphan",
          order_by="InvoiceItem.id"
     )
     payments = relationship(
          "Payment",
          back_populates="invoice",
          order_by="[Payment.paid_at, Payment.id]"
     )

     def __repr__(self):
          return f"<Invoice(id={self.id}, client='{self.client_name}', status='{self.status.value}', due_date={self.due_date})>"

     @property
     def subtotal(self):
          from services.invoice_calculator import subtotal
          return subtotal(self)

     @property
     def tax(self):
          from services.invoice_calculator import tax
          return tax(self)

     @property
     def grand_total(self):
          from services.invoice_calculator import grand_total
          return grand_total(self)

     @property
     def total_paid(self):
          from services.invoice_calculator import total_paid
          return total_paid(self)

     @property
     def total_due(self):
          from services.invoice_calculator import total_due
          return total_due(self)


class InvoiceItem(Base):
     """A line on an invoice. Has no identity outside its invoice."""

     id = Column(Integer, primary_key=True, autoincrement=True)
     invoice_id = Column(
          Integer,
          ForeignKey("invoices.id", ondelete="CASCADE"),
          nullable=False,
          index=True
     )
     name = Column(String(255), nullable=False)
     unit_price = Column(Numeric(12, 2), nullable=False)
     quantity = Column(Integer, nullable=False, default=1)

     invoice = relationship("Invoice", back_populates="items")

     @property
     def line_total(self):
          return self.unit_price * self.quantity

     def __repr__(self):
          return f"<InvoiceItem(name='{self.name}', unit_price={self.unit_price}, quantity={self.quantity})>"
