# models/payment.py
"""
Payment model - a single amount received against an invoice.

The payments table is the only store of payments; Invoice.payments is a
relationship over payments.invoice_id, not a second copy.
Records are append-only; modification is prevented at the application layer.
"""
from sqlalchemy import Column, Integer, String, Numeric, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from .base import Base


class Payment(Base):

     id = Column(Integer, primary_key=True, autoincrement=True)
     invoice_id = Column(
          Integer,
          ForeignKey("invoices.id", ondelete="RESTRICT"),
          nullable=False,
          index=True
     )
     amount = Column(Numeric(12, 2), nullable=False)
     paid_at = Column(DateTime, server_default=func.now(), nullable=False, index=True)
     method = Column(String(100), nullable=False)

     # Relationships
     invoice = relationship("Invoice", back_populates="payments")

     def __repr__(self):
          return f"<Payment(id={self.id}, invoice_id={self.invoice_id}, amount={self.amount}, method='{self.method}')>"
