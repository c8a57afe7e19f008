# schemas/invoice.py
"""
Pydantic schemas for Invoice API request/response validation.

Business rules (at least one item, quantity >= 1, percentage discount in
0-100) are enforced by services.validation so that the API and any other
caller get the same ValidationError; the schemas only check shapes.
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional, List
from pydantic import BaseModel, Field, ConfigDict

from models.invoice import DiscountType, InvoiceStatus
from schemas.money import Money
from schemas.payment import PaymentResponse


class InvoiceItemRequest(BaseModel):
     """One invoice line as submitted by a client."""
     name: str = Field(..., min_length=1, max_length=255)
     unit_price: Decimal = Field(..., max_digits=12, decimal_places=2)
     quantity: int = Field(1)


class InvoiceItemResponse(BaseModel):
     name: str
     unit_price: Decimal
     quantity: int

     model_config = ConfigDict(from_attributes=True)


class InvoiceCreate(BaseModel):
     """Schema for creating a new invoice."""
     client_id: int = Field(..., description="Client identifier")
     client_name: str = Field(..., min_length=1, max_length=200)
     client_email: Optional[str] = Field(None, max_length=255)
     client_phone: Optional[str] = Field(None, max_length=50)
     region: Optional[str] = Field(None, max_length=10, description="Two-letter region code selecting the VAT rate")
     discount_kind: DiscountType = Field(default=DiscountType.FIXED)
     discount: Decimal = Field(default=Decimal("0"), max_digits=12, decimal_places=2)
     due_in_days: int = Field(30, description="Due date offset from creation, in days")
     items: List[InvoiceItemRequest] = Field(default_factory=list)

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "client_id": 1001,
                    "client_name": "Sample Client",
                    "client_email": "client@example.com",
                    "client_phone": "+1234567890",
                    "region": "PS",
                    "discount_kind": "Percentage",
                    "discount": 10,
                    "due_in_days": 30,
                    "items": [
                         {"name": "Website Design", "unit_price": 500, "quantity": 1},
                         {"name": "Hosting (1 year)", "unit_price": 120, "quantity": 1}
                    ]
               }
          }
     )


class InvoiceUpdate(BaseModel):
     """
     Schema for updating an existing invoice.

     Only provided fields change. A provided item list replaces the current
     items entirely; due_in_days is counted from the time of the update.
     """
     client_name: Optional[str] = Field(None, min_length=1, max_length=200)
     client_email: Optional[str] = Field(None, max_length=255)
     client_phone: Optional[str] = Field(None, max_length=50)
     region: Optional[str] = Field(None, max_length=10)
     discount_kind: Optional[DiscountType] = None
     discount: Optional[Decimal] = Field(None, max_digits=12, decimal_places=2)
     due_in_days: Optional[int] = None
     items: Optional[List[InvoiceItemRequest]] = None

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "discount_kind": "Fixed",
                    "discount": 25
               }
          }
     )


class InvoiceResponse(BaseModel):
     """Schema for invoice response, including the computed money values."""
     id: int
     client_id: int
     client_name: str
     client_email: Optional[str] = None
     client_phone: Optional[str] = None
     region: Optional[str] = None
     status: InvoiceStatus
     created_at: datetime
     due_date: datetime
     discount_kind: DiscountType
     discount: Decimal
     subtotal: Money
     tax: Money
     grand_total: Money
     total_paid: Money
     total_due: Money
     items: List[InvoiceItemResponse]
     payments: List[PaymentResponse]

     model_config = ConfigDict(from_attributes=True)


class DueReminderResponse(BaseModel):
     """An unpaid invoice falling due within the reminder window."""
     invoice_id: int
     due_date: datetime
     total_due: Money
     status: InvoiceStatus
     client_name: str
     client_email: Optional[str] = None
     client_phone: Optional[str] = None


class InvoiceStatusResponse(BaseModel):
     invoice_id: int
     status: InvoiceStatus
     summary: str


class StatusRefreshResponse(BaseModel):
     checked: int
     changed: int
