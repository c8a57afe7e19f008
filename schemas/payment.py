# schemas/payment.py
"""
Pydantic schemas for the payments API.
"""
from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, Field, ConfigDict


class PaymentCreate(BaseModel):
     """
     Request body for POST /api/payments/invoice/{invoice_id}.

     Amount and method are checked by the payment ledger (amount > 0,
     non-blank method) and rejected with 400 when invalid.
     """

     amount: Decimal = Field(..., max_digits=12, decimal_places=2, description="Amount paid")
     method: str = Field("", max_length=100, description="Payment method, e.g. Cash or Bank Transfer")

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "amount": 300.00,
                    "method": "Bank Transfer",
               }
          }
     )


class PaymentResponse(BaseModel):
     id: int
     invoice_id: int
     amount: Decimal
     paid_at: datetime
     method: str

     model_config = ConfigDict(from_attributes=True)
