# schemas/cost.py
from datetime import datetime
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class CostCreate(BaseModel):
     description: str = Field(..., min_length=1, max_length=255)
     amount: Decimal = Field(..., max_digits=12, decimal_places=2)
     category: Optional[str] = Field(None, max_length=100)

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "description": "Office supplies",
                    "amount": 125.50,
                    "category": "Office"
               }
          }
     )


class CostResponse(BaseModel):
     id: int
     description: str
     amount: Decimal
     date: datetime
     category: Optional[str] = None

     model_config = ConfigDict(from_attributes=True)
