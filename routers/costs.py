# routers/costs.py
"""
Cost ledger API routes.
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from database import get_session
from routers.errors import to_http_exception
from schemas.cost import CostCreate, CostResponse
from services.cost_service import CostService
from services.errors import BillingError

router = APIRouter(prefix="/api/costs", tags=["costs"])


@router.get("", response_model=List[CostResponse], summary="List all costs")
def list_costs(db: Session = Depends(get_session)):
     return CostService.list_costs(db)


@router.get("/{cost_id}", response_model=CostResponse, summary="Get cost by ID")
def get_cost(cost_id: int, db: Session = Depends(get_session)):
     try:
          return CostService.get_cost(db, cost_id)
     except BillingError as e:
          raise to_http_exception(e)


@router.post(
     "",
     response_model=CostResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Log a new cost"
)
def create_cost(body: CostCreate, db: Session = Depends(get_session)):
     """
     Log a business cost. The date is set to the time of the request.

     - **description**: What the money was spent on
     - **amount**: Non-negative amount
     - **category**: Optional grouping, e.g. Office
     """
     try:
          cost = CostService.create_cost(db, body.description, body.amount, body.category)
     except BillingError as e:
          db.rollback()
          raise to_http_exception(e)
     db.commit()
     db.refresh(cost)
     return cost
