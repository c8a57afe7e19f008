# services/cost_service.py
import logging
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from sqlalchemy.orm import Session

from models import Cost
from services.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


class CostService:
     """Append-only ledger of business costs."""

     @staticmethod
     def create_cost(
          db: Session,
          description: str,
          amount: Decimal,
          category: Optional[str] = None,
          now: Optional[datetime] = None
     ) -> Cost:
          if amount is None or amount < 0:
               raise ValidationError(["Cost amount cannot be negative"])
          if not description or not description.strip():
               raise ValidationError(["Cost description is required"])

          cost = Cost(
               description=description,
               amount=amount,
               category=category,
               date=now or datetime.now(),
          )
          db.add(cost)
          db.flush()

          logger.info(f"Logged cost {cost.id}: {cost.description} ({cost.amount})")
          return cost

     @staticmethod
     def get_cost(db: Session, cost_id: int) -> Cost:
          cost = db.get(Cost, cost_id)
          if cost is None:
               raise NotFoundError("Cost", cost_id)
          return cost

     @staticmethod
     def list_costs(db: Session) -> List[Cost]:
          return db.query(Cost).order_by(Cost.date, Cost.id).all()
