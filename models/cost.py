# models/cost.py
from sqlalchemy import Column, Integer, String, Numeric, DateTime, func
from .base import Base


class Cost(Base):
     """
     Cost model - a business expense entry.
     Immutable once logged; there is no update or delete path.
     """

     id = Column(Integer, primary_key=True, autoincrement=True)
     description = Column(String(255), nullable=False)
     amount = Column(Numeric(12, 2), nullable=False)
     date = Column(DateTime, server_default=func.now(), nullable=False, index=True)
     category = Column(String(100), nullable=True, index=True)

     def __repr__(self):
          return f"<Cost(id={self.id}, amount={self.amount}, category='{self.category}')>"
