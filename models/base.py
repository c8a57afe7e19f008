# models/base.py
import re

from sqlalchemy.orm import DeclarativeBase, declared_attr


class Base(DeclarativeBase):
     """Declarative base; each table is named after its model."""

     @declared_attr.directive
     def __tablename__(cls) -> str:
          """
          Snake_case plural of the class name.
          Example: InvoiceItem -> invoice_items, Cost -> costs
          """
          name = re.sub(r'(?<!^)(?=[A-Z])', '_', cls.__name__).lower()
          if name.endswith('y'):
               return name[:-1] + 'ies'
          elif name.endswith('s'):
               return name + 'es'
          return name + 's'
