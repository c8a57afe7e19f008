# services/errors.py
"""Errors raised by the billing services and translated by the routers."""
from typing import Iterable, Optional


class BillingError(Exception):
     """Base class for billing service errors."""


class ValidationError(BillingError, ValueError):
     """
     A structural invariant was violated (empty items, out-of-range discount,
     non-positive payment amount, blank payment method, ...).

     Raised before anything is written, so the store is left unchanged.
     """

     def __init__(self, errors: Iterable[str], message: Optional[str] = None):
          self.errors = list(errors)
          super().__init__(message or "; ".join(self.errors))


class NotFoundError(BillingError, LookupError):
     """A referenced invoice, payment or cost id does not exist."""

     def __init__(self, entity: str, entity_id: int):
          self.entity = entity
          self.entity_id = entity_id
          super().__init__(f"{entity} with ID {entity_id} not found")
