# routers/errors.py
from fastapi import HTTPException, status

from services.errors import BillingError, NotFoundError, ValidationError


def to_http_exception(exc: BillingError) -> HTTPException:
     """Map a service error onto the HTTP status the API reports for it."""
     if isinstance(exc, NotFoundError):
          return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
     if isinstance(exc, ValidationError):
          return HTTPException(
               status_code=status.HTTP_400_BAD_REQUEST,
               detail={"message": "Validation failed", "errors": exc.errors},
          )
     return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))
