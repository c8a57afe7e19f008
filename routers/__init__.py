# routers/__init__.py
from .costs import router as costs_router
from .invoices import router as invoices_router
from .payments import router as payments_router
from .reports import router as reports_router

__all__ = [
     "costs_router",
     "invoices_router",
     "payments_router",
     "reports_router",
]
