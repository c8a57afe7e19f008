import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from config import CORS_ORIGINS, LOG_LEVEL, PORT, SEED_SAMPLE_DATA
from database import check_connection, get_session_context, init_db
from routers import costs_router, invoices_router, payments_router, reports_router
from services.sample_data import seed_sample_data

# Configure logging
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


# Startup
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create missing tables and optionally seed the demo records."""
    init_db()
    if SEED_SAMPLE_DATA:
        with get_session_context() as db:
            if seed_sample_data(db):
                logger.info("Sample data loaded")
    logger.info("Cost Manager API started")
    yield


# App instance
app = FastAPI(
    title="Cost Manager API",
    description="Costs, invoices with regional VAT and discounts, payments, status tracking and reports.",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(costs_router)
app.include_router(invoices_router)
app.include_router(payments_router)
app.include_router(reports_router)


@app.get("/api/health")
def health():
    return {"status": "ok", "database": check_connection()}


# 404 Fallback Middleware
@app.middleware("http")
async def not_found_middleware(request: Request, call_next):
    try:
        response = await call_next(request)
        if response.status_code == 404 and request.scope.get("endpoint") is None:
            return JSONResponse(status_code=404, content={"error": "Route not found"})
        return response
    except Exception:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(status_code=500, content={"error": "Internal server error"})


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=PORT, reload=True)
