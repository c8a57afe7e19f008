# routers/reports.py
"""
Invoice report routes.

Each report is available as structured JSON (raw amounts and timestamps)
or, with `format=text`, as the rendered plain-text table.
"""
from datetime import date
from enum import Enum
from typing import Optional, Union
from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from database import get_session
from schemas.report import SummaryStatistics, TabularReport
from services.report_engine import ReportEngine, render_report, render_summary

router = APIRouter(prefix="/api/reports", tags=["reports"])


class ReportFormat(str, Enum):
     JSON = "json"
     TEXT = "text"


def _respond(report: TabularReport, fmt: ReportFormat) -> Union[TabularReport, PlainTextResponse]:
     if fmt == ReportFormat.TEXT:
          return PlainTextResponse(render_report(report))
     return report


@router.get("/status", response_model=TabularReport, summary="Invoices by status")
def status_report(
     status: Optional[str] = Query(None, description="Only this status (case-insensitive)"),
     format: ReportFormat = Query(ReportFormat.JSON),
     db: Session = Depends(get_session)
):
     """Rows sorted by status, then due date."""
     return _respond(ReportEngine.from_session(db).status_report(status), format)


@router.get("/client", response_model=TabularReport, summary="Invoices by client")
def client_report(
     client: Optional[str] = Query(None, description="Substring of the client name (case-insensitive)"),
     format: ReportFormat = Query(ReportFormat.JSON),
     db: Session = Depends(get_session)
):
     """Rows sorted by client name, then due date."""
     return _respond(ReportEngine.from_session(db).client_report(client), format)


@router.get("/date-range", response_model=TabularReport, summary="Invoices created in a date range")
def date_range_report(
     start: Optional[date] = Query(None, description="First creation day (inclusive)"),
     end: Optional[date] = Query(None, description="Last creation day (inclusive)"),
     format: ReportFormat = Query(ReportFormat.JSON),
     db: Session = Depends(get_session)
):
     """Rows sorted by creation time. Either bound may be omitted."""
     return _respond(ReportEngine.from_session(db).date_range_report(start, end), format)


@router.get("/summary", response_model=SummaryStatistics, summary="Totals by status and by client")
def summary_statistics(
     format: ReportFormat = Query(ReportFormat.JSON),
     db: Session = Depends(get_session)
):
     stats = ReportEngine.from_session(db).summary_statistics()
     if format == ReportFormat.TEXT:
          return PlainTextResponse(render_summary(stats))
     return stats
