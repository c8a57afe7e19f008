# schemas/report.py
"""
Pydantic schemas for invoice reports.

Rows carry raw values (Decimal amounts, datetimes); formatting is left to
the text renderer or the API client.
"""
from typing import Any, List
from pydantic import BaseModel, ConfigDict

from schemas.money import Money


class TabularReport(BaseModel):
     """Title, ordered column names and rows of values in column order."""
     title: str
     columns: List[str]
     rows: List[List[Any]]

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "title": "Invoice Status Report (Partial)",
                    "columns": ["ID", "Client", "Created", "Due Date", "Amount Due", "Status"],
                    "rows": [[1, "Sample Client", "2026-10-19T09:00:00", "2026-11-18T09:00:00", "347.28", "Partial"]]
               }
          }
     )


class GroupSummary(BaseModel):
     """Aggregates for one status or one client."""
     key: str
     count: int
     total_amount: Money
     total_due: Money


class SummaryStatistics(BaseModel):
     title: str = "Invoice Summary Statistics"
     by_status: List[GroupSummary]
     by_client: List[GroupSummary]
