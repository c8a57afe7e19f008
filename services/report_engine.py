# services/report_engine.py
"""
Report Engine - filters, sorts, groups and aggregates the invoice collection.

Reports are built from raw values. `render_report` and `render_summary`
turn them into the plain-text layout used by the text endpoints.
"""
from datetime import date, datetime, time
from decimal import Decimal
from itertools import groupby
from typing import Any, Callable, Iterable, List, Optional, Tuple, Union

from sqlalchemy.orm import Session

from models import Invoice
from schemas.report import GroupSummary, SummaryStatistics, TabularReport
from services.formatting import format_currency, format_short_date, format_value

DateBound = Union[date, datetime, None]

STATUS_COLUMNS = ["ID", "Client", "Created", "Due Date", "Amount Due", "Status"]
CLIENT_COLUMNS = ["ID", "Client", "Created", "Total", "Paid", "Due", "Status"]
DATE_RANGE_COLUMNS = ["ID", "Client", "Created", "Due Date", "Total", "Status"]


def _name_order(name: Optional[str]) -> Tuple[str, str]:
     """Alphabetical regardless of case; exact spelling breaks ties."""
     name = name or ""
     return name.casefold(), name


def _titled(base: str, qualifier: Optional[str]) -> str:
     return f"{base} ({qualifier})" if qualifier else base


def _start_of(bound: DateBound) -> Optional[datetime]:
     if bound is None or isinstance(bound, datetime):
          return bound
     return datetime.combine(bound, time.min)


def _end_of(bound: DateBound) -> Optional[datetime]:
     # A bare date covers the whole day
     if bound is None or isinstance(bound, datetime):
          return bound
     return datetime.combine(bound, time.max)


class ReportEngine:
     """Builds reports over a fixed snapshot of invoices."""

     def __init__(self, invoices: Iterable[Invoice]):
          self.invoices = list(invoices)

     @classmethod
     def from_session(cls, db: Session) -> "ReportEngine":
          return cls(db.query(Invoice).order_by(Invoice.id).all())

     def status_report(self, status_filter: Optional[str] = None) -> TabularReport:
          invoices = self.invoices
          if status_filter:
               wanted = status_filter.strip().lower()
               invoices = [i for i in invoices if i.status.value.lower() == wanted]

          invoices = sorted(invoices, key=lambda i: (i.status.value, i.due_date))
          return TabularReport(
               title=_titled("Invoice Status Report", status_filter),
               columns=STATUS_COLUMNS,
               rows=[
                    [i.id, i.client_name, i.created_at, i.due_date, i.total_due, i.status.value]
                    for i in invoices
               ],
          )

     def client_report(self, client_filter: Optional[str] = None) -> TabularReport:
          invoices = self.invoices
          if client_filter:
               needle = client_filter.lower()
               invoices = [i for i in invoices if needle in (i.client_name or "").lower()]

          invoices = sorted(invoices, key=lambda i: (_name_order(i.client_name), i.due_date))
          return TabularReport(
               title=_titled("Client Invoice Report", client_filter),
               columns=CLIENT_COLUMNS,
               rows=[
                    [i.id, i.client_name, i.created_at, i.grand_total, i.total_paid, i.total_due, i.status.value]
                    for i in invoices
               ],
          )

     def date_range_report(self, start: DateBound = None, end: DateBound = None) -> TabularReport:
          lower, upper = _start_of(start), _end_of(end)
          invoices = self.invoices
          if lower is not None:
               invoices = [i for i in invoices if i.created_at >= lower]
          if upper is not None:
               invoices = [i for i in invoices if i.created_at <= upper]

          invoices = sorted(invoices, key=lambda i: i.created_at)
          range_label = (
               f"{format_short_date(start) if start else 'Start'} to "
               f"{format_short_date(end) if end else 'End'}"
          )
          return TabularReport(
               title=f"Date Range Invoice Report ({range_label})",
               columns=DATE_RANGE_COLUMNS,
               rows=[
                    [i.id, i.client_name, i.created_at, i.due_date, i.grand_total, i.status.value]
                    for i in invoices
               ],
          )

     def summary_statistics(self) -> SummaryStatistics:
          return SummaryStatistics(
               by_status=self._group(lambda i: i.status.value),
               by_client=self._group(lambda i: i.client_name or "", order=_name_order),
          )

     def _group(
          self,
          key: Callable[[Invoice], str],
          order: Optional[Callable[[str], Any]] = None
     ) -> List[GroupSummary]:
          order = order or (lambda k: k)
          ordered = sorted(self.invoices, key=lambda i: order(key(i)))
          groups = []
          for group_key, members in groupby(ordered, key=key):
               members = list(members)
               groups.append(GroupSummary(
                    key=group_key,
                    count=len(members),
                    total_amount=sum((i.grand_total for i in members), Decimal("0")),
                    total_due=sum((i.total_due for i in members), Decimal("0")),
               ))
          return groups


def render_report(report: TabularReport) -> str:
     """Plain-text table with a trailing invoice count."""
     width = len(report.title)
     lines = [
          report.title,
          "=" * width,
          " | ".join(report.columns),
          "-" * (sum(len(c) for c in report.columns) + (len(report.columns) - 1) * 3),
     ]
     for row in report.rows:
          lines.append(" | ".join(format_value(value) for value in row))
     lines.append("=" * width)
     lines.append(f"Total Invoices: {len(report.rows)}")
     return "\n".join(lines) + "\n"


def render_summary(stats: SummaryStatistics) -> str:
     lines = ["=== Invoice Statistics ===", "", "By Status:"]
     for group in stats.by_status:
          lines.append(_group_line(group))
     lines.extend(["", "By Client:"])
     for group in stats.by_client:
          lines.append(_group_line(group))
     return "\n".join(lines) + "\n"


def _group_line(group: GroupSummary) -> str:
     return (
          f"{group.key}: {group.count} invoices, "
          f"Total: {format_currency(group.total_amount)}, Due: {format_currency(group.total_due)}"
     )
