# services/formatting.py
"""Presentation helpers shared by the text reports and the receipt."""
from datetime import date, datetime
from decimal import Decimal


def format_currency(value) -> str:
     """1234.5 -> $1,234.50, -5 -> -$5.00"""
     sign = "-" if value < 0 else ""
     return f"{sign}${abs(value):,.2f}"


def format_short_date(value) -> str:
     """Month/day/year without zero padding, e.g. 3/7/2026."""
     return f"{value.month}/{value.day}/{value.year}"


def format_value(value) -> str:
     if isinstance(value, Decimal):
          return format_currency(value)
     if isinstance(value, (datetime, date)):
          return format_short_date(value)
     if value is None:
          return ""
     return str(value)
