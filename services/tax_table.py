# services/tax_table.py
"""
VAT rates by region code.

The table is fixed country data. Lookups are case-insensitive and any code
not in the table (including None or an empty string) falls back to
DEFAULT_RATE without raising.
"""
from decimal import Decimal
from typing import Optional

DEFAULT_RATE = Decimal("0.05")

VAT_RATES = {
     # Gulf Cooperation Council
     "SA": Decimal("0.15"),  # Saudi Arabia
     "AE": Decimal("0.05"),  # United Arab Emirates
     # North Africa
     "EG": Decimal("0.14"),  # Egypt
     "MA": Decimal("0.20"),  # Morocco
     "TN": Decimal("0.19"),  # Tunisia
     "LY": Decimal("0.15"),  # Libya
     # Levant
     "JO": Decimal("0.16"),  # Jordan
     "IQ": Decimal("0.15"),  # Iraq
     "PS": Decimal("0.16"),  # Palestine
}


def normalize_region(region_code: Optional[str]) -> str:
     return (region_code or "").strip().upper()


def rate(region_code: Optional[str]) -> Decimal:
     """Return the VAT rate for a region code, or DEFAULT_RATE if unknown."""
     return VAT_RATES.get(normalize_region(region_code), DEFAULT_RATE)


def tax_for(amount: Decimal, region_code: Optional[str]) -> Decimal:
     """Tax owed on `amount` in the given region."""
     return amount * rate(region_code)
