# schemas/money.py
"""
Money fields as they leave the API.

Derived amounts keep full Decimal precision inside the services (tax and
percentage discounts produce long tails); responses round them to cents.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Annotated

from pydantic import PlainSerializer

CENT = Decimal("0.01")


def to_cents(value: Decimal) -> Decimal:
     return value.quantize(CENT, rounding=ROUND_HALF_UP)


Money = Annotated[Decimal, PlainSerializer(to_cents, return_type=Decimal)]
