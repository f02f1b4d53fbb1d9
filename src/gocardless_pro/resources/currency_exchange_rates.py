from __future__ import annotations

from typing import Optional

from gocardless_pro.resources.base import Resource
from gocardless_pro.resources.currency import Currency


class CurrencyExchangeRate(Resource):
    # Decimal string, kept as sent to avoid float rounding.
    rate: Optional[str] = None
    source: Optional[Currency] = None
    target: Optional[Currency] = None
    time: Optional[str] = None
