from __future__ import annotations

from typing import Optional

from gocardless_pro.enums import TolerantWireEnum
from gocardless_pro.resources.base import Resource
from gocardless_pro.resources.currency import Currency


class BalanceType(TolerantWireEnum):
    UNKNOWN = "unknown"
    CONFIRMED_FUNDS = "confirmed_funds"
    PENDING_PAYOUTS = "pending_payouts"
    PENDING_PAYMENTS_SUBMITTED = "pending_payments_submitted"


class BalanceLinks(Resource):
    creditor: Optional[str] = None


class Balance(Resource):
    amount: Optional[int] = None
    balance_type: Optional[BalanceType] = None
    currency: Optional[Currency] = None
    last_updated_at: Optional[str] = None
    links: Optional[BalanceLinks] = None
