"""Payouts: transfers of collected funds to a creditor's bank account."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, Optional

from gocardless_pro.enums import TolerantWireEnum
from gocardless_pro.resources.base import Resource
from gocardless_pro.resources.currency import Currency


class PayoutStatus(TolerantWireEnum):
    UNKNOWN = "unknown"
    PENDING = "pending"
    PAID = "paid"
    BOUNCED = "bounced"


class PayoutType(TolerantWireEnum):
    UNKNOWN = "unknown"
    MERCHANT = "merchant"
    PARTNER = "partner"


class PayoutFx(Resource):
    estimated_exchange_rate: Optional[str] = None
    exchange_rate: Optional[str] = None
    fx_amount: Optional[int] = None
    fx_currency: Optional[Currency] = None


class PayoutLinks(Resource):
    creditor: Optional[str] = None
    creditor_bank_account: Optional[str] = None


class Payout(Resource):
    amount: Optional[int] = None
    arrival_date: Optional[str] = None
    created_at: Optional[datetime] = None
    currency: Optional[Currency] = None
    deducted_fees: Optional[int] = None
    fx: Optional[PayoutFx] = None
    id: Optional[str] = None
    links: Optional[PayoutLinks] = None
    metadata: Optional[Dict[str, str]] = None
    payout_type: Optional[PayoutType] = None
    reference: Optional[str] = None
    status: Optional[PayoutStatus] = None
    tax_currency: Optional[str] = None
