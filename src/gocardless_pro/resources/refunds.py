from __future__ import annotations

from datetime import datetime
from typing import Dict, Optional

from gocardless_pro.enums import TolerantWireEnum
from gocardless_pro.resources.base import Resource
from gocardless_pro.resources.currency import Currency


class RefundStatus(TolerantWireEnum):
    UNKNOWN = "unknown"
    CREATED = "created"
    PENDING_SUBMISSION = "pending_submission"
    SUBMITTED = "submitted"
    PAID = "paid"
    CANCELLED = "cancelled"
    BOUNCED = "bounced"
    FUNDS_RETURNED = "funds_returned"


class RefundFx(Resource):
    estimated_exchange_rate: Optional[str] = None
    exchange_rate: Optional[str] = None
    fx_amount: Optional[int] = None
    fx_currency: Optional[Currency] = None


class RefundLinks(Resource):
    mandate: Optional[str] = None
    payment: Optional[str] = None


class Refund(Resource):
    amount: Optional[int] = None
    created_at: Optional[datetime] = None
    currency: Optional[Currency] = None
    fx: Optional[RefundFx] = None
    id: Optional[str] = None
    links: Optional[RefundLinks] = None
    metadata: Optional[Dict[str, str]] = None
    reference: Optional[str] = None
    status: Optional[RefundStatus] = None
