"""Payments collected against a mandate."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, Optional

from gocardless_pro.enums import TolerantWireEnum
from gocardless_pro.resources.base import Resource
from gocardless_pro.resources.currency import Currency


class PaymentStatus(TolerantWireEnum):
    UNKNOWN = "unknown"
    PENDING_CUSTOMER_APPROVAL = "pending_customer_approval"
    PENDING_SUBMISSION = "pending_submission"
    SUBMITTED = "submitted"
    CONFIRMED = "confirmed"
    PAID_OUT = "paid_out"
    CANCELLED = "cancelled"
    CUSTOMER_APPROVAL_DENIED = "customer_approval_denied"
    FAILED = "failed"
    CHARGED_BACK = "charged_back"


class PaymentFx(Resource):
    """Foreign exchange details, present when the payment is in a different currency to the payout."""

    estimated_exchange_rate: Optional[str] = None
    exchange_rate: Optional[str] = None
    fx_amount: Optional[int] = None
    fx_currency: Optional[Currency] = None


class PaymentLinks(Resource):
    creditor: Optional[str] = None
    instalment_schedule: Optional[str] = None
    mandate: Optional[str] = None
    payout: Optional[str] = None
    subscription: Optional[str] = None


class Payment(Resource):
    # Amounts are in the lowest denomination of the currency (pence, cents).
    amount: Optional[int] = None
    amount_refunded: Optional[int] = None
    charge_date: Optional[str] = None
    created_at: Optional[datetime] = None
    currency: Optional[Currency] = None
    description: Optional[str] = None
    fx: Optional[PaymentFx] = None
    id: Optional[str] = None
    links: Optional[PaymentLinks] = None
    metadata: Optional[Dict[str, str]] = None
    reference: Optional[str] = None
    retry_if_possible: Optional[bool] = None
    status: Optional[PaymentStatus] = None
