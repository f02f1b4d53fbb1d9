"""
Subscriptions: recurring payments created automatically against a mandate.

interval_unit and month are closed calendar vocabularies and decode
strictly; status is allowed to grow and decodes tolerantly.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from gocardless_pro.enums import TolerantWireEnum, WireEnum
from gocardless_pro.resources.base import Resource
from gocardless_pro.resources.currency import Currency


class SubscriptionStatus(TolerantWireEnum):
    UNKNOWN = "unknown"
    PENDING_CUSTOMER_APPROVAL = "pending_customer_approval"
    CUSTOMER_APPROVAL_DENIED = "customer_approval_denied"
    ACTIVE = "active"
    FINISHED = "finished"
    CANCELLED = "cancelled"


class SubscriptionIntervalUnit(WireEnum):
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class SubscriptionMonth(WireEnum):
    JANUARY = "january"
    FEBRUARY = "february"
    MARCH = "march"
    APRIL = "april"
    MAY = "may"
    JUNE = "june"
    JULY = "july"
    AUGUST = "august"
    SEPTEMBER = "september"
    OCTOBER = "october"
    NOVEMBER = "november"
    DECEMBER = "december"


class SubscriptionLinks(Resource):
    mandate: Optional[str] = None


class SubscriptionUpcomingPayment(Resource):
    amount: Optional[int] = None
    charge_date: Optional[str] = None


class Subscription(Resource):
    amount: Optional[int] = None
    created_at: Optional[datetime] = None
    currency: Optional[Currency] = None
    day_of_month: Optional[int] = None
    end_date: Optional[str] = None
    id: Optional[str] = None
    interval: Optional[int] = None
    interval_unit: Optional[SubscriptionIntervalUnit] = None
    links: Optional[SubscriptionLinks] = None
    metadata: Optional[Dict[str, str]] = None
    month: Optional[SubscriptionMonth] = None
    name: Optional[str] = None
    payment_reference: Optional[str] = None
    start_date: Optional[str] = None
    status: Optional[SubscriptionStatus] = None
    upcoming_payments: Optional[List[SubscriptionUpcomingPayment]] = None
