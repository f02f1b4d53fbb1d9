"""Mandates: a customer's permission to collect payments from their bank account."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, Optional

from gocardless_pro.enums import TolerantWireEnum
from gocardless_pro.resources.base import Resource


class MandateStatus(TolerantWireEnum):
    UNKNOWN = "unknown"
    PENDING_CUSTOMER_APPROVAL = "pending_customer_approval"
    PENDING_SUBMISSION = "pending_submission"
    SUBMITTED = "submitted"
    ACTIVE = "active"
    FAILED = "failed"
    CANCELLED = "cancelled"
    EXPIRED = "expired"


class MandateLinks(Resource):
    creditor: Optional[str] = None
    customer: Optional[str] = None
    customer_bank_account: Optional[str] = None
    # Set once the mandate has been moved to a new bank account or creditor.
    new_mandate: Optional[str] = None


class Mandate(Resource):
    created_at: Optional[datetime] = None
    id: Optional[str] = None
    links: Optional[MandateLinks] = None
    metadata: Optional[Dict[str, str]] = None
    next_possible_charge_date: Optional[str] = None
    payments_require_approval: Optional[bool] = None
    reference: Optional[str] = None
    scheme: Optional[str] = None
    status: Optional[MandateStatus] = None
