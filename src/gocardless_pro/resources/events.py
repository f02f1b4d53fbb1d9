"""
Events: the audit trail of things that happened to other resources.

Events are where new vocabulary shows up first (new causes, new origins,
new resource types), so every enum here is tolerant.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from gocardless_pro.enums import TolerantWireEnum
from gocardless_pro.resources.base import Resource


class EventResourceType(TolerantWireEnum):
    UNKNOWN = "unknown"
    BILLING_REQUESTS = "billing_requests"
    CREDITORS = "creditors"
    CUSTOMERS = "customers"
    EXPORTS = "exports"
    INSTALMENT_SCHEDULES = "instalment_schedules"
    MANDATES = "mandates"
    ORGANISATIONS = "organisations"
    OUTBOUND_PAYMENTS = "outbound_payments"
    PAYER_AUTHORISATIONS = "payer_authorisations"
    PAYMENTS = "payments"
    PAYOUTS = "payouts"
    REFUNDS = "refunds"
    SCHEME_IDENTIFIERS = "scheme_identifiers"
    SUBSCRIPTIONS = "subscriptions"


class EventDetailsOrigin(TolerantWireEnum):
    UNKNOWN = "unknown"
    BANK = "bank"
    API = "api"
    GOCARDLESS = "gocardless"
    CUSTOMER = "customer"
    PAYER = "payer"


class EventDetailsScheme(TolerantWireEnum):
    UNKNOWN = "unknown"
    ACH = "ach"
    AUTOGIRO = "autogiro"
    BACS = "bacs"
    BECS = "becs"
    BECS_NZ = "becs_nz"
    BETALINGSSERVICE = "betalingsservice"
    FASTER_PAYMENTS = "faster_payments"
    PAD = "pad"
    PAY_TO = "pay_to"
    SEPA_CORE = "sepa_core"
    SEPA_COR1 = "sepa_cor1"


class EventSourceType(TolerantWireEnum):
    UNKNOWN = "unknown"
    APP = "app"
    USER = "user"
    GC_TEAM = "gc_team"
    ACCESS_TOKEN = "access_token"


class EventCustomerNotification(Resource):
    deadline: Optional[str] = None
    id: Optional[str] = None
    mandatory: Optional[bool] = None
    type: Optional[str] = None


class EventDetails(Resource):
    bank_account_id: Optional[str] = None
    cause: Optional[str] = None
    currency: Optional[str] = None
    description: Optional[str] = None
    item_count: Optional[int] = None
    not_retried_reason: Optional[str] = None
    origin: Optional[EventDetailsOrigin] = None
    property: Optional[str] = None
    reason_code: Optional[str] = None
    scheme: Optional[EventDetailsScheme] = None
    will_attempt_retry: Optional[bool] = None


class EventLinks(Resource):
    bank_authorisation: Optional[str] = None
    billing_request: Optional[str] = None
    billing_request_flow: Optional[str] = None
    creditor: Optional[str] = None
    customer: Optional[str] = None
    customer_bank_account: Optional[str] = None
    instalment_schedule: Optional[str] = None
    mandate: Optional[str] = None
    mandate_request: Optional[str] = None
    mandate_request_mandate: Optional[str] = None
    new_customer_bank_account: Optional[str] = None
    new_mandate: Optional[str] = None
    organisation: Optional[str] = None
    outbound_payment: Optional[str] = None
    parent_event: Optional[str] = None
    payer_authorisation: Optional[str] = None
    payment: Optional[str] = None
    payment_request_payment: Optional[str] = None
    payout: Optional[str] = None
    previous_customer_bank_account: Optional[str] = None
    refund: Optional[str] = None
    scheme_identifier: Optional[str] = None
    subscription: Optional[str] = None


class EventSource(Resource):
    name: Optional[str] = None
    type: Optional[EventSourceType] = None


class Event(Resource):
    action: Optional[str] = None
    created_at: Optional[datetime] = None
    customer_notifications: Optional[List[EventCustomerNotification]] = None
    details: Optional[EventDetails] = None
    id: Optional[str] = None
    links: Optional[EventLinks] = None
    metadata: Optional[Dict[str, str]] = None
    resource_metadata: Optional[Dict[str, str]] = None
    resource_type: Optional[EventResourceType] = None
    source: Optional[EventSource] = None
