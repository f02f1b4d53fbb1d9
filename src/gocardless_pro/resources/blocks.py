from __future__ import annotations

from datetime import datetime
from typing import Optional

from gocardless_pro.enums import TolerantWireEnum
from gocardless_pro.resources.base import Resource


class BlockType(TolerantWireEnum):
    UNKNOWN = "unknown"
    EMAIL = "email"
    EMAIL_DOMAIN = "email_domain"
    BANK_ACCOUNT = "bank_account"


class BlockReasonType(TolerantWireEnum):
    UNKNOWN = "unknown"
    IDENTITY_FRAUD = "identity_fraud"
    NO_INTENT_TO_PAY = "no_intent_to_pay"
    UNFAIR_CHARGEBACK = "unfair_chargeback"
    OTHER = "other"


class Block(Resource):
    active: Optional[bool] = None
    block_type: Optional[BlockType] = None
    created_at: Optional[datetime] = None
    id: Optional[str] = None
    reason_description: Optional[str] = None
    reason_type: Optional[BlockReasonType] = None
    resource_reference: Optional[str] = None
    updated_at: Optional[str] = None
