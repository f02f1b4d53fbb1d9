"""Customers and the bank accounts they pay from."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, Optional

from gocardless_pro.enums import TolerantWireEnum
from gocardless_pro.resources.base import Resource
from gocardless_pro.resources.currency import Currency


class Customer(Resource):
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    address_line3: Optional[str] = None
    city: Optional[str] = None
    company_name: Optional[str] = None
    country_code: Optional[str] = None
    created_at: Optional[datetime] = None
    danish_identity_number: Optional[str] = None
    email: Optional[str] = None
    family_name: Optional[str] = None
    given_name: Optional[str] = None
    id: Optional[str] = None
    language: Optional[str] = None
    metadata: Optional[Dict[str, str]] = None
    phone_number: Optional[str] = None
    postal_code: Optional[str] = None
    region: Optional[str] = None
    swedish_identity_number: Optional[str] = None


class CustomerBankAccountType(TolerantWireEnum):
    """Only returned for USD accounts."""

    UNKNOWN = "unknown"
    SAVINGS = "savings"
    CHECKING = "checking"


class CustomerBankAccountLinks(Resource):
    customer: Optional[str] = None


class CustomerBankAccount(Resource):
    account_holder_name: Optional[str] = None
    account_number_ending: Optional[str] = None
    account_type: Optional[CustomerBankAccountType] = None
    bank_account_token: Optional[str] = None
    bank_name: Optional[str] = None
    country_code: Optional[str] = None
    created_at: Optional[datetime] = None
    currency: Optional[Currency] = None
    enabled: Optional[bool] = None
    id: Optional[str] = None
    links: Optional[CustomerBankAccountLinks] = None
    metadata: Optional[Dict[str, str]] = None
