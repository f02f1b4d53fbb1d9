"""
Resource models.

Each module mirrors one API resource: the resource class, its nested
sub-objects (links, fx...) and the enumerations of its constrained fields.
RESOURCE_TYPES maps the API's plural resource key to the model class.
"""

from .base import Resource, decode_list, decode_optional, format_timestamp, serialize_value
from .currency import Currency
from .balances import Balance, BalanceLinks, BalanceType
from .bank_details_lookups import BankDetailsLookup, BankDetailsLookupAvailableDebitScheme
from .blocks import Block, BlockReasonType, BlockType
from .currency_exchange_rates import CurrencyExchangeRate
from .customers import Customer, CustomerBankAccount, CustomerBankAccountLinks, CustomerBankAccountType
from .events import (
    Event,
    EventCustomerNotification,
    EventDetails,
    EventDetailsOrigin,
    EventDetailsScheme,
    EventLinks,
    EventResourceType,
    EventSource,
    EventSourceType,
)
from .mandates import Mandate, MandateLinks, MandateStatus
from .payments import Payment, PaymentFx, PaymentLinks, PaymentStatus
from .payouts import Payout, PayoutFx, PayoutLinks, PayoutStatus, PayoutType
from .refunds import Refund, RefundFx, RefundLinks, RefundStatus
from .subscriptions import (
    Subscription,
    SubscriptionIntervalUnit,
    SubscriptionLinks,
    SubscriptionMonth,
    SubscriptionStatus,
    SubscriptionUpcomingPayment,
)

RESOURCE_TYPES = {
    "balances": Balance,
    "bank_details_lookups": BankDetailsLookup,
    "blocks": Block,
    "currency_exchange_rates": CurrencyExchangeRate,
    "customers": Customer,
    "customer_bank_accounts": CustomerBankAccount,
    "events": Event,
    "mandates": Mandate,
    "payments": Payment,
    "payouts": Payout,
    "refunds": Refund,
    "subscriptions": Subscription,
}

__all__ = [
    # base
    "Resource", "decode_list", "decode_optional", "format_timestamp", "serialize_value",
    "RESOURCE_TYPES",
    # shared
    "Currency",
    # resources
    "Balance", "BalanceLinks", "BalanceType",
    "BankDetailsLookup", "BankDetailsLookupAvailableDebitScheme",
    "Block", "BlockReasonType", "BlockType",
    "CurrencyExchangeRate",
    "Customer", "CustomerBankAccount", "CustomerBankAccountLinks", "CustomerBankAccountType",
    "Event", "EventCustomerNotification", "EventDetails", "EventDetailsOrigin",
    "EventDetailsScheme", "EventLinks", "EventResourceType", "EventSource", "EventSourceType",
    "Mandate", "MandateLinks", "MandateStatus",
    "Payment", "PaymentFx", "PaymentLinks", "PaymentStatus",
    "Payout", "PayoutFx", "PayoutLinks", "PayoutStatus", "PayoutType",
    "Refund", "RefundFx", "RefundLinks", "RefundStatus",
    "Subscription", "SubscriptionIntervalUnit", "SubscriptionLinks", "SubscriptionMonth",
    "SubscriptionStatus", "SubscriptionUpcomingPayment",
]
