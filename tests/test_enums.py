"""Tests for the string-keyed enum codec (tolerant and strict decoding)."""

import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

from gocardless_pro.api_errors import ApiErrorType
from gocardless_pro.config import SDKConfig, set_config
from gocardless_pro.enums import TolerantWireEnum, WireEnum, decode, encode, is_unknown, wire_table
from gocardless_pro.errors import (
    DecodeError,
    EncodeError,
    EnumEncodeError,
    MalformedTokenError,
    UnrecognizedValueError,
)
from gocardless_pro.resources import (
    BalanceType,
    BankDetailsLookupAvailableDebitScheme,
    BlockReasonType,
    BlockType,
    Currency,
    CustomerBankAccountType,
    EventDetailsOrigin,
    EventDetailsScheme,
    EventResourceType,
    EventSourceType,
    MandateStatus,
    PaymentStatus,
    PayoutStatus,
    PayoutType,
    RefundStatus,
    SubscriptionIntervalUnit,
    SubscriptionMonth,
    SubscriptionStatus,
)

TOLERANT_ENUMS = [
    ApiErrorType,
    BalanceType,
    BlockReasonType,
    BlockType,
    Currency,
    CustomerBankAccountType,
    EventDetailsOrigin,
    EventDetailsScheme,
    EventResourceType,
    EventSourceType,
    MandateStatus,
    PaymentStatus,
    PayoutStatus,
    PayoutType,
    RefundStatus,
    SubscriptionStatus,
]

STRICT_ENUMS = [
    BankDetailsLookupAvailableDebitScheme,
    SubscriptionIntervalUnit,
    SubscriptionMonth,
]

UNRECOGNISED = ["suspended_by_payer_v2", "", "ACTIVE", " active", "active ", "pay_to_v3"]


# --- Tolerant policy ---


@pytest.mark.parametrize("enum_type", TOLERANT_ENUMS)
@pytest.mark.parametrize("token", UNRECOGNISED)
def test_tolerant_enum_decodes_unrecognised_string_to_unknown(enum_type, token):
    assert decode(enum_type, token) is enum_type.UNKNOWN


@pytest.mark.parametrize("enum_type", TOLERANT_ENUMS)
def test_tolerant_enum_round_trips_every_recognised_member(enum_type):
    for member in enum_type:
        if member is enum_type.UNKNOWN:
            continue
        assert decode(enum_type, encode(member)) is member


@pytest.mark.parametrize("enum_type", TOLERANT_ENUMS)
def test_unknown_member_cannot_be_encoded(enum_type):
    with pytest.raises(EncodeError):
        encode(enum_type.UNKNOWN)
    with pytest.raises(EnumEncodeError):
        enum_type.UNKNOWN.to_wire()


@pytest.mark.parametrize("enum_type", TOLERANT_ENUMS)
def test_unknown_is_not_part_of_the_wire_vocabulary(enum_type):
    assert "unknown" not in enum_type.wire_values()
    assert enum_type.is_tolerant() is True
    assert enum_type.fallback_member() is enum_type.UNKNOWN


def test_mandate_status_scenario():
    assert decode(MandateStatus, "active") is MandateStatus.ACTIVE
    assert decode(MandateStatus, "cancelled") is MandateStatus.CANCELLED
    assert decode(MandateStatus, "suspended_by_payer_v2") is MandateStatus.UNKNOWN


def test_literal_unknown_token_decodes_to_fallback():
    assert decode(MandateStatus, "unknown") is MandateStatus.UNKNOWN


def test_currency_codes_keep_their_wire_casing():
    assert decode(Currency, "GBP") is Currency.GBP
    assert decode(Currency, "gbp") is Currency.UNKNOWN
    assert encode(Currency.AUD) == "AUD"


# --- Strict policy ---


@pytest.mark.parametrize("enum_type", STRICT_ENUMS)
@pytest.mark.parametrize("token", UNRECOGNISED)
def test_strict_enum_rejects_unrecognised_string(enum_type, token):
    with pytest.raises(UnrecognizedValueError) as exc_info:
        decode(enum_type, token)
    assert exc_info.value.enum_type is enum_type
    assert exc_info.value.token == token
    assert isinstance(exc_info.value, DecodeError)


@pytest.mark.parametrize("enum_type", STRICT_ENUMS)
def test_strict_enum_round_trips_every_member(enum_type):
    assert enum_type.is_tolerant() is False
    assert enum_type.fallback_member() is None
    for member in enum_type:
        assert decode(enum_type, encode(member)) is member


def test_bank_details_lookup_scheme_scenario():
    scheme = BankDetailsLookupAvailableDebitScheme
    assert decode(scheme, "autogiro") is scheme.AUTOGIRO
    assert decode(scheme, "bacs") is scheme.BACS
    assert decode(scheme, "sepa_core") is scheme.SEPA_CORE
    with pytest.raises(DecodeError):
        decode(scheme, "pay_to")


# --- Absent and malformed tokens ---


@pytest.mark.parametrize("enum_type", TOLERANT_ENUMS + STRICT_ENUMS)
def test_absent_token_is_no_value_not_unknown(enum_type):
    result = decode(enum_type, None)
    assert result is None
    assert not is_unknown(result)


@pytest.mark.parametrize("enum_type", [MandateStatus, BankDetailsLookupAvailableDebitScheme])
@pytest.mark.parametrize("token", [42, 1.5, True, ["active"], {"status": "active"}, b"active"])
def test_non_string_token_is_malformed_under_either_policy(enum_type, token):
    with pytest.raises(MalformedTokenError) as exc_info:
        decode(enum_type, token)
    assert exc_info.value.token == token


def test_members_pass_through_and_other_enums_decode_by_value():
    assert decode(MandateStatus, MandateStatus.ACTIVE) is MandateStatus.ACTIVE
    assert decode(RefundStatus, PaymentStatus.CANCELLED) is RefundStatus.CANCELLED
    assert decode(PayoutStatus, MandateStatus.ACTIVE) is PayoutStatus.UNKNOWN


def test_encode_rejects_plain_strings():
    with pytest.raises(EnumEncodeError):
        encode("active")


# --- Class-level helpers ---


def test_from_wire_and_to_wire_delegate_to_codec():
    assert MandateStatus.from_wire("expired") is MandateStatus.EXPIRED
    assert MandateStatus.EXPIRED.to_wire() == "expired"
    assert MandateStatus.from_wire(None) is None


def test_calling_tolerant_enum_with_new_value_gives_unknown():
    assert MandateStatus("brand_new_status") is MandateStatus.UNKNOWN
    assert MandateStatus("active") is MandateStatus.ACTIVE
    with pytest.raises(ValueError):
        BankDetailsLookupAvailableDebitScheme("brand_new_scheme")


def test_wire_values_follow_declaration_order():
    assert MandateStatus.wire_values() == (
        "pending_customer_approval",
        "pending_submission",
        "submitted",
        "active",
        "failed",
        "cancelled",
        "expired",
    )


def test_is_unknown():
    assert is_unknown(MandateStatus.UNKNOWN) is True
    assert is_unknown(MandateStatus.ACTIVE) is False
    assert is_unknown("unknown") is False
    assert is_unknown(None) is False


# --- Lookup tables ---


def test_wire_table_is_built_once_and_read_only():
    table = wire_table(PaymentStatus)
    assert wire_table(PaymentStatus) is table
    assert table.fallback is PaymentStatus.UNKNOWN
    assert table.by_wire["paid_out"] is PaymentStatus.PAID_OUT
    assert table.by_member[PaymentStatus.PAID_OUT] == "paid_out"
    assert PaymentStatus.UNKNOWN not in table.by_member
    with pytest.raises(TypeError):
        table.by_wire["new"] = PaymentStatus.UNKNOWN


def test_wire_table_rejects_non_wire_enums():
    with pytest.raises(TypeError):
        wire_table(str)


def test_tolerant_enum_without_fallback_member_is_a_definition_error():
    class Broken(TolerantWireEnum):
        FIRST = "first"

    with pytest.raises(TypeError):
        wire_table(Broken)
    with pytest.raises(TypeError):
        decode(Broken, "second")


def test_fallback_member_name_is_configurable_per_type():
    class Channel(TolerantWireEnum):
        __fallback__ = "OTHER"
        OTHER = "other"
        EMAIL = "email"

    assert decode(Channel, "sms") is Channel.OTHER
    assert Channel.wire_values() == ("email",)
    with pytest.raises(EncodeError):
        encode(Channel.OTHER)


def test_policy_comes_from_base_class_not_member_names():
    class Closed(WireEnum):
        UNKNOWN = "unknown"
        OPEN = "open"

    assert decode(Closed, "unknown") is Closed.UNKNOWN
    assert encode(Closed.UNKNOWN) == "unknown"
    with pytest.raises(UnrecognizedValueError):
        decode(Closed, "half_open")


def test_concurrent_decoding_shares_one_table():
    tokens = ["active", "cancelled", "new_value", "expired"] * 250

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda t: decode(MandateStatus, t), tokens))

    assert results[:4] == [
        MandateStatus.ACTIVE,
        MandateStatus.CANCELLED,
        MandateStatus.UNKNOWN,
        MandateStatus.EXPIRED,
    ]
    assert results.count(MandateStatus.UNKNOWN) == 250


# --- Configuration hooks ---


def test_unrecognised_value_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="gocardless_pro.enums"):
        decode(MandateStatus, "suspended_by_payer_v2")

    records = [r for r in caplog.records if r.name == "gocardless_pro.enums"]
    assert len(records) == 1
    assert records[0].levelno == logging.WARNING
    assert "MandateStatus" in records[0].getMessage()
    assert "suspended_by_payer_v2" in records[0].getMessage()


def test_unrecognised_value_log_level_is_configurable(caplog):
    set_config(SDKConfig(unknown_enum_log_level="DEBUG"))
    with caplog.at_level(logging.DEBUG, logger="gocardless_pro.enums"):
        decode(MandateStatus, "suspended_by_payer_v2")

    records = [r for r in caplog.records if r.name == "gocardless_pro.enums"]
    assert [r.levelno for r in records] == [logging.DEBUG]


def test_unrecognised_value_logging_can_be_disabled(caplog):
    set_config(SDKConfig(log_unknown_enum_values=False))
    with caplog.at_level(logging.DEBUG, logger="gocardless_pro.enums"):
        assert decode(MandateStatus, "suspended_by_payer_v2") is MandateStatus.UNKNOWN

    assert not [r for r in caplog.records if r.name == "gocardless_pro.enums"]


def test_known_values_are_not_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="gocardless_pro.enums"):
        decode(MandateStatus, "active")

    assert not [r for r in caplog.records if r.name == "gocardless_pro.enums"]


def test_strict_mode_makes_tolerant_enums_fail():
    set_config(SDKConfig(strict_enums=True))

    assert decode(MandateStatus, "active") is MandateStatus.ACTIVE
    assert decode(MandateStatus, None) is None
    with pytest.raises(UnrecognizedValueError):
        decode(MandateStatus, "suspended_by_payer_v2")
