"""
Typed resources for the GoCardless Pro API.

Resources are decoded from response bodies that an HTTP client has already
parsed into plain JSON values. Constrained string fields are WireEnum
members; tolerant enums decode values this SDK version does not know to
UNKNOWN instead of failing, so new API values never break decoding.

    from gocardless_pro import Mandate, MandateStatus, is_unknown

    mandate = Mandate.from_dict(body["mandates"])
    if mandate.status is MandateStatus.ACTIVE:
        ...
    elif is_unknown(mandate.status):
        logger.info("New mandate status: %s", mandate.unknown_values())
"""

from .config import SDKConfig, get_config, load_sdk_config, reset_config, set_config
from .enums import TolerantWireEnum, WireEnum, WireTable, decode, encode, is_unknown, wire_table
from .errors import (
    DecodeError,
    EncodeError,
    EnumDecodeError,
    EnumEncodeError,
    GoCardlessError,
    MalformedTokenError,
    ResourceDecodeError,
    UnrecognizedValueError,
)
from .resources import *  # noqa: F401,F403
from .resources import __all__ as _resources_all
from .api_errors import (
    ApiError,
    ApiErrorType,
    AuthenticationFailedError,
    ErrorDetail,
    GoCardlessApiError,
    InsufficientPermissionsError,
    InternalError,
    InvalidApiUsageError,
    InvalidStateError,
    RateLimitReachedError,
    ValidationFailedError,
    from_response,
    to_exception,
)

__version__ = "0.1.0"

__all__ = [
    # config
    "SDKConfig", "get_config", "load_sdk_config", "reset_config", "set_config",
    # codec
    "TolerantWireEnum", "WireEnum", "WireTable", "decode", "encode", "is_unknown", "wire_table",
    # errors
    "DecodeError", "EncodeError", "EnumDecodeError", "EnumEncodeError", "GoCardlessError",
    "MalformedTokenError", "ResourceDecodeError", "UnrecognizedValueError",
    # api errors
    "ApiError", "ApiErrorType", "AuthenticationFailedError", "ErrorDetail", "GoCardlessApiError",
    "InsufficientPermissionsError", "InternalError", "InvalidApiUsageError", "InvalidStateError",
    "RateLimitReachedError", "ValidationFailedError", "from_response", "to_exception",
] + list(_resources_all)
