"""
Error types raised while decoding and encoding API data.

Decoding is tolerant where the API is allowed to grow (an unrecognised value
in a tolerant enum is not an error at all) and strict everywhere else:

- DecodeError: a value is present but cannot be decoded. Covers malformed
  tokens (wrong primitive shape) and vocabulary misses on strict enums.
- EncodeError: a value cannot be written back to the wire, e.g. an UNKNOWN
  enum member. This is a programming error on the caller's side.

Neither is retried; both propagate to whoever called decode/encode.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional


class GoCardlessError(Exception):
    def __init__(self, message: str, *, payload: Optional[Any] = None) -> None:
        super().__init__(message)
        self.payload = payload


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


class DecodeError(GoCardlessError, ValueError):
    """A value read from the wire could not be decoded."""


class EnumDecodeError(DecodeError):
    def __init__(self, message: str, *, enum_type: type, token: Any) -> None:
        super().__init__(message, payload=token)
        self.enum_type = enum_type
        self.token = token


class MalformedTokenError(EnumDecodeError):
    """The token is not a string (number, bool, list, object...)."""


class UnrecognizedValueError(EnumDecodeError):
    """A strict enum received a string outside its vocabulary."""


class ResourceDecodeError(DecodeError):
    def __init__(
        self,
        message: str,
        *,
        resource_type: type,
        payload: Optional[Any] = None,
        errors: Optional[List[Dict[str, Any]]] = None,
    ) -> None:
        super().__init__(message, payload=payload)
        self.resource_type = resource_type
        self.errors = errors or []


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


class EncodeError(GoCardlessError, ValueError):
    """A value could not be written to the wire."""


class EnumEncodeError(EncodeError):
    def __init__(self, message: str, *, member: Any) -> None:
        super().__init__(message, payload=member)
        self.member = member
