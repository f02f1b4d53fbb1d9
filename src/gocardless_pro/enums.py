"""
String-keyed enumerations used by resource fields.

Every constrained string field on a resource is typed with a WireEnum
subclass. Member values are the exact strings the API puts on the wire, so
the association is explicit (``AUD = "AUD"``,
``PENDING_SUBMISSION = "pending_submission"``) and never derived from member
names.

Two decoding policies exist, chosen by the base class:

- WireEnum: strict. A string outside the vocabulary is a decode error.
  Used for closed fields that are not expected to grow.
- TolerantWireEnum: an unrecognised string decodes to the fallback member
  (UNKNOWN) instead of failing. The API adds values (new schemes, new
  statuses) before a matching SDK release exists; without the fallback a
  purely additive server-side change would break decoding of every
  resource carrying that field.

The fallback member is decode-only. Encoding it raises EnumEncodeError.

Lookup tables are built once per enum type on first use and cached for the
lifetime of the process. They are read-only, so decode/encode are safe to
call from any thread.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple, Type, TypeVar

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from gocardless_pro.config import get_config
from gocardless_pro.errors import EnumEncodeError, MalformedTokenError, UnrecognizedValueError

logger = logging.getLogger(__name__)

E = TypeVar("E", bound="WireEnum")


@dataclass(frozen=True)
class WireTable:
    by_wire: Mapping[str, "WireEnum"]
    by_member: Mapping["WireEnum", str]
    fallback: Optional["WireEnum"] = None

    @property
    def tolerant(self) -> bool:
        return self.fallback is not None


class WireEnum(str, Enum):
    """Strict API enumeration. Subclass TolerantWireEnum for the tolerant policy."""

    @classmethod
    def fallback_member(cls):
        return None

    @classmethod
    def is_tolerant(cls) -> bool:
        return wire_table(cls).tolerant

    @classmethod
    def wire_values(cls) -> Tuple[str, ...]:
        return tuple(wire_table(cls).by_wire)

    @classmethod
    def from_wire(cls, token: Any):
        return decode(cls, token)

    def to_wire(self) -> str:
        return encode(self)

    @classmethod
    def _validate_field(cls, token: Any):
        if token is None:
            raise MalformedTokenError(
                f"{cls.__name__} expects a string token, got null",
                enum_type=cls,
                token=token,
            )
        return decode(cls, token)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        # Optional fields accept null through pydantic's nullable wrapper, so a
        # None reaching this validator is a null inside a list or a required slot.
        return core_schema.no_info_plain_validator_function(
            cls._validate_field,
            serialization=core_schema.plain_serializer_function_ser_schema(encode),
        )


class TolerantWireEnum(WireEnum):
    """
    API enumeration that decodes unrecognised strings to a fallback member.

    Subclasses must declare the member named by ``__fallback__``:

        class MandateStatus(TolerantWireEnum):
            UNKNOWN = "unknown"
            ACTIVE = "active"
    """

    __fallback__ = "UNKNOWN"

    @classmethod
    def fallback_member(cls):
        member = cls.__members__.get(cls.__fallback__)
        if member is None:
            raise TypeError(
                f"{cls.__name__} is tolerant but declares no {cls.__fallback__} member"
            )
        return member

    @classmethod
    def _missing_(cls, value: Any):
        # Keeps MandateStatus("new_value") consistent with decode().
        if isinstance(value, str):
            return _fallback_for(cls, value)
        return None


@lru_cache(maxsize=None)
def wire_table(enum_type: Type[WireEnum]) -> WireTable:
    """Build (once) the wire string <-> member table for an enum type."""
    if not (isinstance(enum_type, type) and issubclass(enum_type, WireEnum)):
        raise TypeError(f"{enum_type!r} is not a WireEnum subclass")

    fallback = enum_type.fallback_member()
    by_wire = {}
    for member in enum_type:
        if member is fallback:
            continue
        by_wire[member.value] = member

    return WireTable(
        by_wire=MappingProxyType(by_wire),
        by_member=MappingProxyType({member: wire for wire, member in by_wire.items()}),
        fallback=fallback,
    )


def _fallback_for(enum_type: Type[E], token: str) -> Optional[E]:
    table = wire_table(enum_type)
    cfg = get_config()
    if table.fallback is None or cfg.strict_enums:
        return None
    if cfg.log_unknown_enum_values:
        logger.log(
            cfg.unknown_enum_log_levelno,
            "Unrecognised %s value %r, decoding as %s",
            enum_type.__name__,
            token,
            table.fallback.name,
        )
    return table.fallback


def decode(enum_type: Type[E], token: Any) -> Optional[E]:
    """
    Decode a wire token into a member of ``enum_type``.

    Returns None when the token is absent. Matching is exact and
    case-sensitive. Unrecognised strings give the fallback member on tolerant
    types and raise UnrecognizedValueError on strict ones. Tokens that are
    not strings raise MalformedTokenError whatever the policy.
    """
    if token is None:
        return None
    if isinstance(token, enum_type):
        return token
    if isinstance(token, Enum):
        token = token.value
    if not isinstance(token, str):
        raise MalformedTokenError(
            f"{enum_type.__name__} expects a string token, got {type(token).__name__}: {token!r}",
            enum_type=enum_type,
            token=token,
        )

    member = wire_table(enum_type).by_wire.get(token)
    if member is not None:
        return member

    member = _fallback_for(enum_type, token)
    if member is None:
        raise UnrecognizedValueError(
            f"{token!r} is not a valid {enum_type.__name__}",
            enum_type=enum_type,
            token=token,
        )
    return member


def encode(member: Any) -> str:
    """Return the wire string for ``member``. The fallback member has none."""
    if not isinstance(member, WireEnum):
        raise EnumEncodeError(f"{member!r} is not a WireEnum member", member=member)

    wire = wire_table(type(member)).by_member.get(member)
    if wire is None:
        raise EnumEncodeError(
            f"{type(member).__name__}.{member.name} has no wire value and cannot be sent to the API",
            member=member,
        )
    return wire


def is_unknown(value: Any) -> bool:
    """True when ``value`` is the fallback member of its enum type."""
    if not isinstance(value, WireEnum):
        return False
    return value is wire_table(type(value)).fallback
