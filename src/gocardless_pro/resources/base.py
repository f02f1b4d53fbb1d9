"""
Base class for API resources.

A resource is a snapshot of one API object (a payment, a mandate...) decoded
from a response body. Every attribute is optional: the API omits fields
depending on resource state, scheme or plan, and "omitted" has to stay
distinguishable from "present with a zero-ish value". Pydantic records the
fields that were actually present in ``model_fields_set``.

Resources are frozen once decoded and ignore JSON keys they do not model, so
new fields added to the API never break decoding.
"""

from __future__ import annotations

import json
import logging
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, PrivateAttr, ValidationError

from gocardless_pro.enums import WireEnum, encode, is_unknown
from gocardless_pro.errors import ResourceDecodeError

logger = logging.getLogger(__name__)

R = TypeVar("R", bound="Resource")


class Resource(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    _raw: Dict[str, Any] = PrivateAttr(default_factory=dict)

    # ------------------------------------------------------------------
    # Decoding
    # ------------------------------------------------------------------

    @classmethod
    def from_dict(cls: Type[R], payload: Any) -> R:
        """
        Decode one resource from an already-parsed JSON object.

        Raises ResourceDecodeError when the payload is structurally wrong
        (not an object, wrong scalar types, malformed enum tokens, values
        outside a strict enum). Unrecognised values of tolerant enums decode
        to UNKNOWN and never raise.
        """
        if not isinstance(payload, Mapping):
            raise ResourceDecodeError(
                f"{cls.__name__} payload must be a JSON object, got {type(payload).__name__}",
                resource_type=cls,
                payload=payload,
            )

        try:
            resource = cls.model_validate(payload)
        except ValidationError as exc:
            logger.error("Failed to decode %s: %s", cls.__name__, exc)
            raise ResourceDecodeError(
                f"{cls.__name__} response validation failed: {exc}",
                resource_type=cls,
                payload=dict(payload),
                errors=exc.errors(include_url=False),
            ) from exc

        resource._attach_raw(payload)
        return resource

    @classmethod
    def from_json(cls: Type[R], text: Union[str, bytes]) -> R:
        try:
            payload = json.loads(text)
        except ValueError as exc:
            raise ResourceDecodeError(
                f"{cls.__name__} body is not valid JSON: {exc}",
                resource_type=cls,
                payload=text,
            ) from exc
        return cls.from_dict(payload)

    def _attach_raw(self, payload: Mapping[str, Any]) -> None:
        self._raw = dict(payload)
        for name in self.model_fields_set:
            value = getattr(self, name)
            nested = payload.get(self._wire_name(name))
            if isinstance(value, Resource) and isinstance(nested, Mapping):
                value._attach_raw(nested)
            elif isinstance(value, list) and isinstance(nested, list):
                for item, raw_item in zip(value, nested):
                    if isinstance(item, Resource) and isinstance(raw_item, Mapping):
                        item._attach_raw(raw_item)

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @property
    def raw(self) -> Dict[str, Any]:
        """The payload this resource was decoded from."""
        return self._raw

    def is_present(self, name: str) -> bool:
        """True when the field was present in the payload, even with a null/zero value."""
        if name not in type(self).model_fields:
            raise AttributeError(f"{type(self).__name__} has no field {name!r}")
        return name in self.model_fields_set

    def unknown_values(self) -> Dict[str, Any]:
        """
        Map the dotted path of every field that decoded to UNKNOWN to the raw
        wire value the API sent, e.g. ``{"status": "suspended_by_payer_v2"}``.
        """
        found: Dict[str, Any] = {}
        self._collect_unknown("", found)
        return found

    def _collect_unknown(self, prefix: str, found: Dict[str, Any]) -> None:
        for name in self.model_fields_set:
            wire_name = self._wire_name(name)
            path = f"{prefix}{wire_name}"
            value = getattr(self, name)
            raw_value = self._raw.get(wire_name)
            if is_unknown(value):
                found[path] = raw_value
            elif isinstance(value, Resource):
                value._collect_unknown(f"{path}.", found)
            elif isinstance(value, list):
                for index, item in enumerate(value):
                    item_path = f"{path}[{index}]"
                    if is_unknown(item):
                        found[item_path] = raw_value[index] if isinstance(raw_value, list) else None
                    elif isinstance(item, Resource):
                        item._collect_unknown(f"{item_path}.", found)

    @classmethod
    def _wire_name(cls, name: str) -> str:
        return cls.model_fields[name].alias or name

    # ------------------------------------------------------------------
    # Encoding
    # ------------------------------------------------------------------

    def to_wire(self) -> Dict[str, Any]:
        """
        JSON-compatible dict of the fields that were present.

        Enum values go through the codec, so a field holding UNKNOWN raises
        EnumEncodeError instead of sending a placeholder back to the API.
        None values are omitted.
        """
        result: Dict[str, Any] = {}
        for name in type(self).model_fields:
            if name not in self.model_fields_set:
                continue
            value = getattr(self, name)
            if value is None:
                continue
            result[self._wire_name(name)] = serialize_value(value)
        return result


def serialize_value(value: Any) -> Any:
    """Convert a single decoded value back to a JSON-compatible type."""
    if isinstance(value, WireEnum):
        return encode(value)
    elif isinstance(value, Resource):
        return value.to_wire()
    elif isinstance(value, datetime):
        return format_timestamp(value)
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, dict):
        return {key: serialize_value(item) for key, item in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(item) for item in value]
    return value


def format_timestamp(value: datetime) -> str:
    """ISO-8601 with millisecond precision and a Z suffix, as the API sends it."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def decode_list(resource_type: Type[R], payloads: Any) -> List[R]:
    """Decode a JSON array of resources of one type."""
    if not isinstance(payloads, list):
        raise ResourceDecodeError(
            f"Expected a JSON array of {resource_type.__name__}, got {type(payloads).__name__}",
            resource_type=resource_type,
            payload=payloads,
        )
    return [resource_type.from_dict(item) for item in payloads]


def decode_optional(resource_type: Type[R], payload: Optional[Any]) -> Optional[R]:
    return None if payload is None else resource_type.from_dict(payload)
