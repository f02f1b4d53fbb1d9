"""
Vocabulary drift detection.

Decodes captured API payloads and reports every enum field that fell back to
UNKNOWN, i.e. every value the live API sent that this SDK version does not
know yet. Used by scripts/report_unknown_enums.py and handy in integration
tests that replay recorded responses.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Type, Union

from gocardless_pro.resources import RESOURCE_TYPES, Resource

logger = logging.getLogger(__name__)


def resolve_resource_type(resource: Union[str, Type[Resource]]) -> Type[Resource]:
    if isinstance(resource, type) and issubclass(resource, Resource):
        return resource
    try:
        return RESOURCE_TYPES[resource]
    except KeyError:
        known = ", ".join(sorted(RESOURCE_TYPES))
        raise ValueError(f"Unknown resource type {resource!r}. Known: {known}") from None


def scan_payload(resource: Union[str, Type[Resource]], payload: Any) -> List[Dict[str, Any]]:
    """
    Decode ``payload`` (one JSON object or an array of them) and return one
    entry per resource that carried unrecognised values::

        [{"index": 0, "id": "MD123", "unknown": {"status": "suspended_by_payer_v2"}}]

    Decode errors propagate unchanged.
    """
    resource_type = resolve_resource_type(resource)
    items = payload if isinstance(payload, list) else [payload]

    findings: List[Dict[str, Any]] = []
    for index, item in enumerate(items):
        decoded = resource_type.from_dict(item)
        unknown = decoded.unknown_values()
        if unknown:
            findings.append({"index": index, "id": decoded.raw.get("id"), "unknown": unknown})

    logger.info(
        "Scanned %d %s payload(s), %d with unrecognised values",
        len(items),
        resource_type.__name__,
        len(findings),
    )
    return findings
