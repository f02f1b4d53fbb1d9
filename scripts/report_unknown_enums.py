#!/usr/bin/env python3
"""
Report enum values in a captured API payload that this SDK version does not know.

Usage:
    python scripts/report_unknown_enums.py --resource mandates --input mandate.json
    python scripts/report_unknown_enums.py --resource events --input events.json --strict

Exit status is 1 when unrecognised values were found (or, with --strict,
when decoding failed on one), 0 otherwise.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

# Add src/ to path so the package imports work without installing it
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from dotenv import load_dotenv

from gocardless_pro.config import load_sdk_config, set_config
from gocardless_pro.drift import scan_payload
from gocardless_pro.errors import DecodeError
from gocardless_pro.resources import RESOURCE_TYPES


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def main() -> int:
    parser = argparse.ArgumentParser(description="Find enum values the SDK decodes as UNKNOWN")
    parser.add_argument("--resource", required=True, choices=sorted(RESOURCE_TYPES), help="Resource type of the payload")
    parser.add_argument("--input", type=Path, required=True, help="JSON file holding one resource object or an array")
    parser.add_argument("--config", type=Path, default=None, help="SDK config YAML (default: $GOCARDLESS_SDK_CONFIG)")
    parser.add_argument("--strict", action="store_true", help="Fail on the first unrecognised value instead of reporting")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    setup_logging(args.verbose)
    load_dotenv()
    logger = logging.getLogger("report_unknown_enums")

    config = load_sdk_config(args.config)
    if args.strict:
        config = config.model_copy(update={"strict_enums": True})
    # Reported below, no need to log each value as well.
    set_config(config.model_copy(update={"log_unknown_enum_values": False}))

    payload = json.loads(args.input.read_text(encoding="utf-8"))

    try:
        findings = scan_payload(args.resource, payload)
    except DecodeError as e:
        logger.error("Decoding failed: %s", e)
        return 1

    if not findings:
        print("No unrecognised values.")
        return 0

    for finding in findings:
        for path, value in sorted(finding["unknown"].items()):
            print(f"[{finding['index']}] {finding['id'] or '-'} {path} = {value!r}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
