from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from rename_core import RawRenameEvent, RenameTrackingError, describe_kinds

from .config import FailurePolicy, TrackerConfig
from .tracker import RenameTracker


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Rename event tracking CLI")
    parser.add_argument("--verbose", action="store_true", help="Log debug events")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("kinds", help="List object kinds and their canonical tokens")

    normalize_parser = subparsers.add_parser("normalize", help="Print the normalized record for an event")
    normalize_parser.add_argument("--event", required=True, help="JSON object describing the rename event")

    dispatch_parser = subparsers.add_parser("dispatch", help="Dispatch an event to the configured handler")
    dispatch_parser.add_argument("--event", required=True, help="JSON object describing the rename event")
    dispatch_parser.add_argument("--handler", help="Handler name or module:function path")
    dispatch_parser.add_argument("--strict", action="store_true", help="Fail when the handler is missing or fails")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s %(message)s",
        stream=sys.stderr,
    )

    if args.command == "kinds":
        print(json.dumps(describe_kinds()))
        return

    try:
        run_event_command(args)
    except RenameTrackingError as exc:
        raise SystemExit(f"{type(exc).__name__}: {exc}") from exc


def run_event_command(args: argparse.Namespace) -> None:
    event = RawRenameEvent.from_mapping(parse_json_arg(args.event))

    if args.command == "normalize":
        record = RenameTracker(TrackerConfig()).normalize(event)
        print(json.dumps(record.to_payload()))
        return

    if args.command == "dispatch":
        config = TrackerConfig.from_env().merge(
            handler=args.handler,
            failure_policy=FailurePolicy.RAISE if args.strict else None,
        )
        RenameTracker(config).track(event)
        return

    raise SystemExit(f"Unsupported command: {args.command}")


def parse_json_arg(payload: str) -> Dict[str, Any]:
    try:
        parsed = json.loads(payload) if payload else {}
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid JSON payload: {exc}") from exc
    if not isinstance(parsed, dict):
        raise SystemExit("Event JSON must be an object")
    return parsed


if __name__ == "__main__":
    main()
