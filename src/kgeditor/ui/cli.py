from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv

from kgeditor.app import (
    InstanceView,
    enrich_instance_payload,
    enrich_instance_payloads,
    enrich_neighbor_payload,
    enrich_scope_payload,
    fetch_user_profile,
)
from kgeditor.config import configure_logging

from .payloads import instance_payload, neighbor_payload, scope_payload, user_profile_payload

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Enrich KG core payloads for the editor UI")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log at DEBUG level",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    instance = subparsers.add_parser("instance", help="Enrich a single instance")
    instance.add_argument("path", type=Path, help="JSON file holding the raw instance")

    instances = subparsers.add_parser("instances", help="Enrich a list of instances")
    instances.add_argument("path", type=Path, help="JSON file holding a list of raw instances")
    instances.add_argument(
        "--view",
        type=InstanceView,
        choices=list(InstanceView),
        default=InstanceView.FULL,
        help="Projection to build (default: %(default)s)",
    )

    neighbors = subparsers.add_parser("neighbors", help="Enrich a neighbor graph")
    neighbors.add_argument("path", type=Path, help="JSON file holding the root neighbor")

    scope = subparsers.add_parser("scope", help="Enrich a release scope tree")
    scope.add_argument("path", type=Path, help="JSON file holding the root scope")

    subparsers.add_parser("me", help="Show the current user's profile")

    return parser.parse_args(list(argv))


def _load_json(path: Path) -> Any:
    try:
        with path.open(encoding="utf-8") as handle:
            return json.load(handle)
    except (OSError, json.JSONDecodeError) as exc:
        raise ValueError(f"Cannot read JSON from {path}: {exc}") from exc


def _load_object(path: Path) -> dict[str, Any]:
    payload = _load_json(path)
    # a bare KG core response carries the object in its data envelope
    if isinstance(payload, dict) and isinstance(payload.get("data"), dict):
        payload = payload["data"]
    if not isinstance(payload, dict):
        raise ValueError(f"Expected a JSON object in {path}")
    return payload


def _load_list(path: Path) -> list[dict[str, Any]]:
    payload = _load_json(path)
    if isinstance(payload, dict) and isinstance(payload.get("data"), list):
        payload = payload["data"]
    if not isinstance(payload, list) or not all(isinstance(item, dict) for item in payload):
        raise ValueError(f"Expected a JSON list of objects in {path}")
    return payload


def _load_input(args: argparse.Namespace) -> Any:
    if args.command == "instances":
        return _load_list(args.path)
    if args.command in {"instance", "neighbors", "scope"}:
        return _load_object(args.path)
    return None


def _run(args: argparse.Namespace, payload: Any) -> Any:
    if args.command == "instance":
        return instance_payload(enrich_instance_payload(payload))
    if args.command == "instances":
        enriched = enrich_instance_payloads(payload, view=args.view)
        return {key: instance_payload(instance) for key, instance in enriched.items()}
    if args.command == "neighbors":
        return neighbor_payload(enrich_neighbor_payload(payload))
    if args.command == "scope":
        return scope_payload(enrich_scope_payload(payload))
    if args.command == "me":
        profile = fetch_user_profile()
        return user_profile_payload(profile) if profile is not None else None
    raise ValueError(f"Unsupported command: {args.command}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args: argparse.Namespace
    try:
        parsed_args = _parse_args(args_list)
        configure_logging(level=logging.DEBUG if parsed_args.debug else logging.INFO)
        payload = _load_input(parsed_args)
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        result = _run(parsed_args, payload)
    except Exception:
        log.exception("Fatal error during enrichment")
        sys.exit(1)

    json.dump(result, sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
