"""Command-line interface for serving the API and inspecting formations."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from pitchside.config import display_abbreviation, get_slots, iter_formations
from pitchside.engine import assign
from pitchside.errors import UnknownFormation
from pitchside.presentation import encode_share_query
from pitchside.settings import load_settings


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Soccer lineup manager")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the REST API with uvicorn")
    serve.add_argument("--host", default=None, help="Bind address (default PITCHSIDE_HOST)")
    serve.add_argument("--port", type=int, default=None, help="Bind port (default PITCHSIDE_PORT)")

    subparsers.add_parser("formations", help="Print the formation table")

    share = subparsers.add_parser("share-link", help="Build a share-link query string")
    share.add_argument("--team", default="", help="Team id")
    share.add_argument("--formation", default="4-4-2", help="Formation key (e.g., 4-3-3)")
    share.add_argument(
        "--assign",
        action="append",
        default=[],
        metavar="SLOT=PLAYER_ID",
        help="Slot assignment; repeat for each slot",
    )
    return parser.parse_args(argv)


def _print_formations() -> None:
    for formation in iter_formations():
        labels = " ".join(f"{slot}({display_abbreviation(slot)})" for slot in formation.slots)
        print(f"{formation.key:<8} {labels}")


def _share_link(args: argparse.Namespace) -> int:
    try:
        slots = get_slots(args.formation)
    except UnknownFormation as exc:
        print(exc, file=sys.stderr)
        return 2
    assignment: dict[str, str] = {}
    for item in args.assign:
        slot, sep, player_id = item.partition("=")
        if not sep or not slot:
            print(f"Invalid assignment {item!r}; expected SLOT=PLAYER_ID", file=sys.stderr)
            return 2
        if slot not in slots:
            print(f"Slot {slot!r} is not part of formation {args.formation}", file=sys.stderr)
            return 2
        assignment = assign(assignment, slot, player_id)
    print(f"/share?{encode_share_query(args.team, args.formation, assignment)}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    if args.command == "formations":
        _print_formations()
        return 0
    if args.command == "share-link":
        return _share_link(args)

    import uvicorn

    from pitchside.api import create_app

    settings = load_settings()
    uvicorn.run(
        create_app(settings=settings),
        host=args.host or settings.host,
        port=args.port or settings.port,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
