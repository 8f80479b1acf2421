"""Lightweight REST client for the pitchside API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def load_ratings(path: Path) -> dict[str, float]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid ratings JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise SystemExit("Ratings file must hold a JSON object of player id -> rating")
    return {str(player_id): float(rating) for player_id, rating in data.items()}


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the pitchside REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8080")
    parser.add_argument("--list-players", action="store_true", help="List the roster and exit")
    parser.add_argument("--list-teams", action="store_true", help="List teams and exit")
    parser.add_argument("--hierarchy", action="store_true", help="Print the roster hierarchy")
    parser.add_argument("--ratings", type=Path, help="JSON file mapping player ids to ratings")
    parser.add_argument("--share-lineup", type=Path, help="JSON file with a slot -> player id mapping")
    parser.add_argument("--formation", default="4-4-2", help="Formation used with --share-lineup")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.list_players:
            resp = client.get("/api/players")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
        if args.list_teams:
            resp = client.get("/api/teams")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
        if args.hierarchy:
            resp = client.get("/api/hierarchy")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
        if args.ratings:
            resp = client.post("/api/ratings", json={"ratings": load_ratings(args.ratings)})
            if resp.status_code == 422:
                detail = resp.json().get("detail", {})
                raise SystemExit(f"Ratings partially saved; failures: {json.dumps(detail.get('failures', {}))}")
            resp.raise_for_status()
            for player_id, label in resp.json()["display"].items():
                print(f"{player_id}: {label}")
        if args.share_lineup:
            assignment = json.loads(args.share_lineup.read_text(encoding="utf-8"))
            resp = client.post(
                "/api/share/link",
                json={"formation": args.formation, "assignment": assignment},
            )
            resp.raise_for_status()
            print(f"{args.base_url.rstrip('/')}{resp.json()['path']}")


if __name__ == "__main__":
    main()
