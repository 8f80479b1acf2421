"""Post-match rating submission."""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional

from pydantic import ValidationError

from pitchside.errors import RatingsUpdateError
from pitchside.models import Player
from pitchside.persistence import MemoryStore


logger = logging.getLogger("uvicorn.error")


def format_rating(value: Optional[float]) -> str:
    if value is None:
        return "-"
    return f"{value:.1f}/10"


def submit_ratings(store: MemoryStore, ratings: Mapping[str, float]) -> List[Player]:
    """Apply each rating as its own player update.

    Every entry is attempted. Updates that succeed stay applied even when
    others fail; any failure is reported once through RatingsUpdateError.
    """

    updated: List[Player] = []
    failures: Dict[str, str] = {}
    for player_id, rating in ratings.items():
        try:
            player = store.update_player(player_id, {"rating": rating})
        except ValidationError as exc:
            failures[player_id] = f"invalid rating {rating!r}: {exc.errors()[0]['msg']}"
            continue
        if player is None:
            failures[player_id] = "player not found"
            continue
        updated.append(player)

    if failures:
        logger.warning(
            "Rating save failed for %d of %d players: %s",
            len(failures),
            len(ratings),
            ", ".join(sorted(failures)),
        )
        raise RatingsUpdateError(failures, updated)
    logger.info("Saved ratings for %d players", len(updated))
    return updated
