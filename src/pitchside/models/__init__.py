"""Domain models for the roster, teams and saved lineups."""

from .player import (
    DEFAULT_STATUS,
    IMAGE_MIME_TYPES,
    PLAYER_STATUSES,
    Player,
    PlayerCreate,
    PlayerStatus,
    PlayerUpdate,
    validate_player,
)
from .team import Lineup, LineupCreate, LineupUpdate, Team, TeamCreate, TeamUpdate

__all__ = [
    "DEFAULT_STATUS",
    "IMAGE_MIME_TYPES",
    "PLAYER_STATUSES",
    "Player",
    "PlayerCreate",
    "PlayerStatus",
    "PlayerUpdate",
    "validate_player",
    "Lineup",
    "LineupCreate",
    "LineupUpdate",
    "Team",
    "TeamCreate",
    "TeamUpdate",
]
