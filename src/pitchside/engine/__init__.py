"""Lineup assignment engine."""

from .assignment import (
    UNASSIGNED,
    Assignment,
    LineupStats,
    assign,
    assigned_player_ids,
    is_captain,
    is_motm,
    lineup_stats,
    player_at_slot,
    slot_candidates,
    unassigned_available_players,
)
from .board import LineupBoard, SlotView, change_formation, resolve_board

__all__ = [
    "UNASSIGNED",
    "Assignment",
    "LineupStats",
    "assign",
    "assigned_player_ids",
    "is_captain",
    "is_motm",
    "lineup_stats",
    "player_at_slot",
    "slot_candidates",
    "unassigned_available_players",
    "LineupBoard",
    "SlotView",
    "change_formation",
    "resolve_board",
]
