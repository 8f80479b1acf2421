"""Slot assignment edits and the read views derived from them.

An assignment maps slot codes to player ids. It is deliberately permissive:
``assign`` never clears a player from other slots, so the same id can sit in
two slots at once. The "offer each player once" guarantee lives in
``slot_candidates``, which builds the selection list for a slot.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Set

from pitchside.models import Player, Team


Assignment = Dict[str, str]

UNASSIGNED = "none"


@dataclass(frozen=True)
class LineupStats:
    starters: int
    bench: int
    absent: int


def assign(assignment: Mapping[str, str], slot: str, player_id: Optional[str]) -> Assignment:
    """Return a copy of ``assignment`` with ``slot`` set to ``player_id``.

    ``None``, ``""`` and ``"none"`` clear the slot.
    """

    updated = dict(assignment)
    if not player_id or player_id == UNASSIGNED:
        updated.pop(slot, None)
    else:
        updated[slot] = player_id
    return updated


def assigned_player_ids(assignment: Mapping[str, str]) -> Set[str]:
    return {player_id for player_id in assignment.values() if player_id}


def _index(players: Iterable[Player]) -> Dict[str, Player]:
    return {player.id: player for player in players}


def player_at_slot(players: Iterable[Player], assignment: Mapping[str, str], slot: str) -> Optional[Player]:
    player_id = assignment.get(slot)
    if not player_id:
        return None
    return _index(players).get(player_id)


def unassigned_available_players(players: Iterable[Player], assignment: Mapping[str, str]) -> List[Player]:
    taken = assigned_player_ids(assignment)
    return [player for player in players if player.status == "available" and player.id not in taken]


def slot_candidates(players: Iterable[Player], assignment: Mapping[str, str], slot: str) -> List[Player]:
    """Players to offer in the selector for ``slot``: its occupant, then the free pool."""

    roster = list(players)
    candidates = unassigned_available_players(roster, assignment)
    occupant = player_at_slot(roster, assignment, slot)
    if occupant is not None:
        candidates.insert(0, occupant)
    return candidates


def lineup_stats(players: Iterable[Player], assignment: Mapping[str, str]) -> LineupStats:
    # bench goes negative when non-available players are placed in slots
    roster = list(players)
    starters = sum(1 for player_id in assignment.values() if player_id)
    available = sum(1 for player in roster if player.status == "available")
    absent = sum(1 for player in roster if player.status == "absent")
    return LineupStats(starters=starters, bench=available - starters, absent=absent)


def is_captain(team: Optional[Team], player: Optional[Player]) -> bool:
    if team is None or player is None or not team.captain_id:
        return False
    return team.captain_id == player.id


def is_motm(team: Optional[Team], player: Optional[Player]) -> bool:
    if team is None or player is None or not team.motm_id:
        return False
    return team.motm_id == player.id
