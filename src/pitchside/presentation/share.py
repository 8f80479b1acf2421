"""Read-only share view rebuilt from (team, formation, lineup) link values.

Players here are grouped by the slot they occupy, not by their preferred
position, so a player can land in a different family than on the roster
hierarchy.
"""

from __future__ import annotations

import json
import urllib.parse
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Sequence, Tuple

from pitchside.config import DEFAULT_FORMATION, get_slots
from pitchside.engine import Assignment, LineupBoard, assigned_player_ids, resolve_board
from pitchside.errors import NotFoundError
from pitchside.models import Player, Team

from .hierarchy import Category, display_number


SHARE_CATEGORIES: Tuple[Category, ...] = ("goalkeepers", "defenders", "midfielders", "attackers")


_SLOT_MARKERS: Tuple[Tuple[Category, Tuple[str, ...]], ...] = (
    ("goalkeepers", ("GK",)),
    ("defenders", ("B", "CB")),
    ("midfielders", ("M", "DM", "AM")),
    ("attackers", ("W", "F", "ST")),
)


def categorize_slot(slot: str) -> FrozenSet[Category]:
    """Every role family whose marker appears in the slot code.

    Families are tested independently, so wing-back codes such as ``LWB``
    belong to both defenders and attackers. Unmatched codes give an empty set.
    """

    return frozenset(
        category for category, markers in _SLOT_MARKERS if any(marker in slot for marker in markers)
    )


def share_role_label(category: Category, player: Player) -> str:
    position = player.preferred_position
    if category == "goalkeepers":
        return "POR"
    if category == "defenders":
        return "TS" if "L" in position else "TD" if "R" in position else "DC"
    if category == "midfielders":
        return "CDS" if "DM" in position else "COC"
    if category == "attackers":
        return "AS" if "L" in position else "AD" if "R" in position else "ATT"
    return position


def decode_share_assignment(raw: Optional[str]) -> Assignment:
    """Parse the ``lineup`` link value into a slot -> player id mapping."""

    if not raw:
        return {}
    try:
        data = json.loads(urllib.parse.unquote(raw))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid lineup JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError("lineup must be a JSON object")
    assignment: Assignment = {}
    for slot, player_id in data.items():
        if player_id is None:
            continue
        if not isinstance(player_id, str):
            raise ValueError(f"lineup value for {slot!r} must be a string")
        assignment[slot] = player_id
    return assignment


def encode_share_query(team_id: Optional[str], formation: str, assignment: Mapping[str, str]) -> str:
    """Query string for a share link; the lineup JSON is percent-encoded twice over."""

    lineup = urllib.parse.quote(json.dumps(dict(assignment), separators=(",", ":")), safe="")
    return urllib.parse.urlencode({"team": team_id or "", "formation": formation, "lineup": lineup})


@dataclass(frozen=True)
class SharedPlayer:
    player: Player
    slot: str
    label: str
    number: str


@dataclass(frozen=True)
class ShareView:
    team: Team
    formation: str
    assignment: Assignment
    board: LineupBoard
    assigned: Tuple[Player, ...]
    groups: Mapping[Category, Tuple[SharedPlayer, ...]]

    @property
    def counts(self) -> Dict[str, int]:
        counts = {category: len(self.groups.get(category, ())) for category in SHARE_CATEGORIES}
        counts["assigned"] = len(self.assigned)
        return counts


def _group_by_slot(
    assigned: Sequence[Player],
    slots: Sequence[str],
    assignment: Mapping[str, str],
) -> Dict[Category, Tuple[SharedPlayer, ...]]:
    # a player joins every family matched by any slot they hold
    groups: Dict[Category, List[SharedPlayer]] = {category: [] for category in SHARE_CATEGORIES}
    for category in SHARE_CATEGORIES:
        for player in assigned:
            slot = next(
                (
                    code
                    for code in slots
                    if assignment.get(code) == player.id and category in categorize_slot(code)
                ),
                None,
            )
            if slot is None:
                continue
            groups[category].append(
                SharedPlayer(
                    player=player,
                    slot=slot,
                    label=share_role_label(category, player),
                    number=display_number(player),
                )
            )
    return {category: tuple(entries) for category, entries in groups.items()}


def build_share_view(
    players: Iterable[Player],
    teams: Sequence[Team],
    team_id: Optional[str],
    formation: Optional[str],
    lineup_raw: Optional[str],
) -> ShareView:
    """Rebuild the shared lineup; falls back to the first team when the id is unknown."""

    team = next((candidate for candidate in teams if candidate.id == team_id), None)
    if team is None:
        team = teams[0] if teams else None
    if team is None:
        raise NotFoundError("Team", team_id)

    formation_key = formation or team.formation or DEFAULT_FORMATION
    slots = get_slots(formation_key)
    assignment = decode_share_assignment(lineup_raw)

    roster = list(players)
    taken = assigned_player_ids(assignment)
    assigned = tuple(player for player in roster if player.id in taken)
    return ShareView(
        team=team,
        formation=formation_key,
        assignment=assignment,
        board=resolve_board(formation_key, roster, team, assignment),
        assigned=assigned,
        groups=_group_by_slot(assigned, slots, assignment),
    )
