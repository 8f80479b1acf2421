"""Roster hierarchy: players grouped by role family and side of the pitch."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cmp_to_key
from typing import Dict, Iterable, List, Literal, Mapping, Optional, Tuple

from pitchside.config import display_abbreviation
from pitchside.engine import assigned_player_ids, is_captain, is_motm
from pitchside.models import Player, Team


Category = Literal["goalkeepers", "defenders", "midfielders", "attackers", "others"]
Side = Literal["left", "center", "right"]

CATEGORY_ORDER: Tuple[Category, ...] = ("goalkeepers", "defenders", "midfielders", "attackers", "others")
SIDES: Tuple[Side, ...] = ("left", "center", "right")

POSITION_CATEGORIES: Mapping[str, frozenset] = {
    "goalkeepers": frozenset({"GK"}),
    "defenders": frozenset({"LB", "CB", "CB1", "CB2", "CB3", "RB", "LWB", "RWB"}),
    "midfielders": frozenset({"LM", "CM", "CM1", "CM2", "CM3", "CDM", "CDM1", "CDM2", "CAM", "RM"}),
    "attackers": frozenset({"LW", "RW", "LF", "RF", "ST", "ST1", "ST2"}),
}

STATUS_LABELS: Mapping[str, str] = {
    "available": "Disponibile",
    "absent": "Assente",
    "injured": "Infortunato",
    "suspended": "Squalificato",
}


def _side(position: str) -> Side:
    # substring heuristic: any "L" reads as left, then any "R" as right
    if "L" in position:
        return "left"
    if "R" in position:
        return "right"
    return "center"


def categorize(player: Player) -> Tuple[Category, Side]:
    """Role family and side for a player, keyed on the preferred position."""

    position = player.preferred_position
    if position in POSITION_CATEGORIES["goalkeepers"]:
        return "goalkeepers", "center"
    for category in ("defenders", "midfielders", "attackers"):
        if position in POSITION_CATEGORIES[category]:
            return category, _side(position)  # type: ignore[return-value]
    return "others", "center"


def _compare_entry(a: Player, b: Player) -> int:
    if a.entry_order is not None and b.entry_order is not None:
        return (a.entry_order > b.entry_order) - (a.entry_order < b.entry_order)
    return (a.id > b.id) - (a.id < b.id)


def sort_by_entry_order(players: Iterable[Player]) -> List[Player]:
    """Registration order: entry_order when both sides have one, else id."""

    return sorted(players, key=cmp_to_key(_compare_entry))


def entry_numbers(players: Iterable[Player]) -> Dict[str, int]:
    return {player.id: index for index, player in enumerate(sort_by_entry_order(players), start=1)}


def display_number(player: Player) -> str:
    """Shirt number as shown to users; 0 means unknown and renders as '?'."""

    return "?" if player.number == 0 else str(player.number)


@dataclass(frozen=True)
class StatusBadge:
    kind: str
    label: str


def status_badge(player: Player, team: Optional[Team], assignment: Mapping[str, str]) -> StatusBadge:
    """Badge shown next to a player; first match wins."""

    if is_captain(team, player):
        return StatusBadge(kind="captain", label="Capitano")
    if is_motm(team, player):
        return StatusBadge(kind="motm", label="MOTM")
    if player.id in assigned_player_ids(assignment):
        return StatusBadge(kind="starter", label="Titolare")
    return StatusBadge(kind=player.status, label=STATUS_LABELS.get(player.status, player.status))


@dataclass(frozen=True)
class HierarchyEntry:
    player: Player
    entry_number: int
    number: str
    position_label: str
    badge: StatusBadge


@dataclass(frozen=True)
class HierarchyGroup:
    category: Category
    sides: Mapping[Side, Tuple[HierarchyEntry, ...]]

    @property
    def size(self) -> int:
        return sum(len(entries) for entries in self.sides.values())


@dataclass(frozen=True)
class RosterSummary:
    total: int
    available: int
    absent: int
    injured: int
    suspended: int


@dataclass(frozen=True)
class RosterHierarchy:
    groups: Tuple[HierarchyGroup, ...]
    summary: RosterSummary

    def group(self, category: str) -> Optional[HierarchyGroup]:
        for group in self.groups:
            if group.category == category:
                return group
        return None


def roster_summary(players: Iterable[Player]) -> RosterSummary:
    roster = list(players)
    counts = {status: 0 for status in STATUS_LABELS}
    for player in roster:
        if player.status in counts:
            counts[player.status] += 1
    return RosterSummary(total=len(roster), **counts)


def build_hierarchy(
    players: Iterable[Player],
    team: Optional[Team],
    assignment: Mapping[str, str] | None = None,
) -> RosterHierarchy:
    assignment = assignment or {}
    ordered = sort_by_entry_order(players)
    numbers = {player.id: index for index, player in enumerate(ordered, start=1)}

    buckets: Dict[str, Dict[str, List[HierarchyEntry]]] = {}
    for player in ordered:
        category, side = categorize(player)
        entry = HierarchyEntry(
            player=player,
            entry_number=numbers[player.id],
            number=display_number(player),
            position_label=display_abbreviation(player.preferred_position),
            badge=status_badge(player, team, assignment),
        )
        buckets.setdefault(category, {s: [] for s in SIDES})[side].append(entry)

    groups = tuple(
        HierarchyGroup(
            category=category,
            sides={side: tuple(buckets[category][side]) for side in SIDES},
        )
        for category in CATEGORY_ORDER
        if category in buckets
    )
    return RosterHierarchy(groups=groups, summary=roster_summary(ordered))
