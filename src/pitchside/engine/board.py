"""Resolve a formation and an assignment into the editor's pitch board."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional, Tuple

from pitchside.config import display_abbreviation, get_formation, get_slots
from pitchside.models import Player, Team
from pitchside.persistence import MemoryStore

from .assignment import (
    LineupStats,
    is_captain,
    is_motm,
    lineup_stats,
    unassigned_available_players,
)


@dataclass(frozen=True)
class SlotView:
    slot: str
    abbreviation: str
    player: Optional[Player]
    is_captain: bool
    is_motm: bool

    @property
    def occupied(self) -> bool:
        return self.player is not None


@dataclass(frozen=True)
class LineupBoard:
    formation: str
    slots: Tuple[SlotView, ...]
    bench: Tuple[Player, ...]
    stats: LineupStats

    @property
    def occupied_slots(self) -> List[str]:
        return [view.slot for view in self.slots if view.occupied]

    @property
    def empty_slots(self) -> List[str]:
        return [view.slot for view in self.slots if not view.occupied]

    def slot(self, code: str) -> Optional[SlotView]:
        for view in self.slots:
            if view.slot == code:
                return view
        return None


def resolve_board(
    formation: str,
    players: Iterable[Player],
    team: Optional[Team],
    assignment: Mapping[str, str],
) -> LineupBoard:
    """Build the pitch view for ``formation``.

    Slots holding ids that no longer resolve show as empty. Assignment keys
    outside the formation are ignored for the slot views but still count as
    starters, matching how the stats are computed from the raw assignment.
    """

    roster = list(players)
    by_id = {player.id: player for player in roster}
    views = []
    for slot in get_slots(formation):
        player_id = assignment.get(slot)
        player = by_id.get(player_id) if player_id else None
        views.append(
            SlotView(
                slot=slot,
                abbreviation=display_abbreviation(slot),
                player=player,
                is_captain=is_captain(team, player),
                is_motm=is_motm(team, player),
            )
        )
    return LineupBoard(
        formation=formation,
        slots=tuple(views),
        bench=tuple(unassigned_available_players(roster, assignment)),
        stats=lineup_stats(roster, assignment),
    )


def change_formation(store: MemoryStore, team_id: str, formation: str) -> Optional[Team]:
    """Persist a formation switch on the team; raises UnknownFormation for bad keys."""

    get_formation(formation)
    return store.update_team(team_id, {"formation": formation})
