"""In-memory storage for players, teams and saved lineups."""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar
from uuid import uuid4

from pydantic import BaseModel

from pitchside.models import (
    Lineup,
    LineupCreate,
    LineupUpdate,
    Player,
    PlayerCreate,
    PlayerUpdate,
    Team,
    TeamCreate,
    TeamUpdate,
)
from pitchside.settings import Settings


logger = logging.getLogger("uvicorn.error")

_M = TypeVar("_M", bound=BaseModel)


def _coerce(model: Type[_M], payload: Any) -> _M:
    if isinstance(payload, model):
        return payload
    return model.model_validate(payload)


def _new_id() -> str:
    return uuid4().hex


class MemoryStore:
    """Process-lifetime store; nothing survives a restart.

    References between entities (team captain/MOTM, lineup positions) are
    plain ids and are never cascaded or checked, so readers must tolerate ids
    that no longer resolve.
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or Settings()
        self._players: Dict[str, Player] = {}
        self._teams: Dict[str, Team] = {}
        self._lineups: Dict[str, Lineup] = {}
        self._last_entry_order = 0
        if self.settings.seed_default_team:
            team = self.create_team(
                TeamCreate(
                    name=self.settings.default_team_name,
                    coach=self.settings.default_team_coach,
                )
            )
            logger.info("Seeded default team %s (%s)", team.name, team.id)

    def _next_entry_order(self) -> int:
        value = max(int(time.time() * 1000), self._last_entry_order + 1)
        self._last_entry_order = value
        return value

    # Players

    def list_players(self) -> List[Player]:
        return list(self._players.values())

    def get_player(self, player_id: str) -> Optional[Player]:
        return self._players.get(player_id)

    def create_player(self, payload: PlayerCreate | Mapping[str, Any]) -> Player:
        data = _coerce(PlayerCreate, payload)
        fields = data.model_dump()
        if fields.get("entry_order") is None:
            fields["entry_order"] = self._next_entry_order()
        else:
            self._last_entry_order = max(self._last_entry_order, fields["entry_order"])
        player = Player(id=_new_id(), **fields)
        self._players[player.id] = player
        logger.info("Created player %s (%s)", player.name, player.id)
        return player

    def update_player(self, player_id: str, payload: PlayerUpdate | Mapping[str, Any]) -> Optional[Player]:
        current = self._players.get(player_id)
        if current is None:
            return None
        changes = _coerce(PlayerUpdate, payload).model_dump(exclude_unset=True)
        updated = current.model_copy(update=changes)
        self._players[player_id] = updated
        logger.info("Updated player %s fields=%s", player_id, sorted(changes))
        return updated

    def delete_player(self, player_id: str) -> bool:
        removed = self._players.pop(player_id, None) is not None
        if removed:
            logger.info("Deleted player %s", player_id)
        return removed

    # Teams

    def list_teams(self) -> List[Team]:
        return list(self._teams.values())

    def get_team(self, team_id: str) -> Optional[Team]:
        return self._teams.get(team_id)

    def current_team(self) -> Optional[Team]:
        """First team in creation order, the one the editor binds to."""

        return next(iter(self._teams.values()), None)

    def create_team(self, payload: TeamCreate | Mapping[str, Any]) -> Team:
        data = _coerce(TeamCreate, payload)
        team = Team(id=_new_id(), **data.model_dump())
        self._teams[team.id] = team
        logger.info("Created team %s (%s)", team.name, team.id)
        return team

    def update_team(self, team_id: str, payload: TeamUpdate | Mapping[str, Any]) -> Optional[Team]:
        current = self._teams.get(team_id)
        if current is None:
            return None
        changes = _coerce(TeamUpdate, payload).model_dump(exclude_unset=True)
        updated = current.model_copy(update=changes)
        self._teams[team_id] = updated
        logger.info("Updated team %s fields=%s", team_id, sorted(changes))
        return updated

    def delete_team(self, team_id: str) -> bool:
        removed = self._teams.pop(team_id, None) is not None
        if removed:
            logger.info("Deleted team %s", team_id)
        return removed

    # Lineups

    def list_lineups(self, team_id: str | None = None) -> List[Lineup]:
        lineups = list(self._lineups.values())
        if team_id:
            return [lineup for lineup in lineups if lineup.team_id == team_id]
        return lineups

    def get_lineup(self, lineup_id: str) -> Optional[Lineup]:
        return self._lineups.get(lineup_id)

    def create_lineup(self, payload: LineupCreate | Mapping[str, Any]) -> Lineup:
        data = _coerce(LineupCreate, payload)
        lineup = Lineup(id=_new_id(), **data.model_dump())
        self._lineups[lineup.id] = lineup
        logger.info("Created lineup %s for team %s (%s)", lineup.name, lineup.team_id, lineup.id)
        return lineup

    def update_lineup(self, lineup_id: str, payload: LineupUpdate | Mapping[str, Any]) -> Optional[Lineup]:
        current = self._lineups.get(lineup_id)
        if current is None:
            return None
        changes = _coerce(LineupUpdate, payload).model_dump(exclude_unset=True)
        updated = current.model_copy(update=changes)
        self._lineups[lineup_id] = updated
        logger.info("Updated lineup %s fields=%s", lineup_id, sorted(changes))
        return updated

    def delete_lineup(self, lineup_id: str) -> bool:
        removed = self._lineups.pop(lineup_id, None) is not None
        if removed:
            logger.info("Deleted lineup %s", lineup_id)
        return removed


__all__ = ["MemoryStore"]
