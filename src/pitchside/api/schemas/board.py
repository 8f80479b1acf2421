from __future__ import annotations

from typing import Dict, List

from pydantic import Field

from pitchside.models import Player
from pitchside.models.player import WireModel


class SlotLabelResponse(WireModel):
    slot: str
    abbreviation: str


class FormationResponse(WireModel):
    key: str
    slots: List[SlotLabelResponse]


class BoardRequest(WireModel):
    formation: str | None = None
    team_id: str | None = None
    assignment: Dict[str, str] = Field(default_factory=dict)


class AssignRequest(BoardRequest):
    slot: str = Field(..., min_length=1)
    player_id: str | None = None


class SlotResponse(WireModel):
    slot: str
    abbreviation: str
    player: Player | None
    is_captain: bool
    is_motm: bool


class StatsResponse(WireModel):
    starters: int
    bench: int
    absent: int


class BoardResponse(WireModel):
    formation: str
    team_id: str | None
    assignment: Dict[str, str]
    slots: List[SlotResponse]
    occupied_slots: List[str]
    empty_slots: List[str]
    bench: List[Player]
    candidates: Dict[str, List[str]]
    stats: StatsResponse
