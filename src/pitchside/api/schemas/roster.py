from __future__ import annotations

from typing import Dict, List

from pydantic import Field

from pitchside.models import Player
from pitchside.models.player import WireModel

from .board import BoardResponse


class BadgeResponse(WireModel):
    kind: str
    label: str


class HierarchyEntryResponse(WireModel):
    player: Player
    entry_number: int
    number: str
    position_label: str
    badge: BadgeResponse


class HierarchyGroupResponse(WireModel):
    category: str
    size: int
    left: List[HierarchyEntryResponse]
    center: List[HierarchyEntryResponse]
    right: List[HierarchyEntryResponse]


class RosterSummaryResponse(WireModel):
    total: int
    available: int
    absent: int
    injured: int
    suspended: int


class HierarchyResponse(WireModel):
    team_id: str | None
    groups: List[HierarchyGroupResponse]
    summary: RosterSummaryResponse


class SharedPlayerResponse(WireModel):
    player: Player
    slot: str
    label: str
    number: str


class ShareResponse(WireModel):
    team_id: str
    team_name: str
    coach: str | None
    formation: str
    board: BoardResponse
    groups: Dict[str, List[SharedPlayerResponse]]
    counts: Dict[str, int]


class ShareLinkRequest(WireModel):
    team_id: str | None = None
    formation: str
    assignment: Dict[str, str] = Field(default_factory=dict)


class ShareLinkResponse(WireModel):
    query: str
    path: str


class RatingsRequest(WireModel):
    ratings: Dict[str, float]


class RatingsResponse(WireModel):
    updated: List[Player]
    display: Dict[str, str]
