"""Pydantic models for API I/O."""

from .board import (
    AssignRequest,
    BoardRequest,
    BoardResponse,
    FormationResponse,
    SlotLabelResponse,
    SlotResponse,
    StatsResponse,
)
from .roster import (
    BadgeResponse,
    HierarchyEntryResponse,
    HierarchyGroupResponse,
    HierarchyResponse,
    RatingsRequest,
    RatingsResponse,
    RosterSummaryResponse,
    SharedPlayerResponse,
    ShareLinkRequest,
    ShareLinkResponse,
    ShareResponse,
)

__all__ = [
    "AssignRequest",
    "BoardRequest",
    "BoardResponse",
    "FormationResponse",
    "SlotLabelResponse",
    "SlotResponse",
    "StatsResponse",
    "BadgeResponse",
    "HierarchyEntryResponse",
    "HierarchyGroupResponse",
    "HierarchyResponse",
    "RatingsRequest",
    "RatingsResponse",
    "RosterSummaryResponse",
    "SharedPlayerResponse",
    "ShareLinkRequest",
    "ShareLinkResponse",
    "ShareResponse",
]
