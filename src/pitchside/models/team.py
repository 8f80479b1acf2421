"""Team and saved-lineup models."""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import Field, field_validator
from pydantic.config import ConfigDict

from pitchside.config import DEFAULT_FORMATION, is_formation

from .player import WireModel, check_image_url


def _check_formation(value: Optional[str]) -> Optional[str]:
    if value is not None and not is_formation(value):
        raise ValueError(f"unknown formation {value!r}")
    return value


class TeamFields(WireModel):
    name: str = ""
    coach: Optional[str] = None
    formation: str = DEFAULT_FORMATION
    captain_id: Optional[str] = None
    motm_id: Optional[str] = None
    logo_url: Optional[str] = None

    @field_validator("formation")
    @classmethod
    def _known_formation(cls, value: Optional[str]) -> Optional[str]:
        return _check_formation(value)

    @field_validator("logo_url")
    @classmethod
    def _check_logo(cls, value: Optional[str]) -> Optional[str]:
        return check_image_url(value)


class TeamCreate(TeamFields):
    pass


class TeamUpdate(TeamFields):
    name: Optional[str] = None
    formation: Optional[str] = None

    @field_validator("name", "formation")
    @classmethod
    def _not_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("field may not be null")
        return value


class Team(TeamFields):
    id: str = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True)


class LineupFields(WireModel):
    team_id: str = Field(..., min_length=1)
    name: str
    formation: str
    positions: Dict[str, str] = Field(default_factory=dict)

    @field_validator("formation")
    @classmethod
    def _known_formation(cls, value: Optional[str]) -> Optional[str]:
        return _check_formation(value)


class LineupCreate(LineupFields):
    pass


class LineupUpdate(LineupFields):
    team_id: Optional[str] = Field(default=None, min_length=1)
    name: Optional[str] = None
    formation: Optional[str] = None
    positions: Optional[Dict[str, str]] = None

    @field_validator("team_id", "name", "formation", "positions")
    @classmethod
    def _not_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("field may not be null")
        return value


class Lineup(LineupFields):
    """Named snapshot of a formation and its slot assignment."""

    id: str = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True)
