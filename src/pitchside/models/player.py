"""Roster player models shared by storage, engine and API layers."""

from __future__ import annotations

from typing import Any, Literal, Mapping, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict


PlayerStatus = Literal["available", "absent", "injured", "suspended"]

PLAYER_STATUSES: tuple[str, ...] = ("available", "absent", "injured", "suspended")
DEFAULT_STATUS: PlayerStatus = "available"

IMAGE_MIME_TYPES = frozenset(
    {"image/png", "image/jpeg", "image/jpg", "image/gif", "image/webp"}
)


def check_image_url(value: Optional[str]) -> Optional[str]:
    """Reject data URIs whose MIME type is not an allowed image type."""

    if not value or not value.startswith("data:"):
        return value
    mime = value[len("data:"):].split(";", 1)[0].split(",", 1)[0].strip().lower()
    if mime not in IMAGE_MIME_TYPES:
        raise ValueError(f"unsupported image type {mime or 'unknown'!r}")
    return value


class WireModel(BaseModel):
    """Base model speaking camelCase on the wire and snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PlayerFields(WireModel):
    name: str = Field(..., min_length=1)
    number: int = 0
    preferred_position: str = Field(..., min_length=1)
    status: PlayerStatus = DEFAULT_STATUS
    age: Optional[int] = Field(default=None, gt=0)
    notes: Optional[str] = None
    photo_url: Optional[str] = None
    entry_order: Optional[int] = None
    rating: Optional[float] = Field(default=None, ge=1.0, le=10.0)

    @field_validator("name", "preferred_position", mode="before")
    @classmethod
    def _strip_required(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("photo_url")
    @classmethod
    def _check_photo(cls, value: Optional[str]) -> Optional[str]:
        return check_image_url(value)


class PlayerCreate(PlayerFields):
    """Input accepted when registering a player."""


class PlayerUpdate(PlayerFields):
    """Partial player update; only fields explicitly sent are applied."""

    name: Optional[str] = Field(default=None, min_length=1)
    number: Optional[int] = None
    preferred_position: Optional[str] = Field(default=None, min_length=1)
    status: Optional[PlayerStatus] = None

    @field_validator("name", "number", "preferred_position", "status")
    @classmethod
    def _not_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("field may not be null")
        return value


class Player(PlayerFields):
    """Stored roster member."""

    id: str = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True)


def validate_player(payload: Mapping[str, Any] | PlayerCreate) -> PlayerCreate:
    """Validate raw player input, raising pydantic.ValidationError on bad data."""

    if isinstance(payload, PlayerCreate):
        return payload
    return PlayerCreate.model_validate(payload)
