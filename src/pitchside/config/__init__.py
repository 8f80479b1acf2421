"""Static formation and position tables."""

from .formations import (
    DEFAULT_FORMATION,
    POSITION_NAMES,
    Formation,
    display_abbreviation,
    get_formation,
    get_slots,
    is_formation,
    iter_formations,
)

__all__ = [
    "DEFAULT_FORMATION",
    "POSITION_NAMES",
    "Formation",
    "display_abbreviation",
    "get_formation",
    "get_slots",
    "is_formation",
    "iter_formations",
]
