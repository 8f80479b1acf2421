"""Formation table and position display names."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Tuple

from pitchside.errors import UnknownFormation


DEFAULT_FORMATION = "4-4-2"


@dataclass(frozen=True)
class Formation:
    key: str
    slots: Tuple[str, ...]


_FORMATIONS: Dict[str, Formation] = {
    "4-4-2": Formation(
        key="4-4-2",
        slots=("GK", "LB", "CB1", "CB2", "RB", "LM", "CM1", "CM2", "RM", "LF", "RF"),
    ),
    "4-3-3": Formation(
        key="4-3-3",
        slots=("GK", "LB", "CB1", "CB2", "RB", "CDM", "CM1", "CM2", "LW", "ST", "RW"),
    ),
    "3-5-2": Formation(
        key="3-5-2",
        slots=("GK", "CB1", "CB2", "CB3", "LWB", "CM1", "CM2", "CM3", "RWB", "ST1", "ST2"),
    ),
    "4-5-1": Formation(
        key="4-5-1",
        slots=("GK", "LB", "CB1", "CB2", "RB", "LM", "CM1", "CM2", "CM3", "RM", "ST"),
    ),
    "5-3-2": Formation(
        key="5-3-2",
        slots=("GK", "CB1", "CB2", "CB3", "LWB", "RWB", "CM1", "CM2", "CM3", "ST1", "ST2"),
    ),
    "4-2-1-3": Formation(
        key="4-2-1-3",
        slots=("GK", "LB", "CB1", "CB2", "RB", "CDM1", "CDM2", "CAM", "LW", "ST", "RW"),
    ),
}

# Italian short labels shown on the pitch and in the roster list.
POSITION_NAMES: Mapping[str, str] = {
    "GK": "POR",
    "LB": "TS",
    "CB": "DC",
    "CB1": "DC",
    "CB2": "DC",
    "CB3": "DC",
    "RB": "TD",
    "LWB": "TS",
    "RWB": "TD",
    "LM": "CDS",
    "CM": "COC",
    "CM1": "COC",
    "CM2": "COC",
    "CM3": "COC",
    "CDM": "CDS",
    "CDM1": "CDS",
    "CDM2": "CDS",
    "CAM": "COC",
    "RM": "CDS",
    "LW": "AS",
    "RW": "AD",
    "LF": "ATT",
    "RF": "ATT",
    "ST": "ATT",
    "ST1": "ATT",
    "ST2": "ATT",
}


def iter_formations() -> Iterable[Formation]:
    """Return the configured formations in table order."""

    return _FORMATIONS.values()


def is_formation(key: str) -> bool:
    return key in _FORMATIONS


def get_formation(key: str) -> Formation:
    """Fetch a formation by key, raising UnknownFormation if missing."""

    try:
        return _FORMATIONS[key]
    except KeyError:
        raise UnknownFormation(key) from None


def get_slots(key: str) -> Tuple[str, ...]:
    return get_formation(key).slots


def display_abbreviation(slot: str) -> str:
    """Short display label for a slot code; unknown codes are echoed back."""

    return POSITION_NAMES.get(slot, slot)
