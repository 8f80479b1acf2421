"""Exceptions raised by the storage, formation and ratings layers."""

from __future__ import annotations

from typing import Mapping, Sequence


class UnknownFormation(KeyError):
    """Formation key outside the configured table."""

    def __init__(self, key: str):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"No formation configured for key={self.key!r}"


class NotFoundError(LookupError):
    def __init__(self, entity: str, identifier: str | None):
        super().__init__(f"{entity} not found: {identifier!r}")
        self.entity = entity
        self.identifier = identifier


class RatingsUpdateError(RuntimeError):
    """One or more rating updates failed; the others stay applied."""

    def __init__(self, failures: Mapping[str, str], updated: Sequence[object]):
        super().__init__(f"{len(failures)} rating update(s) failed")
        self.failures = dict(failures)
        self.updated = list(updated)
