"""Railway error types and non-fatal failure reports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from railway.api.tracks import Position

ConflictReason = Literal["duplicate_id", "position_conflict"]
ReferenceOperation = Literal["navigate", "return"]


class RailwayError(Exception):
    """Base class for raised railway errors."""


class InitialTrackError(RailwayError, ValueError):
    """Initial track id is missing from the base map or not at the origin."""


@dataclass(frozen=True, slots=True)
class InvalidTrackReference:
    """Navigation targeted an id absent from the flattened registry."""

    track_id: str
    operation: ReferenceOperation


@dataclass(frozen=True, slots=True)
class RegistrationConflict:
    """Overlay entry dropped while merging the registry."""

    owner_id: str
    track_id: str
    position: Position
    reason: ConflictReason
    conflicting_id: str | None = None
