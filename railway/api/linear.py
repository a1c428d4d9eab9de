"""Public linear-track builder contracts."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from railway.api.tracks import Direction, TrackMap


@dataclass(frozen=True, slots=True)
class StepDefinition[TPayload]:
    """One step of an ordered walkthrough."""

    id: str
    render: TPayload
    direction: Direction | None = None


def create_linear_tracks[TPayload](steps: Sequence[StepDefinition[TPayload]]) -> TrackMap[TPayload]:
    """Build a track map by walking ``steps`` from the origin."""
    from railway.runtime.linear_tracks import generate_tracks_from_steps

    return generate_tracks_from_steps(steps)
