"""Linear track builder: ordered steps to a position-tagged track map."""

from __future__ import annotations

from collections.abc import Sequence

from railway.api.linear import StepDefinition
from railway.api.tracks import ORIGIN, TrackDefinition, TrackMap, direction

DEFAULT_STEP_DIRECTION = "right"


def generate_tracks_from_steps[TPayload](
    steps: Sequence[StepDefinition[TPayload]],
) -> TrackMap[TPayload]:
    """Place each step one unit away from the previous one.

    The first step always sits at the origin and its direction is ignored.
    Later steps default to ``right``.
    """
    tracks: dict[str, TrackDefinition[TPayload]] = {}
    position = ORIGIN
    for index, step in enumerate(steps):
        if index:
            position = position.translated(direction(step.direction or DEFAULT_STEP_DIRECTION))
        tracks[step.id] = TrackDefinition(position=position, render=step.render)
    return tracks
