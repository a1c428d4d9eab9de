from __future__ import annotations

from collections.abc import Callable

import pytest

from railway.api.tracks import Position, TrackDefinition
from railway.diagnostics.hub import DiagnosticHub
from railway.runtime.navigation import RuntimeRailway


def tracks(**positions: tuple[int, int]) -> dict[str, TrackDefinition[str]]:
    """Build a track map whose payload is the track id."""
    return {
        track_id: TrackDefinition(position=Position(x, y), render=track_id)
        for track_id, (x, y) in positions.items()
    }


@pytest.fixture
def base_tracks() -> dict[str, TrackDefinition[str]]:
    return tracks(start=(0, 0), left=(-1, 0), right=(1, 0))


@pytest.fixture
def hub() -> DiagnosticHub:
    return DiagnosticHub(capacity=100, enabled=True)


@pytest.fixture
def railway_factory(
    base_tracks: dict[str, TrackDefinition[str]], hub: DiagnosticHub
) -> Callable[..., RuntimeRailway[str, object]]:
    def _make(
        default_tracks: dict[str, TrackDefinition[str]] | None = None,
        initial_track_id: str = "start",
    ) -> RuntimeRailway[str, object]:
        return RuntimeRailway(
            base_tracks if default_tracks is None else default_tracks,
            initial_track_id,
            diagnostics=hub,
        )

    return _make


@pytest.fixture
def railway(railway_factory) -> RuntimeRailway[str, object]:
    return railway_factory()
