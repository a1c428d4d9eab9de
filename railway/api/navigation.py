"""Public navigation API contracts."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Literal, Protocol

from railway.api.errors import RegistrationConflict
from railway.api.tracks import Position, TrackEntry, TrackMap

if TYPE_CHECKING:
    from railway.diagnostics.hub import DiagnosticHub

ReturnDirection = Literal["left", "right", "top"]


@dataclass(frozen=True, slots=True)
class RailwaySnapshot[TPayload, TContext]:
    """Immutable view of navigation state after one mutation."""

    journey_stack: tuple[str, ...]
    current_position: Position
    current_track: TrackEntry[TPayload] | None
    tracks: tuple[TrackEntry[TPayload], ...]
    context_map: Mapping[str, TContext | None]
    return_direction: ReturnDirection | None
    revision: int

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-safe summary; payloads and contexts are omitted."""
        return {
            "revision": self.revision,
            "journey_stack": list(self.journey_stack),
            "current_position": list(self.current_position.as_tuple()),
            "current_track": None if self.current_track is None else self.current_track.id,
            "tracks": {track.id: list(track.position.as_tuple()) for track in self.tracks},
            "context_ids": sorted(self.context_map),
            "return_direction": self.return_direction,
        }


@dataclass(frozen=True, slots=True)
class Subscription:
    """Opaque subscription token."""

    id: int


type SnapshotHandler[TPayload, TContext] = Callable[[RailwaySnapshot[TPayload, TContext]], None]


class Railway[TPayload, TContext](Protocol):
    """Public navigation engine contract."""

    @property
    def diagnostics(self) -> DiagnosticHub:
        """Return the diagnostics channel of this instance."""

    @property
    def current_track(self) -> TrackEntry[TPayload] | None:
        """Return the track at the current position, if any."""

    @property
    def return_direction(self) -> ReturnDirection | None:
        """Return the coarse direction of the way back."""

    def is_current_track(self, track_id: str) -> bool:
        """Return whether ``track_id`` is the current track."""

    def navigate_to_view(self, track_id: str, context: TContext | None = None) -> bool:
        """Push a track onto the journey; False when the id is unknown."""

    def return_to_last(self) -> bool:
        """Pop one journey entry; False when nothing changed."""

    def register_new_tracks(
        self,
        owner_id: str,
        tracks: TrackMap[TPayload],
        anchor: Position | tuple[int, int] | None = None,
    ) -> tuple[RegistrationConflict, ...]:
        """Register an overlay translated by ``anchor``."""

    def deregister_tracks(self, owner_id: str | None = None) -> bool:
        """Remove one owner's overlay, or all overlays."""

    def snapshot(self) -> RailwaySnapshot[TPayload, TContext]:
        """Return current immutable snapshot."""

    def subscribe(self, handler: SnapshotHandler[TPayload, TContext]) -> Subscription:
        """Call ``handler`` with every post-mutation snapshot."""

    def unsubscribe(self, subscription: Subscription) -> None:
        """Remove a snapshot subscription."""


def create_railway[TPayload, TContext](
    default_tracks: TrackMap[TPayload],
    initial_track_id: str,
    *,
    diagnostics: DiagnosticHub | None = None,
) -> Railway[TPayload, TContext]:
    """Create default railway navigation engine."""
    from railway.runtime.navigation import RuntimeRailway

    return RuntimeRailway(default_tracks, initial_track_id, diagnostics=diagnostics)
