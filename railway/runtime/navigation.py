"""Navigation state machine over the flattened track registry."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, replace
from types import MappingProxyType

from railway.api.errors import InitialTrackError, InvalidTrackReference, RegistrationConflict
from railway.api.navigation import (
    RailwaySnapshot,
    ReturnDirection,
    SnapshotHandler,
    Subscription,
)
from railway.api.tracks import ORIGIN, Position, TrackEntry, TrackMap, as_position
from railway.diagnostics.config import load_diagnostics_config
from railway.diagnostics.hub import DiagnosticHub
from railway.diagnostics.json_codec import dumps_text
from railway.runtime.overlays import OverlayManager
from railway.runtime.registry import MergeResult, TrackRegistry, log_conflicts

_LOG = logging.getLogger("railway.navigation")


@dataclass(frozen=True, slots=True)
class NavigationState[TContext]:
    """Journey, position and context; replaced wholesale on every change."""

    journey_stack: tuple[str, ...]
    current_position: Position
    context_map: Mapping[str, TContext | None]


class RuntimeRailway[TPayload, TContext]:
    """Default navigation engine: registry, overlays and journey state."""

    def __init__(
        self,
        default_tracks: TrackMap[TPayload],
        initial_track_id: str,
        *,
        diagnostics: DiagnosticHub | None = None,
    ) -> None:
        initial = default_tracks.get(initial_track_id)
        if initial is None:
            raise InitialTrackError(f"initial track {initial_track_id!r} is not in the base map")
        if initial.position != ORIGIN:
            raise InitialTrackError(
                f"initial track {initial_track_id!r} must sit at (0, 0), "
                f"got {initial.position.as_tuple()}"
            )
        self._registry = TrackRegistry(default_tracks)
        self._overlays = OverlayManager[TPayload]()
        self._state: NavigationState[TContext] = NavigationState(
            journey_stack=(initial_track_id,),
            current_position=ORIGIN,
            context_map=MappingProxyType({}),
        )
        self._revision = 0
        self._diagnostics = (
            diagnostics
            if diagnostics is not None
            else DiagnosticHub.from_config(load_diagnostics_config())
        )
        self._next_subscription_id = 1
        self._subscribers: dict[int, SnapshotHandler[TPayload, TContext]] = {}

    @property
    def diagnostics(self) -> DiagnosticHub:
        return self._diagnostics

    @property
    def revision(self) -> int:
        return self._revision

    @property
    def current_track(self) -> TrackEntry[TPayload] | None:
        return self._registry.result.find_at(self._state.current_position)

    @property
    def return_direction(self) -> ReturnDirection | None:
        """Classify the way back by horizontal delta only.

        Any move without horizontal change reads as ``top``, including moves
        that went up or down.
        """
        journey = self._state.journey_stack
        if len(journey) < 2:
            return None
        result = self._registry.result
        previous = result.find_by_id(journey[-2])
        if previous is None or self.current_track is None:
            return None
        dx = previous.position.x - self._state.current_position.x
        if dx < 0:
            return "left"
        if dx > 0:
            return "right"
        return "top"

    def is_current_track(self, track_id: str) -> bool:
        current = self.current_track
        return current is not None and current.id == track_id

    def navigate_to_view(self, track_id: str, context: TContext | None = None) -> bool:
        target = self._registry.result.find_by_id(track_id)
        if target is None:
            self._report_invalid(InvalidTrackReference(track_id=track_id, operation="navigate"))
            return False
        state = self._state
        context_map = dict(state.context_map)
        context_map[track_id] = context
        self._commit(
            replace(
                state,
                journey_stack=(*state.journey_stack, track_id),
                current_position=target.position,
                context_map=MappingProxyType(context_map),
            )
        )
        return True

    def return_to_last(self) -> bool:
        state = self._state
        if len(state.journey_stack) < 2:
            return False
        previous_id = state.journey_stack[-2]
        target = self._registry.result.find_by_id(previous_id)
        if target is None:
            self._report_invalid(InvalidTrackReference(track_id=previous_id, operation="return"))
            return False
        # Context of the track being left is kept.
        self._commit(
            replace(
                state,
                journey_stack=state.journey_stack[:-1],
                current_position=target.position,
            )
        )
        return True

    def register_new_tracks(
        self,
        owner_id: str,
        tracks: TrackMap[TPayload],
        anchor: Position | tuple[int, int] | None = None,
    ) -> tuple[RegistrationConflict, ...]:
        """Register ``tracks`` under ``owner_id``, anchored at ``anchor``.

        Without an anchor the overlay is placed relative to the current
        position. Returns the entries of this owner that lost a conflict.

        Conflicts are recomputed from scratch on every overlay change, so
        standing conflicts of other owners are logged and emitted again.
        """
        offset = as_position(anchor) if anchor is not None else self._state.current_position
        self._overlays.register(owner_id, tracks, offset)
        result = self._registry.rebuild(self._overlays.overlays())
        self._commit(self._state)
        self._report_conflicts(result)
        return tuple(conflict for conflict in result.conflicts if conflict.owner_id == owner_id)

    def deregister_tracks(self, owner_id: str | None = None) -> bool:
        """Remove overlays.

        With an owner id, that owner's tracks leave the registry and their
        context entries are purged. Without one, every overlay is removed but
        the context map is left as is.
        """
        if owner_id is None:
            if not self._overlays.clear():
                return False
            result = self._registry.rebuild(self._overlays.overlays())
            self._commit(self._state)
            self._report_conflicts(result)
            return True

        removed_ids = self._overlays.remove(owner_id)
        if removed_ids is None:
            return False
        state = self._state
        context_map = {
            track_id: context
            for track_id, context in state.context_map.items()
            if track_id not in removed_ids
        }
        result = self._registry.rebuild(self._overlays.overlays())
        self._commit(replace(state, context_map=MappingProxyType(context_map)))
        self._report_conflicts(result)
        return True

    def snapshot(self) -> RailwaySnapshot[TPayload, TContext]:
        state = self._state
        return RailwaySnapshot(
            journey_stack=state.journey_stack,
            current_position=state.current_position,
            current_track=self.current_track,
            tracks=self._registry.tracks(),
            context_map=state.context_map,
            return_direction=self.return_direction,
            revision=self._revision,
        )

    def subscribe(self, handler: SnapshotHandler[TPayload, TContext]) -> Subscription:
        sub_id = self._next_subscription_id
        self._next_subscription_id += 1
        self._subscribers[sub_id] = handler
        return Subscription(sub_id)

    def unsubscribe(self, subscription: Subscription) -> None:
        self._subscribers.pop(subscription.id, None)

    def _report_conflicts(self, result: MergeResult[TPayload]) -> None:
        log_conflicts(result.conflicts)
        for conflict in result.conflicts:
            self._diagnostics.emit_fast(
                category="registry",
                name=f"registry.{conflict.reason}",
                tick=self._revision,
                level="warning",
                value=conflict.track_id,
                metadata={
                    "owner_id": conflict.owner_id,
                    "position": list(conflict.position.as_tuple()),
                    "conflicting_id": conflict.conflicting_id,
                },
            )

    def _report_invalid(self, report: InvalidTrackReference) -> None:
        _LOG.error("invalid_track_reference id=%s operation=%s", report.track_id, report.operation)
        self._diagnostics.emit_fast(
            category="navigation",
            name="navigation.invalid_track",
            tick=self._revision,
            level="error",
            value=report.track_id,
            metadata={"operation": report.operation},
        )

    def _commit(self, state: NavigationState[TContext]) -> None:
        self._state = state
        self._revision += 1
        snapshot = self.snapshot()
        if _LOG.isEnabledFor(logging.DEBUG):
            _LOG.debug("railway_state %s", dumps_text(snapshot.to_dict()))
        for handler in tuple(self._subscribers.values()):
            handler(snapshot)
