"""Track registry: merges the base map with owner-scoped overlays."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from railway.api.errors import RegistrationConflict
from railway.api.tracks import Position, TrackDefinition, TrackEntry, TrackMap

_LOG = logging.getLogger("railway.registry")


@dataclass(frozen=True, slots=True)
class MergeResult[TPayload]:
    """Flattened track list plus the overlay entries that were dropped."""

    tracks: tuple[TrackEntry[TPayload], ...]
    conflicts: tuple[RegistrationConflict, ...] = ()

    def find_by_id(self, track_id: str) -> TrackEntry[TPayload] | None:
        for track in self.tracks:
            if track.id == track_id:
                return track
        return None

    def find_at(self, position: Position) -> TrackEntry[TPayload] | None:
        for track in self.tracks:
            if track.position == position:
                return track
        return None


def merge_tracks[TPayload](
    base: TrackMap[TPayload],
    overlays: Mapping[str, TrackMap[TPayload]],
) -> MergeResult[TPayload]:
    """Union base and overlays, first come first served.

    Base entries always win. Overlays are applied in registration order; an
    overlay entry is dropped when its id is already taken or when any entry
    accepted so far occupies the same position.
    """
    merged: dict[str, TrackDefinition[TPayload]] = dict(base)
    conflicts: list[RegistrationConflict] = []

    for owner_id, overlay in overlays.items():
        for track_id, definition in overlay.items():
            if track_id in merged:
                conflicts.append(
                    RegistrationConflict(
                        owner_id=owner_id,
                        track_id=track_id,
                        position=definition.position,
                        reason="duplicate_id",
                        conflicting_id=track_id,
                    )
                )
                continue
            occupant = _occupant_of(merged, definition.position)
            if occupant is not None:
                conflicts.append(
                    RegistrationConflict(
                        owner_id=owner_id,
                        track_id=track_id,
                        position=definition.position,
                        reason="position_conflict",
                        conflicting_id=occupant,
                    )
                )
                continue
            merged[track_id] = definition

    tracks = tuple(
        TrackEntry(id=track_id, position=definition.position, render=definition.render)
        for track_id, definition in merged.items()
    )
    return MergeResult(tracks=tracks, conflicts=tuple(conflicts))


def _occupant_of[TPayload](
    tracks: Mapping[str, TrackDefinition[TPayload]], position: Position
) -> str | None:
    for track_id, definition in tracks.items():
        if definition.position == position:
            return track_id
    return None


class TrackRegistry[TPayload]:
    """Base track map with a cached flattened view over current overlays."""

    def __init__(self, base: TrackMap[TPayload]) -> None:
        self._base: TrackMap[TPayload] = dict(base)
        self._result: MergeResult[TPayload] = merge_tracks(self._base, {})

    @property
    def result(self) -> MergeResult[TPayload]:
        return self._result

    def tracks(self) -> tuple[TrackEntry[TPayload], ...]:
        return self._result.tracks

    def rebuild(self, overlays: Mapping[str, TrackMap[TPayload]]) -> MergeResult[TPayload]:
        """Recompute and swap in the flattened list."""
        self._result = merge_tracks(self._base, overlays)
        return self._result


def log_conflicts(conflicts: Iterable[RegistrationConflict]) -> None:
    """Log every dropped overlay entry."""
    for conflict in conflicts:
        if conflict.reason == "duplicate_id":
            _LOG.warning(
                "track_duplicate_id owner=%s id=%s",
                conflict.owner_id,
                conflict.track_id,
            )
        else:
            _LOG.warning(
                "track_position_conflict owner=%s id=%s position=%s occupied_by=%s",
                conflict.owner_id,
                conflict.track_id,
                conflict.position.as_tuple(),
                conflict.conflicting_id,
            )
