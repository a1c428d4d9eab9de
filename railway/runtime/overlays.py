"""Owner-scoped overlay track maps."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from railway.api.tracks import Position, TrackMap


def translate_tracks[TPayload](tracks: TrackMap[TPayload], anchor: Position) -> TrackMap[TPayload]:
    """Return a copy of ``tracks`` with every position shifted by ``anchor``."""
    return MappingProxyType(
        {
            track_id: definition.moved_to(definition.position.translated(anchor))
            for track_id, definition in tracks.items()
        }
    )


class OverlayManager[TPayload]:
    """Registered overlays keyed by owner id, in registration order.

    The owner mapping is replaced on every mutation so that previously handed
    out ``overlays()`` views never change underneath a reader.
    """

    def __init__(self) -> None:
        self._overlays: Mapping[str, TrackMap[TPayload]] = MappingProxyType({})

    def overlays(self) -> Mapping[str, TrackMap[TPayload]]:
        return self._overlays

    def owners(self) -> tuple[str, ...]:
        return tuple(self._overlays)

    def tracks_for(self, owner_id: str) -> TrackMap[TPayload] | None:
        return self._overlays.get(owner_id)

    def register(self, owner_id: str, tracks: TrackMap[TPayload], anchor: Position) -> TrackMap[TPayload]:
        """Store an anchor-translated copy of ``tracks`` under ``owner_id``.

        Re-registering an owner replaces its previous overlay in place; the
        owner keeps its earlier merge priority.
        """
        translated = translate_tracks(tracks, anchor)
        updated = dict(self._overlays)
        updated[owner_id] = translated
        self._overlays = MappingProxyType(updated)
        return translated

    def remove(self, owner_id: str) -> tuple[str, ...] | None:
        """Drop one owner's overlay and return the ids it declared."""
        removed = self._overlays.get(owner_id)
        if removed is None:
            return None
        updated = dict(self._overlays)
        del updated[owner_id]
        self._overlays = MappingProxyType(updated)
        return tuple(removed)

    def clear(self) -> bool:
        """Drop every overlay; return whether anything was registered."""
        had_overlays = bool(self._overlays)
        self._overlays = MappingProxyType({})
        return had_overlays
