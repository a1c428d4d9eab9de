"""Owner-scoped overlay mounts for hosts with a mount/unmount lifecycle."""

from __future__ import annotations

from collections.abc import Callable

from railway.api.navigation import Railway
from railway.api.tracks import TrackMap

type TrackMapFactory[TPayload, TContext] = Callable[[TContext | None], TrackMap[TPayload]]


class TrackMount[TPayload, TContext]:
    """Handle for one overlay registration; releases it at most once."""

    def __init__(self, railway: Railway[TPayload, TContext], owner_id: str) -> None:
        self._railway = railway
        self._owner_id = owner_id
        self._released = False

    @property
    def owner_id(self) -> str:
        return self._owner_id

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> bool:
        """Deregister the owner's tracks; False when already released."""
        if self._released:
            return False
        self._released = True
        self._railway.deregister_tracks(self._owner_id)
        return True

    def __enter__(self) -> TrackMount[TPayload, TContext]:
        return self

    def __exit__(self, *_exc: object) -> None:
        self.release()


def mount_tracks[TPayload, TContext](
    railway: Railway[TPayload, TContext],
    owner_id: str,
    map_creator: TrackMapFactory[TPayload, TContext],
) -> TrackMount[TPayload, TContext] | None:
    """Lay overlay tracks around ``owner_id`` while it is the current track.

    The overlay is anchored at the current position and ``map_creator``
    receives the context stored for ``owner_id``. Nothing is registered when
    ``owner_id`` is not current. Hosts must call this from a follow-up effect,
    never from inside a snapshot handler.
    """
    if not railway.is_current_track(owner_id):
        return None
    context = railway.snapshot().context_map.get(owner_id)
    railway.register_new_tracks(owner_id, map_creator(context))
    return TrackMount(railway, owner_id)
