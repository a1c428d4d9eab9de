from __future__ import annotations

import pytest

from railway.api.tracks import Position
from railway.runtime.overlays import OverlayManager, translate_tracks
from tests.railway.conftest import tracks


def test_translate_tracks_offsets_every_position() -> None:
    translated = translate_tracks(tracks(a=(0, 1), b=(-1, 0)), Position(3, 4))
    assert {track_id: d.position for track_id, d in translated.items()} == {
        "a": Position(3, 5),
        "b": Position(2, 4),
    }


def test_translated_copy_is_read_only_and_source_untouched() -> None:
    source = tracks(a=(0, 1))
    translated = translate_tracks(source, Position(1, 1))
    assert source["a"].position == Position(0, 1)
    with pytest.raises(TypeError):
        translated["b"] = source["a"]  # type: ignore[index]


def test_register_replaces_owner_overlay_and_keeps_order() -> None:
    manager = OverlayManager[str]()
    manager.register("first", tracks(a=(0, 1)), Position(0, 0))
    manager.register("second", tracks(b=(0, 1)), Position(5, 0))
    manager.register("first", tracks(c=(0, 2)), Position(1, 1))

    assert manager.owners() == ("first", "second")
    first = manager.tracks_for("first")
    assert first is not None
    assert list(first) == ["c"]
    assert first["c"].position == Position(1, 3)


def test_register_swaps_mapping_instead_of_mutating() -> None:
    manager = OverlayManager[str]()
    before = manager.overlays()
    manager.register("app", tracks(a=(0, 1)), Position(0, 0))
    assert dict(before) == {}
    assert list(manager.overlays()) == ["app"]


def test_remove_returns_declared_ids() -> None:
    manager = OverlayManager[str]()
    manager.register("app", tracks(a=(0, 1), b=(0, 2)), Position(0, 0))
    assert manager.remove("app") == ("a", "b")
    assert manager.remove("app") is None
    assert manager.owners() == ()


def test_clear_reports_whether_anything_was_registered() -> None:
    manager = OverlayManager[str]()
    assert manager.clear() is False
    manager.register("one", tracks(a=(0, 1)), Position(0, 0))
    manager.register("two", tracks(b=(0, 2)), Position(0, 0))
    assert manager.clear() is True
    assert manager.overlays() == {}
