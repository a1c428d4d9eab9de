"""Public track data-model contracts."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal

Direction = Literal["left", "right", "down"]


@dataclass(frozen=True, slots=True)
class Position:
    """Integer grid coordinate; unbounded in every direction."""

    x: int
    y: int

    def translated(self, offset: Position) -> Position:
        """Return this position shifted by ``offset``."""
        return Position(self.x + offset.x, self.y + offset.y)

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)


ORIGIN = Position(0, 0)
LEFT = Position(-1, 0)
RIGHT = Position(1, 0)
DOWN = Position(0, 1)

_DIRECTION_DELTAS: dict[str, Position] = {
    "left": LEFT,
    "right": RIGHT,
    "down": DOWN,
}


def direction(name: Direction | str) -> Position:
    """Return unit delta for a named direction."""
    normalized = str(name).strip().lower()
    delta = _DIRECTION_DELTAS.get(normalized)
    if delta is None:
        raise ValueError(f"unknown direction: {name!r}")
    return delta


def as_position(value: Position | tuple[int, int]) -> Position:
    """Coerce a ``Position`` or an ``(x, y)`` pair of integral values."""
    if isinstance(value, Position):
        return value
    x, y = value
    if int(x) != x or int(y) != y:
        raise ValueError(f"position must be integral: {value!r}")
    return Position(int(x), int(y))


@dataclass(frozen=True, slots=True)
class TrackDefinition[TPayload]:
    """Track placement plus opaque render payload."""

    position: Position
    render: TPayload

    def moved_to(self, position: Position) -> TrackDefinition[TPayload]:
        return TrackDefinition(position=position, render=self.render)


@dataclass(frozen=True, slots=True)
class TrackEntry[TPayload]:
    """One entry of the flattened track list."""

    id: str
    position: Position
    render: TPayload


type TrackMap[TPayload] = Mapping[str, TrackDefinition[TPayload]]
