"""Coordinate-addressed navigation engine."""

from railway.api import (
    DOWN,
    LEFT,
    RIGHT,
    InitialTrackError,
    Position,
    Railway,
    RailwaySnapshot,
    StepDefinition,
    TrackDefinition,
    TrackEntry,
    TrackMap,
    create_linear_tracks,
    create_railway,
    direction,
)
from railway.runtime.mounting import TrackMount, mount_tracks

__all__ = [
    "DOWN",
    "InitialTrackError",
    "LEFT",
    "Position",
    "RIGHT",
    "Railway",
    "RailwaySnapshot",
    "StepDefinition",
    "TrackDefinition",
    "TrackEntry",
    "TrackMap",
    "TrackMount",
    "create_linear_tracks",
    "create_railway",
    "direction",
    "mount_tracks",
]
