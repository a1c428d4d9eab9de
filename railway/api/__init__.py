"""Public railway API contracts."""

from railway.api.errors import (
    InitialTrackError,
    InvalidTrackReference,
    RailwayError,
    RegistrationConflict,
)
from railway.api.linear import StepDefinition, create_linear_tracks
from railway.api.logging import RailwayLoggingConfig
from railway.api.navigation import (
    Railway,
    RailwaySnapshot,
    ReturnDirection,
    Subscription,
    create_railway,
)
from railway.api.tracks import (
    DOWN,
    LEFT,
    ORIGIN,
    RIGHT,
    Direction,
    Position,
    TrackDefinition,
    TrackEntry,
    TrackMap,
    as_position,
    direction,
)

__all__ = [
    "DOWN",
    "Direction",
    "InitialTrackError",
    "InvalidTrackReference",
    "LEFT",
    "ORIGIN",
    "Position",
    "RIGHT",
    "Railway",
    "RailwayError",
    "RailwayLoggingConfig",
    "RailwaySnapshot",
    "RegistrationConflict",
    "ReturnDirection",
    "StepDefinition",
    "Subscription",
    "TrackDefinition",
    "TrackEntry",
    "TrackMap",
    "as_position",
    "create_linear_tracks",
    "create_railway",
    "direction",
]
