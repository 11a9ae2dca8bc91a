"""Custom types and enumerations."""

from enum import Enum


class PathMode(Enum):
    """Shape of the camera path. Values match the .cman file encoding."""

    LINEAR = 0
    RADIAL = 1
    BEZIER = 2


class SpeedMode(Enum):
    """How `speed` turns elapsed tics into path progress."""

    DISTANCE = 0
    TIME = 1


class AngleMode(Enum):
    """Whether yaw gets the heading of travel added (RELATIVE) or not (ABSOLUTE)."""

    RELATIVE = 0
    ABSOLUTE = 1


class CameraState(Enum):
    """Tic orchestrator states."""

    DISABLED = "disabled"
    PENDING = "pending"
    ACTIVE = "active"
    COMPLETED = "completed"
