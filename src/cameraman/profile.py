"""Camera profile and pose data model.

A CameraProfile is the static description of one camera path, normally loaded
from a .cman file (see cameraman.loader). Only the control set of the profile's
path mode is meaningful; the others are ignored:

- Linear: points 0 and 1 (point 2 unused)
- Bezier: points 0, 1 and 2 as the quadratic control polygon
- Radial: angular sweep ra0/ra1, radius r0/r1, center cx0/cy0 to cx1/cy1

The yaw (a0/a1) and pitch (p0/p1) endpoints apply to every mode.

A CameraPose is what the path evaluators produce for one tic.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Self

from cameraman.angles import from_turn_fraction, to_fixed
from cameraman.types import AngleMode, PathMode, SpeedMode


@dataclass(frozen=True)
class CameraProfile:
    """Static camera path description, immutable for the whole session.

    Attributes:
        delay: Tics after level start before the camera engages. Negative
            disables Cameraman.
        path_mode: Shape of the path.
        speed_mode: Distance or time based progress (Bezier is always time based).
        angle_mode: Whether the heading of travel is added to yaw.
        overshoot: Keep extrapolating past the end instead of snapping to it.
        warp_player: Move the player along with the camera.
        hide_player: Make the player invisible while the camera is active.
        angle_buffer_length: Yaw smoothing window size (0 or 1 disables).
        speed: Map units per tic (distance mode), turns per tic (radial
            distance mode) or tics for the whole path (time mode).
    """

    delay: int = 0
    path_mode: PathMode = PathMode.LINEAR
    speed_mode: SpeedMode = SpeedMode.DISTANCE
    angle_mode: AngleMode = AngleMode.RELATIVE
    overshoot: bool = False
    warp_player: bool = False
    hide_player: bool = False
    angle_buffer_length: int = 0
    speed: float = 1.0
    x0: float = 0.0
    y0: float = 0.0
    z0: float = 0.0
    x1: float = 0.0
    y1: float = 0.0
    z1: float = 0.0
    x2: float = 0.0
    y2: float = 0.0
    z2: float = 0.0
    a0: float = 0.0
    a1: float = 0.0
    p0: float = 0.0
    p1: float = 0.0
    ra0: float = 0.0
    ra1: float = 0.0
    r0: float = 0.0
    r1: float = 0.0
    cx0: float = 0.0
    cy0: float = 0.0
    cx1: float = 0.0
    cy1: float = 0.0

    @classmethod
    def disabled(cls) -> Self:
        """Profile that never engages the camera."""
        return cls(delay=-1)

    @property
    def enabled(self) -> bool:
        """Whether the camera can engage at all."""
        return self.delay >= 0

    @property
    def smoothing_enabled(self) -> bool:
        """Whether Bezier tangent yaw is averaged through the angle buffer."""
        return (
            self.angle_buffer_length > 1
            and self.path_mode is PathMode.BEZIER
            and self.angle_mode is AngleMode.RELATIVE
        )

    def with_changes(self, **changes: Any) -> Self:  # noqa: ANN401
        """Return a copy of this profile with some fields replaced."""
        return replace(self, **changes)


@dataclass(frozen=True)
class FixedPose:
    """A camera pose in host engine units.

    Attributes:
        x: X position, 16.16 fixed point.
        y: Y position, 16.16 fixed point.
        z: Z position, 16.16 fixed point.
        angle: Yaw as a 32-bit binary angle.
        pitch: Pitch as a 32-bit binary angle.
    """

    x: int
    y: int
    z: int
    angle: int
    pitch: int


@dataclass(frozen=True)
class CameraPose:
    """Camera position and orientation for one tic.

    Attributes:
        x: World X position.
        y: World Y position.
        z: World Z position.
        a: Yaw as a turn fraction. May be unwrapped (outside [0, 1)) when a
            tangent heading was added; it is wrapped only by to_fixed().
        p: Pitch as a turn fraction.
    """

    x: float
    y: float
    z: float
    a: float
    p: float

    def with_yaw(self, a: float) -> CameraPose:
        """Return a copy with the yaw replaced."""
        return replace(self, a=a)

    def to_fixed(self) -> FixedPose:
        """Convert to host engine units."""
        return FixedPose(
            x=to_fixed(self.x),
            y=to_fixed(self.y),
            z=to_fixed(self.z),
            angle=from_turn_fraction(self.a),
            pitch=from_turn_fraction(self.p),
        )
