"""Linear path: a straight line from point 0 to point 1."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

from cameraman.angles import vector_bearing, vector_length
from cameraman.paths.base import PathEvaluator, lerp, time_progress
from cameraman.paths.registry import PathRegistry
from cameraman.profile import CameraPose
from cameraman.types import AngleMode, PathMode, SpeedMode

if TYPE_CHECKING:
    from cameraman.profile import CameraProfile
    from cameraman.session import SessionState

logger = logging.getLogger(__name__)


@PathRegistry.register
class LinearPath(PathEvaluator):
    """Moves the camera along the segment P0 -> P1.

    Position, yaw and pitch are each interpolated by progress. In relative
    angle mode the constant bearing of P1 - P0 is added to yaw, so a0/a1 act
    as offsets from the direction of travel.
    """

    mode: ClassVar[PathMode] = PathMode.LINEAR

    def progress(self, profile: CameraProfile, t: float) -> float:
        """Distance mode: `speed` map units per tic along the segment."""
        if profile.speed_mode is SpeedMode.TIME:
            return time_progress(profile, t)

        length = vector_length(profile.x1 - profile.x0, profile.y1 - profile.y0)
        if not length:
            # degenerate segment, nothing to travel
            logger.debug("Linear path has zero length, treating it as complete")
            return 1.0
        return profile.speed * t / length

    def evaluate(
        self,
        profile: CameraProfile,
        t: float,
        *,
        overshoot: bool,
        state: SessionState,  # noqa: ARG002
    ) -> tuple[CameraPose, float]:
        """Compute the pose at time `t` on the segment."""
        progress = self.progress(profile, t)

        if overshoot or progress < 1.0:
            pose = CameraPose(
                x=lerp(profile.x0, profile.x1, progress),
                y=lerp(profile.y0, profile.y1, progress),
                z=lerp(profile.z0, profile.z1, progress),
                a=lerp(profile.a0, profile.a1, progress),
                p=lerp(profile.p0, profile.p1, progress),
            )
        else:
            pose = CameraPose(x=profile.x1, y=profile.y1, z=profile.z1, a=profile.a1, p=profile.p1)

        if profile.angle_mode is AngleMode.RELATIVE:
            pose = pose.with_yaw(pose.a + vector_bearing(profile.x1 - profile.x0, profile.y1 - profile.y0))

        return pose, progress
