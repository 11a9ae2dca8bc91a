"""Radial path: an orbit around a center point."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, ClassVar

from cameraman.angles import vector_bearing
from cameraman.paths.base import PathEvaluator, lerp, time_progress
from cameraman.paths.registry import PathRegistry
from cameraman.profile import CameraPose
from cameraman.types import AngleMode, PathMode, SpeedMode

if TYPE_CHECKING:
    from cameraman.profile import CameraProfile
    from cameraman.session import SessionState

logger = logging.getLogger(__name__)


@PathRegistry.register
class RadialPath(PathEvaluator):
    """Sweeps the camera around a center from angle ra0 to ra1.

    The sweep angle, radius and center are all interpolated by progress, so
    a moving center or changing radius produces a spiral. In relative angle
    mode the camera faces the (interpolated) center, not the direction of
    travel.
    """

    mode: ClassVar[PathMode] = PathMode.RADIAL

    def progress(self, profile: CameraProfile, t: float) -> float:
        """Distance mode: `speed` turns per tic around the center."""
        if profile.speed_mode is SpeedMode.TIME:
            return time_progress(profile, t)

        sweep = abs(profile.ra1 - profile.ra0)
        if not sweep:
            logger.debug("Radial path has zero sweep, treating it as complete")
            return 1.0
        return profile.speed * t / sweep

    def evaluate(
        self,
        profile: CameraProfile,
        t: float,
        *,
        overshoot: bool,
        state: SessionState,  # noqa: ARG002
    ) -> tuple[CameraPose, float]:
        """Compute the pose at time `t` on the orbit."""
        progress = self.progress(profile, t)

        if overshoot or progress < 1.0:
            ra = lerp(profile.ra0, profile.ra1, progress)
            r = lerp(profile.r0, profile.r1, progress)
            cx = lerp(profile.cx0, profile.cx1, progress)
            cy = lerp(profile.cy0, profile.cy1, progress)
            z = lerp(profile.z0, profile.z1, progress)
            a = lerp(profile.a0, profile.a1, progress)
            p = lerp(profile.p0, profile.p1, progress)
        else:
            ra, r, cx, cy = profile.ra1, profile.r1, profile.cx1, profile.cy1
            z, a, p = profile.z1, profile.a1, profile.p1

        ra_radians = ra * math.tau
        x = cx + math.cos(ra_radians) * r
        y = cy + math.sin(ra_radians) * r

        if profile.angle_mode is AngleMode.RELATIVE:
            a += vector_bearing(cx - x, cy - y)

        return CameraPose(x=x, y=y, z=z, a=a, p=p), progress
