"""Bezier path: a quadratic curve through three control points."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from cameraman.angles import unwrap_angle, vector_bearing
from cameraman.paths.base import PathEvaluator, lerp, time_progress
from cameraman.paths.registry import PathRegistry
from cameraman.profile import CameraPose
from cameraman.types import AngleMode, PathMode

if TYPE_CHECKING:
    from cameraman.profile import CameraProfile
    from cameraman.session import SessionState


def curve_point(profile: CameraProfile, p: float) -> tuple[float, float, float]:
    """Point of the curve at parameter `p`.

    The curve is anchored at point 1 with points 0 and 2 as the flanking
    controls: pos(p) = P1 + (1 - p)^2 (P0 - P1) + p^2 (P2 - P1).
    """
    p2 = p * p
    omp2 = (1.0 - p) * (1.0 - p)
    return (
        profile.x1 + omp2 * (profile.x0 - profile.x1) + p2 * (profile.x2 - profile.x1),
        profile.y1 + omp2 * (profile.y0 - profile.y1) + p2 * (profile.y2 - profile.y1),
        profile.z1 + omp2 * (profile.z0 - profile.z1) + p2 * (profile.z2 - profile.z1),
    )


@PathRegistry.register
class BezierPath(PathEvaluator):
    """Moves the camera along a quadratic Bezier curve ending at point 2.

    Bezier paths are always time based: `speed` is the number of tics the
    whole curve takes. Yaw and pitch endpoints still interpolate linearly.

    In relative angle mode the tangent heading is estimated from the position
    one tic earlier. Consecutive headings are unwrapped against the previous
    one stored in the session state, so the heading stays a continuous real
    number across the east (0/1) boundary and can be averaged and offset.
    """

    mode: ClassVar[PathMode] = PathMode.BEZIER

    def progress(self, profile: CameraProfile, t: float) -> float:
        """Time based progress regardless of the profile's speed mode."""
        return time_progress(profile, t)

    def evaluate(
        self,
        profile: CameraProfile,
        t: float,
        *,
        overshoot: bool,
        state: SessionState,
    ) -> tuple[CameraPose, float]:
        """Compute the pose at time `t` on the curve."""
        progress = self.progress(profile, t)

        if overshoot or progress < 1.0:
            x, y, z = curve_point(profile, progress)
            a = lerp(profile.a0, profile.a1, progress)
            p = lerp(profile.p0, profile.p1, progress)
        else:
            x, y, z = profile.x2, profile.y2, profile.z2
            a, p = profile.a1, profile.p1

        if profile.angle_mode is AngleMode.RELATIVE:
            a += self.tangent_heading(profile, t, x, y, state)

        return CameraPose(x=x, y=y, z=z, a=a, p=p), progress

    def tangent_heading(
        self,
        profile: CameraProfile,
        t: float,
        x: float,
        y: float,
        state: SessionState,
    ) -> float:
        """Heading of travel arriving at (x, y), one tic of curve behind.

        Updates state.prev_tangent_angle with the (possibly unwrapped) result.
        """
        prev_p = time_progress(profile, t - 1.0)
        prev_x, prev_y, _ = curve_point(profile, prev_p)

        angle = vector_bearing(x - prev_x, y - prev_y)
        if state.was_active:
            angle = unwrap_angle(angle, state.prev_tangent_angle)

        state.prev_tangent_angle = angle
        return angle
