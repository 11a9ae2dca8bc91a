"""Path evaluators for Linear, Radial and Bezier camera paths.

This package provides:
- LinearPath, RadialPath, BezierPath: one evaluator per PathMode
- PathRegistry: maps path modes to evaluators
- evaluate_unbuffered: the single dispatch point used by the session

Importing the package registers all built-in evaluators.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cameraman.paths.base import PathEvaluator, lerp
from cameraman.paths.bezier import BezierPath, curve_point
from cameraman.paths.linear import LinearPath
from cameraman.paths.radial import RadialPath
from cameraman.paths.registry import PathRegistry, UnknownPathModeError

if TYPE_CHECKING:
    from cameraman.profile import CameraPose, CameraProfile
    from cameraman.session import SessionState


def evaluate_unbuffered(
    profile: CameraProfile,
    t: float,
    *,
    overshoot: bool,
    state: SessionState,
) -> tuple[CameraPose, float]:
    """Evaluate the profile's path at time `t` without angle smoothing.

    Returns:
        Tuple of (pose, progress).
    """
    evaluator = PathRegistry.get(profile.path_mode)
    return evaluator.evaluate(profile, t, overshoot=overshoot, state=state)


__all__ = [
    "BezierPath",
    "LinearPath",
    "PathEvaluator",
    "PathRegistry",
    "RadialPath",
    "UnknownPathModeError",
    "curve_point",
    "evaluate_unbuffered",
    "lerp",
]
