"""Base class for path evaluators.

A path evaluator turns a profile and a time value into a raw camera pose.
Each evaluator owns its progress normalization rule; the shared contract is:

- progress 0 is the start of the path, 1 its nominal end
- without overshoot, progress >= 1 snaps to the exact terminal control values
- with overshoot, progress is used as is, even past 1 or below 0

Evaluators return fresh CameraPose values and never write to shared output
state. Only the Bezier evaluator touches the session state, to keep its
tangent heading continuous between calls.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from cameraman.profile import CameraPose, CameraProfile
    from cameraman.session import SessionState
    from cameraman.types import PathMode


def lerp(start: float, end: float, progress: float) -> float:
    """Linearly interpolate between two endpoint values."""
    return start + (end - start) * progress


def time_progress(profile: CameraProfile, t: float) -> float:
    """Progress for time based speed: the path takes `speed` tics."""
    return t / profile.speed if profile.speed else 0.0


class PathEvaluator(ABC):
    """Base class for all path evaluators.

    Attributes:
        mode: The PathMode this evaluator handles. Must be defined as a class
            variable; PathRegistry dispatches on it.
    """

    mode: ClassVar[PathMode]

    @abstractmethod
    def progress(self, profile: CameraProfile, t: float) -> float:
        """Normalize elapsed tics into path progress."""

    @abstractmethod
    def evaluate(
        self,
        profile: CameraProfile,
        t: float,
        *,
        overshoot: bool,
        state: SessionState,
    ) -> tuple[CameraPose, float]:
        """Compute the raw pose at time `t`.

        Args:
            profile: Camera profile being played.
            t: Tics since the camera engaged. Fractional and out of range
                values are allowed.
            overshoot: Extrapolate past the end of the path instead of snapping.
            state: Session state shared across calls of the same session.

        Returns:
            Tuple of (pose, progress).
        """
