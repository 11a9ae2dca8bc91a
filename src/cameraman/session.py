"""Tic orchestrator: the per-tic camera state machine.

A CameraSession owns everything that changes while a profile plays: the
session flags, the angle smoothing buffer and the current state. The host
calls tick() exactly once per simulation tic and applies the returned
TicResult. The session itself performs no I/O and reads no clock, so the same
profile and tic sequence always produce the same poses.

States:
    DISABLED  - no profile, or profile delay < 0. Terminal.
    PENDING   - waiting for `delay` tics after level start.
    ACTIVE    - emitting a pose every tic.
    COMPLETED - progress reached 1. Terminal until the next level start.

Example usage:
    session = CameraSession(profile, auto_exit=True)

    # In the host game loop
    result = session.tick(leveltime, level_start=gametic == levelstarttic)
    if result.pose is not None:
        apply_camera(result.pose.to_fixed())
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from cameraman.paths import evaluate_unbuffered
from cameraman.smoothing import AngleBuffer
from cameraman.types import CameraState

if TYPE_CHECKING:
    from cameraman.profile import CameraPose, CameraProfile

logger = logging.getLogger(__name__)


@dataclass
class SessionState:
    """Mutable per-level session flags.

    Attributes:
        was_active: True once the camera has been engaged since the last reset.
        prev_tangent_angle: Last (unwrapped) Bezier tangent heading.
    """

    was_active: bool = False
    prev_tangent_angle: float = 0.0

    def reset(self) -> None:
        """Return to the level start values."""
        self.was_active = False
        self.prev_tangent_angle = 0.0


@dataclass(frozen=True)
class TicResult:
    """Outcome of one tic, for the host to apply.

    Attributes:
        engaged: True when the camera overrides the host's view this tic
            (active or completed).
        state: Session state after the tic.
        progress: Path progress for the tic (0.0 when not evaluated).
        pose: Camera pose to show, only while ACTIVE.
        reset_interpolation: Skip view interpolation for one frame.
        clear_override: Drop any camera override left from the previous level.
        warp_player: Move the player entity to the pose.
        hide_player: Make the player entity invisible.
        exit_requested: Terminate the process (path done, auto-exit on).
    """

    engaged: bool
    state: CameraState
    progress: float = 0.0
    pose: CameraPose | None = None
    reset_interpolation: bool = False
    clear_override: bool = False
    warp_player: bool = False
    hide_player: bool = False
    exit_requested: bool = False


class CameraSession:
    """Drives one profile through the tic state machine.

    Attributes:
        profile: The profile being played, or None when Cameraman is not loaded.
        auto_exit: Request process exit once the path is completed.
        state: Session flags shared with the Bezier evaluator.
        buffer: Angle smoothing buffer, only when the profile uses smoothing.
        camera_state: Current state machine state.
    """

    def __init__(self, profile: CameraProfile | None = None, *, auto_exit: bool = False) -> None:
        """Create a session for a profile.

        Args:
            profile: Profile to play. None (or a negative delay) disables the session.
            auto_exit: Whether completing the path requests process exit.
        """
        self.profile = profile
        self.auto_exit = auto_exit
        self.state = SessionState()
        self.buffer: AngleBuffer | None = None
        if profile is not None and profile.smoothing_enabled:
            self.buffer = AngleBuffer(profile.angle_buffer_length)

        if profile is None or not profile.enabled:
            self.camera_state = CameraState.DISABLED
        else:
            self.camera_state = CameraState.PENDING

    @property
    def enabled(self) -> bool:
        """Whether this session can ever engage."""
        return self.camera_state is not CameraState.DISABLED

    def reset(self) -> None:
        """Reset for a new level."""
        self.state.reset()
        if self.enabled:
            self.camera_state = CameraState.PENDING

    def next_pose(self, t: float) -> tuple[CameraPose, float]:
        """Compute the pose for time `t`, smoothing yaw when configured.

        The angle buffer is advanced first so its lookahead samples cannot
        disturb the tic's own pose, which is then evaluated with the profile's
        overshoot flag.

        Returns:
            Tuple of (pose, progress).
        """
        profile = self._require_profile()

        if self.buffer is not None:
            self.buffer.advance(profile, t, self.state)

        pose, progress = evaluate_unbuffered(profile, t, overshoot=profile.overshoot, state=self.state)

        if self.buffer is not None:
            pose = pose.with_yaw(self.buffer.average)

        return pose, progress

    def tick(
        self,
        level_time: int,
        *,
        level_start: bool = False,
        skipping: bool = False,
        demo_playback: bool = False,
    ) -> TicResult:
        """Run one simulation tic.

        Args:
            level_time: Tics elapsed since the current level started.
            level_start: True on the first tic of a level.
            skipping: The host is fast-skipping frames (suppresses auto-exit).
            demo_playback: The host is playing back a demo (suppresses player warp).

        Returns:
            What the host should do this tic.
        """
        if not self.enabled:
            return TicResult(engaged=False, state=CameraState.DISABLED)

        if level_start:
            self.reset()
            logger.debug("Level start, camera session reset")

        profile = self._require_profile()
        relative_tic = level_time - profile.delay - 1
        if relative_tic < 0:
            self.camera_state = CameraState.PENDING
            return TicResult(engaged=False, state=CameraState.PENDING, clear_override=level_start)

        pose, progress = self.next_pose(float(relative_tic))

        if progress < 1.0:
            first_tic = not self.state.was_active
            if first_tic:
                logger.info("Camera engaged at level tic %d", level_time)
            self.camera_state = CameraState.ACTIVE
            result = TicResult(
                engaged=True,
                state=CameraState.ACTIVE,
                progress=progress,
                pose=pose,
                reset_interpolation=first_tic,
                clear_override=level_start,
                warp_player=profile.warp_player and not demo_playback,
                hide_player=profile.hide_player,
            )
        else:
            if self.camera_state is not CameraState.COMPLETED:
                logger.info("Camera path completed at level tic %d", level_time)
            self.camera_state = CameraState.COMPLETED
            result = TicResult(
                engaged=True,
                state=CameraState.COMPLETED,
                progress=progress,
                clear_override=level_start,
                exit_requested=self.auto_exit and not skipping,
            )

        self.state.was_active = True
        return result

    def _require_profile(self) -> CameraProfile:
        if self.profile is None:
            msg = "Camera session has no profile"
            raise RuntimeError(msg)
        return self.profile
