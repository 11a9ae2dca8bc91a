"""In-memory host that records every request it receives.

Used by the command line preview to print a path without an engine, and by
tests to observe what the driver asked for.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from cameraman.host.base import CameraHost

if TYPE_CHECKING:
    from cameraman.profile import CameraPose


@dataclass
class RecordingHost(CameraHost):
    """CameraHost that keeps a log instead of moving anything.

    Attributes:
        override: Current camera override, or None.
        poses: Every pose the camera was set to, in order.
        warps: Every pose the player was warped to.
        interpolation_resets: Number of interpolation reset requests.
        player_hidden: Whether hide_player() was called.
        exit_requested: Whether request_exit() was called.
        video_dump: Target passed to set_video_dump(), empty when unused.
        reject_warps: Make warp_player() report failure.
    """

    skipping: bool = False
    demo_playback: bool = False
    reject_warps: bool = False
    override: CameraPose | None = None
    poses: list[CameraPose] = field(default_factory=list)
    warps: list[CameraPose] = field(default_factory=list)
    interpolation_resets: int = 0
    player_hidden: bool = False
    exit_requested: bool = False
    video_dump: str = ""

    def set_camera_override(self, pose: CameraPose) -> None:
        """Record the pose as the current view."""
        self.override = pose
        self.poses.append(pose)

    def clear_camera_override(self) -> None:
        """Drop the current view override."""
        self.override = None

    def reset_view_interpolation(self) -> None:
        """Count the reset request."""
        self.interpolation_resets += 1

    def warp_player(self, pose: CameraPose) -> bool:
        """Record the warp unless warps are rejected."""
        if self.reject_warps:
            return False
        self.warps.append(pose)
        return True

    def hide_player(self) -> None:
        """Remember that the player was hidden."""
        self.player_hidden = True

    def request_exit(self) -> None:
        """Remember the exit request."""
        self.exit_requested = True

    def set_video_dump(self, target: str) -> None:
        """Remember the dump target."""
        self.video_dump = target
