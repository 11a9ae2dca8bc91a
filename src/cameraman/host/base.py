"""Base class for Cameraman hosts.

A host is the engine side of the integration: it owns the real camera, the
player entity and the process. The driver translates each TicResult into
calls on this interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cameraman.profile import CameraPose


class CameraHost(ABC):
    """Engine interface consumed by the Cameraman driver.

    Attributes:
        skipping: True while the host fast-skips frames.
        demo_playback: True while the host plays back a recorded demo.
    """

    skipping: bool = False
    demo_playback: bool = False

    @abstractmethod
    def set_camera_override(self, pose: CameraPose) -> None:
        """Show the view from `pose` instead of the player's view."""
        ...

    @abstractmethod
    def clear_camera_override(self) -> None:
        """Return the view to the player."""
        ...

    @abstractmethod
    def reset_view_interpolation(self) -> None:
        """Skip view interpolation for the next frame."""
        ...

    @abstractmethod
    def warp_player(self, pose: CameraPose) -> bool:
        """Move the player to `pose`, zeroing momentum.

        Returns:
            False if the engine rejected the move.
        """
        ...

    @abstractmethod
    def hide_player(self) -> None:
        """Make the player entity invisible."""
        ...

    @abstractmethod
    def request_exit(self) -> None:
        """Terminate the process once the current frame is done."""
        ...

    @abstractmethod
    def set_video_dump(self, target: str) -> None:
        """Start dumping rendered frames to `target` for the rest of the run."""
        ...
