"""Arcade host: plays camera profiles on an Arcade Camera2D.

The Camera2D is moved to the pose's x/y and rotated by its yaw; z and pitch
have no 2D counterpart and are only kept on `pose` for host code that wants
them. The player sprite is warped and hidden the way the engine would move
and hide the player object.

Usage Example:
    camera = arcade.camera.Camera2D()
    host = ArcadeCameraHost(camera, player_sprite, walls=wall_list)
    cameraman = Cameraman.from_settings(host)

    def on_update(self, delta_time):
        self.level_time += 1
        cameraman.ticker(self.level_time, level_start=self.level_time == 0)

    def on_draw(self):
        ...
        host.capture_frame()  # no-op unless a video dump was requested
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import TYPE_CHECKING

import arcade

from cameraman.host.base import CameraHost

if TYPE_CHECKING:
    from cameraman.profile import CameraPose

logger = logging.getLogger(__name__)


def to_arcade_degrees(a: float) -> float:
    """Convert a counter-clockwise turn fraction to Arcade's clockwise degrees."""
    return (-360.0 * (a - math.floor(a))) % 360.0


class ArcadeCameraHost(CameraHost):
    """CameraHost backed by an Arcade camera and player sprite.

    Attributes:
        camera: The Camera2D that shows the world.
        player: Player sprite, or None when no player is spawned.
        walls: Sprites the player may not be warped into.
        pose: Camera override currently shown, or None.
        home_position: Camera position before the override, restored on clear.
        snap_next_frame: Set when the next frame must not be smoothed; the
            view code clears it after drawing.
        dump_dir: Directory receiving captured frames, or None.
        frames_dumped: Number of frames written to dump_dir.
    """

    def __init__(
        self,
        camera: arcade.camera.Camera2D,
        player: arcade.Sprite | None = None,
        *,
        walls: arcade.SpriteList | None = None,
    ) -> None:
        """Create a host for an Arcade view.

        Args:
            camera: The camera to drive.
            player: Player sprite to warp and hide.
            walls: Optional wall list used to reject warps into solid sprites.
        """
        self.camera = camera
        self.player = player
        self.walls = walls
        self.pose: CameraPose | None = None
        self.home_position: tuple[float, float] | None = None
        self.home_angle = 0.0
        self.snap_next_frame = False
        self.dump_dir: Path | None = None
        self.frames_dumped = 0

    def set_camera_override(self, pose: CameraPose) -> None:
        """Move the camera to the pose."""
        if self.pose is None:
            self.home_position = tuple(self.camera.position)
            self.home_angle = self.camera.angle
        self.pose = pose
        self.camera.position = (pose.x, pose.y)
        self.camera.angle = to_arcade_degrees(pose.a)

    def clear_camera_override(self) -> None:
        """Put the camera back where it was before the override."""
        if self.pose is None:
            return
        if self.home_position is not None:
            self.camera.position = self.home_position
        self.camera.angle = self.home_angle
        self.pose = None
        self.home_position = None

    def reset_view_interpolation(self) -> None:
        """Flag the next frame to jump straight to the camera position."""
        self.snap_next_frame = True

    def warp_player(self, pose: CameraPose) -> bool:
        """Teleport the player sprite to the pose and stop it.

        The move is undone and rejected when the sprite would overlap a wall.
        """
        if self.player is None:
            logger.debug("No player sprite to warp")
            return False

        old_position = self.player.position
        self.player.position = (pose.x, pose.y)
        if self.walls is not None and arcade.check_for_collision_with_list(self.player, self.walls):
            self.player.position = old_position
            return False

        self.player.angle = to_arcade_degrees(pose.a)
        self.player.change_x = 0
        self.player.change_y = 0
        return True

    def hide_player(self) -> None:
        """Make the player sprite invisible."""
        if self.player is not None:
            self.player.visible = False

    def request_exit(self) -> None:
        """Close the Arcade window and stop the event loop."""
        logger.info("Camera path completed, exiting")
        arcade.exit()

    def set_video_dump(self, target: str) -> None:
        """Write every drawn frame as a numbered PNG into the `target` directory."""
        self.dump_dir = Path(target)
        self.dump_dir.mkdir(parents=True, exist_ok=True)
        self.frames_dumped = 0
        logger.info("Dumping frames to %s", self.dump_dir)

    def capture_frame(self) -> Path | None:
        """Save the current window contents when a video dump is active.

        Called by the view at the end of on_draw().

        Returns:
            Path of the written frame, or None when no dump was requested.
        """
        if self.dump_dir is None:
            return None
        frame_path = self.dump_dir / f"frame_{self.frames_dumped:06d}.png"
        arcade.get_image().save(frame_path)
        self.frames_dumped += 1
        return frame_path
