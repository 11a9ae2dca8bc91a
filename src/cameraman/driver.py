"""Cameraman driver: connects a camera session to a host engine.

The driver is the engine integration layer. Once per tic it runs the session
and turns the TicResult into host calls: camera override, one-frame
interpolation reset, player warp and hide, and the auto-exit request. It also
answers the host's question of how many tics to fast-skip before the camera
engages.

Usage Example:
    host = ArcadeCameraHost(camera, player_sprite)
    cameraman = Cameraman.from_settings(host)

    # Before playback starts
    skip = cameraman.skip_tics()

    # Every tic
    engaged = cameraman.ticker(level_time, level_start=gametic == levelstarttic)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Self

from cameraman.conf import settings
from cameraman.events import CameraActivatedEvent, CameraCompletedEvent, EventBus
from cameraman.loader import load_profile
from cameraman.session import CameraSession
from cameraman.types import CameraState

if TYPE_CHECKING:
    from cameraman.host.base import CameraHost
    from cameraman.profile import CameraProfile
    from cameraman.session import TicResult

logger = logging.getLogger(__name__)


class Cameraman:
    """Plays a camera profile on a host, one tic at a time.

    Attributes:
        host: Engine interface receiving camera and player requests.
        session: The camera state machine.
        auto_skip: Fast-skip the tics before the camera engages.
        event_bus: Receives CameraActivatedEvent and CameraCompletedEvent.
        viddump: Video dump target for the host, empty when unused.
    """

    def __init__(
        self,
        host: CameraHost,
        profile: CameraProfile | None = None,
        *,
        auto_skip: bool = False,
        auto_exit: bool = False,
        event_bus: EventBus | None = None,
        viddump: str = "",
    ) -> None:
        """Create a driver.

        Args:
            host: Engine interface to drive.
            profile: Profile to play; None leaves Cameraman disabled.
            auto_skip: Fast-skip the tics before the camera engages.
            auto_exit: Request process exit once the path is completed.
            event_bus: Bus for camera events. A private one is created if omitted.
            viddump: Video dump target handed to the host; setting it forces
                auto-skip and auto-exit.
        """
        if viddump:
            auto_skip = True
            auto_exit = True

        self.host = host
        self.session = CameraSession(profile, auto_exit=auto_exit)
        self.auto_skip = auto_skip
        self.event_bus = event_bus or EventBus()
        self.viddump = viddump
        self._completed_published = False

        if viddump:
            logger.info("Video dump to %s, auto-skip and auto-exit enabled", viddump)
            host.set_video_dump(viddump)

    @classmethod
    def from_settings(cls, host: CameraHost, event_bus: EventBus | None = None) -> Self:
        """Build a driver from the CMAN_* settings.

        An empty CMAN_PROFILE leaves Cameraman disabled.

        Raises:
            ProfileNotFoundError: If CMAN_PROFILE names a missing file.
        """
        profile = load_profile(settings.CMAN_PROFILE) if settings.CMAN_PROFILE else None
        return cls(
            host,
            profile,
            auto_skip=settings.CMAN_AUTO_SKIP,
            auto_exit=settings.CMAN_AUTO_EXIT,
            event_bus=event_bus,
            viddump=settings.CMAN_VIDDUMP,
        )

    @property
    def enabled(self) -> bool:
        """Whether a profile is loaded and enabled."""
        return self.session.enabled

    def skip_tics(self) -> int:
        """Number of tics the host should fast-skip, or -1 for no skipping."""
        if not self.auto_skip or self.session.profile is None:
            return -1
        return self.session.profile.delay

    def ticker(self, level_time: int, *, level_start: bool = False) -> bool:
        """Run one tic and apply it to the host.

        Args:
            level_time: Tics since the current level started.
            level_start: True on the first tic of a level.

        Returns:
            True when the camera overrides the view, telling the caller to
            leave its own camera handling alone.
        """
        result = self.session.tick(
            level_time,
            level_start=level_start,
            skipping=self.host.skipping,
            demo_playback=self.host.demo_playback,
        )
        if level_start:
            self._completed_published = False
        self.apply(result, level_time)
        return result.engaged

    def apply(self, result: TicResult, level_time: int) -> None:
        """Translate a TicResult into host calls and events."""
        if result.clear_override:
            self.host.clear_camera_override()

        if result.state is CameraState.ACTIVE and result.pose is not None:
            if result.reset_interpolation:
                self.host.reset_view_interpolation()
                self.event_bus.publish(CameraActivatedEvent(level_time, result.pose))

            self.host.set_camera_override(result.pose)

            if result.warp_player and not self.host.warp_player(result.pose):
                logger.debug("Player warp rejected at level tic %d", level_time)

            if result.hide_player:
                self.host.hide_player()

        elif result.state is CameraState.COMPLETED:
            if not self._completed_published:
                self._completed_published = True
                self.event_bus.publish(CameraCompletedEvent(level_time, exit_requested=result.exit_requested))

            if result.exit_requested:
                self.host.request_exit()
