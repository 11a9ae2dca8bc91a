"""Unit tests for the Cameraman driver."""

import tempfile
import unittest
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from cameraman.conf import settings
from cameraman.driver import Cameraman
from cameraman.events import CameraActivatedEvent, CameraCompletedEvent, EventBus
from cameraman.host.recording import RecordingHost
from cameraman.loader import ProfileNotFoundError
from cameraman.profile import CameraProfile

# Engages on level tic 3, completes on level tic 13
SHORT_LINE = CameraProfile(delay=2, speed=10, x1=100)


def play(cameraman: Cameraman, tics: int) -> list[bool]:
    """Run the driver from level start for `tics` tics."""
    return [cameraman.ticker(t, level_start=t == 0) for t in range(tics)]


class TestCameramanTicker(unittest.TestCase):
    """Test applying tic results to a host."""

    def setUp(self) -> None:
        """Create a driver on a recording host."""
        self.host = RecordingHost()
        self.event_bus = EventBus()
        self.cameraman = Cameraman(self.host, SHORT_LINE, event_bus=self.event_bus)

    def test_engaged_return_value(self) -> None:
        """Test that ticker reports when the camera owns the view."""
        engaged = play(self.cameraman, 20)

        assert engaged[:3] == [False, False, False]
        assert all(engaged[3:])

    def test_poses_applied(self) -> None:
        """Test that every active tic sets the camera override."""
        play(self.cameraman, 20)

        assert len(self.host.poses) == 10
        assert [pose.x for pose in self.host.poses[:3]] == pytest.approx([0.0, 10.0, 20.0])
        assert self.host.interpolation_resets == 1

    def test_override_cleared_on_level_start(self) -> None:
        """Test that a new level drops the previous override."""
        play(self.cameraman, 8)
        assert self.host.override is not None

        self.cameraman.ticker(0, level_start=True)

        assert self.host.override is None

    def test_events_published_once(self) -> None:
        """Test that activation and completion are each published once per level."""
        activated = MagicMock()
        completed = MagicMock()
        self.event_bus.subscribe(CameraActivatedEvent, activated)
        self.event_bus.subscribe(CameraCompletedEvent, completed)

        play(self.cameraman, 30)

        activated.assert_called_once()
        event = activated.call_args[0][0]
        assert event.level_time == 3
        assert event.pose.x == 0.0
        completed.assert_called_once_with(CameraCompletedEvent(13, exit_requested=False))

    def test_events_published_again_next_level(self) -> None:
        """Test that events are published again after a level restart."""
        completed = MagicMock()
        self.event_bus.subscribe(CameraCompletedEvent, completed)

        play(self.cameraman, 20)
        play(self.cameraman, 20)

        assert completed.call_count == 2

    def test_warp_and_hide(self) -> None:
        """Test that warp and hide requests reach the host."""
        profile = SHORT_LINE.with_changes(warp_player=True, hide_player=True)
        cameraman = Cameraman(self.host, profile)

        play(cameraman, 6)

        assert len(self.host.warps) == 3
        assert self.host.player_hidden is True

    def test_rejected_warp(self) -> None:
        """Test that a rejected warp does not stop the camera."""
        host = RecordingHost(reject_warps=True)
        cameraman = Cameraman(host, SHORT_LINE.with_changes(warp_player=True))

        play(cameraman, 6)

        assert host.warps == []
        assert len(host.poses) == 3

    def test_demo_playback_blocks_warp(self) -> None:
        """Test that the host's demo playback flag suppresses warps."""
        host = RecordingHost(demo_playback=True)
        cameraman = Cameraman(host, SHORT_LINE.with_changes(warp_player=True))

        play(cameraman, 6)

        assert host.warps == []

    def test_auto_exit(self) -> None:
        """Test that completion requests exit with auto-exit on."""
        cameraman = Cameraman(self.host, SHORT_LINE, auto_exit=True)

        play(cameraman, 13)
        assert self.host.exit_requested is False

        cameraman.ticker(13)
        assert self.host.exit_requested is True

    def test_auto_exit_suppressed_while_skipping(self) -> None:
        """Test that no exit is requested while the host skips frames."""
        host = RecordingHost(skipping=True)
        cameraman = Cameraman(host, SHORT_LINE, auto_exit=True)

        play(cameraman, 20)

        assert host.exit_requested is False

    def test_disabled(self) -> None:
        """Test that a disabled driver never touches the host."""
        host = MagicMock()
        host.skipping = False
        host.demo_playback = False
        cameraman = Cameraman(host, CameraProfile.disabled())

        assert play(cameraman, 10) == [False] * 10
        assert cameraman.enabled is False
        host.set_camera_override.assert_not_called()
        host.clear_camera_override.assert_not_called()


class TestCameramanOptions(unittest.TestCase):
    """Test skip and exit options."""

    def test_skip_tics(self) -> None:
        """Test that auto-skip skips up to the profile delay."""
        host = RecordingHost()
        assert Cameraman(host, SHORT_LINE, auto_skip=True).skip_tics() == 2
        assert Cameraman(host, SHORT_LINE).skip_tics() == -1
        assert Cameraman(host, None, auto_skip=True).skip_tics() == -1

    def test_viddump_forces_skip_and_exit(self) -> None:
        """Test that a video dump implies auto-skip and auto-exit."""
        cameraman = Cameraman(RecordingHost(), SHORT_LINE, viddump="capture.mkv")

        assert cameraman.auto_skip is True
        assert cameraman.session.auto_exit is True

    def test_viddump_target_handed_to_host(self) -> None:
        """Test that the host is told where to dump frames."""
        host = RecordingHost()

        Cameraman(host, SHORT_LINE, viddump="capture.mkv")

        assert host.video_dump == "capture.mkv"

    def test_no_viddump(self) -> None:
        """Test that the dump hook is not called without a target."""
        host = MagicMock()

        Cameraman(host, SHORT_LINE)

        host.set_video_dump.assert_not_called()


class TestFromSettings(unittest.TestCase):
    """Test building a driver from CMAN_* settings."""

    def test_no_profile(self) -> None:
        """Test that an empty CMAN_PROFILE leaves the driver disabled."""
        cameraman = Cameraman.from_settings(RecordingHost())

        assert cameraman.enabled is False
        assert cameraman.session.profile is None

    def test_profile_and_flags(self) -> None:
        """Test that the profile and flags come from settings."""
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "intro.cman"
            path.write_text("delay = 7\nspeed = 5\nx1 = 50\n", encoding="utf-8")
            settings.configure(CMAN_PROFILE=str(path), CMAN_AUTO_SKIP=True, CMAN_AUTO_EXIT=True)

            event_bus = EventBus()
            cameraman = Cameraman.from_settings(RecordingHost(), event_bus)

        assert cameraman.enabled is True
        assert cameraman.skip_tics() == 7
        assert cameraman.session.auto_exit is True
        assert cameraman.event_bus is event_bus

    def test_viddump_setting(self) -> None:
        """Test that CMAN_VIDDUMP reaches the host and forces auto-skip and auto-exit."""
        settings.configure(CMAN_VIDDUMP="frames")
        host = RecordingHost()

        cameraman = Cameraman.from_settings(host)

        assert host.video_dump == "frames"
        assert cameraman.auto_skip is True
        assert cameraman.session.auto_exit is True

    def test_missing_profile(self) -> None:
        """Test that a missing profile file raises."""
        settings.configure(CMAN_PROFILE="/nonexistent/intro.cman")

        with pytest.raises(ProfileNotFoundError):
            Cameraman.from_settings(RecordingHost())
