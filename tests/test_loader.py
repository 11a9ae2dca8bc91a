"""Unit tests for the .cman profile loader."""

import tempfile
import unittest
from pathlib import Path

import pytest

from cameraman.conf import settings
from cameraman.loader import (
    ProfileError,
    ProfileNotFoundError,
    convert_value,
    load_profile,
    parse_line,
    parse_profile,
    resolve_profile_path,
)
from cameraman.profile import CameraProfile
from cameraman.types import AngleMode, PathMode, SpeedMode

FLYBY = """\
delay = 35
path_mode = 2
speed_mode = 1
angle_mode = 0
overshoot = 1
warp_player = 0
hide_player = 1
ga_buffer_len = 16
speed = 350
x0 = -512
y0 = 128.5
x1 = 0
x2 = 512
a0 = 0.25
p1 = -0.05
"""


class TestParseLine(unittest.TestCase):
    """Test splitting single profile lines."""

    def test_assignment(self) -> None:
        """Test a plain assignment."""
        assert parse_line("speed = 350") == ("speed", 350.0)

    def test_whitespace_and_trailing_text(self) -> None:
        """Test that surrounding whitespace and trailing text are ignored."""
        assert parse_line("  x0 =  -1.5e2 units\n") == ("x0", -150.0)
        assert parse_line("a0\t=\t.25") == ("a0", 0.25)

    def test_hex_values(self) -> None:
        """Test that C99 hex floats are read in full."""
        assert parse_line("speed = 0x1A") == ("speed", 26.0)
        assert parse_line("x0 = -0X1.8p1") == ("x0", -3.0)
        assert parse_line("a0 = 0x.8") == ("a0", 0.5)

    def test_malformed(self) -> None:
        """Test lines that are not assignments."""
        assert parse_line("") is None
        assert parse_line("# comment") is None
        assert parse_line("speed = fast") is None
        assert parse_line("speed : 10") is None
        assert parse_line("speed=10") is None


class TestConvertValue(unittest.TestCase):
    """Test per-field value conversion."""

    def test_modes(self) -> None:
        """Test that mode fields become enums."""
        assert convert_value("path_mode", 1.0) is PathMode.RADIAL
        assert convert_value("speed_mode", 1.0) is SpeedMode.TIME
        assert convert_value("angle_mode", 1.0) is AngleMode.ABSOLUTE

    def test_unknown_mode(self) -> None:
        """Test that an out of range mode is rejected."""
        with pytest.raises(ValueError):
            convert_value("path_mode", 7.0)

    def test_flags_and_integers(self) -> None:
        """Test that flags and integer fields are truncated."""
        assert convert_value("overshoot", 1.0) is True
        assert convert_value("hide_player", 0.9) is False
        assert convert_value("delay", 35.7) == 35
        assert convert_value("delay", -1.0) == -1

    def test_non_finite(self) -> None:
        """Test that inf and nan are rejected."""
        with pytest.raises(ValueError, match="finite"):
            convert_value("speed", float("inf"))
        with pytest.raises(ValueError, match="finite"):
            convert_value("x0", float("nan"))


class TestParseProfile(unittest.TestCase):
    """Test building profiles from lines."""

    def test_full_profile(self) -> None:
        """Test that every field kind is parsed."""
        profile = parse_profile(FLYBY.splitlines())

        assert profile.delay == 35
        assert profile.path_mode is PathMode.BEZIER
        assert profile.speed_mode is SpeedMode.TIME
        assert profile.angle_mode is AngleMode.RELATIVE
        assert profile.overshoot is True
        assert profile.warp_player is False
        assert profile.hide_player is True
        assert profile.angle_buffer_length == 16
        assert profile.speed == 350.0
        assert (profile.x0, profile.y0, profile.x1, profile.x2) == (-512.0, 128.5, 0.0, 512.0)
        assert (profile.a0, profile.p1) == (0.25, -0.05)

    def test_defaults(self) -> None:
        """Test that an empty file gives the default profile."""
        assert parse_profile([]) == CameraProfile()

    def test_last_value_wins(self) -> None:
        """Test that repeated parameters keep the last value."""
        profile = parse_profile(["speed = 1", "speed = 2", "speed = 3"])
        assert profile.speed == 3.0

    def test_unknown_and_malformed_lines_skipped(self) -> None:
        """Test that unusable lines are skipped."""
        lines = ["camera_fov = 90", "garbage", "", "delay = 3"]

        with self.assertLogs("cameraman.loader", level="DEBUG") as logs:
            profile = parse_profile(lines)

        assert profile == CameraProfile(delay=3)
        assert any("unknown profile parameter 'camera_fov'" in line for line in logs.output)
        assert any("malformed profile line 2" in line for line in logs.output)

    def test_invalid_value_warns(self) -> None:
        """Test that invalid values are ignored with a warning."""
        with self.assertLogs("cameraman.loader", level="WARNING") as logs:
            profile = parse_profile(["path_mode = 9", "speed = inf"])

        assert profile.path_mode is PathMode.LINEAR
        assert profile.speed == 1.0
        assert len(logs.records) == 2

    def test_buffer_length_clamped(self) -> None:
        """Test that the buffer length is capped by CMAN_ANGLE_BUFFER_MAX."""
        settings.configure(CMAN_ANGLE_BUFFER_MAX=8)

        with self.assertLogs("cameraman.loader", level="WARNING"):
            profile = parse_profile(["ga_buffer_len = 100"])

        assert profile.angle_buffer_length == 8

    def test_negative_buffer_length(self) -> None:
        """Test that a negative buffer length disables smoothing."""
        with self.assertLogs("cameraman.loader", level="WARNING"):
            profile = parse_profile(["ga_buffer_len = -4"])

        assert profile.angle_buffer_length == 0

    def test_field_name_accepted_directly(self) -> None:
        """Test that the profile field name works as well as the .cman alias."""
        assert parse_profile(["angle_buffer_length = 4"]).angle_buffer_length == 4


class TestLoadProfile(unittest.TestCase):
    """Test loading profiles from disk."""

    def setUp(self) -> None:
        """Create a temporary directory with one profile."""
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.directory = Path(self._tmp.name)
        self.path = self.directory / "map01.cman"
        self.path.write_text(FLYBY, encoding="utf-8")

    def test_load(self) -> None:
        """Test loading an existing file."""
        with self.assertLogs("cameraman.loader", level="INFO") as logs:
            profile = load_profile(self.path)

        assert profile.speed == 350.0
        assert any("Loading Cameraman profile" in line for line in logs.output)

    def test_suffix_resolution(self) -> None:
        """Test that the .cman suffix is tried when missing."""
        assert resolve_profile_path(self.directory / "map01") == self.path
        assert load_profile(str(self.directory / "map01")).delay == 35

    def test_missing_file(self) -> None:
        """Test that a missing profile raises ProfileNotFoundError."""
        with pytest.raises(ProfileNotFoundError) as exc_info:
            load_profile(self.directory / "map02")

        assert isinstance(exc_info.value, FileNotFoundError)
        assert isinstance(exc_info.value, ProfileError)

    def test_explicit_suffix_not_replaced(self) -> None:
        """Test that a path with another suffix is not rewritten."""
        with pytest.raises(ProfileNotFoundError):
            resolve_profile_path(self.directory / "map01.txt")
