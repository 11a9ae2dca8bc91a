"""Cameraman - deterministic camera paths for demo playback and cinematic capture.

Cameraman computes, once per simulation tic, where a virtual camera following
a pre-authored path should be and where it should look. Paths come from .cman
profiles and can be:
- Linear: a straight segment between two points
- Radial: an orbit (or spiral) around a moving center
- Bezier: a quadratic curve, optionally facing along its own tangent with
  sliding-window yaw smoothing

Quick start:
    from cameraman import CameraSession, load_profile

    session = CameraSession(load_profile("intro.cman"))
    for level_time in range(700):
        result = session.tick(level_time, level_start=level_time == 0)
        if result.pose is not None:
            print(result.pose)

Engine integration:
    # settings.py
    # CMAN_PROFILE = "intro.cman"
    # CMAN_AUTO_EXIT = True

    from cameraman import create_cameraman
    from cameraman.host.arcade_host import ArcadeCameraHost

    cameraman = create_cameraman(ArcadeCameraHost(camera, player_sprite))
    cameraman.ticker(level_time, level_start=level_time == 0)
"""

__version__ = "0.1.0"

from cameraman.conf import settings
from cameraman.driver import Cameraman
from cameraman.events import CameraActivatedEvent, CameraCompletedEvent, EventBus
from cameraman.helpers import create_cameraman, setup_logging
from cameraman.loader import ProfileError, ProfileNotFoundError, load_profile, parse_profile
from cameraman.profile import CameraPose, CameraProfile, FixedPose
from cameraman.session import CameraSession, SessionState, TicResult
from cameraman.smoothing import AngleBuffer
from cameraman.types import AngleMode, CameraState, PathMode, SpeedMode

__all__ = [
    "AngleBuffer",
    "AngleMode",
    "CameraActivatedEvent",
    "CameraCompletedEvent",
    "CameraPose",
    "CameraProfile",
    "CameraSession",
    "CameraState",
    "Cameraman",
    "EventBus",
    "FixedPose",
    "PathMode",
    "ProfileError",
    "ProfileNotFoundError",
    "SessionState",
    "SpeedMode",
    "TicResult",
    "__version__",
    "create_cameraman",
    "load_profile",
    "parse_profile",
    "settings",
    "setup_logging",
]
