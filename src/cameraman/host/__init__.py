"""Hosts that apply camera poses to an engine.

This package provides:
- CameraHost: the interface the driver talks to
- RecordingHost: records requests in memory (CLI preview, tests)

The Arcade host lives in cameraman.host.arcade_host and is imported
explicitly, so the engine-free parts of Cameraman don't load Arcade:

    from cameraman.host.arcade_host import ArcadeCameraHost
"""

from cameraman.host.base import CameraHost
from cameraman.host.recording import RecordingHost

__all__ = [
    "CameraHost",
    "RecordingHost",
]
