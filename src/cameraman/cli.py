"""Command line preview of a Cameraman profile.

Plays a .cman profile against a RecordingHost and prints the camera pose for
each tic, so a path can be checked without starting the engine.

Usage:
    cameraman demos/map01.cman --tics 700 --every 35
    cameraman demos/map01 --auto-skip --auto-exit
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING, cast

from rich.console import Console
from rich.table import Table

from cameraman import __version__
from cameraman.conf import settings
from cameraman.driver import Cameraman
from cameraman.helpers import setup_logging
from cameraman.host.recording import RecordingHost
from cameraman.loader import ProfileError, load_profile
from cameraman.types import CameraState

if TYPE_CHECKING:
    from collections.abc import Sequence

    from cameraman.profile import CameraProfile

logger = logging.getLogger(__name__)

LOG_LEVELS = ("critical", "error", "warning", "info", "debug")

PREVIEW_MINUTES = 10


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the preview command."""
    parser = argparse.ArgumentParser(
        prog="cameraman",
        description="Preview the camera path described by a .cman profile.",
    )
    parser.add_argument("profile", help="Path to the .cman profile (the suffix may be omitted)")
    parser.add_argument("--tics", type=int, default=0, help="Level tics to simulate (default: until the path ends)")
    parser.add_argument("--every", type=int, default=1, help="Print every Nth engaged tic (default: 1)")
    parser.add_argument("--auto-skip", action="store_true", help="Fast-skip the tics before the camera engages")
    parser.add_argument("--auto-exit", action="store_true", help="Stop once the camera path is completed")
    parser.add_argument("--viddump", default="", help="Video dump target; implies --auto-skip and --auto-exit")
    parser.add_argument("--demo-playback", action="store_true", help="Simulate demo playback (no player warps)")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=LOG_LEVELS,
        type=str.lower,
        help="Logging verbosity (default: settings.LOG_LEVEL)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def default_tic_limit(profile: CameraProfile) -> int:
    """Tics to simulate when --tics is not given: delay plus a generous path length."""
    return profile.delay + 1 + settings.TICRATE * PREVIEW_MINUTES * 60


def run_preview(
    cameraman: Cameraman,
    tics: int,
    every: int,
    console: Console,
) -> Table:
    """Run the driver for `tics` level tics and tabulate the engaged ones.

    Tics up to skip_tics() are played with the host in skipping mode, as an
    engine would fast-forward them. Stops after the path completes or when an
    exit is requested.
    """
    host = cast("RecordingHost", cameraman.host)
    skip_until = cameraman.skip_tics()
    ticrate = settings.TICRATE

    table = Table(title="Cameraman preview")
    for column in ("tic", "time", "state", "x", "y", "z", "yaw", "pitch", "angle (BAM)"):
        table.add_column(column, justify="right" if column != "state" else "left")

    engaged_count = 0
    for level_time in range(tics):
        host.skipping = level_time < skip_until
        engaged = cameraman.ticker(level_time, level_start=level_time == 0)
        if not engaged:
            continue

        state = cameraman.session.camera_state
        pose = host.override if state is CameraState.ACTIVE else None
        if pose is not None and engaged_count % every == 0:
            fixed = pose.to_fixed()
            table.add_row(
                str(level_time),
                f"{level_time / ticrate:.2f}s",
                state.value,
                f"{pose.x:.3f}",
                f"{pose.y:.3f}",
                f"{pose.z:.3f}",
                f"{pose.a:.5f}",
                f"{pose.p:.5f}",
                f"0x{fixed.angle:08x}",
            )
        engaged_count += 1

        if pose is None:
            table.add_row(str(level_time), f"{level_time / ticrate:.2f}s", state.value, *([""] * 6))
            break
        if host.exit_requested:
            break

    if host.exit_requested:
        console.print("[bold]Exit requested[/bold] after the camera path completed")
    return table


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the `cameraman` command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.every < 1:
        parser.error("--every must be at least 1")

    setup_logging(args.log_level)
    console = Console()

    try:
        profile = load_profile(args.profile)
    except ProfileError as e:
        logger.error("%s", e)  # noqa: TRY400
        return 1

    if not profile.enabled:
        console.print("Profile is disabled (negative delay), nothing to preview")
        return 0

    host = RecordingHost(demo_playback=args.demo_playback)
    cameraman = Cameraman(
        host,
        profile,
        auto_skip=args.auto_skip,
        auto_exit=args.auto_exit,
        viddump=args.viddump,
    )

    tics = args.tics or default_tic_limit(profile)
    table = run_preview(cameraman, tics, args.every, console)
    console.print(table)
    return 0


if __name__ == "__main__":
    sys.exit(main())
