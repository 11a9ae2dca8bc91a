"""Loader for .cman camera profiles.

A .cman file is a list of `<param> = <value>` lines in any order, as written
by the authoring tool. Values are numbers; mode and flag parameters hold
integers. Lines that don't match this shape and parameter names that aren't
recognized are skipped, so profiles from newer tools still load.

Example profile:
    path_mode = 2
    angle_mode = 0
    ga_buffer_len = 16
    speed = 350
    x0 = -512
    y0 = 128
    ...

Example usage:
    from cameraman.loader import load_profile

    profile = load_profile("demos/map01")  # also finds demos/map01.cman
"""

from __future__ import annotations

import logging
import math
import re
from pathlib import Path
from typing import TYPE_CHECKING, Any

from cameraman.conf import settings
from cameraman.constants import (
    BOOL_PROFILE_FIELDS,
    FLOAT_PROFILE_FIELDS,
    INT_PROFILE_FIELDS,
    MODE_PROFILE_FIELDS,
    PROFILE_FIELD_ALIASES,
)
from cameraman.profile import CameraProfile
from cameraman.types import AngleMode, PathMode, SpeedMode

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)

PROFILE_SUFFIX = ".cman"

# <name> <separator> <number>, anything after the number is ignored
_LINE_RE = re.compile(
    r"""
    ^\s*(?P<name>\S+)\s+(?P<sep>\S)\s*
    (?P<value>[-+]?(?:
        0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)(?:p[-+]?\d+)?  # hex, as written by %a
        |(?:\d+\.?\d*|\.\d+)(?:e[-+]?\d+)?
        |inf(?:inity)?|nan
    ))
    """,
    re.VERBOSE | re.IGNORECASE,
)

KNOWN_PROFILE_FIELDS = FLOAT_PROFILE_FIELDS | INT_PROFILE_FIELDS | BOOL_PROFILE_FIELDS | MODE_PROFILE_FIELDS

_MODE_TYPES: dict[str, type[PathMode | SpeedMode | AngleMode]] = {
    "path_mode": PathMode,
    "speed_mode": SpeedMode,
    "angle_mode": AngleMode,
}


class ProfileError(Exception):
    """Raised when a camera profile cannot be loaded."""


class ProfileNotFoundError(ProfileError, FileNotFoundError):
    """Raised when the profile file does not exist."""


def parse_line(line: str) -> tuple[str, float] | None:
    """Split a profile line into (name, value).

    Returns:
        The parameter name and its numeric value, or None when the line is
        not a `<param> = <value>` assignment.
    """
    match = _LINE_RE.match(line)
    if match is None or match.group("sep") != "=":
        return None
    value = match.group("value")
    if "x" in value.lower():
        return match.group("name"), float.fromhex(value)
    return match.group("name"), float(value)


def convert_value(name: str, value: float) -> Any:  # noqa: ANN401
    """Convert a raw numeric value to the type of the profile field `name`.

    Raises:
        ValueError: If the value is not valid for the field.
    """
    if not math.isfinite(value):
        msg = f"{name} must be a finite number, got {value}"
        raise ValueError(msg)

    if name in MODE_PROFILE_FIELDS:
        return _MODE_TYPES[name](int(value))
    if name in BOOL_PROFILE_FIELDS:
        return bool(int(value))
    if name in INT_PROFILE_FIELDS:
        return int(value)
    return value


def parse_profile(lines: Iterable[str]) -> CameraProfile:
    """Build a profile from .cman lines.

    Unset parameters keep their defaults; when a parameter appears more than
    once the last value wins.
    """
    values: dict[str, Any] = {}

    for lineno, line in enumerate(lines, start=1):
        parsed = parse_line(line)
        if parsed is None:
            if line.strip():
                logger.debug("Skipping malformed profile line %d: %r", lineno, line.rstrip())
            continue

        param_name, raw_value = parsed
        logger.debug("Cameraman param: %s = %f", param_name, raw_value)

        name = PROFILE_FIELD_ALIASES.get(param_name, param_name)
        if name not in KNOWN_PROFILE_FIELDS:
            logger.debug("Ignoring unknown profile parameter '%s'", param_name)
            continue

        try:
            values[name] = convert_value(name, raw_value)
        except ValueError as e:
            logger.warning("Ignoring profile line %d: %s", lineno, e)

    buffer_max = settings.CMAN_ANGLE_BUFFER_MAX
    buffer_length = values.get("angle_buffer_length", 0)
    if buffer_length > buffer_max:
        logger.warning("Angle buffer length %d exceeds %d, clamping", buffer_length, buffer_max)
        values["angle_buffer_length"] = buffer_max
    elif buffer_length < 0:
        logger.warning("Negative angle buffer length %d, disabling smoothing", buffer_length)
        values["angle_buffer_length"] = 0

    return CameraProfile(**values)


def resolve_profile_path(path: str | Path) -> Path:
    """Find the profile file, trying the .cman suffix when it is missing.

    Raises:
        ProfileNotFoundError: If neither the path nor its .cman variant exists.
    """
    candidate = Path(path)
    if candidate.is_file():
        return candidate

    if not candidate.suffix:
        with_suffix = candidate.with_suffix(PROFILE_SUFFIX)
        if with_suffix.is_file():
            return with_suffix

    msg = f"Cameraman profile not found: {path}"
    raise ProfileNotFoundError(msg)


def load_profile(path: str | Path) -> CameraProfile:
    """Load a camera profile from a .cman file.

    Raises:
        ProfileNotFoundError: If the file does not exist.
        ProfileError: If the file cannot be read.
    """
    profile_path = resolve_profile_path(path)
    logger.info("Loading Cameraman profile: %s", profile_path)

    try:
        with profile_path.open(encoding="utf-8", errors="replace") as f:
            return parse_profile(f)
    except OSError as e:
        msg = f"Could not read Cameraman profile {profile_path}: {e}"
        raise ProfileError(msg) from e
