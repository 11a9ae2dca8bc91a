"""Default settings for Cameraman.

Users can override these in their project's settings.py file.

Example:
    # In your project's settings.py:
    CMAN_PROFILE = "demos/map01.cman"
    CMAN_AUTO_SKIP = True
    CMAN_AUTO_EXIT = True
"""

# Profile settings
CMAN_PROFILE = ""
"""Path to the .cman profile to load (empty string leaves Cameraman disabled)."""

CMAN_ANGLE_BUFFER_MAX = 1024
"""Largest accepted angle smoothing window, in samples."""

# Playback behavior
CMAN_AUTO_SKIP = False
"""Fast-skip the level tics that pass before the camera engages."""

CMAN_AUTO_EXIT = False
"""Request process termination once the camera path is completed."""

CMAN_VIDDUMP = ""
"""Video dump target handed to the host; setting it also enables auto-skip and auto-exit."""

# Timing
TICRATE = 35
"""Simulation tics per second, used only to show elapsed time."""

# Logging
LOG_LEVEL = "INFO"
"""Logging level used by the command line tool."""
