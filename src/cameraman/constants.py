"""Engine unit constants.

The host engine measures positions in 16.16 fixed point and angles as 32-bit
binary angle measures (BAM), of which only the upper 16 bits are kept when
converting to and from turn fractions.
"""

FRACBITS = 16
"""Number of fractional bits in a fixed-point value."""

FRACUNIT = 1 << FRACBITS
"""Fixed-point representation of 1.0."""

ANGLE_RESOLUTION = 65536
"""Angle subdivisions per full turn kept by turn-fraction conversions."""

ANGLE_MASK = 0xFFFFFFFF
"""Binary angles wrap at 32 bits."""

# .cman parameter names mapped to CameraProfile field names
PROFILE_FIELD_ALIASES = {
    "ga_buffer_len": "angle_buffer_length",
}

INT_PROFILE_FIELDS = frozenset({"delay", "angle_buffer_length"})
BOOL_PROFILE_FIELDS = frozenset({"overshoot", "warp_player", "hide_player"})
MODE_PROFILE_FIELDS = frozenset({"path_mode", "speed_mode", "angle_mode"})
FLOAT_PROFILE_FIELDS = frozenset(
    {
        "speed",
        "x0",
        "y0",
        "z0",
        "x1",
        "y1",
        "z1",
        "x2",
        "y2",
        "z2",
        "a0",
        "a1",
        "p0",
        "p1",
        "ra0",
        "ra1",
        "r0",
        "r1",
        "cx0",
        "cy0",
        "cx1",
        "cy1",
    }
)
