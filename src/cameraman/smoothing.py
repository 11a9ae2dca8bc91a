"""Sliding-window yaw smoothing for tangent-following Bezier paths.

The per-tic tangent heading of a Bezier path is a finite difference between
two nearby curve points, quantized to the engine's angle resolution. At low
curvature that estimate jitters from tic to tic. The AngleBuffer keeps the
yaw of the next N tics (centered on the current one) and replaces the tic's
yaw with their mean.

The running sum is maintained incrementally: each tic subtracts the sample
being overwritten and adds the new one. It is kept as an exact rational so
that it always equals the sum of the stored samples.

Example usage:
    buffer = AngleBuffer(profile.angle_buffer_length)

    # Each tic, before computing the tic's own pose
    buffer.advance(profile, t, state)
    yaw = buffer.average
"""

from __future__ import annotations

import logging
from fractions import Fraction
from typing import TYPE_CHECKING

from cameraman.paths import evaluate_unbuffered

if TYPE_CHECKING:
    from collections.abc import Iterable

    from cameraman.profile import CameraProfile
    from cameraman.session import SessionState

logger = logging.getLogger(__name__)


class AngleBuffer:
    """Fixed-capacity ring buffer of yaw samples with a running sum.

    Attributes:
        length: Number of samples (N).
        values: Stored samples, oldest first starting at `index`.
        index: Next slot to overwrite.
        sum: Exact running sum of `values`.
    """

    def __init__(self, length: int) -> None:
        """Create an empty buffer.

        Args:
            length: Window size. Must be at least 1.

        Raises:
            ValueError: If length is smaller than 1.
        """
        if length < 1:
            msg = f"Angle buffer length must be at least 1, got {length}"
            raise ValueError(msg)
        self.length = length
        self.values: list[float] = [0.0] * length
        self.index = 0
        self.sum = Fraction(0)

    @property
    def lookahead(self) -> int:
        """Tics between the current tic and the newest sample."""
        return self.length // 2

    @property
    def average(self) -> float:
        """Mean of the stored samples."""
        return float(self.sum / self.length)

    def fill(self, samples: Iterable[float]) -> None:
        """Replace the whole window, newest sample first.

        The first sample goes to the last slot and the last sample to slot 0,
        which becomes the next slot to overwrite.

        Raises:
            ValueError: If the number of samples does not match the length.
        """
        values = list(samples)
        if len(values) != self.length:
            msg = f"Expected {self.length} samples, got {len(values)}"
            raise ValueError(msg)
        self.values = values[::-1]
        self.sum = sum((Fraction(v) for v in self.values), Fraction(0))
        self.index = 0

    def push(self, value: float) -> None:
        """Overwrite the oldest sample and advance the index."""
        self.sum -= Fraction(self.values[self.index])
        self.sum += Fraction(value)
        self.values[self.index] = value
        self.index = (self.index + 1) % self.length

    def advance(self, profile: CameraProfile, t: float, state: SessionState) -> None:
        """Bring the window up to date for the tic at time `t`.

        On the first active tic the whole window is sampled, counting down
        from t + lookahead. Afterwards only the sample at t + lookahead is
        added. Samples are taken unbuffered with overshoot forced on, so the
        window can look past the end of the path.
        """
        newest_t = t + self.lookahead

        if not state.was_active:
            samples = []
            sample_t = newest_t
            for _ in range(self.length):
                pose, _ = evaluate_unbuffered(profile, sample_t, overshoot=True, state=state)
                samples.append(pose.a)
                sample_t -= 1.0
            self.fill(samples)
            logger.debug("Angle buffer filled with %d samples from t=%s", self.length, newest_t)
        else:
            pose, _ = evaluate_unbuffered(profile, newest_t, overshoot=True, state=state)
            self.push(pose.a)
