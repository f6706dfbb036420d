"""Circular low-pass filter for compass headings."""

DEFAULT_ALPHA = 0.15
HEAVY_ALPHA = 0.08  # For devices with noisier raw output


def normalize_degrees(angle: float) -> float:
    """Map any angle into [0, 360)."""
    angle = angle % 360.0
    # -1e-15 % 360 rounds to 360.0 in floating point
    if angle >= 360.0:
        angle -= 360.0
    return angle


def shortest_delta(target: float, current: float) -> float:
    """Signed difference target - current wrapped into (-180, 180]."""
    diff = (target - current) % 360.0
    if diff > 180.0:
        diff -= 360.0
    return diff


class AngleSmoother:
    """Exponential smoothing that always follows the short arc across 0°/360°.

    The filter owns the only mutable heading state. One instance lives for one
    sensor subscription; create a fresh one (or call `reset`) on restart.
    """

    def __init__(self, alpha: float = DEFAULT_ALPHA) -> None:
        if not 0.0 < alpha <= 1.0:
            raise ValueError(f"alpha must be in (0, 1], got {alpha}")
        self.alpha = alpha
        self._state: float | None = None

    @property
    def value(self) -> float | None:
        """Last smoothed heading, or None before the first sample."""
        return self._state

    def filter(self, angle: float) -> float:
        """Feed one heading in degrees and return the smoothed heading in [0, 360)."""
        if self._state is None:
            self._state = normalize_degrees(angle)
            return self._state

        diff = shortest_delta(angle, self._state)
        self._state = normalize_degrees(self._state + self.alpha * diff)
        return self._state

    def reset(self) -> None:
        self._state = None
