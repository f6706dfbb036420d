"""Heading engine: turns raw orientation samples into one stable compass heading.

Two input modes share the same smoothing path:

* Vector mode: a magnetometer vector (optionally with gravity for tilt
  compensation) is normalised and converted with ``atan2(x, y)`` so that the
  +y axis reads 0° and the +x axis reads 90°.
* Angle mode: a platform-supplied angle. Absolute and relative orientation
  angles count counter-clockwise from north and are flipped with
  ``(360 - angle) % 360``; the native compass heading is already clockwise.

Samples are ranked native compass > absolute > relative. Once a tier has
delivered a sample, lower tiers are ignored until the subscription restarts.
"""

import logging
import math
from collections.abc import Callable, Sequence
from typing import Protocol

from vastucompass.device_profiles import resolve_device_profile
from vastucompass.models import (
    AxisInversion,
    DeviceDescriptor,
    DeviceProfile,
    HeadingSample,
    HeadingStatus,
    SampleSource,
)
from vastucompass.smoothing import AngleSmoother, normalize_degrees

logger = logging.getLogger(__name__)

MIN_VECTOR_MAGNITUDE = 1e-6
MIN_GRAVITY_MAGNITUDE = 0.1

_POINTS_16 = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)  # fmt: skip
_POINTS_8 = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")


class OrientationCapability(Protocol):
    """Host-provided orientation source."""

    def is_available(self) -> bool: ...

    def subscribe(self, callback: Callable[[HeadingSample], None]) -> None: ...

    def unsubscribe(self) -> None: ...


def vector_heading(
    vector: Sequence[float],
    profile: DeviceProfile,
    gravity: Sequence[float] | None = None,
) -> float | None:
    """Heading in [0, 360) from a magnetometer vector, or None if the vector is degenerate.

    Args:
        vector: Magnetometer reading (x, y) or (x, y, z).
        profile: Calibration constants for the device.
        gravity: Optional accelerometer reading (x, y, z). Used for tilt
            compensation when its magnitude is at least MIN_GRAVITY_MAGNITUDE.

    Returns:
        Heading in degrees clockwise from north, offset applied, or None when
        the vector magnitude is below MIN_VECTOR_MAGNITUDE.
    """
    x = float(vector[0])
    y = float(vector[1])
    z = float(vector[2]) if len(vector) > 2 else 0.0

    magnitude = math.sqrt(x * x + y * y + z * z)
    if not math.isfinite(magnitude) or magnitude < MIN_VECTOR_MAGNITUDE:
        return None
    x, y, z = x / magnitude, y / magnitude, z / magnitude

    if profile.axis_inversion in (AxisInversion.X, AxisInversion.XY):
        x = -x
    if profile.axis_inversion in (AxisInversion.Y, AxisInversion.XY):
        y = -y

    if gravity is not None:
        ax, ay, az = (float(g) for g in gravity)
        g_magnitude = math.sqrt(ax * ax + ay * ay + az * az)
        if math.isfinite(g_magnitude) and g_magnitude >= MIN_GRAVITY_MAGNITUDE:
            pitch = math.atan2(-ax, math.sqrt(ay * ay + az * az))
            roll = math.atan2(ay, az)
            # Project the magnetic vector onto the horizontal plane
            hx = x * math.cos(pitch) + z * math.sin(pitch)
            hy = (
                x * math.sin(roll) * math.sin(pitch)
                + y * math.cos(roll)
                - z * math.sin(roll) * math.cos(pitch)
            )
            x, y = hx, hy

    heading = math.degrees(math.atan2(x, y))
    return normalize_degrees(heading + profile.angle_offset_degrees)


def angle_heading(angle: float, source: SampleSource, profile: DeviceProfile) -> float:
    """Heading in [0, 360) from a platform-supplied angle.

    Absolute and relative orientation angles are counter-clockwise from north
    and get flipped; a native compass angle is used as-is.
    """
    if source is SampleSource.NATIVE_COMPASS:
        heading = angle
    else:
        heading = (360.0 - angle) % 360.0
    return normalize_degrees(heading + profile.angle_offset_degrees)


def tier_rank(source: SampleSource, profile: DeviceProfile) -> int:
    """Priority of an angle source; lower is better."""
    if source is SampleSource.NATIVE_COMPASS:
        return 0
    if source is SampleSource.ABSOLUTE:
        return 1 if profile.prefer_absolute_angle else 2
    return 2 if profile.prefer_absolute_angle else 1


def _sample_angle(sample: HeadingSample) -> float | None:
    """Platform angle of an angle-mode sample, or None if it carries no usable angle."""
    if sample.angle is not None:
        angle = float(sample.angle)
    # Some browsers omit alpha on relative events but still report tilt
    elif sample.source is SampleSource.RELATIVE and sample.beta is not None and sample.gamma is not None:
        angle = math.degrees(math.atan2(sample.gamma, sample.beta))
    else:
        return None
    if not math.isfinite(angle):
        return None
    return normalize_degrees(angle)


def direction_name(heading: float) -> str:
    """One of the 16 compass points, e.g. 'NNE'."""
    # Half-up rounding: 11.25° already reads NNE
    return _POINTS_16[int(normalize_degrees(heading) / 22.5 + 0.5) % 16]


def cardinal_direction(heading: float) -> str:
    """One of the 8 principal points using 45° sectors centred on each point."""
    return _POINTS_8[int(((normalize_degrees(heading) + 22.5) % 360.0) // 45.0)]


class HeadingEstimator:
    """Stateful heading estimator bound to one orientation capability.

    ``subscribe()`` resolves the device profile, creates a fresh smoother and
    starts delivery; ``unsubscribe()`` stops delivery and discards the state.
    A capability that is unavailable or denied leaves the estimator in
    ``HeadingStatus.UNAVAILABLE`` until ``subscribe()`` is called again.
    """

    def __init__(
        self,
        capability: OrientationCapability,
        descriptor: DeviceDescriptor | None = None,
        on_heading: Callable[[float], None] | None = None,
    ) -> None:
        self._capability = capability
        self._descriptor = descriptor
        self._on_heading = on_heading
        self._smoother: AngleSmoother | None = None
        self._best_tier: int | None = None
        self.profile: DeviceProfile | None = None
        self.status = HeadingStatus.IDLE

    @property
    def current_heading(self) -> float | None:
        """Last published heading, or None when idle, unavailable, or not yet fed."""
        if self.status is not HeadingStatus.ACTIVE or self._smoother is None:
            return None
        return self._smoother.value

    def subscribe(self) -> HeadingStatus:
        """Start (or restart) delivery. State from any previous subscription is dropped."""
        if self.status is HeadingStatus.ACTIVE:
            self.unsubscribe()

        if not self._capability.is_available():
            logger.warning("Orientation capability unavailable; heading disabled")
            self.status = HeadingStatus.UNAVAILABLE
            return self.status

        self.profile = resolve_device_profile(self._descriptor)
        self._smoother = AngleSmoother(self.profile.smoothing_alpha)
        self._best_tier = None
        self.status = HeadingStatus.ACTIVE
        logger.info(
            "Heading subscription started (variant=%s, alpha=%.2f, offset=%.0f)",
            self.profile.variant,
            self.profile.smoothing_alpha,
            self.profile.angle_offset_degrees,
        )
        self._capability.subscribe(self.handle_sample)
        return self.status

    def unsubscribe(self) -> None:
        if self.status is HeadingStatus.ACTIVE:
            self._capability.unsubscribe()
            logger.info("Heading subscription stopped")
        self._smoother = None
        self._best_tier = None
        self.profile = None
        if self.status is not HeadingStatus.UNAVAILABLE:
            self.status = HeadingStatus.IDLE

    def mark_unavailable(self) -> None:
        """Host reports that the capability was revoked or denied mid-subscription."""
        if self.status is HeadingStatus.ACTIVE:
            self.unsubscribe()
        logger.warning("Orientation capability lost; heading disabled")
        self.status = HeadingStatus.UNAVAILABLE

    def handle_sample(self, sample: HeadingSample) -> float | None:
        """Process one sample and publish the smoothed heading.

        Returns:
            The new smoothed heading, or None if the sample was dropped or the
            estimator is not active.
        """
        if self.status is not HeadingStatus.ACTIVE or self._smoother is None or self.profile is None:
            return None

        raw = self._raw_heading(sample, self.profile)
        if raw is None:
            return None

        heading = self._smoother.filter(raw)
        if self._on_heading is not None:
            self._on_heading(heading)
        return heading

    def _raw_heading(self, sample: HeadingSample, profile: DeviceProfile) -> float | None:
        if sample.source is SampleSource.MAGNETOMETER:
            if sample.vector is None:
                return None
            raw = vector_heading(sample.vector, profile, sample.gravity)
            if raw is None:
                logger.debug("Dropped degenerate magnetometer sample %s", sample.vector)
            return raw

        rank = tier_rank(sample.source, profile)
        if self._best_tier is not None and rank > self._best_tier:
            logger.debug("Dropped %s sample; higher tier active", sample.source)
            return None

        angle = _sample_angle(sample)
        if angle is None:
            logger.debug("Dropped %s sample without a usable angle", sample.source)
            return None
        if self._best_tier is None or rank < self._best_tier:
            self._best_tier = rank
        return angle_heading(angle, sample.source, profile)
