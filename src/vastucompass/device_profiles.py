"""Device calibration variants and the resolver that picks one per subscription.

The vendor constants below were measured on hardware, not derived. Treat them
as calibration data: change them only with a device in hand.
"""

import logging

from vastucompass.models import AxisInversion, DeviceDescriptor, DeviceProfile
from vastucompass.smoothing import DEFAULT_ALPHA, HEAVY_ALPHA

logger = logging.getLogger(__name__)

DEFAULT_PROFILE = DeviceProfile(
    variant="default",
    axis_inversion=AxisInversion.NONE,
    angle_offset_degrees=0.0,
    smoothing_alpha=DEFAULT_ALPHA,
    prefer_absolute_angle=True,
)

# Magnetometer mounted a quarter turn from the display axes
ROTATED_SENSOR_PROFILE = DeviceProfile(
    variant="rotated_sensor",
    axis_inversion=AxisInversion.NONE,
    angle_offset_degrees=90.0,
    smoothing_alpha=HEAVY_ALPHA,
    prefer_absolute_angle=True,
)

# Platform angles on these devices read 180° off, hence the offset. The
# magnetometer also reports both horizontal axes flipped, and the XY inversion
# cancels the offset in vector mode, so magnetometer headings pass through unchanged.
INVERTED_SENSOR_PROFILE = DeviceProfile(
    variant="inverted_sensor",
    axis_inversion=AxisInversion.XY,
    angle_offset_degrees=180.0,
    smoothing_alpha=HEAVY_ALPHA,
    prefer_absolute_angle=False,
)

PROFILES: dict[str, DeviceProfile] = {
    p.variant: p for p in (DEFAULT_PROFILE, ROTATED_SENSOR_PROFILE, INVERTED_SENSOR_PROFILE)
}

# manufacturer (lower-case) → variant, Android only
_VENDOR_VARIANTS: dict[str, str] = {
    "xiaomi": "rotated_sensor",
    "redmi": "rotated_sensor",
    "poco": "rotated_sensor",
    "huawei": "inverted_sensor",
    "honor": "inverted_sensor",
}


def resolve_device_profile(descriptor: DeviceDescriptor | None) -> DeviceProfile:
    """Classify a device into one of the known calibration variants.

    Pure and total: anything unrecognised, including a missing descriptor,
    resolves to the default variant (no inversion, 0° offset, alpha 0.15).

    Args:
        descriptor: Platform facts reported by the host, or None.

    Returns:
        The DeviceProfile to use for the whole subscription.
    """
    if descriptor is None:
        return DEFAULT_PROFILE

    if descriptor.platform.lower() != "android":
        return DEFAULT_PROFILE

    manufacturer = (descriptor.manufacturer or "").strip().lower()
    variant = _VENDOR_VARIANTS.get(manufacturer)
    if variant is None:
        return DEFAULT_PROFILE

    logger.debug("Manufacturer %r mapped to variant %s", manufacturer, variant)
    return PROFILES[variant]
