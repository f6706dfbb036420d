"""Plot corner lifecycle: auto-placement, dragging, confirm/cancel/clear."""

import logging
from collections.abc import Sequence
from dataclasses import replace
from enum import StrEnum

from vastucompass.i18n import translate as default_translate
from vastucompass.models import CornerIndex, GeoPoint, GridRenderPlan, GridResolution, Layer, LayerVisibility
from vastucompass.projection import from_local_xy
from vastucompass.render_plan import Translate, build_render_plan

logger = logging.getLogger(__name__)

DEFAULT_HALF_SIZE_M = 15.0


class PlotMode(StrEnum):
    IDLE = "idle"  # No corners
    ADJUSTING = "adjusting"  # Corners placed, grid hidden
    CONFIRMED = "confirmed"  # Grid shown


def auto_place_corners(
    center: GeoPoint, half_size_m: float = DEFAULT_HALF_SIZE_M
) -> tuple[GeoPoint, GeoPoint, GeoPoint, GeoPoint]:
    """A square plot of side 2 * half_size_m around `center`, as BL, BR, TR, TL."""
    h = half_size_m
    return (
        from_local_xy(center, -h, -h),
        from_local_xy(center, h, -h),
        from_local_xy(center, h, h),
        from_local_xy(center, -h, h),
    )


class PlotSession:
    """Holds the plot corners, layer toggles and grid resolution for one map view.

    Every UI event mutates this object and the caller asks for a fresh
    `render_plan()` afterwards; nothing derived from the corners is kept.
    """

    def __init__(
        self,
        resolution: GridResolution = GridResolution.PADAS_81,
        visibility: LayerVisibility | None = None,
    ) -> None:
        self.mode = PlotMode.IDLE
        self.corners: tuple[GeoPoint, ...] = ()
        self.resolution = GridResolution(resolution)
        self.visibility = visibility or LayerVisibility()

    @property
    def grid_visible(self) -> bool:
        return self.mode is PlotMode.CONFIRMED and len(self.corners) == 4

    def enter_adjustment(self, center: GeoPoint, half_size_m: float = DEFAULT_HALF_SIZE_M) -> None:
        """Auto-place four corners around `center` and start adjusting them."""
        if half_size_m <= 0:
            raise ValueError(f"half_size_m must be positive, got {half_size_m}")
        self.corners = auto_place_corners(center, half_size_m)
        self.mode = PlotMode.ADJUSTING
        logger.info("Corner adjustment started at (%.6f, %.6f)", center.lat, center.lon)

    def replace_corners(self, points: Sequence[GeoPoint]) -> None:
        """Full replace of the corner array, as emitted on drag or drag-end."""
        self.corners = tuple(points)

    def move_corner(self, index: int, point: GeoPoint) -> None:
        """Drag one corner to a new position.

        Raises:
            ValueError: If `index` is not 0..3.
            RuntimeError: If no corners have been placed.
        """
        corner = CornerIndex(index)
        if len(self.corners) != 4:
            raise RuntimeError("No plot corners to move; call enter_adjustment first")
        corners = list(self.corners)
        corners[corner] = point
        self.corners = tuple(corners)

    def confirm(self) -> bool:
        """Show the grid. Returns False (and stays put) unless four corners exist."""
        if len(self.corners) != 4:
            logger.debug("Confirm ignored with %d corners", len(self.corners))
            return False
        self.mode = PlotMode.CONFIRMED
        logger.info("Plot corners confirmed")
        return True

    def cancel(self) -> None:
        self.clear()

    def clear(self) -> None:
        """Drop the corners and hide the grid."""
        self.corners = ()
        self.mode = PlotMode.IDLE

    def set_visibility(self, visibility: LayerVisibility) -> None:
        self.visibility = visibility

    def toggle_layer(self, layer: Layer) -> None:
        key = Layer(layer).value
        self.visibility = replace(self.visibility, **{key: not getattr(self.visibility, key)})

    def set_resolution(self, resolution: GridResolution) -> None:
        self.resolution = GridResolution(resolution)

    def render_plan(self, translate: Translate = default_translate, language: str = "en") -> GridRenderPlan:
        """Current draw list; empty until the corners are confirmed."""
        if not self.grid_visible:
            return GridRenderPlan()
        return build_render_plan(self.corners, self.visibility, self.resolution, translate, language)
