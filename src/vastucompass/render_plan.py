"""GridRenderPlan builder — projects the region tables onto four plot corners.

The plan is a flat, ordered list of geographic items; renderers draw it front
to back without any knowledge of the Vastu tables:

1. plot outline
2. faint lattice lines
3. one polygon per visible region
4. Brahmasthan highlight cells (centre layer only)
5. one translated label per visible region
"""

import logging
from collections.abc import Callable, Sequence

from vastucompass import grid_model
from vastucompass.i18n import translate as default_translate
from vastucompass.models import (
    GeoPoint,
    GridCell,
    GridRenderPlan,
    GridResolution,
    LabelItem,
    Layer,
    LayerVisibility,
    LineItem,
    PolygonItem,
    RenderItem,
)
from vastucompass.projection import GRID_DIVISIONS, cell_center, cell_corners, lattice_lines

logger = logging.getLogger(__name__)

Translate = Callable[[str, str], str]

OUTLINE_COLOR = "#0f5257"
OUTLINE_WEIGHT = 4.0
LATTICE_WEIGHT = 0.5
LATTICE_OPACITY = 0.2
REGION_FILL_OPACITY = 0.2
HIGHLIGHT_STROKE = "#DAA520"
HIGHLIGHT_FILL = "#FFD700"
HIGHLIGHT_FILL_OPACITY = 0.4
HIGHLIGHT_WEIGHT = 3.0
LABEL_TEXT_COLOR = "#654321"
CENTER_LABEL_TEXT_COLOR = "#8B4513"

# name → font size for regions that need more (or less) emphasis
_FONT_SIZE_OVERRIDES: dict[str, int] = {
    grid_model.SACRED_CENTER: 18,
    "Bhoodhar": 14,
    "Vivasvan": 14,
    "Mitra": 13,
    "Aryama": 13,
}
_SMALL_LABELS = frozenset({"Pushpdant", "Gandharva"})


def label_font_size(region: GridCell) -> int:
    """Font tier of a region label."""
    size = _FONT_SIZE_OVERRIDES.get(region.name)
    if size is not None:
        return size
    if region.row_span + region.col_span == 3:
        return 11
    if region.name in _SMALL_LABELS:
        return 8
    return 9


def stroke_weight(region: GridCell) -> float:
    if region.name == grid_model.SACRED_CENTER:
        return 4.0
    if region.row_span + region.col_span > 3:
        return 3.0
    return 2.0


def _outline(corners: Sequence[GeoPoint]) -> LineItem:
    return LineItem(
        points=(*corners, corners[0]),
        color=OUTLINE_COLOR,
        weight=OUTLINE_WEIGHT,
        opacity=1.0,
    )


def _lattice(corners: Sequence[GeoPoint]) -> list[LineItem]:
    return [
        LineItem(
            points=(start, end),
            color=OUTLINE_COLOR,
            weight=LATTICE_WEIGHT,
            opacity=LATTICE_OPACITY,
            dashed=True,
        )
        for start, end in lattice_lines(corners, GRID_DIVISIONS)
    ]


def _region_polygon(corners: Sequence[GeoPoint], region: GridCell, layer: Layer) -> PolygonItem:
    return PolygonItem(
        name=region.name,
        row=region.row,
        col=region.col,
        layer=layer,
        points=cell_corners(corners, region.row, region.col, region.row_span, region.col_span),
        fill_color=region.color,
        stroke_color=region.color,
        fill_opacity=REGION_FILL_OPACITY,
        stroke_weight=stroke_weight(region),
    )


def _highlight(corners: Sequence[GeoPoint], row: int, col: int) -> PolygonItem:
    return PolygonItem(
        name=grid_model.SACRED_CENTER,
        row=row,
        col=col,
        layer=Layer.CENTER,
        points=cell_corners(corners, row, col),
        fill_color=HIGHLIGHT_FILL,
        stroke_color=HIGHLIGHT_STROKE,
        fill_opacity=HIGHLIGHT_FILL_OPACITY,
        stroke_weight=HIGHLIGHT_WEIGHT,
        highlight=True,
    )


def _label(
    corners: Sequence[GeoPoint],
    region: GridCell,
    layer: Layer,
    translate: Translate,
    language: str,
) -> LabelItem:
    is_center = region.name == grid_model.SACRED_CENTER
    return LabelItem(
        name=region.name,
        text=translate(region.name, language),
        layer=layer,
        position=cell_center(corners, region.row, region.col, region.row_span, region.col_span),
        font_size=label_font_size(region),
        background=region.color,
        text_color=CENTER_LABEL_TEXT_COLOR if is_center else LABEL_TEXT_COLOR,
    )


def build_render_plan(
    corners: Sequence[GeoPoint],
    visibility: LayerVisibility,
    resolution: GridResolution = GridResolution.PADAS_81,
    translate: Translate = default_translate,
    language: str = "en",
) -> GridRenderPlan:
    """Build the full draw list for a plot.

    Pure: identical inputs give an identical plan, and nothing is cached
    between calls.

    Args:
        corners: Plot corners in BL, BR, TR, TL order.
        visibility: Which layers to include.
        resolution: Region table to draw.
        translate: ``translate(name, language)`` used for label text.
        language: Language code passed to `translate`.

    Returns:
        The ordered plan, or an empty plan unless exactly four corners are given.
    """
    if len(corners) != 4:
        return GridRenderPlan()
    corners = tuple(corners)

    visible = [
        (region, layer)
        for region in grid_model.regions(resolution)
        if visibility.is_visible(layer := grid_model.layer_of(region))
    ]

    items: list[RenderItem] = [_outline(corners)]
    items.extend(_lattice(corners))
    items.extend(_region_polygon(corners, region, layer) for region, layer in visible)
    if visibility.center:
        items.extend(_highlight(corners, row, col) for row, col in grid_model.brahmasthan_cells())
    items.extend(_label(corners, region, layer, translate, language) for region, layer in visible)

    logger.debug(
        "Built %s plan: %d regions visible, %d items", resolution, len(visible), len(items)
    )
    return GridRenderPlan(items=tuple(items))
