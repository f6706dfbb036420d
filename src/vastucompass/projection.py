"""Bilinear grid projection over a four-corner plot, plus local-metric helpers.

Corners are always ordered BL, BR, TR, TL. Column fractions run along the
BL→BR (and TL→TR) edge, row fractions run from the bottom edge to the top
edge. The four corners are dragged independently, so the plot is a general
quadrilateral and the mapping must be bilinear rather than affine.

All projection functions are total: colinear or self-intersecting corners
produce collapsed but well-defined points.
"""

import math
from collections.abc import Sequence

import numpy as np

from vastucompass.models import GeoPoint

GRID_DIVISIONS = 9
EARTH_RADIUS_M = 6378137.0

Quad = Sequence[GeoPoint]  # BL, BR, TR, TL


def lerp(a: GeoPoint, b: GeoPoint, t: float) -> GeoPoint:
    return GeoPoint(a.lat + (b.lat - a.lat) * t, a.lon + (b.lon - a.lon) * t)


def bilinear_point(corners: Quad, u: float, t: float) -> GeoPoint:
    """Point at row fraction `u` and column fraction `t` (both 0..1)."""
    bl, br, tr, tl = corners[0], corners[1], corners[2], corners[3]
    bottom = lerp(bl, br, t)
    top = lerp(tl, tr, t)
    return lerp(bottom, top, u)


def grid_point(corners: Quad, row: float, col: float, divisions: int = GRID_DIVISIONS) -> GeoPoint:
    """Lattice point at (row, col) in grid index space; fractional indices are allowed."""
    if divisions <= 0:
        raise ValueError(f"divisions must be positive, got {divisions}")
    return bilinear_point(corners, row / divisions, col / divisions)


def cell_corners(
    corners: Quad,
    row: int,
    col: int,
    row_span: int = 1,
    col_span: int = 1,
    divisions: int = GRID_DIVISIONS,
) -> tuple[GeoPoint, GeoPoint, GeoPoint, GeoPoint]:
    """Four corners (BL, BR, TR, TL) of the region anchored at (row, col).

    Args:
        corners: Plot corners in BL, BR, TR, TL order.
        row: Anchor row, counted from the BL→BR edge.
        col: Anchor column, counted from the BL→TL edge.
        row_span: Rows covered by the region.
        col_span: Columns covered by the region.
        divisions: Grid size N.

    Returns:
        The region's quadrilateral in the same corner order as the plot.
    """
    return (
        grid_point(corners, row, col, divisions),
        grid_point(corners, row, col + col_span, divisions),
        grid_point(corners, row + row_span, col + col_span, divisions),
        grid_point(corners, row + row_span, col, divisions),
    )


def cell_center(
    corners: Quad,
    row: int,
    col: int,
    row_span: int = 1,
    col_span: int = 1,
    divisions: int = GRID_DIVISIONS,
) -> GeoPoint:
    """Bilinear image of the region's midpoint fractions."""
    return grid_point(corners, row + row_span / 2, col + col_span / 2, divisions)


def lattice(corners: Quad, divisions: int = GRID_DIVISIONS) -> np.ndarray:
    """All (divisions+1)² lattice points as an array of shape (n+1, n+1, 2) holding (lat, lon).

    Index [row, col] matches `grid_point(corners, row, col)`.
    """
    c = np.array([[p.lat, p.lon] for p in corners[:4]], dtype=np.float64)
    f = np.linspace(0.0, 1.0, divisions + 1)
    bottom = c[0] + np.outer(f, c[1] - c[0])  # (n+1, 2) along columns
    top = c[3] + np.outer(f, c[2] - c[3])
    return bottom[np.newaxis, :, :] + f[:, np.newaxis, np.newaxis] * (top - bottom)[np.newaxis, :, :]


def lattice_lines(
    corners: Quad, divisions: int = GRID_DIVISIONS
) -> list[tuple[GeoPoint, GeoPoint]]:
    """Column lines (bottom→top) followed by row lines (left→right)."""
    pts = lattice(corners, divisions)
    n = divisions
    lines: list[tuple[GeoPoint, GeoPoint]] = []
    for i in range(n + 1):
        lines.append((GeoPoint(*pts[0, i]), GeoPoint(*pts[n, i])))
    for i in range(n + 1):
        lines.append((GeoPoint(*pts[i, 0]), GeoPoint(*pts[i, n])))
    return lines


# ------------------------------------------------------------------------------
# Local tangent plane
# ------------------------------------------------------------------------------
def to_local_xy(origin: GeoPoint, point: GeoPoint) -> tuple[float, float]:
    """Equirectangular offset of `point` from `origin` in metres (x east, y north)."""
    d_lat = math.radians(point.lat - origin.lat)
    d_lon = math.radians(point.lon - origin.lon)
    x = d_lon * EARTH_RADIUS_M * math.cos(math.radians(origin.lat))
    y = d_lat * EARTH_RADIUS_M
    return x, y


def from_local_xy(origin: GeoPoint, x: float, y: float) -> GeoPoint:
    """Inverse of `to_local_xy`."""
    d_lat = y / EARTH_RADIUS_M
    d_lon = x / (EARTH_RADIUS_M * math.cos(math.radians(origin.lat)))
    return GeoPoint(origin.lat + math.degrees(d_lat), origin.lon + math.degrees(d_lon))


def average_center(points: Sequence[GeoPoint]) -> GeoPoint:
    n = len(points)
    return GeoPoint(sum(p.lat for p in points) / n, sum(p.lon for p in points) / n)


def sort_corners_as_rect(points: Sequence[GeoPoint]) -> tuple[GeoPoint, GeoPoint, GeoPoint, GeoPoint]:
    """Order four arbitrary points as BL, BR, TR, TL.

    The two southernmost points form the bottom edge; each edge is then
    ordered west to east.
    """
    if len(points) != 4:
        raise ValueError(f"Expected 4 points, got {len(points)}")
    by_lat = sorted(points, key=lambda p: p.lat)
    bl, br = sorted(by_lat[:2], key=lambda p: p.lon)
    tl, tr = sorted(by_lat[2:], key=lambda p: p.lon)
    return bl, br, tr, tl


def plot_angle(corners: Quad) -> float:
    """Angle of the BL→BR edge relative to east, in radians."""
    center = average_center(corners)
    x0, y0 = to_local_xy(center, corners[0])
    x1, y1 = to_local_xy(center, corners[1])
    return math.atan2(y1 - y0, x1 - x0)
