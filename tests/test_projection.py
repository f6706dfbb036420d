import math

import numpy as np
import pytest

from vastucompass.models import GeoPoint
from vastucompass.projection import (
    bilinear_point,
    cell_center,
    cell_corners,
    from_local_xy,
    grid_point,
    lattice,
    lattice_lines,
    plot_angle,
    sort_corners_as_rect,
    to_local_xy,
)

# BL, BR, TR, TL of an axis-aligned rectangle (lat = row axis, lon = column axis)
RECT = (GeoPoint(10.0, 20.0), GeoPoint(10.0, 29.0), GeoPoint(28.0, 29.0), GeoPoint(28.0, 20.0))
# A general quadrilateral
QUAD = (GeoPoint(0.0, 0.0), GeoPoint(1.0, 8.0), GeoPoint(9.0, 10.0), GeoPoint(7.0, -2.0))


def _approx(p: GeoPoint, q: GeoPoint) -> bool:
    return p.lat == pytest.approx(q.lat) and p.lon == pytest.approx(q.lon)


@pytest.mark.parametrize("corners", [RECT, QUAD])
def test_grid_corners_hit_plot_corners(corners):
    bl, br, tr, tl = corners
    assert _approx(grid_point(corners, 0, 0), bl)
    assert _approx(grid_point(corners, 0, 9), br)
    assert _approx(grid_point(corners, 9, 9), tr)
    assert _approx(grid_point(corners, 9, 0), tl)


def test_rectangle_subdivides_proportionally():
    for row in range(9):
        for col in range(9):
            bl, br, tr, tl = cell_corners(RECT, row, col)
            assert _approx(bl, GeoPoint(10.0 + 2 * row, 20.0 + col))
            assert _approx(br, GeoPoint(10.0 + 2 * row, 21.0 + col))
            assert _approx(tr, GeoPoint(12.0 + 2 * row, 21.0 + col))
            assert _approx(tl, GeoPoint(12.0 + 2 * row, 20.0 + col))


def test_spanned_cell_covers_its_cells():
    bl, br, tr, tl = cell_corners(RECT, 3, 3, row_span=3, col_span=3)
    assert _approx(bl, GeoPoint(16.0, 23.0))
    assert _approx(tr, GeoPoint(22.0, 26.0))


def test_cell_center_uses_midpoint_fractions():
    assert _approx(cell_center(RECT, 3, 3, 3, 3), GeoPoint(19.0, 24.5))
    assert _approx(cell_center(RECT, 0, 0), GeoPoint(11.0, 20.5))


def test_bilinear_not_affine_on_general_quad():
    # The centre of a general quad is the average of the four corners
    centre = bilinear_point(QUAD, 0.5, 0.5)
    assert centre.lat == pytest.approx(sum(p.lat for p in QUAD) / 4)
    assert centre.lon == pytest.approx(sum(p.lon for p in QUAD) / 4)


def test_adjacent_cells_share_edges():
    left = cell_corners(QUAD, 2, 4)
    right = cell_corners(QUAD, 2, 5)
    assert _approx(left[1], right[0])
    assert _approx(left[2], right[3])


def test_degenerate_corners_do_not_raise():
    p = GeoPoint(5.0, 5.0)
    collapsed = (p, p, p, p)
    assert _approx(grid_point(collapsed, 4, 7), p)
    line = (GeoPoint(0, 0), GeoPoint(0, 9), GeoPoint(0, 9), GeoPoint(0, 0))
    assert _approx(grid_point(line, 4, 3), GeoPoint(0.0, 3.0))


def test_invalid_divisions():
    with pytest.raises(ValueError):
        grid_point(RECT, 0, 0, divisions=0)


def test_lattice_matches_grid_point():
    pts = lattice(QUAD)
    assert pts.shape == (10, 10, 2)
    for row, col in [(0, 0), (3, 7), (9, 9), (5, 0)]:
        p = grid_point(QUAD, row, col)
        np.testing.assert_allclose(pts[row, col], [p.lat, p.lon])


def test_lattice_lines():
    lines = lattice_lines(RECT)
    assert len(lines) == 20
    start, end = lines[0]
    assert _approx(start, RECT[0]) and _approx(end, RECT[3])
    start, end = lines[10]
    assert _approx(start, RECT[0]) and _approx(end, RECT[1])


def test_local_xy_round_trip():
    origin = GeoPoint(28.6, 77.2)
    x, y = to_local_xy(origin, GeoPoint(28.601, 77.201))
    assert x > 0 and y > 0
    back = from_local_xy(origin, x, y)
    assert _approx(back, GeoPoint(28.601, 77.201))


def test_local_xy_scale():
    origin = GeoPoint(0.0, 0.0)
    _, y = to_local_xy(origin, GeoPoint(1.0, 0.0))
    assert y == pytest.approx(math.radians(1.0) * 6378137.0)


def test_sort_corners_as_rect():
    bl, br, tr, tl = GeoPoint(0, 0), GeoPoint(0, 1), GeoPoint(1, 1), GeoPoint(1, 0)
    assert sort_corners_as_rect([tr, bl, tl, br]) == (bl, br, tr, tl)


def test_sort_corners_requires_four_points():
    with pytest.raises(ValueError):
        sort_corners_as_rect([GeoPoint(0, 0), GeoPoint(1, 1)])


def test_plot_angle():
    east_aligned = (GeoPoint(0, 0), GeoPoint(0, 0.001), GeoPoint(0.001, 0.001), GeoPoint(0.001, 0))
    assert plot_angle(east_aligned) == pytest.approx(0.0, abs=1e-9)
    north_aligned = (GeoPoint(0, 0), GeoPoint(0.001, 0), GeoPoint(0.001, -0.001), GeoPoint(0, -0.001))
    assert plot_angle(north_aligned) == pytest.approx(math.pi / 2)
