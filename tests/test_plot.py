import pytest

from vastucompass.models import CornerIndex, GeoPoint, GridResolution, Layer, LayerVisibility
from vastucompass.plot import PlotMode, PlotSession, auto_place_corners
from vastucompass.projection import to_local_xy

CENTER = GeoPoint(28.6139, 77.2090)


def test_auto_place_corners_forms_square():
    corners = auto_place_corners(CENTER, 15.0)
    xy = [to_local_xy(CENTER, p) for p in corners]
    expected = [(-15.0, -15.0), (15.0, -15.0), (15.0, 15.0), (-15.0, 15.0)]
    for (x, y), (ex, ey) in zip(xy, expected):
        assert x == pytest.approx(ex)
        assert y == pytest.approx(ey)


def test_new_session_is_idle_and_empty():
    session = PlotSession()
    assert session.mode is PlotMode.IDLE
    assert session.render_plan().is_empty


def test_grid_hidden_until_confirmed():
    session = PlotSession()
    session.enter_adjustment(CENTER)
    assert session.mode is PlotMode.ADJUSTING
    assert len(session.corners) == 4
    assert session.render_plan().is_empty

    assert session.confirm()
    assert session.mode is PlotMode.CONFIRMED
    assert len(session.render_plan().labels) == 45


def test_confirm_needs_four_corners():
    session = PlotSession()
    session.replace_corners([CENTER, CENTER])
    assert not session.confirm()
    assert session.mode is PlotMode.IDLE


def test_fewer_corners_after_confirm_gives_empty_plan():
    session = PlotSession()
    session.enter_adjustment(CENTER)
    session.confirm()
    session.replace_corners(session.corners[:3])
    assert session.render_plan().is_empty


def test_move_corner_recomputes_plan():
    session = PlotSession()
    session.enter_adjustment(CENTER)
    session.confirm()
    before = session.render_plan()
    moved = GeoPoint(CENTER.lat + 0.001, CENTER.lon + 0.001)
    session.move_corner(CornerIndex.TR, moved)
    assert session.corners[2] == moved
    after = session.render_plan()
    assert after != before
    assert after.lines[0].points[2] == moved


@pytest.mark.parametrize("index", [-1, 4])
def test_move_corner_rejects_bad_index(index):
    session = PlotSession()
    session.enter_adjustment(CENTER)
    with pytest.raises(ValueError):
        session.move_corner(index, CENTER)


def test_move_corner_without_corners():
    with pytest.raises(RuntimeError):
        PlotSession().move_corner(0, CENTER)


@pytest.mark.parametrize("action", ["cancel", "clear"])
def test_cancel_and_clear_drop_corners(action):
    session = PlotSession()
    session.enter_adjustment(CENTER)
    session.confirm()
    getattr(session, action)()
    assert session.mode is PlotMode.IDLE
    assert session.corners == ()
    assert session.render_plan().is_empty


def test_toggle_layer_and_resolution():
    session = PlotSession(visibility=LayerVisibility())
    session.enter_adjustment(CENTER)
    session.confirm()
    session.toggle_layer(Layer.CENTER)
    assert session.visibility == LayerVisibility(outer=True, middle=True, center=False)
    assert session.render_plan().highlights == ()

    session.set_resolution(GridResolution.DEVTAS_45)
    assert len(session.render_plan().labels) == 40


def test_invalid_half_size():
    with pytest.raises(ValueError):
        PlotSession().enter_adjustment(CENTER, 0.0)
