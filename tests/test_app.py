from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP = Path(__file__).resolve().parents[1] / "src" / "vastucompass" / "app.py"


@pytest.fixture
def app(monkeypatch, tmp_path) -> AppTest:
    monkeypatch.chdir(tmp_path)
    for key in ("LOG_LEVEL", "LOG_FILE", "LANGUAGE", "GRID_RESOLUTION", "PLOT_HALF_SIZE_M"):
        monkeypatch.delenv(f"VASTU_{key}", raising=False)
    at = AppTest.from_file(str(APP), default_timeout=30)
    at.run()
    assert not at.exception
    return at


def _heading(at: AppTest) -> float | None:
    return at.session_state["estimator"].current_heading


def test_initial_heading_is_north(app):
    assert _heading(app) == pytest.approx(0.0)


def test_slider_change_feeds_one_sample(app):
    app.slider(key="heading_alpha").set_value(90.0).run()
    assert not app.exception
    # One smoothed step from 0 towards 90 with alpha 0.15
    assert _heading(app) == pytest.approx(13.5)

    for _ in range(5):
        app.run()
    assert _heading(app) == pytest.approx(13.5)


def test_source_switch_restarts_estimator(app):
    app.slider(key="heading_alpha").set_value(90.0).run()
    app.selectbox(key="heading_source").select_index(1).run()
    assert not app.exception
    assert app.session_state["active_source"] == "absolute"
    # Fresh smoother takes the absolute sample as-is: (360 - 90) % 360
    assert _heading(app) == pytest.approx(270.0)

    for _ in range(5):
        app.run()
    assert _heading(app) == pytest.approx(270.0)


def test_switching_back_to_native_is_not_locked_out(app):
    app.selectbox(key="heading_source").select_index(2).run()
    app.slider(key="heading_alpha").set_value(45.0).run()
    app.selectbox(key="heading_source").select_index(0).run()
    assert not app.exception
    assert _heading(app) == pytest.approx(45.0)
