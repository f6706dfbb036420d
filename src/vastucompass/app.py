"""Vastu Compass — Streamlit demo for the heading engine and the plot grid overlay."""

from collections.abc import Callable

import streamlit as st
from dotenv import load_dotenv

load_dotenv()

from vastucompass.config import load_settings  # noqa: E402
from vastucompass.heading import HeadingEstimator, direction_name  # noqa: E402
from vastucompass.i18n import LANGUAGES, t, translate  # noqa: E402
from vastucompass.logging_config import setup_logging  # noqa: E402
from vastucompass.models import (  # noqa: E402
    CornerIndex,
    DeviceDescriptor,
    GeoPoint,
    GridResolution,
    HeadingSample,
    HeadingStatus,
    LayerVisibility,
    SampleSource,
)
from vastucompass.plot import PlotMode, PlotSession  # noqa: E402
from vastucompass.renderers.plotly_2d import render_plotly_compass, render_plotly_plan  # noqa: E402


class ManualOrientation:
    """Orientation capability fed by a slider instead of a device sensor."""

    def __init__(self) -> None:
        self._callback: Callable[[HeadingSample], None] | None = None

    def is_available(self) -> bool:
        return True

    def subscribe(self, callback: Callable[[HeadingSample], None]) -> None:
        self._callback = callback

    def unsubscribe(self) -> None:
        self._callback = None

    def push(self, sample: HeadingSample) -> None:
        if self._callback is not None:
            self._callback(sample)


_SOURCES = [SampleSource.NATIVE_COMPASS, SampleSource.ABSOLUTE, SampleSource.RELATIVE]


def _on_heading_input() -> None:
    """Feed one sample per widget change; switching source restarts the subscription."""
    source: SampleSource = st.session_state.heading_source
    if source != st.session_state.active_source:
        # Restart drops the smoother and the tier lock of the previous source
        st.session_state.estimator.subscribe()
        st.session_state.active_source = source
    st.session_state.orientation.push(HeadingSample(source=source, angle=st.session_state.heading_alpha))


# --- Session state initialization ---

if "settings" not in st.session_state:
    st.session_state.settings = load_settings()
    setup_logging(st.session_state.settings.log_level, st.session_state.settings.log_file)
_settings = st.session_state.settings

if "lang" not in st.session_state:
    st.session_state.lang = _settings.language
if "plot" not in st.session_state:
    st.session_state.plot = PlotSession(resolution=_settings.grid_resolution)
if "orientation" not in st.session_state:
    st.session_state.orientation = ManualOrientation()
    st.session_state.estimator = HeadingEstimator(
        st.session_state.orientation, DeviceDescriptor(platform="web")
    )
    st.session_state.estimator.subscribe()
    st.session_state.active_source = SampleSource.NATIVE_COMPASS
    st.session_state.orientation.push(HeadingSample(source=SampleSource.NATIVE_COMPASS, angle=0.0))

_lang: str = st.session_state.lang
_plot: PlotSession = st.session_state.plot
_estimator: HeadingEstimator = st.session_state.estimator

st.set_page_config(
    page_title=t("page_title", _lang),
    page_icon="🧭",
    layout="wide",
)

# --- Sidebar: plot controls ---

with st.sidebar:
    st.radio(t("label_language", _lang), LANGUAGES, key="lang", horizontal=True)

    lat = st.number_input(t("label_latitude", _lang), value=28.6139, format="%.6f")
    lon = st.number_input(t("label_longitude", _lang), value=77.2090, format="%.6f")

    col_place, col_confirm = st.columns(2)
    if col_place.button(t("btn_place_corners", _lang), use_container_width=True):
        _plot.enter_adjustment(GeoPoint(lat, lon), _settings.plot_half_size_m)
    if col_confirm.button(t("btn_confirm", _lang), use_container_width=True):
        _plot.confirm()

    col_cancel, col_clear = st.columns(2)
    if col_cancel.button(t("btn_cancel", _lang), use_container_width=True):
        _plot.cancel()
    if col_clear.button(t("btn_clear", _lang), use_container_width=True):
        _plot.clear()

    st.divider()
    resolution = st.radio(
        t("label_resolution", _lang),
        [r.value for r in GridResolution],
        index=[r.value for r in GridResolution].index(_plot.resolution.value),
        horizontal=True,
    )
    _plot.set_resolution(GridResolution(resolution))
    _plot.set_visibility(
        LayerVisibility(
            outer=st.checkbox(t("layer_outer", _lang), value=_plot.visibility.outer),
            middle=st.checkbox(t("layer_middle", _lang), value=_plot.visibility.middle),
            center=st.checkbox(t("layer_center", _lang), value=_plot.visibility.center),
        )
    )

# --- Compass ---

col_compass, col_map = st.columns([1, 2])

with col_compass:
    st.markdown(f"#### {t('direction_title', _lang)}")
    st.selectbox(
        t("label_source", _lang),
        _SOURCES,
        format_func=lambda s: s.value,
        key="heading_source",
        on_change=_on_heading_input,
    )
    st.slider(
        t("label_heading", _lang), 0.0, 359.0, 0.0, step=1.0, key="heading_alpha", on_change=_on_heading_input
    )

    if _estimator.status is HeadingStatus.UNAVAILABLE:
        st.warning(t("heading_unavailable", _lang))
    heading = _estimator.current_heading
    if heading is not None:
        st.metric(t("direction_title", _lang), f"{heading:.0f}° {direction_name(heading)}")
    st.plotly_chart(render_plotly_compass(heading), use_container_width=True)

# --- Plot grid ---

with col_map:
    if _plot.mode is PlotMode.ADJUSTING:
        st.markdown(f"#### {t('corner_title', _lang)}")
        st.caption(t("corner_subtitle", _lang))
        for corner in CornerIndex:
            c_lat, c_lon = st.columns(2)
            current = _plot.corners[corner]
            new_lat = c_lat.number_input(
                f"{corner.value + 1} {corner.name} lat", value=current.lat, format="%.6f", key=f"c{corner}_lat"
            )
            new_lon = c_lon.number_input(
                f"{corner.value + 1} {corner.name} lon", value=current.lon, format="%.6f", key=f"c{corner}_lon"
            )
            if (new_lat, new_lon) != (current.lat, current.lon):
                _plot.move_corner(corner, GeoPoint(new_lat, new_lon))
    elif _plot.mode is PlotMode.CONFIRMED:
        st.markdown(f"#### {t('grid_active_title', _lang)}")
        st.caption(t("grid_active_subtitle", _lang))

    plan = _plot.render_plan(translate, _lang)
    if plan.is_empty:
        st.info(t("placeholder", _lang))
    else:
        st.plotly_chart(render_plotly_plan(plan), use_container_width=True, config={"scrollZoom": True})
