"""Plotly 2D interactive renderers for the grid overlay and the compass needle.

Geographic items are drawn with x = longitude, y = latitude. Pixel projection
is left to Plotly.
"""

import plotly.graph_objects as go

from vastucompass.heading import direction_name
from vastucompass.models import GridRenderPlan, LabelItem, LineItem, PolygonItem

_BG = "#fdf6e3"
_NEEDLE_COLOR = "#d62828"
_DIAL_COLOR = "#0f5257"
_POINTS_16 = [i * 22.5 for i in range(16)]


def _rgba(hex_color: str, alpha: float) -> str:
    h = hex_color.lstrip("#")
    r, g, b = int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)
    return f"rgba({r},{g},{b},{alpha})"


def _polygon_trace(item: PolygonItem) -> go.Scatter:
    pts = (*item.points, item.points[0])
    return go.Scatter(
        x=[p.lon for p in pts],
        y=[p.lat for p in pts],
        mode="lines",
        fill="toself",
        fillcolor=_rgba(item.fill_color, item.fill_opacity),
        line=dict(color=item.stroke_color, width=item.stroke_weight),
        hoverinfo="text",
        hovertext=item.name,
        name=item.name,
    )


def _line_trace(item: LineItem) -> go.Scatter:
    return go.Scatter(
        x=[p.lon for p in item.points],
        y=[p.lat for p in item.points],
        mode="lines",
        line=dict(color=item.color, width=item.weight, dash="dot" if item.dashed else "solid"),
        opacity=item.opacity,
        hoverinfo="skip",
        name="outline" if not item.dashed else "lattice",
    )


def _label_trace(labels: tuple[LabelItem, ...]) -> go.Scatter:
    # All labels share one trace; per-point sizes and colours
    return go.Scatter(
        x=[lbl.position.lon for lbl in labels],
        y=[lbl.position.lat for lbl in labels],
        mode="text",
        text=[lbl.text for lbl in labels],
        textfont=dict(
            size=[lbl.font_size for lbl in labels],
            color=[lbl.text_color for lbl in labels],
        ),
        hoverinfo="skip",
        name="labels",
    )


def render_plotly_plan(plan: GridRenderPlan) -> go.Figure:
    """Render a GridRenderPlan as an interactive Plotly figure.

    Items are added in plan order so later items draw on top. Labels are
    collected into a single text trace at the end.

    Args:
        plan: Fully computed render plan.

    Returns:
        Plotly Figure object. An empty plan gives an empty figure.
    """
    traces: list[go.Scatter] = []
    for item in plan:
        if isinstance(item, PolygonItem):
            traces.append(_polygon_trace(item))
        elif isinstance(item, LineItem):
            traces.append(_line_trace(item))
    if plan.labels:
        traces.append(_label_trace(plan.labels))

    fig = go.Figure(data=traces)
    fig.update_layout(
        paper_bgcolor=_BG,
        plot_bgcolor=_BG,
        showlegend=False,
        margin=dict(l=0, r=0, t=0, b=0),
        dragmode="pan",
        xaxis=dict(visible=False),
        # Keep metres roughly square at plot scale
        yaxis=dict(visible=False, scaleanchor="x", scaleratio=1.0),
    )
    fig._config = {"scrollZoom": True, "displayModeBar": False}  # type: ignore[attr-defined]
    return fig


def render_plotly_compass(heading: float | None) -> go.Figure:
    """Compass dial with a needle pointing at `heading` (degrees clockwise from north).

    A None heading draws the dial without a needle.
    """
    fig = go.Figure()
    fig.add_trace(
        go.Scatterpolar(
            r=[1.0] * len(_POINTS_16),
            theta=_POINTS_16,
            mode="markers",
            marker=dict(size=4, color=_DIAL_COLOR),
            hoverinfo="skip",
            name="dial",
        )
    )
    if heading is not None:
        fig.add_trace(
            go.Scatterpolar(
                r=[0.0, 0.9],
                theta=[heading, heading],
                mode="lines+markers",
                line=dict(color=_NEEDLE_COLOR, width=4),
                marker=dict(size=[0, 10], color=_NEEDLE_COLOR),
                hoverinfo="text",
                hovertext=f"{heading:.0f}° {direction_name(heading)}",
                name="needle",
            )
        )

    fig.update_layout(
        paper_bgcolor=_BG,
        showlegend=False,
        margin=dict(l=20, r=20, t=20, b=20),
        polar=dict(
            bgcolor=_BG,
            radialaxis=dict(visible=False, range=[0, 1.05]),
            angularaxis=dict(
                rotation=90,
                direction="clockwise",
                tickmode="array",
                tickvals=_POINTS_16,
                ticktext=[direction_name(a) for a in _POINTS_16],
                color=_DIAL_COLOR,
            ),
        ),
    )
    fig._config = {"displayModeBar": False}  # type: ignore[attr-defined]
    return fig
