"""Matplotlib static PNG renderer for the grid overlay."""

from pathlib import Path

import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.patches import Polygon

from vastucompass.models import GridRenderPlan, LabelItem, LineItem, PolygonItem

_ROOT = Path(__file__).parent.parent.parent.parent
_BG = "white"


def render_static_plan(plan: GridRenderPlan, chart_size: int = 10) -> Figure:
    """Render a GridRenderPlan as a static matplotlib image.

    Items are drawn in plan order using x = longitude, y = latitude.

    Args:
        plan: Fully computed render plan.
        chart_size: Output image size in inches.

    Returns:
        matplotlib Figure object.
    """
    fig, ax = plt.subplots(figsize=(chart_size, chart_size))
    fig.patch.set_facecolor(_BG)
    ax.set_facecolor(_BG)

    for z, item in enumerate(plan):
        if isinstance(item, PolygonItem):
            ax.add_patch(
                Polygon(
                    [(p.lon, p.lat) for p in item.points],
                    closed=True,
                    facecolor=item.fill_color,
                    edgecolor=item.stroke_color,
                    linewidth=item.stroke_weight / 2,
                    alpha=item.fill_opacity,
                    zorder=z,
                )
            )
        elif isinstance(item, LineItem):
            ax.plot(
                [p.lon for p in item.points],
                [p.lat for p in item.points],
                color=item.color,
                linewidth=item.weight,
                linestyle=":" if item.dashed else "-",
                alpha=item.opacity,
                zorder=z,
            )
        elif isinstance(item, LabelItem):
            ax.text(
                item.position.lon,
                item.position.lat,
                item.text,
                fontsize=item.font_size,
                color=item.text_color,
                ha="center",
                va="center",
                bbox=dict(boxstyle="round,pad=0.2", facecolor=item.background, alpha=0.9, linewidth=0),
                zorder=z,
            )

    ax.set_aspect("equal", adjustable="datalim")
    ax.autoscale_view()
    ax.axis("off")

    return fig


def save_static_plan(plan: GridRenderPlan, output_path: Path | None = None) -> Path:
    """Save a GridRenderPlan as a PNG file.

    Args:
        plan: Fully computed render plan.
        output_path: Destination path. Defaults to results/vastu_grid.png.

    Returns:
        Path to the saved file.
    """
    if output_path is None:
        output_path = _ROOT / "results" / "vastu_grid.png"

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig = render_static_plan(plan)
    fig.savefig(output_path, facecolor=_BG)
    plt.close(fig)
    return output_path
