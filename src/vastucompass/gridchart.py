"""CLI entry point for a static grid image.

Edit the center variable at the top (the plot half size comes from
VASTU_PLOT_HALF_SIZE_M), then run:
    uv run python src/vastucompass/gridchart.py
"""

from dotenv import load_dotenv

load_dotenv()

from vastucompass.config import load_settings  # noqa: E402
from vastucompass.logging_config import setup_logging  # noqa: E402
from vastucompass.models import GeoPoint  # noqa: E402
from vastucompass.plot import PlotSession  # noqa: E402
from vastucompass.renderers.static import save_static_plan  # noqa: E402

center = GeoPoint(28.6139, 77.2090)

settings = load_settings()
setup_logging(settings.log_level, settings.log_file)

session = PlotSession(resolution=settings.grid_resolution)
session.enter_adjustment(center, settings.plot_half_size_m)
session.confirm()
path = save_static_plan(session.render_plan(language=settings.language))
print(f"Saved: {path}")
