# cryptoprice/charts.py
import io
import logging
import math
import os
from typing import Any, Dict, List, Optional, Sequence, Tuple

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.ticker import FuncFormatter, MaxNLocator

from .formatting import DEFAULT_LOCALE, format_currency, format_date_label
from .models import Dataset

logger = logging.getLogger(__name__)

RGBA = Tuple[float, float, float, float]

ASSET_COLORS: Dict[str, Tuple[int, int, int]] = {
    "bitcoin": (255, 159, 64),  # orange
    "ethereum": (153, 102, 255),  # purple
}
DEFAULT_COLOR = (75, 192, 192)
FILL_ALPHA = 0.2


def color_pair(asset_id: str) -> Tuple[RGBA, RGBA]:
    """Returns the (border, background) colors for an asset."""
    r, g, b = ASSET_COLORS.get(asset_id, DEFAULT_COLOR)
    rgb = (r / 255, g / 255, b / 255)
    return rgb + (1.0,), rgb + (FILL_ALPHA,)


def build_chart_config(
    datasets: Sequence[Dataset], quote_currency: str, locale: str = DEFAULT_LOCALE
) -> Dict[str, Any]:
    """Turns datasets into a line chart configuration.

    Labels come from the first dataset only; every series is assumed to share
    its time axis.
    """
    currency = quote_currency.upper()
    labels = [format_date_label(ts, locale) for ts in datasets[0].timestamps]

    lengths = {len(ds.series) for ds in datasets}
    if len(lengths) > 1:
        logger.warning(
            f"Series lengths differ ({sorted(lengths)}); dates on the shared axis follow {datasets[0].asset_id}."
        )

    series = []
    for ds in datasets:
        border, background = color_pair(ds.asset_id)
        series.append({
            "label": f"{ds.asset_id.upper()} price in {currency}",
            "data": ds.prices,
            "border_color": border,
            "background_color": background,
            "border_width": 1,
            "fill": True,
        })

    def tick(value: float, pos: Optional[int] = None) -> str:
        return format_currency(value, currency, locale)

    def tooltip(label: str, value: Optional[float]) -> str:
        if not label:
            return format_currency(value, currency, locale) if value is not None else ""
        if value is None:
            return label
        return f"{label}: {format_currency(value, currency, locale)}"

    return {
        "type": "line",
        "data": {"labels": labels, "datasets": series},
        "options": {
            "scales": {
                "x": {"type": "category", "title": "Date"},
                "y": {"begin_at_zero": False, "title": f"Price ({currency})", "ticks": tick},
            },
            "tooltip": tooltip,
        },
    }


def draw_chart(chart_config: Dict[str, Any], figsize: Tuple[float, float] = (10, 6)) -> Figure:
    """Draws a line chart configuration onto a new matplotlib figure."""
    labels: List[str] = chart_config["data"]["labels"]
    series = chart_config["data"]["datasets"]
    scales = chart_config["options"]["scales"]

    fig, ax = plt.subplots(figsize=figsize)
    try:
        _plot(ax, labels, series, scales)
        fig.autofmt_xdate()
        fig.tight_layout()
    except Exception:
        plt.close(fig)
        raise
    return fig


def _plot(ax, labels: List[str], series: List[Dict[str, Any]], scales: Dict[str, Any]) -> None:
    # missing upstream prices are NaN and show as gaps
    values = [v for s in series for v in s["data"] if not math.isnan(v)]
    baseline = 0 if scales["y"]["begin_at_zero"] or not values else min(values)

    for s in series:
        x = range(len(s["data"]))
        ax.plot(x, s["data"], color=s["border_color"], linewidth=s["border_width"], label=s["label"])
        if s["fill"]:
            ax.fill_between(x, s["data"], baseline, color=s["background_color"])

    def x_label(value: float, pos: Optional[int] = None) -> str:
        i = int(round(value))
        return labels[i] if 0 <= i < len(labels) else ""

    ax.xaxis.set_major_locator(MaxNLocator(nbins=8, integer=True))
    ax.xaxis.set_major_formatter(FuncFormatter(x_label))
    ax.yaxis.set_major_formatter(FuncFormatter(scales["y"]["ticks"]))
    ax.set_xlabel(scales["x"]["title"])
    ax.set_ylabel(scales["y"]["title"])
    ax.grid(True)
    ax.legend()


class PriceChart:
    """Owns the single live chart figure of one output surface."""

    def __init__(self, path: str = "", locale: str = DEFAULT_LOCALE, figsize: Tuple[float, float] = (10, 6)) -> None:
        self.path = path
        self.locale = locale
        self.figsize = figsize
        self.figure: Optional[Figure] = None

    def release(self) -> None:
        if self.figure is not None:
            plt.close(self.figure)
            self.figure = None

    def clear(self) -> None:
        """Releases the live figure and removes any image written for it."""
        self.release()
        if self.path and os.path.exists(self.path):
            os.remove(self.path)

    def render(self, datasets: Sequence[Dataset], quote_currency: str) -> None:
        if not datasets:
            logger.info("No data to plot.")
            self.clear()
            return

        chart_config = build_chart_config(datasets, quote_currency, self.locale)
        self.clear()
        try:
            self.figure = draw_chart(chart_config, self.figsize)
        except Exception as e:
            logger.error(f"Error drawing price chart: {e}")
            return

        if self.path:
            # an unsaved figure stays live so in-memory surfaces still get it
            try:
                self.figure.savefig(self.path)
                logger.info(f"Chart saved to {self.path}")
            except Exception as e:
                logger.error(f"Error saving price chart to {self.path}: {e}")

    def to_png(self) -> Optional[bytes]:
        if self.figure is None:
            return None
        buf = io.BytesIO()
        self.figure.savefig(buf, format="png")
        return buf.getvalue()
