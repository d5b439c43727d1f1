# cryptoprice/display.py
import base64
import html
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from .charts import PriceChart

logger = logging.getLogger(__name__)

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
<style>
body {{ font-family: sans-serif; margin: 2em; }}
#current-price {{ font-size: 1.2em; margin-bottom: 1em; }}
#priceChart {{ max-width: 100%; }}
</style>
</head>
<body>
<h1>{title}</h1>
<div id="current-price">{summary}</div>
{chart}
</body>
</html>
"""


class ConsoleOutput:
    """Writes summaries as plain lines to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def write_summary(self, lines: List[str]) -> None:
        for line in lines:
            print(line, file=self.stream, flush=True)

    def show_chart(self, chart: PriceChart) -> None:
        if chart.figure is not None and chart.path and os.path.exists(chart.path):
            print(f"Chart saved to {chart.path}", file=self.stream, flush=True)


class HtmlPage:
    """A static browser page with a price summary and an embedded chart."""

    def __init__(self, path: str = "index.html", title: str = "Crypto Prices") -> None:
        self.path = path
        self.title = title
        self.summary_html = ""
        self.chart_html = '<p id="priceChart">No data to plot.</p>'

    @property
    def uri(self) -> str:
        return Path(os.path.abspath(self.path)).as_uri()

    def write_summary(self, lines: List[str]) -> None:
        self.summary_html = "<br>".join(html.escape(line) for line in lines)

    def show_chart(self, chart: PriceChart) -> None:
        png = chart.to_png()
        if png is None:
            self.chart_html = '<p id="priceChart">No data to plot.</p>'
        else:
            encoded = base64.b64encode(png).decode("ascii")
            self.chart_html = f'<img id="priceChart" alt="Price chart" src="data:image/png;base64,{encoded}">'
        self.save()

    def render(self) -> str:
        title = html.escape(self.title)
        return PAGE_TEMPLATE.format(title=title, summary=self.summary_html, chart=self.chart_html)

    def save(self) -> None:
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(self.render())
        logger.info(f"Page written to {self.path}")
