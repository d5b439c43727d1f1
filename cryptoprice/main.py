#!/usr/bin/env python3
"""
Crypto price tracker: current prices and a history chart from CoinGecko
"""
import sys
import logging
import webbrowser
from typing import List
from .config import load_env_from_dotenv, load_config, load_settings
from .api import CoinGecko
from .charts import PriceChart
from .display import ConsoleOutput, HtmlPage
from .logger import setup_logging
from .tracker import run, check_prices

logger = logging.getLogger(__name__)


def main(argv: List[str]) -> None:
    """Main entry point for the tracker."""
    load_env_from_dotenv()
    load_config()
    setup_logging()

    settings = load_settings()
    client = CoinGecko(base_url=settings.base_url, api_key=settings.api_key, timeout=settings.timeout)
    chart = PriceChart(settings.chart_path, locale=settings.locale)

    args = set(a.lower() for a in argv[1:])
    if "--console" in args:
        output = ConsoleOutput()
        check_prices(settings, client, output)
        # histories are only worth fetching when the chart lands in a file
        if settings.chart_path:
            run(settings, client, chart, output)
        return

    page = HtmlPage(settings.page_path)
    run(settings, client, chart, page)
    if settings.open_browser and "--no-browser" not in args:
        webbrowser.open(page.uri)


def cli() -> None:
    try:
        main(sys.argv)
    except KeyboardInterrupt:
        logger.info("Stopped by user.")


if __name__ == "__main__":
    cli()
