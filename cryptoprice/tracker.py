# cryptoprice/tracker.py
import logging
from typing import Dict, List, Optional, Tuple

from .api import CoinGecko
from .charts import PriceChart
from .config import Settings
from .formatting import price_line
from .models import Dataset

logger = logging.getLogger(__name__)

SEPARATOR = "-" * 30


def run(settings: Settings, client: CoinGecko, chart: PriceChart, output) -> List[Dataset]:
    """Fetches current prices and histories, writes the summary and draws the chart.

    A failed fetch only removes that asset's contribution; the run itself never fails.
    """
    currency = settings.currency

    lines = []
    for asset_id in settings.coin_ids:
        price = client.get_price(asset_id, currency)
        lines.append(price_line(asset_id, currency, price, settings.locale))
    output.write_summary(lines)

    datasets = []
    for asset_id in settings.coin_ids:
        series = client.get_history(asset_id, currency, settings.days)
        if series is None:
            logger.warning(f"Leaving {asset_id} out of the chart: no historical data.")
            continue
        datasets.append(Dataset(asset_id, series))

    chart.render(datasets, currency)
    output.show_chart(chart)
    logger.info(f"Charted {len(datasets)} of {len(settings.coin_ids)} assets in {currency.upper()}.")
    return datasets


def check_prices(settings: Settings, client: CoinGecko, output) -> Dict[Tuple[str, str], Optional[float]]:
    """Prints the current price of every configured asset in every console currency."""
    results: Dict[Tuple[str, str], Optional[float]] = {}
    lines: List[str] = []
    for asset_id in settings.coin_ids:
        for currency in settings.console_currencies:
            logger.info(f"Fetching price for {asset_id.upper()} in {currency.upper()}...")
            price = client.get_price(asset_id, currency)
            results[(asset_id, currency)] = price
            if lines:
                lines.append(SEPARATOR)
            lines.append(price_line(asset_id, currency, price, settings.locale))
    output.write_summary(lines)
    return results
