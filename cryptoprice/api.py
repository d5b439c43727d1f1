# cryptoprice/api.py
import logging
import math
import numbers
from typing import Any, Dict, List, Optional, Union

import requests

from .config import COINGECKO_BASE_URL
from .models import PricePoint

logger = logging.getLogger(__name__)

MAX_DAYS = "max"
DEFAULT_DAYS = 7


def _describe_error(e: Exception) -> str:
    response = getattr(e, "response", None)
    if response is None:
        return str(e)
    return f"{e} (status={response.status_code}, body={response.text[:500]})"


class CoinGecko:
    """Read-only client for the CoinGecko price endpoints.

    Failures never escape: every fetch returns ``None`` and logs what went
    wrong instead.
    """

    def __init__(
        self,
        http: Any = None,
        base_url: str = COINGECKO_BASE_URL,
        api_key: str = "",
        timeout: int = 20,
    ) -> None:
        self.http = http if http is not None else requests.Session()
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.headers = {"Accept": "application/json"}
        if api_key:
            self.headers["x-cg-demo-api-key"] = api_key

    def _get(self, path: str, params: Dict[str, Any]) -> Optional[Any]:
        url = f"{self.base_url}/{path.lstrip('/')}"
        try:
            resp = self.http.get(url, params=params, headers=self.headers, timeout=self.timeout)
            resp.raise_for_status()
            return resp.json()
        except (requests.RequestException, ValueError) as e:
            logger.error(f"GET {url} params={params} failed: {_describe_error(e)}")
            return None

    def get_price(self, asset_id: str, quote_currency: str) -> Optional[float]:
        """Fetches the current price of one asset in one quote currency."""
        params = {"ids": asset_id, "vs_currencies": quote_currency}
        data = self._get("simple/price", params)
        if data is None:
            return None

        quotes = data.get(asset_id) if isinstance(data, dict) else None
        price = quotes.get(quote_currency) if isinstance(quotes, dict) else None
        if isinstance(price, bool) or not isinstance(price, numbers.Real):
            logger.error(f"Could not find the price for {asset_id} in {quote_currency}.")
            return None
        return price

    def get_history(
        self, asset_id: str, quote_currency: str, days: Union[int, str] = DEFAULT_DAYS
    ) -> Optional[List[PricePoint]]:
        """Fetches the price series of an asset over the last ``days`` days (or ``"max"``).

        Market cap and volume series in the response are ignored.
        """
        if days != MAX_DAYS and (isinstance(days, bool) or not isinstance(days, int) or days <= 0):
            raise ValueError(f"days must be a positive integer or {MAX_DAYS!r}, got {days!r}")

        logger.info(
            f"Fetching historical data for {asset_id.upper()} in {quote_currency.upper()} over the last {days} days..."
        )
        params = {"vs_currency": quote_currency, "days": days}
        data = self._get(f"coins/{asset_id}/market_chart", params)
        if data is None:
            return None

        prices = data.get("prices") if isinstance(data, dict) else None
        if not isinstance(prices, list):
            logger.error(f"No price series in market chart response for {asset_id} in {quote_currency}.")
            return None
        try:
            # null prices are kept as NaN gaps
            return [PricePoint(int(ts), math.nan if price is None else float(price)) for ts, price in prices]
        except (TypeError, ValueError) as e:
            logger.error(f"Malformed price series for {asset_id} in {quote_currency}: {e}")
            return None
