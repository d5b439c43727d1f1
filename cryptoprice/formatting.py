# cryptoprice/formatting.py
from datetime import datetime, timezone
from typing import Dict, Optional, Tuple

DEFAULT_LOCALE = "pt-BR"

# locale -> (thousands separator, decimal separator, pattern)
LOCALES: Dict[str, Tuple[str, str, str]] = {
    "pt-BR": (".", ",", "{symbol}\xa0{number}"),
    "en-US": (",", ".", "{symbol}{number}"),
}

CURRENCY_SYMBOLS: Dict[str, Dict[str, str]] = {
    "pt-BR": {"USD": "US$", "BRL": "R$", "EUR": "€", "GBP": "£", "JPY": "JP¥"},
    "en-US": {"USD": "$", "BRL": "R$", "EUR": "€", "GBP": "£", "JPY": "¥"},
}

ZERO_DECIMAL_CURRENCIES = {"JPY", "KRW", "VND", "CLP", "ISK"}

ASSET_NAMES: Dict[str, Tuple[str, str]] = {
    "bitcoin": ("Bitcoin", "BTC"),
    "ethereum": ("Ethereum", "ETH"),
}


def _locale(locale: str) -> str:
    return locale if locale in LOCALES else DEFAULT_LOCALE


def format_number(value: float, decimals: int = 2, locale: str = DEFAULT_LOCALE) -> str:
    """Formats a non-negative number with the locale's grouping and decimal marks."""
    thousands, decimal, _ = LOCALES[_locale(locale)]
    text = f"{value:,.{decimals}f}"
    return text.replace(",", "\0").replace(".", decimal).replace("\0", thousands)


def format_currency(value: float, currency: str, locale: str = DEFAULT_LOCALE) -> str:
    """Formats a value as currency text, e.g. ``US$ 1.234,50`` for usd under pt-BR."""
    locale = _locale(locale)
    code = currency.upper()
    symbol = CURRENCY_SYMBOLS[locale].get(code, code)
    decimals = 0 if code in ZERO_DECIMAL_CURRENCIES else 2
    number = format_number(abs(value), decimals, locale)
    text = LOCALES[locale][2].format(symbol=symbol, number=number)
    return f"-{text}" if value < 0 and number.strip("0,.") else text


def format_date_label(timestamp_ms: int, locale: str = DEFAULT_LOCALE) -> str:
    """Formats a millisecond timestamp as a calendar date (UTC)."""
    d = datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc)
    if _locale(locale) == "en-US":
        return f"{d.month}/{d.day}/{d.year}"
    return d.strftime("%d/%m/%Y")


def asset_label(asset_id: str) -> str:
    """Human name for an asset id, e.g. ``Bitcoin (BTC)``."""
    if asset_id in ASSET_NAMES:
        name, symbol = ASSET_NAMES[asset_id]
        return f"{name} ({symbol})"
    return asset_id.replace("-", " ").title()


def price_line(asset_id: str, currency: str, price: Optional[float], locale: str = DEFAULT_LOCALE) -> str:
    """Builds the summary line for an asset's current price."""
    if price is None:
        return unavailable_line(asset_id, currency)
    return f"Current {asset_label(asset_id)} price in {currency.upper()}: {format_currency(price, currency, locale)}"


def unavailable_line(asset_id: str, currency: str) -> str:
    return f"Current {asset_label(asset_id)} price in {currency.upper()} unavailable."
