# cryptoprice/config.py
import os
import configparser
from dataclasses import dataclass
from typing import Tuple, Union

config = configparser.ConfigParser()

COINGECKO_BASE_URL = "https://api.coingecko.com/api/v3"


@dataclass(frozen=True)
class Settings:
    coin_ids: Tuple[str, ...]
    currency: str
    days: Union[int, str]
    console_currencies: Tuple[str, ...]
    locale: str
    base_url: str
    api_key: str
    timeout: int
    page_path: str
    chart_path: str
    open_browser: bool


def load_config(path: str = "config.ini") -> None:
    """Loads configuration from a .ini file."""
    if os.path.isfile(path):
        config.read(path)


def load_env_from_dotenv(path: str = ".env") -> None:
    """Load simple KEY=VALUE pairs from a .env file into os.environ if not already set."""
    if not os.path.isfile(path):
        return
    try:
        with open(path, "r", encoding="utf-8") as f:
            for raw_line in f:
                line = raw_line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                key, val = line.split("=", 1)
                key = key.strip()
                val = val.strip().strip('"').strip("'")
                if key and key not in os.environ:
                    os.environ[key] = val
    except (OSError, UnicodeDecodeError) as e:
        print(f"Warning: failed to read .env file: {e}")


def get_config(section: str, key: str, env_var: str, default: str = "") -> str:
    """Gets a configuration value from environment variables or config.ini."""
    value = os.getenv(env_var)
    if value is not None:
        return value
    return config.get(section, key, fallback=default)


def get_bool_config(section: str, key: str, env_var: str, default: bool = False) -> bool:
    """Gets a boolean configuration value."""
    value = os.getenv(env_var)
    if value is not None:
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return config.getboolean(section, key, fallback=default)


def get_int_config(section: str, key: str, env_var: str, default: int = 0) -> int:
    """Gets an integer configuration value."""
    value = os.getenv(env_var)
    if value is None:
        value = config.get(section, key, fallback=None)
    if value is None:
        return default
    try:
        return int(value)
    except (ValueError, TypeError):
        return default


def _split_ids(value: str) -> Tuple[str, ...]:
    return tuple(x.strip().lower() for x in value.split(",") if x.strip())


def _days_config(default: int = 30) -> Union[int, str]:
    raw = get_config("settings", "days", "DAYS", str(default)).strip().lower()
    if raw == "max":
        return raw
    try:
        days = int(raw)
    except ValueError:
        return default
    return days if days > 0 else default


def load_settings() -> Settings:
    """Reads every setting for a single run; values stay fixed for that run."""
    return Settings(
        coin_ids=_split_ids(get_config("settings", "coin_ids", "COIN_IDS", "bitcoin,ethereum")),
        currency=get_config("settings", "currency", "CURRENCY", "usd").strip().lower(),
        days=_days_config(),
        console_currencies=_split_ids(get_config("settings", "console_currencies", "CONSOLE_CURRENCIES", "usd,brl")),
        locale=get_config("settings", "locale", "NUMBER_LOCALE", "pt-BR"),
        base_url=get_config("coingecko", "base_url", "COINGECKO_BASE_URL", COINGECKO_BASE_URL),
        api_key=get_config("coingecko", "api_key", "COINGECKO_API_KEY", ""),
        timeout=max(1, get_int_config("coingecko", "timeout", "COINGECKO_TIMEOUT", 20)),
        page_path=get_config("output", "page", "PAGE_PATH", "index.html"),
        chart_path=get_config("output", "chart", "CHART_PATH", ""),
        open_browser=get_bool_config("output", "open_browser", "OPEN_BROWSER", True),
    )
