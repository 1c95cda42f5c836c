import tomllib
from datetime import tzinfo
from pathlib import Path
from typing import Any

from dateutil import tz as dateutil_tz

from showlist.fetch import DEFAULT_TIMEOUT, DEFAULT_TIMEZONE

_DEFAULT_CONFIG_PATH = Path("config.toml")


def load(path: Path = _DEFAULT_CONFIG_PATH) -> dict[str, Any]:
    """Load config from TOML. A missing file means all defaults."""
    if not path.exists():
        return {}
    with open(path, "rb") as f:
        return tomllib.load(f)


def get_site(cfg: dict) -> dict:
    return cfg.get("site", {})


def get_output_dir(cfg: dict) -> Path:
    return Path(get_site(cfg).get("output_dir", "output"))


def get_timeout(cfg: dict) -> float:
    return float(get_site(cfg).get("timeout", DEFAULT_TIMEOUT))


def get_timezone(cfg: dict) -> tzinfo:
    name = get_site(cfg).get("timezone", DEFAULT_TIMEZONE)
    tz = dateutil_tz.gettz(name)
    if tz is None:
        raise ValueError(f"Unknown timezone {name!r} in [site] timezone")
    return tz


def is_enabled(cfg: dict, venue_key: str) -> bool:
    """Venues are enabled unless [venues.<key>] sets enabled = false."""
    return cfg.get("venues", {}).get(venue_key, {}).get("enabled", True)
