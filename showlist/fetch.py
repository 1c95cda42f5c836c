import warnings
from datetime import date, datetime, tzinfo
from typing import Any, Optional

import requests
from bs4 import BeautifulSoup
from dateutil import tz as dateutil_tz

DEFAULT_TIMEOUT = 15
DEFAULT_TIMEZONE = "America/Los_Angeles"
_HEADERS = {"User-Agent": "Mozilla/5.0 (compatible; showlist/0.1)"}


class Fetcher:
    """
    Shared HTTP access for scrapers.

    Holds the session, the per-request timeout and the run's timezone and
    day, so scrapers can resolve local times and yearless dates consistently.
    Non-2xx responses raise requests.HTTPError.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        tz: Optional[tzinfo] = None,
        today: Optional[date] = None,
        session: Optional[requests.Session] = None,
    ):
        self.timeout = timeout
        self.tz = tz or dateutil_tz.gettz(DEFAULT_TIMEZONE)
        self.today = today or datetime.now(self.tz).date()
        self.session = session or requests.Session()
        self.session.headers.update(_HEADERS)

    def text(self, url: str, *, verify: bool = True, **kwargs) -> str:
        with warnings.catch_warnings():
            if not verify:
                warnings.simplefilter("ignore")
            with self.session.get(url, timeout=self.timeout, verify=verify, **kwargs) as r:
                r.raise_for_status()
                return r.text

    def soup(self, url: str, **kwargs) -> BeautifulSoup:
        return BeautifulSoup(self.text(url, **kwargs), "lxml")

    def xml(self, url: str, **kwargs) -> BeautifulSoup:
        # Raw bytes, so the parser honours the feed's own encoding declaration
        with self.session.get(url, timeout=self.timeout, **kwargs) as r:
            r.raise_for_status()
            return BeautifulSoup(r.content, "xml")

    def json(self, url: str, **kwargs) -> Any:
        with self.session.get(url, timeout=self.timeout, **kwargs) as r:
            r.raise_for_status()
            return r.json()

    def close(self) -> None:
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
