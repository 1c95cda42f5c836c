from typing import ClassVar, Protocol

from showlist.fetch import Fetcher
from showlist.models import RawShow


class Scraper(Protocol):
    """
    What every venue scraper provides.

    Scrapers are plain, stateless classes: the venue metadata is hard-coded as
    class attributes and fetch_shows() does the fetching and extraction. Any
    exception raised propagates to the pipeline, which isolates it.
    """

    venue_key: ClassVar[str]     # Registry key, matches [venues.<key>] in config.toml
    venue_name: ClassVar[str]
    venue_link: ClassVar[str]

    def fetch_shows(self, fetcher: Fetcher) -> list[RawShow]:
        ...
