from urllib.parse import urljoin

from showlist.fetch import Fetcher
from showlist.models import RawShow
from showlist.scrapers.seetickets import parse_listing


class TheChapelScraper:
    venue_key = "thechapel"
    venue_name = "The Chapel"
    venue_link = "https://thechapelsf.com/"

    def fetch_shows(self, fetcher: Fetcher) -> list[RawShow]:
        return parse_listing(fetcher.soup(urljoin(self.venue_link, "music/")), fetcher)
