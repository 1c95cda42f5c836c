from showlist.fetch import Fetcher
from showlist.models import RawShow
from showlist.scrapers.seetickets import parse_listing


class RickshawStopScraper:
    venue_key = "rickshawstop"
    venue_name = "Rickshaw Stop"
    venue_link = "https://rickshawstop.com/"

    def fetch_shows(self, fetcher: Fetcher) -> list[RawShow]:
        return parse_listing(fetcher.soup(self.venue_link), fetcher)
