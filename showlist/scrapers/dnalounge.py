"""
DNA Lounge scraper.

Feed: https://www.dnalounge.com/calendar/dnalounge.rss
  - pubDate is the event start time.
  - Titles are prefixed with the date, e.g. "Mar 15 (Fri): Bootie SF"; the
    prefix is stripped.
  - The calendar page link is dug out of the description, falling back to
    the item guid.
"""

import re

from dateutil import parser as dateparser

from showlist.fetch import Fetcher
from showlist.models import RawShow
from showlist.text import html_to_text

_LINK_RE = re.compile(r"https://www\.dnalounge\.com/calendar/\d{4}/[\w\-]+\.html", re.IGNORECASE)
_MONTHS = "Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec"
_WEEKDAYS = "Sun|Mon|Tue|Wed|Thu|Fri|Sat"
_TITLE_PREFIX_RE = re.compile(rf"\A({_MONTHS}) \d+ \(({_WEEKDAYS})\): ", re.IGNORECASE)


class DnaLoungeScraper:
    venue_key = "dnalounge"
    venue_name = "DNA Lounge"
    venue_link = "https://www.dnalounge.com"

    def fetch_shows(self, fetcher: Fetcher) -> list[RawShow]:
        feed = fetcher.xml(f"{self.venue_link}/calendar/dnalounge.rss")

        shows: list[RawShow] = []
        for item in feed.find_all("item"):
            description = item.find("description").get_text()
            link = _LINK_RE.search(description)
            shows.append(RawShow(
                time=dateparser.parse(item.find("pubDate").get_text()).astimezone(fetcher.tz),
                link=link.group() if link else item.find("guid").get_text().strip(),
                title=_TITLE_PREFIX_RE.sub("", item.find("title").get_text().strip()),
                description=html_to_text(description),
            ))
        return shows
