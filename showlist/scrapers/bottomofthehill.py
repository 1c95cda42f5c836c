"""
Bottom of the Hill scraper.

Feed: http://www.bottomofthehill.com/RSS.xml
  - The feed re-announces shows, so several items can share a link. Items are
    grouped by link and only the most recently published one is kept.
  - Title: "<date>: <bill>", e.g. "Friday March 15 2024: Band A, Band B"
  - Link:  http://www.bottomofthehill.com/20240315.html  (date in the path)
  - Description: HTML; the earliest "8pm" / "8:30 pm" style time in it is
    the start time, noon if there is none.
"""

import re
from datetime import date, datetime, time

from bs4 import Tag
from dateutil import parser as dateparser

from showlist import dates
from showlist.fetch import Fetcher
from showlist.models import RawShow
from showlist.text import html_to_text

_USER_AGENT = "Mozilla/5.0 (Macintosh; Intel Mac OS X 10.15; rv:104.0) Gecko/20100101 Firefox/104.0"
_TIME_RE = re.compile(r"\d{1,2}(?::\d{2})?\s*[ap]m", re.IGNORECASE)


def _text(item: Tag, name: str) -> str:
    el = item.find(name)
    return el.get_text().strip() if el else ""


def _published(item: Tag) -> datetime:
    return dateparser.parse(_text(item, "pubDate"))


def latest_by_link(items: list[Tag]) -> list[Tag]:
    """Keep the most recently published item for each link, in first-seen order."""
    latest: dict[str, Tag] = {}
    for item in items:
        link = _text(item, "link")
        if link not in latest or _published(item) > _published(latest[link]):
            latest[link] = item
    return list(latest.values())


def _date_from_link(link: str) -> date:
    m = re.search(r"\d+", link)
    if not m:
        raise ValueError(f"no date in link {link!r}")
    return datetime.strptime(m.group(), "%Y%m%d").date()


class BottomOfTheHillScraper:
    venue_key = "bottomofthehill"
    venue_name = "Bottom of the Hill"
    venue_link = "http://www.bottomofthehill.com"

    def fetch_shows(self, fetcher: Fetcher) -> list[RawShow]:
        feed = fetcher.xml(f"{self.venue_link}/RSS.xml", headers={"User-Agent": _USER_AGENT})

        shows: list[RawShow] = []
        for item in latest_by_link(feed.find_all("item")):
            link = _text(item, "link")
            backup_date, _, title = (part.strip() for part in _text(item, "title").partition(":"))
            day = dates.first_of(
                ("link", lambda: _date_from_link(link)),
                ("title", lambda: dates.parse_date(backup_date, fetcher.today)),
            )

            description = _text(item, "description")
            times = [dates.at_time(t, day, fetcher.tz) for t in _TIME_RE.findall(description)]
            start = min(times) if times else datetime.combine(day, time(12), fetcher.tz)

            shows.append(RawShow(
                time=start,
                link=link,
                title=title,
                description=html_to_text(description),
            ))
        return shows
