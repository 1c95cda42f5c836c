"""
Shared parser for venues that embed the SeeTickets listing widget
(Rickshaw Stop, The Chapel).

Listing markup:
  - Lists: .seetickets-list-events  (the #just-announced-events-list copy is skipped)
  - Cards: .event-info-block
  - Title: .title, link: .title a[href]
  - Date:  .date  e.g. "Fri Mar 15"  (no year)
  - Time:  first of .see-doortime / .see-showtime  e.g. "Doors: 7:00PM"
  - Extra: .subtitle, .doortime-showtime, .ages, .price, .ages-price
"""

import re

from bs4 import BeautifulSoup

from showlist import dates
from showlist.fetch import Fetcher
from showlist.models import RawShow

_PRIVATE_RE = re.compile(r"private (event|party)", re.IGNORECASE)
_CARD_SELECTOR = ".seetickets-list-events:not(#just-announced-events-list) .event-info-block"
_DETAIL_SELECTOR = ".subtitle, .doortime-showtime, .ages, .price, .ages-price"


def parse_listing(soup: BeautifulSoup, fetcher: Fetcher) -> list[RawShow]:
    shows: list[RawShow] = []
    for card in soup.select(_CARD_SELECTOR):
        title = card.select_one(".title").get_text()
        if _PRIVATE_RE.search(title):
            continue

        day = dates.parse_date(card.select_one(".date").get_text(), fetcher.today)
        day = dates.roll_by_month(day, fetcher.today)
        time_el = card.select_one(".see-doortime, .see-showtime")

        details = [el.get_text() for el in card.select(_DETAIL_SELECTOR)]

        shows.append(RawShow(
            time=dates.at_time(time_el.get_text(), day, fetcher.tz),
            link=card.select_one(".title a")["href"],
            title=title.strip(),
            description=". ".join(d for d in details if d),
        ))
    return shows
