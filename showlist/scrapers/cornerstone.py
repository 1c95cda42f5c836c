"""
Cornerstone (Berkeley) scraper.

Listing page: https://cornerstoneberkeley.com/events  (Webflow CMS list)
  - Cards:       div.shows-wrapper div.w-dyn-item
  - Title:       div.event-name
  - Description: div#event-desc p  (joined with spaces)
  - Date:        div.date-2  e.g. "Friday, March 15, 2024"
  - Time:        first non-empty div.time-2  e.g. "8:00 pm"
  - Tickets:     a.tickets[href]
"""

from showlist import dates
from showlist.fetch import Fetcher
from showlist.models import RawShow
from showlist.text import html_to_text


class CornerstoneScraper:
    venue_key = "cornerstone"
    venue_name = "Cornerstone (Berkeley)"
    venue_link = "https://cornerstoneberkeley.com/events"

    def fetch_shows(self, fetcher: Fetcher) -> list[RawShow]:
        soup = fetcher.soup(self.venue_link)

        shows: list[RawShow] = []
        for item in soup.select("div.shows-wrapper div.w-dyn-item"):
            day = dates.parse_date(item.select_one("div.date-2").get_text(), fetcher.today)
            time_el = item.select_one("div.time-2:not(:empty)")
            paragraphs = [html_to_text(str(p)) for p in item.select("div#event-desc p")]

            shows.append(RawShow(
                time=dates.at_time(time_el.get_text(), day, fetcher.tz),
                link=item.select_one("a.tickets")["href"],
                title=html_to_text(str(item.select_one("div.event-name"))),
                description=" ".join(paragraphs),
            ))
        return shows
