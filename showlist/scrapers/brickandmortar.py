"""
Brick and Mortar scraper.

Listing page: https://www.brickandmortarmusic.com  (TicketWeb widget)
  - Each event: .tw-event-name-container, its parent is the row
  - Title: .tw-name, presenter line: .tw-name-presenting
  - Main date: row .tw-date-time .tw-event-date  e.g. "3.15"  (month.day, no year)
  - Times: every .tw-event-time inside the name container
  - Runs of extra nights: row .tw-sequential-dates, each with its own
    .tw-event-date / .tw-event-time and optional .tw-more-info a[href]

Listings are chronological, so a date earlier than the previous one belongs
to next year. The site's certificate does not verify.
"""

from datetime import date

from showlist import dates
from showlist.fetch import Fetcher
from showlist.models import RawShow
from showlist.text import html_to_text


def _month_day(text: str, year: int) -> date:
    month, day = (int(part) for part in text.strip().split("."))
    return date(year, month, day)


class BrickAndMortarScraper:
    venue_key = "brickandmortar"
    venue_name = "Brick and Mortar"
    venue_link = "https://www.brickandmortarmusic.com"

    def fetch_shows(self, fetcher: Fetcher) -> list[RawShow]:
        soup = fetcher.soup(self.venue_link, verify=False)

        shows: list[RawShow] = []
        previous = fetcher.today
        for container in soup.select(".tw-event-name-container"):
            row = container.parent
            href = container.select_one(".tw-name a")["href"]
            title = html_to_text(str(container.select_one(".tw-name")))
            presenting = container.select_one(".tw-name-presenting")

            nights = [
                (row.select_one(".tw-date-time .tw-event-date").get_text(), event_time.get_text(), href)
                for event_time in container.select(".tw-event-time")
            ]
            for sequential in row.select(".tw-sequential-dates"):
                more_info = sequential.select_one(".tw-more-info a[href]")
                nights.append((
                    sequential.select_one(".tw-event-date").get_text(),
                    sequential.select_one(".tw-event-time").get_text(),
                    more_info["href"] if more_info else href,
                ))

            for date_text, time_text, link in nights:
                day = dates.roll_past(_month_day(date_text, fetcher.today.year), previous)
                previous = day
                shows.append(RawShow(
                    time=dates.at_time(time_text, day, fetcher.tz),
                    link=link,
                    title=title,
                    description=html_to_text(str(presenting)) if presenting else "",
                ))
        return shows
