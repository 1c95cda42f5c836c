"""
Kilowatt scraper.

The events page embeds a DICE widget whose public API key sits in a script
tag ("apiKey":"..."). That key is then used against the DICE events API,
which returns JSON with ISO 8601 dates.
"""

import re

from dateutil import parser as dateparser

from showlist.fetch import Fetcher
from showlist.models import RawShow
from showlist.text import html_to_text

DICE_EVENTS_URL = "https://events-api.dice.fm/v1/events"
_API_KEY_RE = re.compile(r'"apiKey":"(\w+)"')
_SKIP_RE = re.compile(r"karaoke", re.IGNORECASE)


class KilowattScraper:
    venue_key = "kilowatt"
    venue_name = "Kilowatt"
    venue_link = "https://kilowattbar.com/"

    def fetch_shows(self, fetcher: Fetcher) -> list[RawShow]:
        page = fetcher.soup(f"{self.venue_link}events")
        scripts = " ".join(s.string or "" for s in page.select("div.sqs-block-content script"))
        m = _API_KEY_RE.search(scripts)
        if not m:
            raise ValueError("DICE API key not found on events page")

        payload = fetcher.json(
            DICE_EVENTS_URL,
            params={
                "page[size]": 24,
                "types": "linkout,event",
                "filter[venues][]": self.venue_name,
            },
            headers={"Accept": "application/json", "x-api-key": m.group(1)},
        )

        shows: list[RawShow] = []
        for event in payload["data"]:
            title = event["name"]
            if _SKIP_RE.search(title):
                continue
            shows.append(RawShow(
                time=dateparser.isoparse(event["date"]).astimezone(fetcher.tz),
                link=event["url"],
                title=title,
                description=html_to_text(event.get("description")),
            ))
        return shows
