"""
Knockout scraper.

The site is Squarespace; its events collection is exposed as JSON per month
at /api/open/GetItemsByMonth?month=MM-YYYY&collectionId=<id>. This month and
next month are fetched. startDate is epoch milliseconds; excerpt is HTML.
Recurring bar nights (karaoke, bingo, trivia) are skipped.
"""

import re
from datetime import datetime
from urllib.parse import urljoin

from dateutil.relativedelta import relativedelta

from showlist.fetch import Fetcher
from showlist.models import RawShow
from showlist.text import html_to_text

COLLECTION_ID = "668dcda020574371451c8e12"
_SKIP_RE = re.compile(r"karaoke|bingo|trivia", re.IGNORECASE)


class KnockoutScraper:
    venue_key = "knockout"
    venue_name = "Knockout"
    venue_link = "https://theknockoutsf.com"

    def fetch_shows(self, fetcher: Fetcher) -> list[RawShow]:
        months = [fetcher.today, fetcher.today + relativedelta(months=1)]

        shows: list[RawShow] = []
        for month in months:
            items = fetcher.json(
                urljoin(self.venue_link, "/api/open/GetItemsByMonth"),
                params={"month": month.strftime("%m-%Y"), "collectionId": COLLECTION_ID},
            )
            for item in items:
                title = item["title"]
                if _SKIP_RE.search(title):
                    continue
                shows.append(RawShow(
                    time=datetime.fromtimestamp(item["startDate"] / 1000, fetcher.tz),
                    link=urljoin(self.venue_link, item["fullUrl"]),
                    title=title,
                    description=html_to_text(item.get("excerpt")),
                ))
        return shows
