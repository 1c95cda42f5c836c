from dataclasses import dataclass
from datetime import date, datetime, time, tzinfo
from typing import Callable, Iterable, Optional

from showlist.fetch import Fetcher
from showlist.models import Show, Venue
from showlist.scrapers.base import Scraper


@dataclass
class AdapterFailure:
    venue_key: str
    venue_name: str
    error: Exception

    def __str__(self) -> str:
        return f"{self.venue_name}: {type(self.error).__name__}: {self.error}"


def collect(
    scrapers: Iterable[type[Scraper]],
    fetcher: Fetcher,
    on_result: Optional[Callable[[Venue, Optional[AdapterFailure]], None]] = None,
) -> tuple[list[Venue], list[AdapterFailure]]:
    """
    Run each scraper in turn and attach its shows to a new Venue.

    A scraper that raises contributes no shows; the error is recorded as an
    AdapterFailure and the remaining scrapers still run. `on_result` is called
    after each venue, with the failure if there was one.
    """
    venues: list[Venue] = []
    failures: list[AdapterFailure] = []

    for scraper_cls in scrapers:
        venue = Venue(name=scraper_cls.venue_name, link=scraper_cls.venue_link)
        failure = None
        try:
            raw_shows = scraper_cls().fetch_shows(fetcher)
        except Exception as exc:
            failure = AdapterFailure(scraper_cls.venue_key, scraper_cls.venue_name, exc)
            failures.append(failure)
        else:
            for raw in raw_shows:
                venue.add(raw)
        venues.append(venue)
        if on_result:
            on_result(venue, failure)

    return venues, failures


def start_of_day(day: date, tz: tzinfo) -> datetime:
    return datetime.combine(day, time.min, tz)


def upcoming(venues: Iterable[Venue], run_day: date, tz: tzinfo) -> list[Show]:
    """All shows on or after the start of `run_day`, ordered by (time, title)."""
    cutoff = start_of_day(run_day, tz)
    shows = [show for venue in venues for show in venue.shows]
    shows = [show for show in shows if show.time >= cutoff]
    shows.sort(key=lambda s: (s.time, s.title))
    return shows


def on_day(shows: Iterable[Show], day: date, tz: tzinfo) -> list[Show]:
    return [show for show in shows if show.time.astimezone(tz).date() == day]
