"""
Date helpers shared by the venue scrapers.

Many listings omit the year. The two inference rules below mirror how those
sites behave around the December to January rollover; both can misfire for
listings published far in advance, which is a known limitation.
"""

from datetime import date, datetime, time, timedelta, tzinfo
from typing import Callable

from dateutil import parser as dateparser


class DateParseError(ValueError):
    """Raised when every attempt in a fallback chain failed."""

    def __init__(self, failures: list[tuple[str, Exception]]):
        self.failures = failures
        reasons = "; ".join(f"{label}: {exc}" for label, exc in failures)
        super().__init__(f"could not parse date ({reasons})")


def first_of(*attempts: tuple[str, Callable[[], date]]) -> date:
    """
    Return the result of the first attempt that succeeds.

    Each attempt is a (label, callable) pair. Failures are kept so the final
    error says why every attempt was rejected.
    """
    failures: list[tuple[str, Exception]] = []
    for label, attempt in attempts:
        try:
            return attempt()
        except (ValueError, OverflowError, TypeError) as exc:
            failures.append((label, exc))
    raise DateParseError(failures)


def parse_date(text: str, reference: date) -> date:
    """Parse a loosely formatted date; missing parts come from `reference`."""
    default = datetime.combine(reference, time.min)
    return dateparser.parse(text, default=default, fuzzy=True).date()


def at_time(text: str, day: date, tz: tzinfo) -> datetime:
    """
    Combine a time string such as '8:00 pm' or 'Doors: 7PM' with `day`.

    Any date found in the text wins over `day`.
    """
    default = datetime.combine(day, time.min)
    parsed = dateparser.parse(text, default=default, fuzzy=True)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=tz)
    return parsed


def roll_by_month(candidate: date, today: date) -> date:
    """Yearless date in an earlier month than today belongs to next year (+365 days)."""
    if candidate.month < today.month:
        return candidate + timedelta(days=365)
    return candidate


def roll_past(candidate: date, previous: date) -> date:
    """Yearless date earlier than the previous one in a chronological feed is next year."""
    if candidate < previous:
        return candidate.replace(year=candidate.year + 1)
    return candidate
