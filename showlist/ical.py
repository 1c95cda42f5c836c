"""
Calendar invites for single shows.

Builds a minimal VCALENDAR/VEVENT object (RFC 5545) and wraps it in a
base64 ``data:`` URI so the page can offer it as a download without a server.

Source sites never publish an end time, so every event is given a fixed
three hour duration.
"""

import base64
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING

import regex

if TYPE_CHECKING:
    from showlist.models import Show

DEFAULT_DOMAIN = "showlist.local"
PRODID = "-//showlist//NONSGML shows//EN"
DURATION = timedelta(hours=3)
MAX_LINE_OCTETS = 75

_TEXT_PROPERTIES = {"SUMMARY", "DESCRIPTION", "LOCATION"}


def format_time(value: datetime) -> str:
    """UTC form, e.g. 20240316T030000Z (RFC 5545 section 3.3.5)."""
    return value.astimezone(timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def escape_text(value: str) -> str:
    return (
        value.replace("\\", "\\\\")
        .replace(";", "\\;")
        .replace(",", "\\,")
        .replace("\r\n", "\n")
        .replace("\n", "\\n")
    )


_ESCAPED_RE = regex.compile(r"\\([\\;,nN])")


def unescape_text(value: str) -> str:
    return _ESCAPED_RE.sub(lambda m: "\n" if m.group(1) in "nN" else m.group(1), value)


def fold(line: str) -> str:
    """
    Fold a content line so no physical line exceeds 75 octets.

    Continuation lines start with a single space. Grapheme clusters are kept
    whole, so a line may end a few octets short of the limit.
    """
    lines = [""]
    for grapheme in regex.findall(r"\X", line):
        size = len(grapheme.encode("utf-8"))
        if len(lines[-1].encode("utf-8")) + size > MAX_LINE_OCTETS:
            lines.append(" ")
        lines[-1] += grapheme
    return "\r\n".join(lines)


def unfold(text: str) -> str:
    """
    Join folded lines back into one content line.

    The result is still escaped; pass a TEXT value through unescape_text()
    to get the original string.
    """
    return text.replace("\r\n ", "")


def content_line(name: str, value) -> str:
    value = "" if value is None else str(value).strip()
    if name in _TEXT_PROPERTIES:
        value = escape_text(value)
    return fold(f"{name}:{value}")


def build_calendar(show: "Show", domain: str = DEFAULT_DOMAIN) -> str:
    start = format_time(show.time)
    properties = [
        ("BEGIN", "VCALENDAR"),
        ("PRODID", PRODID),
        ("VERSION", "2.0"),
        ("BEGIN", "VEVENT"),
        ("UID", f"{show.digest}@{domain}"),
        ("DTSTAMP", start),
        ("URL", show.link),
        ("DTSTART", start),
        ("DTEND", format_time(show.time + DURATION)),
        ("SUMMARY", show.title),
        ("DESCRIPTION", show.description),
        ("LOCATION", show.venue.name),
        ("END", "VEVENT"),
        ("END", "VCALENDAR"),
    ]
    return "\r\n".join(content_line(name, value) for name, value in properties)


def data_uri(show: "Show", domain: str = DEFAULT_DOMAIN) -> str:
    payload = base64.b64encode(build_calendar(show, domain).encode("utf-8")).decode("ascii")
    return f"data:text/calendar;base64,{payload}"
