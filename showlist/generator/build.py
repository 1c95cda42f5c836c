from datetime import date, datetime, tzinfo
from pathlib import Path
from typing import Iterable

from jinja2 import Environment, FileSystemLoader, select_autoescape

from showlist import ical
from showlist.models import Show, Venue
from showlist.pipeline import AdapterFailure, on_day
from showlist.text import truncate

GREETING = "Hello, you're listening to today's shows."
_TEMPLATES = Path(__file__).parent / "templates"


def format_clock(value: datetime) -> str:
    """'7:00pm' style, no leading zero."""
    hour = value.hour % 12 or 12
    suffix = "am" if value.hour < 12 else "pm"
    return f"{hour}:{value.minute:02d}{suffix}"


def format_day(value: datetime) -> str:
    """'Fri, Mar 15' style, no leading zero."""
    return f"{value.strftime('%a, %b')} {value.day}"


def _environment(tz: tzinfo) -> Environment:
    env = Environment(
        loader=FileSystemLoader(_TEMPLATES),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["clock"] = lambda value: format_clock(value.astimezone(tz))
    env.filters["day"] = lambda value: format_day(value.astimezone(tz))
    env.filters["truncate_description"] = truncate
    return env


def render_page(
    venues: Iterable[Venue],
    shows: list[Show],
    tz: tzinfo,
    failures: Iterable[AdapterFailure] = (),
    calendar_domain: str = ical.DEFAULT_DOMAIN,
    title: str = "Shows",
) -> str:
    failed = {f.venue_name for f in failures}
    env = _environment(tz)
    template = env.get_template("index.html")
    return template.render(
        page_title=title,
        venues=sorted(venues, key=lambda v: v.name),
        failed_venues=failed,
        shows=shows,
        calendar_domain=calendar_domain,
    )


def render_digest(shows: Iterable[Show], run_day: date, tz: tzinfo) -> str:
    """The greeting plus one sentence per show on `run_day`."""
    script = [GREETING]
    for show in on_day(shows, run_day, tz):
        title = " ".join(show.title.split())
        script.append(
            f"At {format_clock(show.time.astimezone(tz))} {show.venue.name} is showing: {title}."
        )
    return " ".join(script)


def build_site(
    venues: list[Venue],
    shows: list[Show],
    run_day: date,
    tz: tzinfo,
    output_dir: Path,
    failures: Iterable[AdapterFailure] = (),
    site_cfg: dict | None = None,
) -> tuple[Path, Path]:
    """Write the HTML listing and today's digest; returns both paths."""
    site_cfg = site_cfg or {}
    output_dir.mkdir(parents=True, exist_ok=True)

    html_path = output_dir / site_cfg.get("html_file", "index.html")
    text_path = output_dir / site_cfg.get("text_file", "today.txt")

    html_path.write_text(
        render_page(
            venues,
            shows,
            tz,
            failures=failures,
            calendar_domain=site_cfg.get("calendar_domain", ical.DEFAULT_DOMAIN),
            title=site_cfg.get("title", "Shows"),
        ),
        encoding="utf-8",
    )
    text_path.write_text(render_digest(shows, run_day, tz), encoding="utf-8")
    return html_path, text_path
