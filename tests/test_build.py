from datetime import date, datetime

from showlist.generator.build import (
    GREETING,
    build_site,
    format_clock,
    format_day,
    render_digest,
    render_page,
)
from showlist.models import Venue
from showlist.pipeline import AdapterFailure


def test_format_clock():
    assert format_clock(datetime(2024, 3, 15, 19, 0)) == "7:00pm"
    assert format_clock(datetime(2024, 3, 15, 21, 30)) == "9:30pm"
    assert format_clock(datetime(2024, 3, 15, 0, 5)) == "12:05am"
    assert format_clock(datetime(2024, 3, 15, 12, 0)) == "12:00pm"


def test_format_day():
    assert format_day(datetime(2024, 3, 5, 19, 0)) == "Tue, Mar 5"


def test_digest_text_for_two_shows(make_show, la):
    a = Venue(name="Venue A", link="https://a.example")
    b = Venue(name="Venue B", link="https://b.example")
    shows = [
        make_show(title="Gig 1", time=datetime(2024, 3, 15, 19, 0, tzinfo=la), venue=a),
        make_show(title="Gig 2", time=datetime(2024, 3, 15, 21, 30, tzinfo=la), venue=b),
        make_show(title="Tomorrow", time=datetime(2024, 3, 16, 20, 0, tzinfo=la), venue=b),
    ]

    assert render_digest(shows, date(2024, 3, 15), la) == (
        "Hello, you're listening to today's shows. "
        "At 7:00pm Venue A is showing: Gig 1. "
        "At 9:30pm Venue B is showing: Gig 2."
    )


def test_digest_without_shows_today_is_just_the_greeting(make_show, la):
    shows = [make_show(time=datetime(2024, 3, 16, 20, 0, tzinfo=la))]
    assert render_digest(shows, date(2024, 3, 15), la) == GREETING
    assert render_digest([], date(2024, 3, 15), la) == GREETING


def test_page_has_one_filter_per_venue_in_name_order(make_show, la):
    zeta = Venue(name="Zeta Room", link="https://zeta.example")
    alpha = Venue(name="Alpha Hall", link="https://alpha.example")
    shows = [make_show(venue=zeta), make_show(venue=alpha)]

    html = render_page([zeta, alpha], shows, la)

    assert html.count('<input type="checkbox"') == 2
    assert html.index('id="venue-alpha-hall"') < html.index('id="venue-zeta-room"')
    assert 'tr[data-venue="zeta-room"]' in html
    assert '<tr data-venue="alpha-hall">' in html
    assert "isolateVenue" in html


def test_page_row_contents(make_show, la):
    show = make_show(title="Test Band", link="https://venue.example/show/42")

    html = render_page([show.venue], [show], la)

    assert "Fri, Mar 15" in html
    assert "8:00pm" in html
    assert f'download="{show.digest}.ics"' in html
    assert 'href="data:text/calendar;base64,' in html
    assert '<a href="https://venue.example/show/42">Test Band</a>' in html
    assert '<a href="https://venue-a.example">Venue A</a>' in html


def test_page_escapes_scraped_text(make_show, la):
    show = make_show(title="<script>alert(1)</script>", description='Rock & "roll"')

    html = render_page([show.venue], [show], la)

    assert "<script>alert(1)</script>" not in html
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html
    assert "Rock &amp; &#34;roll&#34;" in html


def test_page_truncates_long_descriptions(make_show, la):
    show = make_show(description="word " * 400)
    html = render_page([show.venue], [show], la)
    assert "word…" in html
    assert "word " * 300 not in html


def test_page_marks_failed_venues(la):
    broken = Venue(name="Broken Venue", link="https://broken.example")
    failure = AdapterFailure("broken", "Broken Venue", ValueError("boom"))

    html = render_page([broken], [], la, failures=[failure])

    assert "Broken Venue (no listings this run)" in html


def test_build_site_writes_both_files(make_show, la, tmp_path):
    show = make_show(title="Gig 1", time=datetime(2024, 3, 15, 19, 0, tzinfo=la))
    output_dir = tmp_path / "out"

    html_path, text_path = build_site(
        [show.venue], [show], date(2024, 3, 15), la, output_dir,
        site_cfg={"text_file": "digest.txt", "calendar_domain": "shows.example"},
    )

    assert html_path == output_dir / "index.html"
    assert text_path == output_dir / "digest.txt"
    assert "Gig 1" in html_path.read_text(encoding="utf-8")
    assert text_path.read_text(encoding="utf-8") == f"{GREETING} At 7:00pm Venue A is showing: Gig 1."
