from datetime import datetime

import pytest
from dateutil import tz

from showlist.models import RawShow, Venue

LA = tz.gettz("America/Los_Angeles")


@pytest.fixture
def la():
    return LA


@pytest.fixture
def make_show():
    """Build a Show attached to a (new or given) venue."""
    def _make(title="Test Band", time=None, venue=None, link="https://venue.example/show/1",
              description="Doors 7pm"):
        venue = venue or Venue(name="Venue A", link="https://venue-a.example")
        return venue.add(RawShow(
            time=time or datetime(2024, 3, 15, 20, 0, tzinfo=LA),
            link=link,
            title=title,
            description=description,
        ))
    return _make
