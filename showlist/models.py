import hashlib
import re
from dataclasses import dataclass, field
from datetime import datetime

from showlist.text import normalize


def slugify(name: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")


@dataclass
class RawShow:
    """A show as emitted by a scraper, before it is attached to its venue."""
    time: datetime     # Timezone-aware
    link: str
    title: str
    description: str = ""


@dataclass
class Venue:
    name: str
    link: str
    shows: list["Show"] = field(default_factory=list, repr=False)
    slug: str = field(init=False)   # Stable id used to scope the UI filters

    def __post_init__(self):
        self.slug = slugify(self.name)

    def add(self, raw: RawShow) -> "Show":
        show = Show(
            time=raw.time,
            link=raw.link,
            title=normalize(raw.title),
            description=normalize(raw.description),
            venue=self,
        )
        self.shows.append(show)
        return show


@dataclass
class Show:
    time: datetime
    link: str
    title: str
    description: str
    venue: Venue = field(repr=False, compare=False)

    @property
    def digest(self) -> str:
        key = f"{self.time.isoformat()}:{self.link}:{self.title}:{self.description}:{self.venue.name}"
        return hashlib.sha256(key.encode("utf-8")).hexdigest()

    def ical_link(self, domain: str | None = None) -> str:
        from showlist import ical

        return ical.data_uri(self, domain or ical.DEFAULT_DOMAIN)
