"""
Scraper registry.

To add a new venue scraper:
1. Create <venue_key>.py with a class setting venue_key, venue_name and
   venue_link and implementing fetch_shows(fetcher)
2. Import and register it in the SCRAPERS dict below
3. Save a copy of the page or feed under tests/fixtures/ and test against it
"""

from showlist.scrapers.base import Scraper
from showlist.scrapers.bottomofthehill import BottomOfTheHillScraper
from showlist.scrapers.brickandmortar import BrickAndMortarScraper
from showlist.scrapers.cornerstone import CornerstoneScraper
from showlist.scrapers.dnalounge import DnaLoungeScraper
from showlist.scrapers.kilowatt import KilowattScraper
from showlist.scrapers.knockout import KnockoutScraper
from showlist.scrapers.rickshawstop import RickshawStopScraper
from showlist.scrapers.thechapel import TheChapelScraper

SCRAPERS: dict[str, type[Scraper]] = {
    "cornerstone": CornerstoneScraper,
    "bottomofthehill": BottomOfTheHillScraper,
    "brickandmortar": BrickAndMortarScraper,
    "rickshawstop": RickshawStopScraper,
    "dnalounge": DnaLoungeScraper,
    "kilowatt": KilowattScraper,
    "knockout": KnockoutScraper,
    "thechapel": TheChapelScraper,
}
