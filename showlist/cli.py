import argparse
import sys
from datetime import datetime
from pathlib import Path

from showlist import __version__
import showlist.config as cfg_module
from showlist.fetch import Fetcher
from showlist.generator.build import build_site
from showlist.pipeline import collect, upcoming
from showlist.scrapers import SCRAPERS


def _report(venue, failure):
    if failure:
        print(f"Scraping {venue.name} ... FAILED ({failure.error})", file=sys.stderr)
    else:
        print(f"Scraping {venue.name} ... {len(venue.shows)} shows.")


def _run(args, cfg):
    if args.venue:
        if args.venue not in SCRAPERS:
            print(f"Error: no scraper registered for venue '{args.venue}'.", file=sys.stderr)
            print(f"Available scrapers: {', '.join(sorted(SCRAPERS))}", file=sys.stderr)
            sys.exit(1)
        targets = [SCRAPERS[args.venue]]
    else:
        targets = [cls for key, cls in SCRAPERS.items() if cfg_module.is_enabled(cfg, key)]

    if not targets:
        print("No enabled scrapers found. Check your config.toml [venues] section.")
        return

    tz = cfg_module.get_timezone(cfg)
    run_day = datetime.now(tz).date()

    with Fetcher(timeout=cfg_module.get_timeout(cfg), tz=tz, today=run_day) as fetcher:
        venues, failures = collect(targets, fetcher, on_result=_report)

    shows = upcoming(venues, run_day, tz)
    output_dir = Path(args.output_dir) if args.output_dir else cfg_module.get_output_dir(cfg)
    html_path, text_path = build_site(
        venues,
        shows,
        run_day,
        tz,
        output_dir,
        failures=failures,
        site_cfg=cfg_module.get_site(cfg),
    )
    print(f"{len(shows)} upcoming shows written to '{html_path}' and '{text_path}'.")
    if failures:
        print(f"{len(failures)} venue(s) failed; their listings are missing from this run.", file=sys.stderr)


def _venues(args, cfg):
    for key, cls in SCRAPERS.items():
        state = "" if cfg_module.is_enabled(cfg, key) else " (disabled)"
        print(f"{key:<18}{cls.venue_name}  {cls.venue_link}{state}")


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="shows",
        description="Upcoming shows static page generator",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--config", default="config.toml", metavar="PATH",
        help="Path to config.toml (default: config.toml, optional)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # run (scrape + render)
    sp_run = subparsers.add_parser("run", help="Scrape all venues then write the page and digest")
    sp_run.add_argument(
        "--venue", metavar="KEY",
        help="Only scrape this venue (by its registry key)",
    )
    sp_run.add_argument(
        "--output-dir", metavar="DIR",
        help="Where to write the output files (default: [site] output_dir or 'output')",
    )

    # venues
    subparsers.add_parser("venues", help="List the registered venue scrapers")

    args = parser.parse_args(argv)
    cfg = cfg_module.load(Path(args.config))

    if args.command == "run":
        _run(args, cfg)
    elif args.command == "venues":
        _venues(args, cfg)


if __name__ == "__main__":
    main()
