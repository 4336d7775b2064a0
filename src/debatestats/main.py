from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from .config import Settings
from .errors import DebateStatsError
from .formatters import format_tournament
from .pipeline import fetch_tournament

LOGGER = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="debate-stats",
        description="Print a tournament's events and entries from its tabroom.com URL.",
    )
    parser.add_argument("url", help="e.g. https://www.tabroom.com/index/tourn/index.mhtml?tourn_id=17253")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    load_dotenv()
    settings = Settings.from_env()

    try:
        tournament = fetch_tournament(args.url, settings=settings)
    except DebateStatsError as exc:
        LOGGER.error("%s", exc)
        return 1

    print(format_tournament(tournament))
    return 0


if __name__ == "__main__":
    sys.exit(main())
