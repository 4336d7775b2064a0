"""tabroom.com support.

Tabroom publishes every tournament as a single tagged-record feed, which
saves us from scraping its HTML pages.
"""

from __future__ import annotations

from .errors import IdNotFound
from .models import Tournament
from .records import decode_feed
from .resolver import resolve
from .urls import ParsedUrl

ID_PARAM = "tourn_id"
FEED_URL_TEMPLATE = "https://www.tabroom.com/api/tourn_published.mhtml?tourn_id={tourn_id}"
_MAX_ID = 2**32 - 1


def tournament_id(url: ParsedUrl) -> int:
    """Get the tournament's id from any tabroom page about it."""
    value = url.query_value(ID_PARAM)
    if value is None or not (value.isascii() and value.isdigit()):
        raise IdNotFound(url.raw)
    tourn_id = int(value)
    if tourn_id > _MAX_ID:
        raise IdNotFound(url.raw)
    return tourn_id


def feed_url(url: ParsedUrl) -> str:
    return FEED_URL_TEMPLATE.format(tourn_id=tournament_id(url))


def parse_feed(body: str) -> Tournament:
    return resolve(decode_feed(body))
