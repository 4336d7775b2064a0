from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from . import tabroom
from .config import Settings
from .errors import HttpFailure
from .hosts import HostKind, classify
from .models import Tournament
from .transport import HttpxTransport, Transport
from .urls import ParsedUrl, process_url

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Platform:
    feed_url: Callable[[ParsedUrl], str]
    parse_feed: Callable[[str], Tournament]


PLATFORMS: dict[HostKind, Platform] = {
    HostKind.TABROOM: Platform(feed_url=tabroom.feed_url, parse_feed=tabroom.parse_feed),
}


def fetch_tournament(
    url: str,
    *,
    transport: Transport | None = None,
    settings: Settings | None = None,
) -> Tournament:
    """Build a tournament from one of its public pages.

    Only tabroom.com is supported at the moment. Every failure surfaces as a
    :class:`~debatestats.errors.DebateStatsError` subclass; nothing is retried.
    """
    parsed = process_url(url)
    platform = PLATFORMS[classify(parsed)]
    target = platform.feed_url(parsed)

    transport = transport or HttpxTransport(settings)
    response = transport.fetch(target)
    if not response.ok:
        raise HttpFailure(response.status, target)

    return platform.parse_feed(response.body)


def parse_feed(kind: HostKind, body: str) -> Tournament:
    return PLATFORMS[kind].parse_feed(body)
