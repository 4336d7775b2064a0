from __future__ import annotations

import logging
from enum import Enum

from .errors import UnsupportedHost
from .urls import ParsedUrl

LOGGER = logging.getLogger(__name__)


class HostKind(Enum):
    """Supported tournament hosting platforms."""

    TABROOM = "tabroom"


KNOWN_HOSTS: dict[HostKind, frozenset[str]] = {
    HostKind.TABROOM: frozenset({"tabroom.com", "www.tabroom.com"}),
}


def classify(url: ParsedUrl) -> HostKind:
    """Match the normalized host against KNOWN_HOSTS. Shortlink sub-domains never match."""
    for kind, hosts in KNOWN_HOSTS.items():
        if url.host in hosts:
            LOGGER.debug("Host %s classified as %s", url.host, kind.value)
            return kind
    raise UnsupportedHost(url.host)
