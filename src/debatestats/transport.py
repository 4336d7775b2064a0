from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

import httpx

from .config import Settings
from .errors import TransportFailure, TransportTimeout

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FeedResponse:
    status: int
    body: str
    url: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class Transport(Protocol):
    def fetch(self, url: str) -> FeedResponse: ...


class HttpxTransport:
    """Blocking transport backed by :mod:`httpx`.

    Each fetch opens and closes its own client unless one is passed in, so
    separate calls share no connection state.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self._client = client

    def fetch(self, url: str) -> FeedResponse:
        LOGGER.info("Fetching %s", url)
        try:
            if self._client is not None:
                response = self._client.get(url)
            else:
                with httpx.Client(
                    timeout=self.settings.timeout_seconds,
                    headers={"User-Agent": self.settings.user_agent},
                    follow_redirects=True,
                ) as client:
                    response = client.get(url)
        except httpx.TimeoutException as exc:
            raise TransportTimeout(url, exc) from exc
        except httpx.HTTPError as exc:
            raise TransportFailure(url, exc) from exc

        LOGGER.debug("Got HTTP %d (%d bytes) from %s", response.status_code, len(response.content), url)
        return FeedResponse(status=response.status_code, body=response.text, url=url)
