from __future__ import annotations


class DebateStatsError(Exception):
    """Base class for every error raised while building a tournament."""


class InvalidUrl(DebateStatsError):
    def __init__(self, url: str, diagnostic: str) -> None:
        self.url = url
        self.diagnostic = diagnostic
        super().__init__(f"unable to convert {url!r} to a url: {diagnostic}")


class UnsupportedHost(DebateStatsError):
    def __init__(self, host: str) -> None:
        self.host = host
        super().__init__(f"we don't currently support that tournament host: {host!r}")


class IdNotFound(DebateStatsError):
    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"unable to find the tournament's ID in {url!r}")


class TransportFailure(DebateStatsError):
    def __init__(self, url: str, cause: Exception) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"unable to fetch {url!r}: {cause}")


class TransportTimeout(TransportFailure):
    pass


class HttpFailure(DebateStatsError):
    def __init__(self, status: int, url: str) -> None:
        self.status = status
        self.url = url
        super().__init__(f"unexpected HTTP status {status} from {url!r}")


class DecodeFailed(DebateStatsError):
    def __init__(self, diagnostic: str) -> None:
        self.diagnostic = diagnostic
        super().__init__(f"unable to decode the tournament feed: {diagnostic}")
