from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import parse_qsl, urlsplit

from .errors import InvalidUrl

_SCHEMES = {"http", "https"}


@dataclass(frozen=True, slots=True)
class ParsedUrl:
    raw: str
    scheme: str
    host: str
    port: int | None = None
    path: str = ""
    query: tuple[tuple[str, str], ...] = ()

    def query_value(self, name: str) -> str | None:
        for key, value in self.query:
            if key == name:
                return value
        return None


def process_url(text: str) -> ParsedUrl:
    """Validate ``text`` as an absolute http(s) URL.

    Schemeless input is rejected rather than guessed. The host is lowercased.
    """
    candidate = text.strip()
    try:
        parts = urlsplit(candidate)
        port = parts.port
    except ValueError as exc:
        raise InvalidUrl(text, str(exc)) from exc

    if not parts.scheme:
        raise InvalidUrl(text, "relative URL without a scheme")
    if parts.scheme.lower() not in _SCHEMES:
        raise InvalidUrl(text, f"unsupported scheme {parts.scheme!r}")

    host = _host_from_netloc(parts.netloc)
    if not host:
        raise InvalidUrl(text, "empty host")

    return ParsedUrl(
        raw=candidate,
        scheme=parts.scheme.lower(),
        host=host,
        port=port,
        path=parts.path,
        query=tuple(parse_qsl(parts.query, keep_blank_values=True)),
    )


def _host_from_netloc(netloc: str) -> str:
    # Keeps IPv6 brackets, unlike urlsplit().hostname.
    host = netloc.rsplit("@", 1)[-1].lower()
    if host.startswith("["):
        return host[: host.find("]") + 1]
    return host.split(":", 1)[0]
