from __future__ import annotations

from dataclasses import dataclass
from os import getenv

DEFAULT_TIMEOUT_SECONDS = 20.0
DEFAULT_USER_AGENT = "debate-stats/0.1"


@dataclass(slots=True)
class Settings:
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_env(cls) -> "Settings":
        raw_timeout = getenv("DEBATESTATS_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS)).strip()
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ValueError(f"DEBATESTATS_TIMEOUT_SECONDS must be a number, got {raw_timeout!r}") from None
        if timeout <= 0:
            raise ValueError("DEBATESTATS_TIMEOUT_SECONDS must be positive")

        user_agent = getenv("DEBATESTATS_USER_AGENT", "").strip() or DEFAULT_USER_AGENT

        return cls(
            timeout_seconds=timeout,
            user_agent=user_agent,
        )
