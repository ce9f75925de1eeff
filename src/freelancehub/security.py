"""Input sanitization, format checks and form rate limiting."""

from __future__ import annotations

import re
import time
from typing import Callable

_HTML_ENTITIES: dict[str, str] = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#x27;",
    "/": "&#x2F;",
}

_ESCAPE_PATTERN = re.compile(r"[&<>\"'/]")

_EMAIL_PATTERN = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)

_MALICIOUS_PATTERNS = [
    re.compile(r"<script", re.IGNORECASE),
    re.compile(r"javascript:", re.IGNORECASE),
    re.compile(r"on\w+\s*=", re.IGNORECASE),
    re.compile(r"data:text/html", re.IGNORECASE),
    re.compile(r"vbscript:", re.IGNORECASE),
    re.compile(r"<iframe", re.IGNORECASE),
    re.compile(r"<object", re.IGNORECASE),
    re.compile(r"<embed", re.IGNORECASE),
]

MAX_INPUT_LENGTH = 1000


def sanitize_input(value: object) -> str:
    """Trim, HTML-escape and truncate free-text input."""
    if not isinstance(value, str):
        return ""
    escaped = _ESCAPE_PATTERN.sub(lambda match: _HTML_ENTITIES[match.group(0)], value.strip())
    return escaped[:MAX_INPUT_LENGTH]


def is_valid_email(email: str) -> bool:
    return bool(_EMAIL_PATTERN.match(email)) and len(email) <= 254


def contains_malicious_patterns(value: str) -> bool:
    return any(pattern.search(value) for pattern in _MALICIOUS_PATTERNS)


class RateLimiter:
    """Sliding-window attempt counter keyed by an identifier."""

    def __init__(
        self,
        max_attempts: int = 5,
        window_seconds: float = 15 * 60,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._max_attempts = max_attempts
        self._window = window_seconds
        self._clock = clock
        self._attempts: dict[str, list[float]] = {}

    def is_allowed(self, identifier: str) -> bool:
        """Record an attempt and report whether it fits in the window."""
        now = self._clock()
        self._prune(now)
        recent = [stamp for stamp in self._attempts.get(identifier, []) if now - stamp < self._window]
        if len(recent) >= self._max_attempts:
            self._attempts[identifier] = recent
            return False
        recent.append(now)
        self._attempts[identifier] = recent
        return True

    def reset(self, identifier: str) -> None:
        self._attempts.pop(identifier, None)

    @property
    def tracked(self) -> int:
        """Number of identifiers with attempts still inside the window."""
        return len(self._attempts)

    def _prune(self, now: float) -> None:
        # Stamps are appended in order, so the last one is the newest.
        stale = [key for key, stamps in self._attempts.items() if not stamps or now - stamps[-1] >= self._window]
        for key in stale:
            del self._attempts[key]


__all__ = [
    "RateLimiter",
    "contains_malicious_patterns",
    "is_valid_email",
    "sanitize_input",
]
