"""Public contact form."""

from __future__ import annotations

from typing import Any

import structlog

from ..errors import Notice, RateLimitedError
from ..schemas import ContactForm, validate_form
from ..security import RateLimiter, sanitize_input


class ContactService:
    def __init__(self, *, limiter: RateLimiter) -> None:
        self._limiter = limiter
        self._logger = structlog.get_logger(__name__)

    def submit(self, data: dict[str, Any]) -> Notice:
        form = validate_form(ContactForm, data)
        if not self._limiter.is_allowed(form.email.lower()):
            raise RateLimitedError("Too many messages sent. Please try again later.")
        self._logger.info(
            "contact.submitted",
            name=sanitize_input(form.name),
            subject=sanitize_input(form.subject),
            length=len(sanitize_input(form.message)),
        )
        return Notice(
            title="Message Sent",
            description="Thank you for contacting us. We'll respond to your inquiry shortly.",
        )
