"""Become-a-client registration."""

from __future__ import annotations

from typing import Any

import structlog

from ..errors import Notice
from ..schemas import ClientRegistrationForm, validate_form
from ..security import sanitize_input


class ClientRegistrationService:
    def __init__(self) -> None:
        self._logger = structlog.get_logger(__name__)

    def register(self, data: dict[str, Any]) -> tuple[ClientRegistrationForm, Notice]:
        """Validate the registration form; the caller returns the visitor to ``/``."""
        form = validate_form(ClientRegistrationForm, data)
        self._logger.info(
            "client.registered",
            name=sanitize_input(form.full_name),
            country=form.country,
            language=form.language,
        )
        return form, Notice(
            title="Registration Successful",
            description="Your account has been created successfully.",
        )
