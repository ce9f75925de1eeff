from __future__ import annotations

import pytest

from freelancehub.errors import FormValidationError, RateLimitedError
from freelancehub.security import RateLimiter
from freelancehub.services import ContactService

MESSAGE = {"name": "Eve", "email": "eve@example.com", "subject": "Billing", "message": "Where is my invoice?"}


def test_submit_returns_confirmation():
    notice = ContactService(limiter=RateLimiter()).submit(MESSAGE)

    assert notice.title == "Message Sent"
    assert notice.variant == "default"


def test_submit_is_rate_limited():
    service = ContactService(limiter=RateLimiter(max_attempts=1))
    service.submit(MESSAGE)

    with pytest.raises(RateLimitedError):
        service.submit({**MESSAGE, "email": "EVE@example.com"})


def test_submit_validates_form():
    with pytest.raises(FormValidationError) as exc:
        ContactService(limiter=RateLimiter()).submit({**MESSAGE, "email": "nope"})
    assert exc.value.errors == {"email": "Please enter a valid email address"}
