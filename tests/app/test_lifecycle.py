from __future__ import annotations

import pytest

from freelancehub.errors import FormValidationError, Notice, OperationCancelled, StoreError, to_notice
from freelancehub.lifecycle import CancelToken


def test_cancelled_token_raises():
    token = CancelToken()
    token.raise_if_cancelled("fetch")

    token.cancel()
    assert token.cancelled
    with pytest.raises(OperationCancelled, match="fetch finished after its owner was closed"):
        token.raise_if_cancelled("fetch")


def test_errors_map_to_notices():
    notice = to_notice(StoreError("Network error: timeout"))
    assert notice == Notice(title="Request failed", description="Network error: timeout", variant="destructive")

    form_notice = FormValidationError({"email": "Please enter a valid email address"}).to_notice()
    assert form_notice.description == "email: Please enter a valid email address"

    assert to_notice(RuntimeError("boom")).description == "Please try again"
