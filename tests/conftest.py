from __future__ import annotations

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo ``configure_logging`` calls made by CLI tests.

    The CLI binds the logger to the stderr stream of the invocation, which the
    test runner discards afterwards.
    """
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
