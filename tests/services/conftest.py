from __future__ import annotations

from typing import Callable

import pytest

from freelancehub.security import RateLimiter
from freelancehub.services import SessionContext
from freelancehub.store import InMemoryAuthProvider, InMemoryFileStorage, InMemoryRecordStore


@pytest.fixture
def store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture
def files() -> InMemoryFileStorage:
    return InMemoryFileStorage()


@pytest.fixture
def auth() -> InMemoryAuthProvider:
    return InMemoryAuthProvider()


@pytest.fixture
def session(auth, store) -> SessionContext:
    return SessionContext(auth=auth, store=store, limiter=RateLimiter(max_attempts=3))


@pytest.fixture
def open_session(auth, store) -> Callable[..., SessionContext]:
    """Sign a new user up in a fresh session, optionally with a stored profile."""

    def factory(
        email: str,
        user_type: str | None = None,
        *,
        verified: bool = False,
        location: str = "Cape Town",
        services: list[str] | None = None,
    ) -> SessionContext:
        session = SessionContext(auth=auth, store=store)
        user = session.sign_up(
            {
                "first_name": email.split("@")[0].title(),
                "last_name": "Tester",
                "email": email,
                "password": "Secret123",
                "confirm_password": "Secret123",
                "user_type": user_type or "client",
                "agree_to_terms": True,
            }
        )
        if user_type:
            store.insert(
                "profiles",
                {
                    "id": user.id,
                    "email": email,
                    "full_name": f"{email.split('@')[0].title()} Tester",
                    "location": location,
                    "user_type": user_type,
                    "is_verified": verified,
                    "services_offered": services or [],
                },
            )
            session.refresh_profile()
        return session

    return factory
