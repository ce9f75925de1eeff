"""Signed-in user state, owned by the application lifecycle."""

from __future__ import annotations

from typing import Any

import structlog

from ..errors import (
    AccessDeniedError,
    AuthRequiredError,
    ProfileRequiredError,
    RateLimitedError,
)
from ..lifecycle import CancelToken
from ..schemas import AuthUser, LoginForm, Profile, SignupForm, UserType, validate_form
from ..security import RateLimiter, sanitize_input
from ..store import AuthProvider, RecordStore


class SessionContext:
    """Explicit replacement for an ambient auth context.

    Services receive the session by injection and read the current user and
    profile from it. ``close`` cancels the session token, so results of calls
    still in flight are dropped instead of being applied to a torn-down session.
    """

    def __init__(
        self,
        *,
        auth: AuthProvider,
        store: RecordStore,
        limiter: RateLimiter | None = None,
    ) -> None:
        self._auth = auth
        self._store = store
        self._limiter = limiter or RateLimiter()
        self._token = CancelToken()
        self._user: AuthUser | None = None
        self._profile: Profile | None = None
        self._logger = structlog.get_logger(__name__)

    def __enter__(self) -> "SessionContext":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    @property
    def token(self) -> CancelToken:
        return self._token

    @property
    def closed(self) -> bool:
        return self._token.cancelled

    @property
    def user(self) -> AuthUser | None:
        return self._user

    @property
    def profile(self) -> Profile | None:
        return self._profile

    def checkpoint(self, operation: str) -> None:
        """Raise ``OperationCancelled`` once the session has been closed."""
        self._token.raise_if_cancelled(operation)

    def sign_up(self, data: dict[str, Any]) -> AuthUser:
        form = validate_form(SignupForm, data)
        first_name = sanitize_input(form.first_name)
        last_name = sanitize_input(form.last_name)
        user = self._auth.sign_up(
            form.email,
            form.password,
            metadata={
                "first_name": first_name,
                "last_name": last_name,
                "full_name": f"{first_name} {last_name}",
                "user_type": form.user_type.value,
            },
        )
        self.checkpoint("sign_up")
        self._set_user(user)
        self._profile = None
        self._logger.info("session.signed_up", user_type=form.user_type.value)
        return user

    def sign_in(self, data: dict[str, Any]) -> AuthUser:
        form = validate_form(LoginForm, data)
        identifier = form.email.lower()
        if not self._limiter.is_allowed(identifier):
            self._logger.warning("session.sign_in_rate_limited")
            raise RateLimitedError("Too many sign-in attempts. Please try again later.")
        user = self._auth.sign_in(form.email, form.password)
        self.checkpoint("sign_in")
        self._limiter.reset(identifier)
        self._set_user(user)
        self.refresh_profile()
        self._logger.info("session.signed_in", has_profile=self._profile is not None)
        return user

    def sign_out(self) -> None:
        self._auth.sign_out()
        self._clear()
        self._logger.info("session.signed_out")

    def refresh_profile(self) -> Profile | None:
        user = self.require_user()
        rows = self._store.select("profiles", filters={"id": user.id})
        self.checkpoint("refresh_profile")
        self._profile = Profile.model_validate(rows[0]) if rows else None
        return self._profile

    def require_user(self) -> AuthUser:
        if self._user is None:
            raise AuthRequiredError("Please sign in to continue")
        return self._user

    def require_profile(self, user_type: UserType | None = None, *, denial: str | None = None) -> Profile:
        self.require_user()
        if self._profile is None:
            raise ProfileRequiredError("Please complete your profile first")
        if user_type is not None and self._profile.user_type != user_type:
            raise AccessDeniedError(denial or f"Only {user_type.value}s can do this")
        return self._profile

    def close(self) -> None:
        if self.closed:
            return
        self._token.cancel()
        self._clear()
        self._logger.info("session.closed")

    def _set_user(self, user: AuthUser) -> None:
        self._user = user
        structlog.contextvars.bind_contextvars(user_id=user.id)

    def _clear(self) -> None:
        self._user = None
        self._profile = None
        structlog.contextvars.unbind_contextvars("user_id")
