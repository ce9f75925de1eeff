"""Error hierarchy and user-facing notices."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

NoticeVariant = Literal["default", "destructive"]


@dataclass(slots=True, frozen=True)
class Notice:
    """Transient notification shown to the user."""

    title: str
    description: str = ""
    variant: NoticeVariant = "default"


class FreelanceHubError(Exception):
    """Base class for all errors surfaced to the user."""

    title = "Something went wrong"

    def to_notice(self) -> Notice:
        return Notice(title=self.title, description=str(self), variant="destructive")


class FormValidationError(FreelanceHubError, ValueError):
    """Raised when a form fails schema validation."""

    title = "Please fix the highlighted fields"

    def __init__(self, errors: dict[str, str]):
        super().__init__("; ".join(f"{field}: {message}" for field, message in errors.items()))
        self.errors = errors


class SalaryParseError(FreelanceHubError, ValueError):
    """Raised by strict salary parsing on malformed input."""

    title = "Invalid salary range"


class StoreError(FreelanceHubError):
    """Raised when a BaaS request fails."""

    title = "Request failed"

    def __init__(self, message: str, *, code: str | None = None, status: int | None = None):
        super().__init__(message)
        self.code = code
        self.status = status


class NotFoundError(StoreError):
    """Raised when a requested record does not exist."""

    title = "Not found"


class AuthError(StoreError):
    """Raised when sign-in or sign-up is rejected."""

    title = "Authentication failed"


class AuthRequiredError(FreelanceHubError):
    """Raised when an operation needs a signed-in user."""

    title = "Sign in required"


class ProfileRequiredError(FreelanceHubError):
    """Raised when an operation needs a completed profile."""

    title = "Profile required"


class AccessDeniedError(FreelanceHubError):
    """Raised when the current user type may not perform an operation."""

    title = "Access Denied"


class InvalidTransitionError(FreelanceHubError, ValueError):
    """Raised on a disallowed status change."""

    title = "Invalid status change"


class RateLimitedError(FreelanceHubError):
    """Raised when an identifier exceeds its attempt budget."""

    title = "Too many attempts"


class OperationCancelled(FreelanceHubError):
    """Raised when a result arrives after its owner was torn down."""

    title = "Operation cancelled"


def to_notice(exc: Exception) -> Notice:
    """Map any exception to a notice, hiding details of unexpected ones."""
    if isinstance(exc, FreelanceHubError):
        return exc.to_notice()
    return Notice(title="Something went wrong", description="Please try again", variant="destructive")


__all__ = [
    "AccessDeniedError",
    "AuthError",
    "AuthRequiredError",
    "FormValidationError",
    "FreelanceHubError",
    "InvalidTransitionError",
    "NotFoundError",
    "Notice",
    "OperationCancelled",
    "ProfileRequiredError",
    "RateLimitedError",
    "SalaryParseError",
    "StoreError",
    "to_notice",
]
