"""Ports to the backend-as-a-service and their implementations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Protocol, runtime_checkable

from ..schemas import AuthUser


@dataclass(frozen=True, slots=True)
class Upload:
    """A file picked by the user, ready to be sent to storage."""

    filename: str
    content: bytes
    content_type: str = "application/octet-stream"

    @property
    def extension(self) -> str:
        _, dot, ext = self.filename.rpartition(".")
        return ext.lower() if dot else "bin"


@runtime_checkable
class RecordStore(Protocol):
    """Table-oriented CRUD against the BaaS.

    ``filters`` are column equality constraints; all of them must hold.
    """

    def select(
        self,
        table: str,
        *,
        filters: Mapping[str, Any] | None = None,
        order_by: str | None = None,
        descending: bool = False,
    ) -> list[dict[str, Any]]:
        """Return matching rows."""

    def insert(self, table: str, record: Mapping[str, Any]) -> dict[str, Any]:
        """Insert a row and return it as stored, defaults included."""

    def update(
        self,
        table: str,
        changes: Mapping[str, Any],
        *,
        filters: Mapping[str, Any],
    ) -> list[dict[str, Any]]:
        """Apply ``changes`` to matching rows and return them."""


@runtime_checkable
class FileStorage(Protocol):
    """Bucketed object storage with public URLs."""

    def upload(self, bucket: str, path: str, content: bytes, *, content_type: str = "application/octet-stream") -> str:
        """Store an object and return its path within the bucket."""

    def public_url(self, bucket: str, path: str) -> str:
        """Return the public URL of a stored object."""


@runtime_checkable
class AuthProvider(Protocol):
    """Email/password identity provider."""

    def sign_up(self, email: str, password: str, *, metadata: Mapping[str, str] | None = None) -> AuthUser:
        """Register a new user."""

    def sign_in(self, email: str, password: str) -> AuthUser:
        """Authenticate and return the user."""

    def sign_out(self) -> None:
        """Drop the current credentials."""


from .memory import InMemoryAuthProvider, InMemoryFileStorage, InMemoryRecordStore  # noqa: E402
from .rest import RestAuthProvider, RestClient, RestFileStorage, RestRecordStore  # noqa: E402

__all__ = [
    "AuthProvider",
    "FileStorage",
    "InMemoryAuthProvider",
    "InMemoryFileStorage",
    "InMemoryRecordStore",
    "RecordStore",
    "RestAuthProvider",
    "RestClient",
    "RestFileStorage",
    "RestRecordStore",
    "Upload",
]
