"""In-process stand-ins for the BaaS, used by the demo CLI and tests."""

from __future__ import annotations

import copy
import hashlib
import secrets
import uuid
from typing import Any, Callable, Mapping

import structlog

from ..clock import utc_timestamp
from ..errors import AuthError, StoreError
from ..schemas import AuthUser


# Column defaults the hosted schema fills in on insert.
_COLUMN_DEFAULTS: dict[str, dict[str, Callable[[], Any]]] = {
    "profiles": {"is_verified": lambda: False, "services_offered": list},
    "bookings": {"created_at": utc_timestamp, "status": lambda: "pending"},
    "conversations": {"updated_at": utc_timestamp},
    "messages": {"sent_at": utc_timestamp},
    "verification_documents": {"status": lambda: "pending", "submitted_at": utc_timestamp, "supporting_documents_url": list},
}


class InMemoryRecordStore:
    """Dict-of-lists table store with the ``RecordStore`` interface."""

    def __init__(self, tables: Mapping[str, list[dict[str, Any]]] | None = None) -> None:
        self._tables: dict[str, list[dict[str, Any]]] = {
            name: [dict(row) for row in rows] for name, rows in (tables or {}).items()
        }
        self._logger = structlog.get_logger(__name__)

    def select(
        self,
        table: str,
        *,
        filters: Mapping[str, Any] | None = None,
        order_by: str | None = None,
        descending: bool = False,
    ) -> list[dict[str, Any]]:
        rows = [row for row in self._tables.get(table, []) if _matches(row, filters)]
        if order_by:
            present = [row for row in rows if row.get(order_by) is not None]
            missing = [row for row in rows if row.get(order_by) is None]
            present.sort(key=lambda row: row[order_by], reverse=descending)
            rows = present + missing
        return copy.deepcopy(rows)

    def insert(self, table: str, record: Mapping[str, Any]) -> dict[str, Any]:
        rows = self._tables.setdefault(table, [])
        row = {"id": str(uuid.uuid4())}
        for column, factory in _COLUMN_DEFAULTS.get(table, {}).items():
            row[column] = factory()
        row.update(copy.deepcopy(dict(record)))
        if any(existing["id"] == row["id"] for existing in rows):
            raise StoreError(
                f'duplicate key value violates unique constraint "{table}_pkey"',
                code="23505",
                status=409,
            )
        rows.append(row)
        self._logger.debug("store.insert", table=table, id=row["id"])
        return copy.deepcopy(row)

    def update(
        self,
        table: str,
        changes: Mapping[str, Any],
        *,
        filters: Mapping[str, Any],
    ) -> list[dict[str, Any]]:
        updated: list[dict[str, Any]] = []
        for row in self._tables.get(table, []):
            if _matches(row, filters):
                row.update(copy.deepcopy(dict(changes)))
                updated.append(copy.deepcopy(row))
        self._logger.debug("store.update", table=table, filters=dict(filters), count=len(updated))
        return updated


def _matches(row: Mapping[str, Any], filters: Mapping[str, Any] | None) -> bool:
    if not filters:
        return True
    return all(row.get(column) == _plain(value) for column, value in filters.items())


def _plain(value: Any) -> Any:
    return getattr(value, "value", value)


class InMemoryFileStorage:
    """Object storage keyed by bucket and path."""

    def __init__(self, base_url: str = "memory://storage") -> None:
        self._base_url = base_url.rstrip("/")
        self._objects: dict[tuple[str, str], tuple[bytes, str]] = {}

    def upload(self, bucket: str, path: str, content: bytes, *, content_type: str = "application/octet-stream") -> str:
        key = (bucket, path)
        if key in self._objects:
            raise StoreError("The resource already exists", code="Duplicate", status=409)
        self._objects[key] = (bytes(content), content_type)
        return path

    def public_url(self, bucket: str, path: str) -> str:
        return f"{self._base_url}/storage/v1/object/public/{bucket}/{path}"

    def read(self, bucket: str, path: str) -> bytes:
        try:
            return self._objects[(bucket, path)][0]
        except KeyError as exc:
            raise StoreError(f"Object not found: {bucket}/{path}", status=404) from exc


class InMemoryAuthProvider:
    """Email/password accounts held in memory with salted PBKDF2 hashes."""

    _ITERATIONS = 100_000

    def __init__(self) -> None:
        self._accounts: dict[str, tuple[AuthUser, bytes, bytes]] = {}
        self.current_user: AuthUser | None = None

    def sign_up(self, email: str, password: str, *, metadata: Mapping[str, str] | None = None) -> AuthUser:
        key = email.lower()
        if key in self._accounts:
            raise AuthError("User already registered", status=422)
        salt = secrets.token_bytes(16)
        user = AuthUser(id=str(uuid.uuid4()), email=email, metadata=dict(metadata or {}))
        self._accounts[key] = (user, salt, self._hash(password, salt))
        self.current_user = user
        return user

    def sign_in(self, email: str, password: str) -> AuthUser:
        account = self._accounts.get(email.lower())
        if account is None or not secrets.compare_digest(account[2], self._hash(password, account[1])):
            raise AuthError("Invalid login credentials", status=400)
        self.current_user = account[0]
        return account[0]

    def sign_out(self) -> None:
        self.current_user = None

    def _hash(self, password: str, salt: bytes) -> bytes:
        return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, self._ITERATIONS)
