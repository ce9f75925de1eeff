"""HTTP implementations of the BaaS ports.

Speaks the REST conventions of the hosted backend: table rows under
``/rest/v1``, objects under ``/storage/v1`` and accounts under ``/auth/v1``.
Every request carries the project ``apikey``; once a user signs in, their
access token replaces the key in the ``Authorization`` header.
"""

from __future__ import annotations

import json
from typing import Any, Mapping
from urllib import error, parse, request

import structlog

from ..errors import AuthError, NotFoundError, StoreError
from ..schemas import AuthUser


class RestClient:
    """Minimal JSON-over-HTTP client for the BaaS endpoints."""

    def __init__(self, base_url: str, api_key: str, *, timeout: float = 10.0):
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout
        self.access_token: str | None = None
        self._logger = structlog.get_logger(__name__)

    @property
    def base_url(self) -> str:
        return self._base_url

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, str] | None = None,
        json_body: Any = None,
        data: bytes | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        url = f"{self._base_url}{path}"
        if params:
            url = f"{url}?{parse.urlencode(params)}"
        merged = {
            "apikey": self._api_key,
            "Authorization": f"Bearer {self.access_token or self._api_key}",
        }
        if json_body is not None:
            data = json.dumps(json_body, ensure_ascii=False).encode("utf-8")
            merged["Content-Type"] = "application/json"
        merged.update(headers or {})

        req = request.Request(url, data=data, headers=merged, method=method)
        try:
            with request.urlopen(req, timeout=self._timeout) as resp:
                body = resp.read().decode("utf-8")
                return json.loads(body) if body else None
        except error.HTTPError as exc:
            raise self._error_from_response(method, path, exc) from exc
        except error.URLError as exc:
            self._logger.warning("baas.request_failed", method=method, path=path, error=str(exc.reason))
            raise StoreError(f"Network error: {exc.reason}") from exc

    def _error_from_response(self, method: str, path: str, exc: error.HTTPError) -> StoreError:
        payload: dict[str, Any] = {}
        try:
            raw = exc.read().decode("utf-8")
            payload = json.loads(raw) if raw else {}
        except (ValueError, OSError):
            payload = {}
        if not isinstance(payload, dict):
            payload = {}
        message = (
            payload.get("message")
            or payload.get("msg")
            or payload.get("error_description")
            or payload.get("error")
            or exc.reason
            or f"HTTP {exc.code}"
        )
        code = payload.get("code") or payload.get("error_code")
        self._logger.warning(
            "baas.request_failed",
            method=method,
            path=path,
            status=exc.code,
            code=code,
            error=str(message),
        )
        error_cls = NotFoundError if exc.code == 404 else StoreError
        return error_cls(str(message), code=str(code) if code is not None else None, status=exc.code)


def _eq(value: Any) -> str:
    value = getattr(value, "value", value)
    if isinstance(value, bool):
        return f"eq.{str(value).lower()}"
    return f"eq.{value}"


class RestRecordStore:
    """``RecordStore`` over the ``/rest/v1`` table endpoints."""

    _RETURN_ROWS = {"Prefer": "return=representation"}

    def __init__(self, client: RestClient) -> None:
        self._client = client

    def select(
        self,
        table: str,
        *,
        filters: Mapping[str, Any] | None = None,
        order_by: str | None = None,
        descending: bool = False,
    ) -> list[dict[str, Any]]:
        params = {"select": "*"}
        params.update({column: _eq(value) for column, value in (filters or {}).items()})
        if order_by:
            params["order"] = f"{order_by}.{'desc' if descending else 'asc'}"
        rows = self._client.request("GET", f"/rest/v1/{table}", params=params)
        return list(rows or [])

    def insert(self, table: str, record: Mapping[str, Any]) -> dict[str, Any]:
        rows = self._client.request(
            "POST",
            f"/rest/v1/{table}",
            json_body=[_jsonable(record)],
            headers=self._RETURN_ROWS,
        )
        if not rows:
            raise StoreError(f"Insert into {table} returned no rows")
        return rows[0]

    def update(
        self,
        table: str,
        changes: Mapping[str, Any],
        *,
        filters: Mapping[str, Any],
    ) -> list[dict[str, Any]]:
        params = {column: _eq(value) for column, value in filters.items()}
        rows = self._client.request(
            "PATCH",
            f"/rest/v1/{table}",
            params=params,
            json_body=_jsonable(changes),
            headers=self._RETURN_ROWS,
        )
        return list(rows or [])


def _jsonable(record: Mapping[str, Any]) -> dict[str, Any]:
    return {key: getattr(value, "value", value) for key, value in record.items()}


class RestFileStorage:
    """``FileStorage`` over the ``/storage/v1`` object endpoints."""

    def __init__(self, client: RestClient) -> None:
        self._client = client

    def upload(self, bucket: str, path: str, content: bytes, *, content_type: str = "application/octet-stream") -> str:
        self._client.request(
            "POST",
            f"/storage/v1/object/{bucket}/{parse.quote(path)}",
            data=content,
            headers={"Content-Type": content_type},
        )
        return path

    def public_url(self, bucket: str, path: str) -> str:
        return f"{self._client.base_url}/storage/v1/object/public/{bucket}/{parse.quote(path)}"


class RestAuthProvider:
    """``AuthProvider`` over the ``/auth/v1`` endpoints.

    A successful sign-in stores the access token on the shared client so that
    later table and storage calls run as the signed-in user.
    """

    def __init__(self, client: RestClient) -> None:
        self._client = client

    def sign_up(self, email: str, password: str, *, metadata: Mapping[str, str] | None = None) -> AuthUser:
        payload = self._call(
            "/auth/v1/signup",
            {"email": email, "password": password, "data": dict(metadata or {})},
        )
        self._remember(payload)
        return _auth_user(payload.get("user") or payload)

    def sign_in(self, email: str, password: str) -> AuthUser:
        payload = self._call(
            "/auth/v1/token",
            {"email": email, "password": password},
            params={"grant_type": "password"},
        )
        self._remember(payload)
        return _auth_user(payload.get("user") or {})

    def sign_out(self) -> None:
        if self._client.access_token is None:
            return
        try:
            self._client.request("POST", "/auth/v1/logout")
        finally:
            self._client.access_token = None

    def _call(self, path: str, body: dict[str, Any], *, params: Mapping[str, str] | None = None) -> dict[str, Any]:
        try:
            payload = self._client.request("POST", path, params=params, json_body=body)
        except StoreError as exc:
            raise AuthError(str(exc), code=exc.code, status=exc.status) from exc
        if not isinstance(payload, dict):
            raise AuthError("Unexpected response from auth service")
        return payload

    def _remember(self, payload: Mapping[str, Any]) -> None:
        token = payload.get("access_token")
        if token:
            self._client.access_token = str(token)


def _auth_user(raw: Mapping[str, Any]) -> AuthUser:
    if not raw.get("id"):
        raise AuthError("Auth response did not include a user")
    metadata = raw.get("user_metadata") or {}
    return AuthUser(
        id=str(raw["id"]),
        email=str(raw.get("email", "")),
        metadata={str(k): str(v) for k, v in metadata.items()},
    )
