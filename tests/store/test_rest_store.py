from __future__ import annotations

import io
import json
from urllib import error
from urllib.parse import parse_qs, urlsplit

import pytest

from freelancehub.errors import AuthError, NotFoundError, StoreError
from freelancehub.store import RestAuthProvider, RestClient, RestFileStorage, RestRecordStore


class FakeResponse:
    def __init__(self, payload) -> None:
        self._body = b"" if payload is None else json.dumps(payload).encode("utf-8")

    def read(self) -> bytes:
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        return None


class FakeTransport:
    """Records requests and replays queued responses."""

    def __init__(self) -> None:
        self.requests = []
        self.responses = []

    def queue(self, payload) -> None:
        self.responses.append(payload)

    def __call__(self, req, timeout=None):
        self.requests.append(req)
        payload = self.responses.pop(0)
        if isinstance(payload, Exception):
            raise payload
        return FakeResponse(payload)


@pytest.fixture
def transport(monkeypatch) -> FakeTransport:
    fake = FakeTransport()
    monkeypatch.setattr("freelancehub.store.rest.request.urlopen", fake)
    return fake


@pytest.fixture
def client() -> RestClient:
    return RestClient("https://project.example.test/", "anon-key")


def http_error(code: int, payload: dict) -> error.HTTPError:
    body = io.BytesIO(json.dumps(payload).encode("utf-8"))
    return error.HTTPError("https://project.example.test", code, "error", {}, body)


def test_select_builds_postgrest_query(transport, client):
    transport.queue([{"id": "b1"}])

    rows = RestRecordStore(client).select(
        "bookings",
        filters={"freelancer_id": "f1", "is_verified": True},
        order_by="created_at",
        descending=True,
    )

    req = transport.requests[0]
    parts = urlsplit(req.full_url)
    query = parse_qs(parts.query)
    assert rows == [{"id": "b1"}]
    assert req.get_method() == "GET"
    assert parts.path == "/rest/v1/bookings"
    assert query["freelancer_id"] == ["eq.f1"]
    assert query["is_verified"] == ["eq.true"]
    assert query["order"] == ["created_at.desc"]
    assert req.get_header("Apikey") == "anon-key"
    assert req.get_header("Authorization") == "Bearer anon-key"


def test_insert_asks_for_representation(transport, client):
    transport.queue([{"id": "m1", "content": "hi"}])

    row = RestRecordStore(client).insert("messages", {"content": "hi"})

    req = transport.requests[0]
    assert row["id"] == "m1"
    assert req.get_method() == "POST"
    assert req.get_header("Prefer") == "return=representation"
    assert json.loads(req.data) == [{"content": "hi"}]


def test_update_sends_patch_with_filters(transport, client):
    transport.queue([{"id": "b1", "status": "accepted"}])

    rows = RestRecordStore(client).update("bookings", {"status": "accepted"}, filters={"id": "b1"})

    req = transport.requests[0]
    assert rows[0]["status"] == "accepted"
    assert req.get_method() == "PATCH"
    assert parse_qs(urlsplit(req.full_url).query) == {"id": ["eq.b1"]}


def test_http_errors_become_store_errors(transport, client):
    transport.queue(http_error(409, {"message": "duplicate key", "code": "23505"}))
    transport.queue(http_error(404, {"message": "missing"}))

    store = RestRecordStore(client)
    with pytest.raises(StoreError) as exc:
        store.insert("profiles", {"id": "u1"})
    assert exc.value.code == "23505"
    assert exc.value.status == 409

    with pytest.raises(NotFoundError):
        store.select("profiles")


def test_network_errors_become_store_errors(transport, client):
    transport.queue(error.URLError("connection refused"))

    with pytest.raises(StoreError, match="Network error"):
        RestRecordStore(client).select("profiles")


def test_file_storage_uploads_and_builds_public_url(transport, client):
    transport.queue({"Key": "profiles/u1.png"})

    storage = RestFileStorage(client)
    path = storage.upload("profiles", "u1.png", b"png-bytes", content_type="image/png")

    req = transport.requests[0]
    assert path == "u1.png"
    assert req.full_url == "https://project.example.test/storage/v1/object/profiles/u1.png"
    assert req.data == b"png-bytes"
    assert req.get_header("Content-type") == "image/png"
    assert storage.public_url("profiles", path) == (
        "https://project.example.test/storage/v1/object/public/profiles/u1.png"
    )


def test_sign_in_stores_access_token(transport, client):
    transport.queue(
        {
            "access_token": "user-token",
            "user": {"id": "u1", "email": "ada@example.com", "user_metadata": {"user_type": "client"}},
        }
    )
    transport.queue([])
    transport.queue(None)

    auth = RestAuthProvider(client)
    user = auth.sign_in("ada@example.com", "Secret123")
    RestRecordStore(client).select("profiles")
    auth.sign_out()

    assert user.id == "u1"
    assert user.metadata == {"user_type": "client"}
    assert "grant_type=password" in transport.requests[0].full_url
    assert transport.requests[1].get_header("Authorization") == "Bearer user-token"
    assert transport.requests[2].full_url.endswith("/auth/v1/logout")
    assert client.access_token is None


def test_auth_failures_become_auth_errors(transport, client):
    transport.queue(http_error(400, {"error_description": "Invalid login credentials"}))

    with pytest.raises(AuthError, match="Invalid login credentials"):
        RestAuthProvider(client).sign_in("ada@example.com", "wrong")


def test_sign_up_sends_metadata(transport, client):
    transport.queue({"id": "u2", "email": "bo@example.com", "user_metadata": {"first_name": "Bo"}})

    user = RestAuthProvider(client).sign_up("bo@example.com", "Secret123", metadata={"first_name": "Bo"})

    body = json.loads(transport.requests[0].data)
    assert body["data"] == {"first_name": "Bo"}
    assert user.metadata["first_name"] == "Bo"
    assert client.access_token is None
