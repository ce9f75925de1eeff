from __future__ import annotations

from freelancehub.config import BaasSettings
from freelancehub.container import create_container
from freelancehub.pipeline import ListingPipeline
from freelancehub.schemas import CurrencyCode
from freelancehub.services import ClientRegistrationService, SessionContext
from freelancehub.store import InMemoryRecordStore, RestAuthProvider, RestFileStorage, RestRecordStore


def test_create_container_with_overrides():
    container = create_container(
        settings={
            "currency": {"default": "GBP", "rates": {"GBP": 0.5}},
            "security": {"max_attempts": 2, "window_seconds": 60},
        }
    )

    converter = container.converter()
    limiter = container.sign_in_limiter()

    assert converter.default_currency is CurrencyCode.GBP
    assert converter.convert("$10-20/hr") == "£5-10/hr"
    assert limiter.is_allowed("a") and limiter.is_allowed("a")
    assert not limiter.is_allowed("a")


def test_default_container_is_in_memory():
    container = create_container()

    assert isinstance(container.record_store(), InMemoryRecordStore)
    assert container.filter_pipeline().predicate_names == ["search", "category", "location"]
    assert isinstance(container.listing_pipeline(), ListingPipeline)
    assert isinstance(container.registration(), ClientRegistrationService)


def test_services_share_one_session_until_shutdown():
    container = create_container()

    session = container.session()
    assert isinstance(session, SessionContext)
    assert container.profiles()._session is session
    assert container.bookings()._session is session

    container.shutdown_resources()
    assert session.closed


def test_baas_settings_switch_to_rest_stores():
    container = create_container(baas=BaasSettings(url="https://example.test", key="anon"))

    store = container.record_store()
    files = container.file_storage()
    auth = container.auth_provider()

    assert isinstance(store, RestRecordStore)
    assert isinstance(files, RestFileStorage)
    assert isinstance(auth, RestAuthProvider)
    assert store._client is files._client is auth._client


def test_currency_settings_accept_lowercase_codes():
    container = create_container(settings={"currency": {"default": "eur", "rates": {"eur": 1.0}}})

    assert container.converter().convert("$10-20/hr") == "€10-20/hr"
