"""Dependency injection container for the marketplace client."""

from __future__ import annotations

from typing import Iterator

from dependency_injector import containers, providers

from .config import BaasSettings
from .core import CurrencyConfig, CurrencyConverter, FilterPipeline, currency_code
from .core.predicates import CategoryPredicate, LocationPredicate, SearchTextPredicate
from .pipeline import ListingPipeline
from .schemas import CurrencyCode
from .security import RateLimiter
from .services import (
    BookingService,
    ClientRegistrationService,
    ContactService,
    MessagingService,
    ProfileService,
    SessionContext,
    VerificationService,
)
from .store import (
    AuthProvider,
    InMemoryAuthProvider,
    InMemoryFileStorage,
    InMemoryRecordStore,
    RecordStore,
    RestAuthProvider,
    RestClient,
    RestFileStorage,
    RestRecordStore,
)


def open_session(
    *,
    auth: AuthProvider,
    store: RecordStore,
    limiter: RateLimiter,
) -> Iterator[SessionContext]:
    """Session resource: closed, and its token cancelled, on container shutdown."""
    session = SessionContext(auth=auth, store=store, limiter=limiter)
    try:
        yield session
    finally:
        session.close()


class FreelanceHubContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config = providers.Configuration()

    currency_config = providers.Singleton(CurrencyConfig)
    converter = providers.Singleton(CurrencyConverter, config=currency_config)

    search_predicate = providers.Singleton(SearchTextPredicate)
    category_predicate = providers.Singleton(CategoryPredicate)
    location_predicate = providers.Singleton(LocationPredicate)

    predicates = providers.List(
        search_predicate,
        category_predicate,
        location_predicate,
    )

    filter_pipeline = providers.Singleton(FilterPipeline, predicates=predicates)

    listing_pipeline = providers.Factory(
        ListingPipeline,
        converter=converter,
        filters=filter_pipeline,
    )

    record_store = providers.Singleton(InMemoryRecordStore)
    file_storage = providers.Singleton(InMemoryFileStorage)
    auth_provider = providers.Singleton(InMemoryAuthProvider)

    sign_in_limiter = providers.Singleton(RateLimiter)
    contact_limiter = providers.Singleton(RateLimiter)

    session = providers.Resource(
        open_session,
        auth=auth_provider,
        store=record_store,
        limiter=sign_in_limiter,
    )

    profiles = providers.Factory(ProfileService, session=session, store=record_store, files=file_storage)
    bookings = providers.Factory(BookingService, session=session, store=record_store, profiles=profiles)
    messaging = providers.Factory(MessagingService, session=session, store=record_store)
    verification = providers.Factory(VerificationService, session=session, store=record_store, files=file_storage)
    contact = providers.Factory(ContactService, limiter=contact_limiter)
    registration = providers.Factory(ClientRegistrationService)


def create_container(
    *,
    settings: dict | None = None,
    baas: BaasSettings | None = None,
) -> FreelanceHubContainer:
    """Instantiate container with optional overrides.

    ``settings`` is the output of ``AppConfig.to_settings``. With ``baas`` set,
    the in-memory stores are replaced by REST clients sharing one connection,
    so the token obtained at sign-in authorizes later table and storage calls.
    """

    container = FreelanceHubContainer()

    if settings:
        container.config.from_dict(settings)

        currency_settings = settings.get("currency", {})
        if currency_settings:
            currency_config = CurrencyConfig(
                default_currency=currency_code(currency_settings.get("default", CurrencyCode.USD)),
                rates={currency_code(code): float(rate) for code, rate in currency_settings.get("rates", {}).items()},
            )
            container.currency_config.override(providers.Object(currency_config))

        security_settings = settings.get("security", {})
        if security_settings:
            container.sign_in_limiter.override(providers.Singleton(RateLimiter, **security_settings))
            container.contact_limiter.override(providers.Singleton(RateLimiter, **security_settings))

    if baas is not None:
        client = providers.Singleton(RestClient, baas.url, baas.key)
        container.record_store.override(providers.Singleton(RestRecordStore, client))
        container.file_storage.override(providers.Singleton(RestFileStorage, client))
        container.auth_provider.override(providers.Singleton(RestAuthProvider, client))

    return container


__all__ = ["FreelanceHubContainer", "create_container", "open_session"]
