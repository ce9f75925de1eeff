"""Filter pipeline over listing and freelancer sets."""

from __future__ import annotations

from collections import Counter
from typing import Any, Generic, Iterable, Sequence, TypeVar

import structlog

from ..schemas import CurrencyCode, FaqItem, FilterState, FreelancerFilter, Listing, Profile
from .currency import CurrencyConverter, currency_code
from .predicates import (
    CategoryPredicate,
    LocationPredicate,
    ProfileLocationPredicate,
    SearchTextPredicate,
    ServiceOfferedPredicate,
)
from .predicates.text import SearchTextConfig
from .presentation import ListingCard, listing_card

ItemT = TypeVar("ItemT")
StateT = TypeVar("StateT")


class FilterPipeline(Generic[ItemT, StateT]):
    """Applies predicates conjunctively, in order, preserving input order.

    A predicate whose ``is_active`` is false for the given state passes every
    item through. Nothing is cached: each call recomputes from the full set.
    """

    def __init__(self, predicates: Iterable[Any]) -> None:
        self._predicates = list(predicates)
        self._logger = structlog.get_logger(__name__)

    @property
    def predicate_names(self) -> list[str]:
        return [predicate.name for predicate in self._predicates]

    def apply(self, items: Iterable[ItemT], state: StateT) -> list[ItemT]:
        active = [predicate for predicate in self._predicates if predicate.is_active(state)]
        source = list(items)
        if not active:
            return source
        matched = [item for item in source if all(predicate.matches(item, state) for predicate in active)]
        self._logger.debug(
            "filter.applied",
            predicates=[predicate.name for predicate in active],
            total=len(source),
            matched=len(matched),
        )
        return matched


def default_listing_pipeline() -> FilterPipeline[Listing, FilterState]:
    return FilterPipeline([SearchTextPredicate(), CategoryPredicate(), LocationPredicate()])


def default_freelancer_pipeline() -> FilterPipeline[Profile, FreelancerFilter]:
    return FilterPipeline([ProfileLocationPredicate(), ServiceOfferedPredicate()])


def filter_listings(
    listings: Iterable[Listing],
    state: FilterState | None = None,
    *,
    search_query: str = "",
    selected_category: str = "",
    selected_location: str = "",
) -> list[Listing]:
    """Return the listings matching every non-empty predicate."""
    if state is None:
        state = FilterState(
            search_query=search_query,
            selected_category=selected_category,
            selected_location=selected_location,
        )
    return default_listing_pipeline().apply(listings, state)


def filter_freelancers(profiles: Iterable[Profile], criteria: FreelancerFilter) -> list[Profile]:
    return default_freelancer_pipeline().apply(profiles, criteria)


def default_faq_pipeline() -> FilterPipeline[FaqItem, FilterState]:
    return FilterPipeline([SearchTextPredicate(config=SearchTextConfig(fields=("question", "answer")))])


def search_faq(items: Iterable[FaqItem], query: str = "") -> dict[str, list[FaqItem]]:
    """Questions whose question or answer contains ``query``, grouped by category.

    Categories keep the order of their first matching item; an empty query
    matches everything.
    """
    groups: dict[str, list[FaqItem]] = {}
    for item in default_faq_pipeline().apply(items, FilterState(search_query=query)):
        groups.setdefault(item.category, []).append(item)
    return groups


def category_counts(listings: Iterable[Listing]) -> dict[str, int]:
    """Number of listings per category, in first-seen order."""
    return dict(Counter(listing.category for listing in listings if listing.category))


def distinct_locations(listings: Iterable[Listing]) -> list[str]:
    seen: dict[str, None] = {}
    for listing in listings:
        seen.setdefault(listing.location, None)
    return list(seen)


class ListingBrowser:
    """Listing page state: the fetched set, the current predicates and currency.

    The listing set is fixed for the lifetime of the browser. Every mutator
    replaces the immutable ``FilterState``; ``results`` recomputes the subset
    from scratch on each read.
    """

    def __init__(
        self,
        listings: Sequence[Listing],
        *,
        pipeline: FilterPipeline[Listing, FilterState] | None = None,
        converter: CurrencyConverter | None = None,
        currency: CurrencyCode | str | None = None,
    ) -> None:
        self._listings = tuple(listings)
        self._pipeline = pipeline or default_listing_pipeline()
        self._converter = converter or CurrencyConverter()
        self._currency = currency_code(currency) if currency else self._converter.default_currency
        self._state = FilterState()

    @property
    def listings(self) -> tuple[Listing, ...]:
        return self._listings

    @property
    def state(self) -> FilterState:
        return self._state

    @property
    def currency(self) -> CurrencyCode:
        return self._currency

    def search(self, query: str) -> "ListingBrowser":
        self._state = self._state.model_copy(update={"search_query": query})
        return self

    def select_category(self, category: str) -> "ListingBrowser":
        self._state = self._state.model_copy(update={"selected_category": category})
        return self

    def select_location(self, location: str) -> "ListingBrowser":
        self._state = self._state.model_copy(update={"selected_location": location})
        return self

    def select_currency(self, currency: CurrencyCode | str) -> "ListingBrowser":
        self._currency = currency_code(currency)
        return self

    def clear(self) -> "ListingBrowser":
        self._state = FilterState()
        return self

    @property
    def results(self) -> list[Listing]:
        return self._pipeline.apply(self._listings, self._state)

    def cards(self) -> list[ListingCard]:
        return [listing_card(listing, self._currency, converter=self._converter) for listing in self.results]

    def categories(self) -> dict[str, int]:
        return category_counts(self._listings)

    def locations(self) -> list[str]:
        return distinct_locations(self._listings)


__all__ = [
    "FilterPipeline",
    "ListingBrowser",
    "category_counts",
    "default_faq_pipeline",
    "default_freelancer_pipeline",
    "default_listing_pipeline",
    "distinct_locations",
    "filter_freelancers",
    "filter_listings",
    "search_faq",
]
