"""Core listing engine: currency conversion, filtering and presentation."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

# NOTE: keep imports explicit for export clarity.
from .currency import (
    CURRENCIES,
    EXCHANGE_RATES,
    CurrencyConfig,
    CurrencyConverter,
    convert_salary,
    currency_code,
    currency_symbol,
    parse_salary,
)
from .filtering import (
    FilterPipeline,
    ListingBrowser,
    category_counts,
    filter_freelancers,
    filter_listings,
    search_faq,
)
from .presentation import ListingCard, freelancer_card, listing_card


@runtime_checkable
class Predicate(Protocol):
    """Predicate contract for the filter pipeline."""

    name: str

    def is_active(self, state: object) -> bool:
        """Return False when the state leaves this predicate empty."""

    def matches(self, item: object, state: object) -> bool:
        """Return True when the item satisfies the predicate under the state."""


__all__ = [
    "CURRENCIES",
    "EXCHANGE_RATES",
    "CurrencyConfig",
    "CurrencyConverter",
    "FilterPipeline",
    "ListingBrowser",
    "ListingCard",
    "Predicate",
    "category_counts",
    "convert_salary",
    "currency_code",
    "currency_symbol",
    "filter_freelancers",
    "filter_listings",
    "freelancer_card",
    "listing_card",
    "parse_salary",
    "search_faq",
]
