"""Exact-match predicates for the category and location selectors."""

from __future__ import annotations

from ...schemas import FilterState, Listing


class CategoryPredicate:
    name = "category"

    def is_active(self, state: FilterState) -> bool:
        return bool(state.selected_category)

    def matches(self, item: Listing, state: FilterState) -> bool:
        return item.category == state.selected_category


class LocationPredicate:
    name = "location"

    def is_active(self, state: FilterState) -> bool:
        return bool(state.selected_location)

    def matches(self, item: Listing, state: FilterState) -> bool:
        return item.location == state.selected_location
