"""Free-text search predicate."""

from __future__ import annotations

from dataclasses import dataclass

from ...schemas import FilterState, Listing


@dataclass
class SearchTextConfig:
    """Which listing attributes the search box looks at."""

    fields: tuple[str, ...] = ("title", "company")


class SearchTextPredicate:
    """Case-insensitive substring match on the configured fields (title or company by default)."""

    name = "search"

    def __init__(self, *, config: SearchTextConfig | None = None) -> None:
        self._config = config or SearchTextConfig()

    def is_active(self, state: FilterState) -> bool:
        return bool(state.search_query)

    def matches(self, item: Listing, state: FilterState) -> bool:
        needle = state.search_query.lower()
        return any(needle in str(getattr(item, attr, "") or "").lower() for attr in self._config.fields)
