"""Listing pipeline assembly and execution."""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path

import pendulum
import structlog
from pydantic import ValidationError

from . import __version__
from .core import CurrencyConverter, FilterPipeline, currency_code
from .core.filtering import default_listing_pipeline
from .core.presentation import ListingCard, listing_card
from .data import sample_listings
from .schemas import CurrencyCode, FilterState, Listing


class ListingLoadError(ValueError):
    """Raised when listing loading encounters invalid records."""

    def __init__(self, errors: list[str], partial: list[Listing]):
        super().__init__("Listing loading failed")
        self.errors = errors
        self.partial = partial

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"Listing loading failed: {self.errors}"


class ListingLoader:
    """Load listings from a JSONL file, one listing object per line."""

    def load(self, path: Path) -> list[Listing]:
        listings: list[Listing] = []
        errors: list[str] = []
        with path.open("r", encoding="utf-8") as handle:
            for idx, line in enumerate(handle, start=1):
                raw = line.strip()
                if not raw:
                    continue
                try:
                    record = json.loads(raw)
                except json.JSONDecodeError as exc:
                    errors.append(f"line {idx}: invalid JSON ({exc})")
                    continue
                try:
                    listings.append(Listing.model_validate(record))
                except ValidationError as exc:
                    errors.append(f"line {idx}: {exc.error_count()} validation error(s)")
        if errors:
            raise ListingLoadError(errors, listings)
        return listings


class OutputWriter:
    """Persist filtered listings."""

    def write(self, path: Path, payload: dict | list[dict]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )


class ListingPipeline:
    """Load, filter and convert listings into display cards."""

    def __init__(
        self,
        *,
        converter: CurrencyConverter,
        filters: FilterPipeline[Listing, FilterState] | None = None,
        loader: ListingLoader | None = None,
        writer: OutputWriter | None = None,
    ) -> None:
        self._converter = converter
        self._filters = filters or default_listing_pipeline()
        self._loader = loader or ListingLoader()
        self._writer = writer or OutputWriter()
        self._logger = structlog.get_logger(__name__)

    def run(
        self,
        *,
        state: FilterState | None = None,
        currency: CurrencyCode | str | None = None,
        listings_path: Path | None = None,
        output_path: Path | None = None,
    ) -> list[ListingCard]:
        state = state or FilterState()
        target = currency_code(currency) if currency else self._converter.default_currency

        load_errors: list[str] = []
        if listings_path is None:
            listings = sample_listings()
        else:
            try:
                listings = self._loader.load(listings_path)
            except ListingLoadError as exc:
                listings = exc.partial
                load_errors.extend(exc.errors)
                self._logger.warning("listings.partial_load", errors=exc.errors)

        matched = self._filters.apply(listings, state)
        cards = [listing_card(listing, target, converter=self._converter) for listing in matched]
        self._logger.info(
            "listings.filtered",
            total=len(listings),
            matched=len(matched),
            currency=target.value,
            filters=state.model_dump(exclude_defaults=True),
        )

        if output_path is not None:
            metadata = {
                "currency": target.value,
                "filters": state.model_dump(),
                "listing_count": len(listings),
                "errors": load_errors,
                "timestamp": pendulum.now().to_iso8601_string(),
                "app_version": __version__,
            }
            self._writer.write(output_path, {"metadata": metadata, "results": [asdict(card) for card in cards]})
        return cards


__all__ = ["ListingLoadError", "ListingLoader", "ListingPipeline", "OutputWriter"]
