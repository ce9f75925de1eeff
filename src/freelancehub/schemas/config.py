"""Pydantic configuration schema for CLI YAML input."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .listing import CurrencyCode


class CurrencySettings(BaseModel):
    default: CurrencyCode | None = None
    rates: dict[CurrencyCode, float] | None = None

    model_config = ConfigDict(extra="forbid")

    @field_validator("rates")
    @classmethod
    def check_positive_rates(cls, value: dict[CurrencyCode, float] | None) -> dict[CurrencyCode, float] | None:
        if value and any(rate <= 0 for rate in value.values()):
            raise ValueError("Exchange rates must be positive")
        return value


class SecuritySettings(BaseModel):
    max_attempts: int | None = Field(default=None, ge=1)
    window_seconds: float | None = Field(default=None, gt=0)

    model_config = ConfigDict(extra="forbid")


class AppConfig(BaseModel):
    currency: CurrencySettings = Field(default_factory=CurrencySettings)
    security: SecuritySettings = Field(default_factory=SecuritySettings)

    model_config = ConfigDict(extra="forbid")

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        currency = self.currency.model_dump(mode="json", exclude_none=True)
        if currency:
            settings["currency"] = currency
        security = self.security.model_dump(exclude_none=True)
        if security:
            settings["security"] = security
        return settings


def load_config(raw: Any) -> AppConfig:
    if not isinstance(raw, dict):
        raise ValidationError.from_exception_data(
            "AppConfig",
            [{"type": "dict_type", "loc": ("config",), "input": raw}],
        )
    return AppConfig.model_validate(raw)
