"""Salary-range currency conversion with static exchange rates."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Mapping, NamedTuple

from ..errors import SalaryParseError
from ..schemas import CurrencyCode

# Rates relative to USD; never refreshed at runtime.
EXCHANGE_RATES: dict[CurrencyCode, float] = {
    CurrencyCode.USD: 1.0,
    CurrencyCode.EUR: 0.93,
    CurrencyCode.GBP: 0.79,
    CurrencyCode.JPY: 151.5,
    CurrencyCode.INR: 83.5,
    CurrencyCode.ZAR: 18.5,
}

_SALARY_PATTERN = re.compile(r"(\d+)-(\d+)/(\w+)")

DEFAULT_UNIT = "/hr"


@dataclass(frozen=True, slots=True)
class CurrencyOption:
    code: CurrencyCode
    symbol: str
    name: str


CURRENCIES: tuple[CurrencyOption, ...] = (
    CurrencyOption(CurrencyCode.USD, "$", "US Dollar"),
    CurrencyOption(CurrencyCode.EUR, "€", "Euro"),
    CurrencyOption(CurrencyCode.GBP, "£", "British Pound"),
    CurrencyOption(CurrencyCode.JPY, "¥", "Japanese Yen"),
    CurrencyOption(CurrencyCode.INR, "₹", "Indian Rupee"),
    CurrencyOption(CurrencyCode.ZAR, "R", "South African Rand"),
)

_SYMBOLS = {option.code: option.symbol for option in CURRENCIES}


class SalaryRange(NamedTuple):
    minimum: int
    maximum: int
    unit: str


def parse_salary(salary: str, *, strict: bool = False) -> SalaryRange:
    """Extract ``min-max/unit`` from a salary string.

    Unparseable input yields ``0-0/hr`` unless ``strict`` is set.
    """
    match = _SALARY_PATTERN.search(salary or "")
    if match is None:
        if strict:
            raise SalaryParseError(f"Unrecognised salary range: {salary!r}")
        return SalaryRange(0, 0, DEFAULT_UNIT)
    return SalaryRange(int(match.group(1)), int(match.group(2)), f"/{match.group(3)}")


def currency_symbol(code: CurrencyCode | str) -> str:
    return _SYMBOLS.get(currency_code(code), "$")


def convert_salary(
    salary: str,
    from_currency: CurrencyCode | str = CurrencyCode.USD,
    to_currency: CurrencyCode | str = CurrencyCode.USD,
    *,
    rates: Mapping[CurrencyCode, float] | None = None,
    strict: bool = False,
) -> str:
    """Re-express a salary range in another currency.

    >>> convert_salary("$100-200/hr", "USD", "EUR")
    '€93-186/hr'
    """
    table = rates if rates is not None else EXCHANGE_RATES
    source = currency_code(from_currency)
    target = currency_code(to_currency)
    parsed = parse_salary(salary, strict=strict)

    factor_from = _rate(table, source)
    factor_to = _rate(table, target)
    low = _round_half_up(parsed.minimum / factor_from * factor_to)
    high = _round_half_up(parsed.maximum / factor_from * factor_to)
    return f"{currency_symbol(target)}{low}-{high}{parsed.unit}"


@dataclass
class CurrencyConfig:
    """Configuration for the salary converter."""

    default_currency: CurrencyCode = CurrencyCode.USD
    rates: dict[CurrencyCode, float] = field(default_factory=dict)


class CurrencyConverter:
    """Converts listing salaries into the display currency."""

    def __init__(self, *, config: CurrencyConfig | None = None) -> None:
        self._config = config or CurrencyConfig()
        self._rates = {**EXCHANGE_RATES, **{currency_code(k): float(v) for k, v in self._config.rates.items()}}

    @property
    def default_currency(self) -> CurrencyCode:
        return self._config.default_currency

    @property
    def rates(self) -> dict[CurrencyCode, float]:
        return dict(self._rates)

    def convert(
        self,
        salary: str,
        to_currency: CurrencyCode | str | None = None,
        *,
        from_currency: CurrencyCode | str = CurrencyCode.USD,
        strict: bool = False,
    ) -> str:
        return convert_salary(
            salary,
            from_currency,
            to_currency or self._config.default_currency,
            rates=self._rates,
            strict=strict,
        )


def currency_code(code: CurrencyCode | str) -> CurrencyCode:
    """Normalise ``code`` to a ``CurrencyCode``, accepting any letter case."""
    if isinstance(code, CurrencyCode):
        return code
    try:
        return CurrencyCode(str(code).upper())
    except ValueError as exc:
        raise ValueError(f"Unsupported currency: {code!r}") from exc


def _rate(table: Mapping[CurrencyCode, float], code: CurrencyCode) -> float:
    try:
        return table[code]
    except KeyError as exc:
        raise ValueError(f"No exchange rate for {code.value}") from exc


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


__all__ = [
    "CURRENCIES",
    "EXCHANGE_RATES",
    "CurrencyConfig",
    "CurrencyConverter",
    "CurrencyOption",
    "SalaryRange",
    "convert_salary",
    "currency_code",
    "currency_symbol",
    "parse_salary",
]
