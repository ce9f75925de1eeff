"""Countries and languages offered by the client registration form."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Country:
    code: str
    name: str
    phone_code: str
    continent: str


@dataclass(frozen=True, slots=True)
class Language:
    code: str
    name: str


COUNTRIES: tuple[Country, ...] = (
    Country("EG", "Egypt", "+20", "Africa"),
    Country("KE", "Kenya", "+254", "Africa"),
    Country("NG", "Nigeria", "+234", "Africa"),
    Country("ZA", "South Africa", "+27", "Africa"),
    Country("GH", "Ghana", "+233", "Africa"),
    Country("MA", "Morocco", "+212", "Africa"),
    Country("CN", "China", "+86", "Asia"),
    Country("IN", "India", "+91", "Asia"),
    Country("JP", "Japan", "+81", "Asia"),
    Country("KR", "South Korea", "+82", "Asia"),
    Country("TH", "Thailand", "+66", "Asia"),
    Country("AE", "United Arab Emirates", "+971", "Asia"),
    Country("PH", "Philippines", "+63", "Asia"),
    Country("VN", "Vietnam", "+84", "Asia"),
    Country("IL", "Israel", "+972", "Asia"),
    Country("ID", "Indonesia", "+62", "Asia"),
    Country("FR", "France", "+33", "Europe"),
    Country("DE", "Germany", "+49", "Europe"),
    Country("IT", "Italy", "+39", "Europe"),
    Country("ES", "Spain", "+34", "Europe"),
    Country("GB", "United Kingdom", "+44", "Europe"),
    Country("PL", "Poland", "+48", "Europe"),
    Country("NL", "Netherlands", "+31", "Europe"),
    Country("SE", "Sweden", "+46", "Europe"),
    Country("CA", "Canada", "+1", "North America"),
    Country("MX", "Mexico", "+52", "North America"),
    Country("US", "United States", "+1", "North America"),
    Country("AU", "Australia", "+61", "Oceania"),
    Country("NZ", "New Zealand", "+64", "Oceania"),
    Country("AR", "Argentina", "+54", "South America"),
    Country("BR", "Brazil", "+55", "South America"),
    Country("CL", "Chile", "+56", "South America"),
    Country("CO", "Colombia", "+57", "South America"),
    Country("PE", "Peru", "+51", "South America"),
)

LANGUAGES: tuple[Language, ...] = (
    Language("en", "English"),
    Language("es", "Spanish"),
    Language("fr", "French"),
    Language("de", "German"),
    Language("zh", "Mandarin"),
    Language("ar", "Arabic"),
    Language("ru", "Russian"),
    Language("pt", "Portuguese"),
    Language("ja", "Japanese"),
    Language("hi", "Hindi"),
    Language("ko", "Korean"),
    Language("it", "Italian"),
    Language("nl", "Dutch"),
    Language("he", "Hebrew"),
    Language("sv", "Swedish"),
    Language("th", "Thai"),
    Language("vi", "Vietnamese"),
    Language("pl", "Polish"),
)

_COUNTRIES_BY_CODE = {country.code: country for country in COUNTRIES}
_LANGUAGES_BY_CODE = {language.code: language for language in LANGUAGES}


def find_country(code: str) -> Country | None:
    return _COUNTRIES_BY_CODE.get(code.upper())


def find_language(code: str) -> Language | None:
    return _LANGUAGES_BY_CODE.get(code.lower())


__all__ = ["COUNTRIES", "LANGUAGES", "Country", "Language", "find_country", "find_language"]
