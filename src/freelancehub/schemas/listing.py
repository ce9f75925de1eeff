from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class CurrencyCode(str, Enum):
    """Currencies the salary display can switch between."""

    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    JPY = "JPY"
    INR = "INR"
    ZAR = "ZAR"


class FreelancerStatus(str, Enum):
    """Availability shown on listing cards."""

    AVAILABLE = "available"
    BUSY = "busy"
    OFFLINE = "offline"


class VerificationLevel(str, Enum):
    """Trust tier advertised on a freelancer's detail page."""

    BASIC = "basic"
    VERIFIED = "verified"
    PREMIUM = "premium"


class Listing(BaseModel):
    """A single job/freelancer offer shown in search results."""

    id: str
    title: str
    company: str
    location: str
    salary_range: str = Field(description='Salary string such as "$45-60/hr".')
    type: str = ""
    posted_time: str = ""
    category: str = ""
    status: FreelancerStatus = FreelancerStatus.AVAILABLE
    image: str | None = None
    name: str | None = None
    description: str | None = None
    rating: float | None = None
    reviews: int | None = None
    verification: VerificationLevel | None = None

    model_config = ConfigDict(frozen=True, extra="forbid")


class FilterState(BaseModel):
    """Predicates selected on the listing page. Empty strings disable a predicate."""

    search_query: str = ""
    selected_category: str = ""
    selected_location: str = ""

    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def is_empty(self) -> bool:
        return not (self.search_query or self.selected_category or self.selected_location)


class FreelancerFilter(BaseModel):
    """Substring filters used when browsing verified freelancers."""

    location: str = ""
    service: str = ""

    model_config = ConfigDict(frozen=True, extra="forbid")
