"""Stateless view models for cards and badges."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..schemas import (
    FAQ_CATEGORY_TITLES,
    BookingStatus,
    CurrencyCode,
    FaqItem,
    FreelancerStatus,
    Listing,
    Profile,
    VerificationLevel,
    VerificationStatus,
)
from .currency import CurrencyConverter

PLACEHOLDER_IMAGE = "/placeholder.svg"
MAX_SERVICE_BADGES = 3


@dataclass(frozen=True, slots=True)
class Badge:
    text: str
    tone: str
    description: str = ""


_STATUS_BADGES: dict[FreelancerStatus, Badge] = {
    FreelancerStatus.AVAILABLE: Badge("Available", "green"),
    FreelancerStatus.OFFLINE: Badge("Offline", "gray"),
    FreelancerStatus.BUSY: Badge("Busy", "red"),
}

_VERIFICATION_LEVEL_BADGES: dict[VerificationLevel, Badge] = {
    VerificationLevel.BASIC: Badge(
        "Basic",
        "blue",
        "Email and phone verification",
    ),
    VerificationLevel.VERIFIED: Badge(
        "Verified",
        "green",
        "ID verified, address confirmed",
    ),
    VerificationLevel.PREMIUM: Badge(
        "Premium",
        "purple",
        "Background check, experience verified, fingerprints on file",
    ),
}

_BOOKING_BADGES: dict[BookingStatus, Badge] = {
    BookingStatus.PENDING: Badge("Pending", "yellow"),
    BookingStatus.ACCEPTED: Badge("Accepted", "green"),
    BookingStatus.DECLINED: Badge("Declined", "red"),
}

_VERIFICATION_STATUS_BADGES: dict[VerificationStatus, Badge] = {
    VerificationStatus.PENDING: Badge("Under Review", "yellow"),
    VerificationStatus.APPROVED: Badge("Approved", "green"),
    VerificationStatus.REJECTED: Badge("Rejected", "red"),
}


def status_badge(status: FreelancerStatus | str) -> Badge:
    return _STATUS_BADGES[FreelancerStatus(status)]


def verification_level_badge(level: VerificationLevel | str) -> Badge:
    return _VERIFICATION_LEVEL_BADGES[VerificationLevel(level)]


def booking_status_badge(status: BookingStatus | str) -> Badge:
    """Badge for a booking row. Unknown statuses render as pending."""
    try:
        return _BOOKING_BADGES[BookingStatus(status)]
    except ValueError:
        return _BOOKING_BADGES[BookingStatus.PENDING]


def verification_status_badge(status: VerificationStatus | str) -> Badge:
    try:
        return _VERIFICATION_STATUS_BADGES[VerificationStatus(status)]
    except ValueError:
        return _VERIFICATION_STATUS_BADGES[VerificationStatus.PENDING]


@dataclass(frozen=True, slots=True)
class ListingCard:
    id: str
    title: str
    company: str
    location: str
    salary: str
    type: str
    category: str
    posted: str
    image: str
    status: Badge
    verification: Badge | None = None


def listing_card(
    listing: Listing,
    currency: CurrencyCode | str = CurrencyCode.USD,
    *,
    converter: CurrencyConverter | None = None,
) -> ListingCard:
    """Render a listing with its salary shown in ``currency``."""
    converter = converter or CurrencyConverter()
    return ListingCard(
        id=listing.id,
        title=listing.title,
        company=listing.company,
        location=listing.location,
        salary=converter.convert(listing.salary_range, currency),
        type=listing.type,
        category=listing.category,
        posted=f"Posted {listing.posted_time}" if listing.posted_time else "",
        image=listing.image or PLACEHOLDER_IMAGE,
        status=status_badge(listing.status),
        verification=verification_level_badge(listing.verification) if listing.verification else None,
    )


@dataclass(frozen=True, slots=True)
class FreelancerCard:
    id: str
    full_name: str
    location: str
    bio: str
    image: str
    services: list[str] = field(default_factory=list)
    extra_services: int = 0
    verified: bool = False


def freelancer_card(profile: Profile) -> FreelancerCard:
    """Card for the browse page; shows the first three services and a "+N more" count."""
    services = list(profile.services_offered)
    return FreelancerCard(
        id=profile.id,
        full_name=profile.full_name,
        location=profile.location,
        bio=profile.bio or "",
        image=profile.profile_picture_url or PLACEHOLDER_IMAGE,
        services=services[:MAX_SERVICE_BADGES],
        extra_services=max(len(services) - MAX_SERVICE_BADGES, 0),
        verified=profile.is_verified,
    )


def render_listing_card(card: ListingCard) -> str:
    """Plain-text rendering used by the CLI."""
    lines = [
        f"{card.title} [{card.status.text}]",
        f"  {card.company}",
        f"  {card.location} | {card.salary} | {card.type} | {card.category}",
    ]
    if card.verification:
        lines.append(f"  {card.verification.text} verification: {card.verification.description}")
    if card.posted:
        lines.append(f"  {card.posted}")
    return "\n".join(lines)


def render_category_counts(counts: dict[str, int]) -> str:
    return "\n".join(f"{category}: {count} jobs available" for category, count in counts.items())


def render_faq(groups: dict[str, list[FaqItem]]) -> str:
    if not groups:
        return "No FAQ items matched your search."
    blocks = []
    for category, items in groups.items():
        lines = [FAQ_CATEGORY_TITLES.get(category, category)]
        for item in items:
            lines.append(f"  Q: {item.question}")
            lines.append(f"     {item.answer}")
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


def render_freelancer_card(card: FreelancerCard) -> str:
    services = ", ".join(card.services)
    if card.extra_services:
        services = f"{services} +{card.extra_services} more"
    return "\n".join(
        [
            f"{card.full_name}{' [Verified]' if card.verified else ''}",
            f"  {card.location}",
            f"  {services}",
        ]
    )


__all__ = [
    "Badge",
    "FreelancerCard",
    "ListingCard",
    "booking_status_badge",
    "freelancer_card",
    "listing_card",
    "render_category_counts",
    "render_faq",
    "render_freelancer_card",
    "render_listing_card",
    "status_badge",
    "verification_level_badge",
    "verification_status_badge",
]
