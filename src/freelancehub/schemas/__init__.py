"""Pydantic schema definitions for listings, BaaS records and forms."""

from __future__ import annotations

from .forms import (
    SERVICE_CATALOGUE,
    BookingRequestForm,
    ClientProfileForm,
    ClientRegistrationForm,
    ContactForm,
    FreelancerProfileForm,
    LoginForm,
    SignupForm,
    VerificationForm,
    validate_form,
)
from .help import FAQ_CATEGORY_TITLES, FaqItem
from .listing import (
    CurrencyCode,
    FilterState,
    FreelancerFilter,
    FreelancerStatus,
    Listing,
    VerificationLevel,
)
from .records import (
    AuthUser,
    Booking,
    BookingStatus,
    BookingView,
    Conversation,
    ConversationView,
    Message,
    MessageView,
    Profile,
    ProfileSummary,
    UserType,
    VerificationDocument,
    VerificationStatus,
)
from .regions import (
    COUNTRIES,
    LANGUAGES,
    Country,
    Language,
    find_country,
    find_language,
)

__all__ = [
    "COUNTRIES",
    "FAQ_CATEGORY_TITLES",
    "LANGUAGES",
    "SERVICE_CATALOGUE",
    "AuthUser",
    "Booking",
    "BookingRequestForm",
    "BookingStatus",
    "BookingView",
    "ClientProfileForm",
    "ClientRegistrationForm",
    "ContactForm",
    "Conversation",
    "ConversationView",
    "Country",
    "CurrencyCode",
    "FaqItem",
    "FilterState",
    "FreelancerFilter",
    "FreelancerProfileForm",
    "FreelancerStatus",
    "Language",
    "Listing",
    "LoginForm",
    "Message",
    "MessageView",
    "Profile",
    "ProfileSummary",
    "SignupForm",
    "UserType",
    "VerificationDocument",
    "VerificationForm",
    "VerificationLevel",
    "VerificationStatus",
    "find_country",
    "find_language",
    "validate_form",
]
