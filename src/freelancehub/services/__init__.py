"""Application services composed over the BaaS ports."""

from __future__ import annotations

from .bookings import ALLOWED_TRANSITIONS, BookingService, check_transition
from .contact import ContactService
from .messaging import MessagingService
from .profiles import ProfileService
from .registration import ClientRegistrationService
from .session import SessionContext
from .uploads import object_name, upload_public
from .verification import VerificationService

__all__ = [
    "ALLOWED_TRANSITIONS",
    "BookingService",
    "ClientRegistrationService",
    "ContactService",
    "MessagingService",
    "ProfileService",
    "SessionContext",
    "VerificationService",
    "check_transition",
    "object_name",
    "upload_public",
]
