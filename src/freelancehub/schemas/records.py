"""BaaS-owned records, mirrored as transient pydantic copies."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class UserType(str, Enum):
    FREELANCER = "freelancer"
    CLIENT = "client"


class BookingStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"


class VerificationStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class AuthUser(BaseModel):
    """Identity returned by the auth provider."""

    id: str
    email: str
    metadata: dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(extra="ignore")


class Profile(BaseModel):
    """Row of the ``profiles`` table."""

    id: str
    full_name: str
    location: str = ""
    bio: str | None = None
    services_offered: list[str] = Field(default_factory=list)
    profile_picture_url: str | None = None
    is_verified: bool = False
    user_type: UserType
    email: str | None = None

    model_config = ConfigDict(extra="ignore")


class ProfileSummary(BaseModel):
    """Subset of a profile embedded in joined views."""

    full_name: str = ""
    profile_picture_url: str | None = None
    email: str | None = None
    location: str | None = None

    model_config = ConfigDict(extra="ignore")


class Booking(BaseModel):
    """Row of the ``bookings`` table."""

    id: str
    client_id: str
    freelancer_id: str
    service_description: str
    booking_date: str
    booking_time: str
    status: BookingStatus = BookingStatus.PENDING
    created_at: str | None = None

    model_config = ConfigDict(extra="ignore")


class BookingView(Booking):
    """Booking joined with the other party's profile.

    That is the client on a freelancer's incoming list and the freelancer on a
    client's outgoing list.
    """

    counterpart: ProfileSummary = Field(default_factory=ProfileSummary)


class Conversation(BaseModel):
    """Row of the ``conversations`` table."""

    id: str
    participant_1: str
    participant_2: str
    updated_at: str | None = None

    model_config = ConfigDict(extra="ignore")

    def other_participant(self, user_id: str) -> str:
        return self.participant_2 if self.participant_1 == user_id else self.participant_1

    def includes(self, user_id: str) -> bool:
        return user_id in (self.participant_1, self.participant_2)


class ConversationView(Conversation):
    """Conversation joined with the counterpart's profile."""

    other_user: ProfileSummary = Field(default_factory=ProfileSummary)


class Message(BaseModel):
    """Row of the ``messages`` table."""

    id: str
    conversation_id: str
    sender_id: str
    content: str
    sent_at: str | None = None

    model_config = ConfigDict(extra="ignore")


class MessageView(Message):
    """Message joined with the sender's display name."""

    sender: ProfileSummary = Field(default_factory=ProfileSummary)


class VerificationDocument(BaseModel):
    """Row of the ``verification_documents`` table."""

    id: str
    user_id: str
    government_id_url: str
    residence_address: str
    billing_address: str
    supporting_documents_url: list[str] = Field(default_factory=list)
    status: VerificationStatus = VerificationStatus.PENDING
    submitted_at: str | None = None
    reviewed_at: str | None = None

    model_config = ConfigDict(extra="ignore")
