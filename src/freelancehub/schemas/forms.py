"""Form schemas validated before any submission reaches the BaaS.

Each form declares the message shown for its length/presence rules in
``field_messages``; validators that need a more specific message raise
``ValueError`` with it. ``validate_form`` folds pydantic's error list into a
single message per field.
"""

from __future__ import annotations

from typing import Any, ClassVar, TypeVar

import pendulum
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
    model_validator,
)

from ..errors import FormValidationError
from ..security import contains_malicious_patterns, is_valid_email
from .records import UserType
from .regions import find_country, find_language

SERVICE_CATALOGUE: tuple[str, ...] = (
    "Web Development",
    "Mobile Development",
    "UI/UX Design",
    "Graphic Design",
    "Content Writing",
    "Digital Marketing",
    "Data Analysis",
    "Translation",
    "Video Editing",
    "Photography",
    "Accounting",
    "Virtual Assistant",
)

FormT = TypeVar("FormT", bound="FormModel")


class FormModel(BaseModel):
    """Base class for user-submitted forms."""

    field_messages: ClassVar[dict[str, str]] = {}

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)


def validate_form(form_cls: type[FormT], data: dict[str, Any], *, context: dict[str, Any] | None = None) -> FormT:
    """Validate ``data`` against ``form_cls`` or raise ``FormValidationError``."""
    try:
        return form_cls.model_validate(data, context=context)
    except ValidationError as exc:
        raise FormValidationError(_collect_messages(form_cls, exc)) from exc


def _collect_messages(form_cls: type[FormModel], exc: ValidationError) -> dict[str, str]:
    messages: dict[str, str] = {}
    for error in exc.errors():
        loc = error.get("loc") or ()
        field = str(loc[0]) if loc else "form"
        if field in messages:
            continue
        if error["type"] == "value_error":
            messages[field] = str(error["ctx"]["error"])
        else:
            messages[field] = form_cls.field_messages.get(field, error["msg"])
    return messages


def _check_email(value: str) -> str:
    if not is_valid_email(value):
        raise ValueError("Please enter a valid email address")
    return value


class LoginForm(FormModel):
    email: str
    password: str = Field(min_length=1)
    remember_me: bool = False

    field_messages: ClassVar[dict[str, str]] = {
        "email": "Please enter a valid email address",
        "password": "Password is required",
    }

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        return _check_email(value)


class SignupForm(FormModel):
    first_name: str = Field(min_length=2)
    last_name: str = Field(min_length=2)
    email: str
    password: str
    confirm_password: str
    user_type: UserType = UserType.CLIENT
    agree_to_terms: bool = False

    field_messages: ClassVar[dict[str, str]] = {
        "first_name": "First name must be at least 2 characters",
        "last_name": "Last name must be at least 2 characters",
        "email": "Please enter a valid email address",
        "user_type": "Please select if you are a freelancer or client",
    }

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        return _check_email(value)

    @field_validator("password")
    @classmethod
    def check_password_strength(cls, value: str) -> str:
        if len(value) < 8:
            raise ValueError("Password must be at least 8 characters")
        if not any(ch.islower() for ch in value):
            raise ValueError("Password must contain at least one lowercase letter")
        if not any(ch.isupper() for ch in value):
            raise ValueError("Password must contain at least one uppercase letter")
        if not any(ch.isdigit() for ch in value):
            raise ValueError("Password must contain at least one number")
        return value

    @field_validator("agree_to_terms")
    @classmethod
    def check_terms_accepted(cls, value: bool) -> bool:
        if value is not True:
            raise ValueError("You must agree to the terms")
        return value

    @field_validator("confirm_password")
    @classmethod
    def check_passwords_match(cls, value: str, info: ValidationInfo) -> str:
        password = info.data.get("password")
        if password is not None and value != password:
            raise ValueError("Passwords don't match")
        return value

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class ClientProfileForm(FormModel):
    full_name: str = Field(min_length=2)
    location: str = Field(min_length=2)

    field_messages: ClassVar[dict[str, str]] = {
        "full_name": "Name must be at least 2 characters",
        "location": "Location is required",
    }


class FreelancerProfileForm(ClientProfileForm):
    bio: str = Field(min_length=10)
    services_offered: list[str] = Field(min_length=1)

    field_messages: ClassVar[dict[str, str]] = {
        **ClientProfileForm.field_messages,
        "bio": "Bio must be at least 10 characters",
        "services_offered": "Select at least one service",
    }

    @field_validator("services_offered")
    @classmethod
    def check_known_services(cls, value: list[str]) -> list[str]:
        unknown = [service for service in value if service not in SERVICE_CATALOGUE]
        if unknown:
            raise ValueError(f"Unknown service: {unknown[0]}")
        return list(dict.fromkeys(value))


class BookingRequestForm(FormModel):
    service_description: str = Field(min_length=10)
    booking_date: str = Field(min_length=1)
    booking_time: str = Field(min_length=1)

    field_messages: ClassVar[dict[str, str]] = {
        "service_description": "Please describe the service you need",
        "booking_date": "Please select a date",
        "booking_time": "Please select a time",
    }

    @field_validator("booking_date")
    @classmethod
    def check_not_in_past(cls, value: str, info: ValidationInfo) -> str:
        try:
            chosen = pendulum.parse(value, exact=True)
        except ValueError as exc:
            raise ValueError("Please select a valid date") from exc
        if not isinstance(chosen, pendulum.Date) or isinstance(chosen, pendulum.DateTime):
            raise ValueError("Please select a valid date")
        today = (info.context or {}).get("today") or pendulum.today().date()
        if chosen < today:
            raise ValueError("Please select a date from today onwards")
        return chosen.to_date_string()


class VerificationForm(FormModel):
    residence_address: str = Field(min_length=10)
    billing_address: str = Field(min_length=10)

    field_messages: ClassVar[dict[str, str]] = {
        "residence_address": "Please provide your complete address",
        "billing_address": "Please provide your billing address",
    }


class ContactForm(FormModel):
    name: str = Field(min_length=1)
    email: str
    subject: str = Field(min_length=1)
    message: str = Field(min_length=1)

    field_messages: ClassVar[dict[str, str]] = {
        "name": "Please enter your name",
        "email": "Please enter a valid email address",
        "subject": "Please enter a subject",
        "message": "Please enter a message",
    }

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        return _check_email(value)

    @field_validator("subject", "message")
    @classmethod
    def check_no_markup(cls, value: str) -> str:
        if contains_malicious_patterns(value):
            raise ValueError("Message contains disallowed content")
        return value


class ClientRegistrationForm(FormModel):
    """Sign-up form of the become-a-client page.

    Picking a country fills in its dialling code unless one was given.
    """

    full_name: str = Field(min_length=2)
    email: str
    country: str
    phone_code: str = Field(min_length=1)
    phone_number: str = Field(min_length=5)
    language: str

    field_messages: ClassVar[dict[str, str]] = {
        "full_name": "Full name must be at least 2 characters",
        "email": "Please enter a valid email address",
        "country": "Please select your country",
        "phone_code": "Please select your country code",
        "phone_number": "Phone number must be at least 5 digits",
        "language": "Please select your preferred language",
    }

    @model_validator(mode="before")
    @classmethod
    def fill_phone_code(cls, data: Any) -> Any:
        if not isinstance(data, dict) or data.get("phone_code"):
            return data
        country = data.get("country")
        match = find_country(country) if isinstance(country, str) else None
        if match is None:
            return data
        return {**data, "phone_code": match.phone_code}

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        return _check_email(value)

    @field_validator("country")
    @classmethod
    def check_country(cls, value: str) -> str:
        country = find_country(value)
        if country is None:
            raise ValueError("Please select your country")
        return country.code

    @field_validator("language")
    @classmethod
    def check_language(cls, value: str) -> str:
        language = find_language(value)
        if language is None:
            raise ValueError("Please select your preferred language")
        return language.code


__all__ = [
    "SERVICE_CATALOGUE",
    "BookingRequestForm",
    "ClientProfileForm",
    "ClientRegistrationForm",
    "ContactForm",
    "FormModel",
    "FreelancerProfileForm",
    "LoginForm",
    "SignupForm",
    "VerificationForm",
    "validate_form",
]
