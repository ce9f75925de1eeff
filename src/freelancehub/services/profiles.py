"""Profile creation and freelancer lookup."""

from __future__ import annotations

from typing import Any

import structlog

from ..core.filtering import filter_freelancers
from ..errors import FormValidationError, NotFoundError
from ..schemas import (
    ClientProfileForm,
    FreelancerFilter,
    FreelancerProfileForm,
    Profile,
    UserType,
    validate_form,
)
from ..security import sanitize_input
from ..store import FileStorage, RecordStore, Upload
from .session import SessionContext
from .uploads import upload_public


class ProfileService:
    """Onboarding and profile reads."""

    BUCKET = "profiles"

    def __init__(self, *, session: SessionContext, store: RecordStore, files: FileStorage) -> None:
        self._session = session
        self._store = store
        self._files = files
        self._logger = structlog.get_logger(__name__)

    def create_profile(
        self,
        user_type: UserType | str,
        data: dict[str, Any],
        picture: Upload | None = None,
    ) -> Profile:
        """Validate the onboarding form, upload the picture and insert the profile.

        Freelancers must provide a picture; clients may skip it.
        """
        user = self._session.require_user()
        try:
            kind = UserType(user_type)
        except ValueError as exc:
            raise FormValidationError({"user_type": "Please choose freelancer or client"}) from exc

        form_cls = FreelancerProfileForm if kind is UserType.FREELANCER else ClientProfileForm
        form = validate_form(form_cls, data)
        if kind is UserType.FREELANCER and picture is None:
            raise FormValidationError({"profile_picture": "Freelancers must upload a profile picture"})

        picture_url = upload_public(self._files, self.BUCKET, user.id, picture) if picture else None
        self._session.checkpoint("create_profile")

        record: dict[str, Any] = {
            "id": user.id,
            "email": user.email,
            "full_name": sanitize_input(form.full_name),
            "location": sanitize_input(form.location),
            "user_type": kind.value,
            "profile_picture_url": picture_url,
        }
        if isinstance(form, FreelancerProfileForm):
            record["bio"] = sanitize_input(form.bio)
            record["services_offered"] = list(form.services_offered)

        row = self._store.insert("profiles", record)
        self._session.checkpoint("create_profile")
        self._session.refresh_profile()
        self._logger.info("profile.created", user_type=kind.value)
        return Profile.model_validate(row)

    def get_profile(self, user_id: str) -> Profile:
        rows = self._store.select("profiles", filters={"id": user_id})
        self._session.checkpoint("get_profile")
        if not rows:
            raise NotFoundError(f"No profile for user {user_id}")
        return Profile.model_validate(rows[0])

    def browse_freelancers(self, criteria: FreelancerFilter | None = None) -> list[Profile]:
        """Verified freelancers matching the location/service filter. Clients only."""
        self._session.require_profile(UserType.CLIENT, denial="Only clients can browse freelancers")
        rows = self._store.select(
            "profiles",
            filters={"user_type": UserType.FREELANCER.value, "is_verified": True},
        )
        self._session.checkpoint("browse_freelancers")
        profiles = [Profile.model_validate(row) for row in rows]
        matched = filter_freelancers(profiles, criteria or FreelancerFilter())
        self._logger.info("freelancers.browsed", total=len(profiles), matched=len(matched))
        return matched

    def get_freelancer(self, freelancer_id: str) -> Profile:
        rows = self._store.select(
            "profiles",
            filters={"id": freelancer_id, "user_type": UserType.FREELANCER.value},
        )
        self._session.checkpoint("get_freelancer")
        if not rows:
            raise NotFoundError("Freelancer not found")
        return Profile.model_validate(rows[0])
