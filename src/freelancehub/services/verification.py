"""Identity verification documents for freelancers."""

from __future__ import annotations

from typing import Any, Sequence

import structlog

from ..clock import utc_timestamp
from ..errors import FormValidationError, InvalidTransitionError, NotFoundError, StoreError
from ..schemas import UserType, VerificationDocument, VerificationForm, VerificationStatus, validate_form
from ..security import sanitize_input
from ..store import FileStorage, RecordStore, Upload
from .session import SessionContext
from .uploads import upload_public

_DENIAL = "Only freelancers can access verification"


class VerificationService:
    """Submission of verification documents and their review.

    A freelancer holds at most one document row; resubmitting replaces its
    contents and puts it back to ``pending``. Review is a back-office step and
    is not tied to the signed-in user.
    """

    BUCKET = "documents"

    def __init__(self, *, session: SessionContext, store: RecordStore, files: FileStorage) -> None:
        self._session = session
        self._store = store
        self._files = files
        self._logger = structlog.get_logger(__name__)

    def current(self) -> VerificationDocument | None:
        freelancer = self._session.require_profile(UserType.FREELANCER, denial=_DENIAL)
        rows = self._store.select("verification_documents", filters={"user_id": freelancer.id})
        self._session.checkpoint("current_verification")
        return VerificationDocument.model_validate(rows[0]) if rows else None

    def submit(
        self,
        data: dict[str, Any],
        government_id: Upload | None,
        supporting: Sequence[Upload] = (),
    ) -> VerificationDocument:
        freelancer = self._session.require_profile(UserType.FREELANCER, denial=_DENIAL)
        form = validate_form(VerificationForm, data)
        if government_id is None:
            raise FormValidationError({"government_id": "Please upload your government ID"})

        government_id_url = upload_public(self._files, self.BUCKET, freelancer.id, government_id)
        self._session.checkpoint("submit_verification")

        supporting_urls: list[str] = []
        for upload in supporting:
            try:
                supporting_urls.append(upload_public(self._files, self.BUCKET, freelancer.id, upload))
            except StoreError as exc:
                self._logger.warning("verification.supporting_upload_failed", filename=upload.filename, error=str(exc))
            self._session.checkpoint("submit_verification")

        record = {
            "government_id_url": government_id_url,
            "residence_address": sanitize_input(form.residence_address),
            "billing_address": sanitize_input(form.billing_address),
            "supporting_documents_url": supporting_urls,
            "status": VerificationStatus.PENDING.value,
            "submitted_at": utc_timestamp(),
            "reviewed_at": None,
        }
        existing = self._store.select("verification_documents", filters={"user_id": freelancer.id})
        self._session.checkpoint("submit_verification")
        if existing:
            rows = self._store.update("verification_documents", record, filters={"id": existing[0]["id"]})
            self._session.checkpoint("submit_verification")
            if not rows:
                raise NotFoundError("Verification document not found")
            row = rows[0]
        else:
            row = self._store.insert("verification_documents", {"user_id": freelancer.id, **record})
            self._session.checkpoint("submit_verification")

        document = VerificationDocument.model_validate(row)
        self._logger.info(
            "verification.submitted",
            document_id=document.id,
            supporting=len(supporting_urls),
            resubmitted=bool(existing),
        )
        return document

    def review(self, document_id: str, approve: bool) -> VerificationDocument:
        """Approve or reject a pending document; approval marks the profile verified."""
        rows = self._store.select("verification_documents", filters={"id": document_id})
        self._session.checkpoint("review_verification")
        if not rows:
            raise NotFoundError("Verification document not found")
        document = VerificationDocument.model_validate(rows[0])
        if document.status is not VerificationStatus.PENDING:
            raise InvalidTransitionError(f"Verification is already {document.status.value}")

        target = VerificationStatus.APPROVED if approve else VerificationStatus.REJECTED
        updated = self._store.update(
            "verification_documents",
            {"status": target.value, "reviewed_at": utc_timestamp()},
            filters={"id": document_id},
        )
        self._session.checkpoint("review_verification")
        if not updated:
            raise NotFoundError("Verification document not found")
        if approve:
            self._store.update("profiles", {"is_verified": True}, filters={"id": document.user_id})
            self._session.checkpoint("review_verification")

        self._logger.info("verification.reviewed", document_id=document_id, status=target.value)
        return VerificationDocument.model_validate(updated[0])
