from __future__ import annotations

import pytest

from freelancehub.errors import (
    AccessDeniedError,
    FormValidationError,
    InvalidTransitionError,
    NotFoundError,
    StoreError,
)
from freelancehub.schemas import VerificationStatus
from freelancehub.services import SessionContext, VerificationService
from freelancehub.store import InMemoryFileStorage, InMemoryRecordStore, Upload

ADDRESSES = {
    "residence_address": "12 Long Street, Cape Town",
    "billing_address": "PO Box 1000, Cape Town",
}


class FlakyStorage(InMemoryFileStorage):
    """Fails every upload whose name ends with ``.bad``."""

    def upload(self, bucket, path, content, *, content_type="application/octet-stream"):
        if path.endswith(".bad"):
            raise StoreError("upload failed", status=500)
        return super().upload(bucket, path, content, content_type=content_type)


class HiddenRowStore(InMemoryRecordStore):
    """Updates to verification rows match nothing, as when row-level security hides them."""

    def update(self, table, changes, *, filters):
        if table == "verification_documents":
            return []
        return super().update(table, changes, filters=filters)


@pytest.fixture
def freelancer(open_session):
    return open_session("ada@example.com", "freelancer")


def test_submit_creates_pending_document(freelancer, store, files):
    service = VerificationService(session=freelancer, store=store, files=files)
    assert service.current() is None

    document = service.submit(ADDRESSES, Upload("id.pdf", b"%PDF"), [Upload("bill.png", b"png")])

    assert document.status is VerificationStatus.PENDING
    assert "/documents/" in document.government_id_url
    assert len(document.supporting_documents_url) == 1
    assert document.submitted_at
    assert service.current() == document


def test_government_id_is_required(freelancer, store, files):
    service = VerificationService(session=freelancer, store=store, files=files)

    with pytest.raises(FormValidationError) as exc:
        service.submit(ADDRESSES, None)
    assert exc.value.errors == {"government_id": "Please upload your government ID"}


def test_failed_supporting_uploads_are_skipped(freelancer, store):
    service = VerificationService(session=freelancer, store=store, files=FlakyStorage())

    document = service.submit(ADDRESSES, Upload("id.pdf", b"%PDF"), [Upload("x.bad", b""), Upload("ok.png", b"")])

    assert len(document.supporting_documents_url) == 1
    assert document.supporting_documents_url[0].endswith(".png")


def test_resubmission_updates_existing_document(freelancer, store, files):
    service = VerificationService(session=freelancer, store=store, files=files)
    first = service.submit(ADDRESSES, Upload("id.pdf", b"1"))
    service.review(first.id, approve=False)

    second = service.submit({**ADDRESSES, "billing_address": "PO Box 2000, Cape Town"}, Upload("id.pdf", b"2"))

    assert second.id == first.id
    assert second.status is VerificationStatus.PENDING
    assert second.reviewed_at is None
    assert len(store.select("verification_documents")) == 1


def test_approval_marks_profile_verified(freelancer, store, files):
    service = VerificationService(session=freelancer, store=store, files=files)
    document = service.submit(ADDRESSES, Upload("id.pdf", b"%PDF"))

    reviewed = service.review(document.id, approve=True)

    assert reviewed.status is VerificationStatus.APPROVED
    assert reviewed.reviewed_at
    assert store.select("profiles", filters={"id": freelancer.user.id})[0]["is_verified"] is True
    with pytest.raises(InvalidTransitionError):
        service.review(document.id, approve=False)


def test_clients_cannot_submit(open_session, store, files):
    client = open_session("carl@example.com", "client")
    service = VerificationService(session=client, store=store, files=files)

    with pytest.raises(AccessDeniedError, match="Only freelancers can access verification"):
        service.submit(ADDRESSES, Upload("id.pdf", b"%PDF"))


def test_rejected_document_cannot_be_approved(freelancer, store, files):
    service = VerificationService(session=freelancer, store=store, files=files)
    document = service.submit(ADDRESSES, Upload("id.pdf", b"%PDF"))
    service.review(document.id, approve=False)

    with pytest.raises(InvalidTransitionError, match="already rejected"):
        service.review(document.id, approve=True)
    assert store.select("profiles", filters={"id": freelancer.user.id})[0]["is_verified"] is False


def test_review_of_missing_document_is_not_found(freelancer, store, files):
    service = VerificationService(session=freelancer, store=store, files=files)

    with pytest.raises(NotFoundError, match="Verification document not found"):
        service.review("missing", approve=True)


def test_hidden_rows_surface_as_not_found(auth):
    hidden = HiddenRowStore()
    session = SessionContext(auth=auth, store=hidden)
    user = session.sign_up(
        {
            "first_name": "Ada",
            "last_name": "Tester",
            "email": "ada@example.com",
            "password": "Secret123",
            "confirm_password": "Secret123",
            "user_type": "freelancer",
            "agree_to_terms": True,
        }
    )
    hidden.insert("profiles", {"id": user.id, "full_name": "Ada Tester", "user_type": "freelancer"})
    session.refresh_profile()
    service = VerificationService(session=session, store=hidden, files=InMemoryFileStorage())
    document = service.submit(ADDRESSES, Upload("id.pdf", b"%PDF"))

    with pytest.raises(NotFoundError):
        service.review(document.id, approve=True)
    with pytest.raises(NotFoundError):
        service.submit(ADDRESSES, Upload("id.pdf", b"%PDF"))
