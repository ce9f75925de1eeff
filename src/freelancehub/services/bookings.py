"""Booking requests and their accept/decline workflow."""

from __future__ import annotations

from typing import Any

import pendulum
import structlog

from ..errors import InvalidTransitionError, NotFoundError, Notice
from ..schemas import (
    Booking,
    BookingRequestForm,
    BookingStatus,
    BookingView,
    ProfileSummary,
    UserType,
    validate_form,
)
from ..security import sanitize_input
from ..store import RecordStore
from .profiles import ProfileService
from .session import SessionContext

ALLOWED_TRANSITIONS: dict[BookingStatus, frozenset[BookingStatus]] = {
    BookingStatus.PENDING: frozenset({BookingStatus.ACCEPTED, BookingStatus.DECLINED}),
    BookingStatus.ACCEPTED: frozenset(),
    BookingStatus.DECLINED: frozenset(),
}


def check_transition(current: BookingStatus, target: BookingStatus) -> None:
    if target not in ALLOWED_TRANSITIONS[current]:
        raise InvalidTransitionError(f"Cannot move a booking from {current.value} to {target.value}")


class BookingService:
    """Clients request bookings; freelancers accept or decline them."""

    def __init__(self, *, session: SessionContext, store: RecordStore, profiles: ProfileService) -> None:
        self._session = session
        self._store = store
        self._profiles = profiles
        self._logger = structlog.get_logger(__name__)

    def request_booking(
        self,
        freelancer_id: str,
        data: dict[str, Any],
        *,
        today: pendulum.Date | None = None,
    ) -> Booking:
        client = self._session.require_profile(UserType.CLIENT, denial="Only clients can request bookings")
        form = validate_form(BookingRequestForm, data, context={"today": today} if today else None)
        freelancer = self._profiles.get_freelancer(freelancer_id)

        row = self._store.insert(
            "bookings",
            {
                "client_id": client.id,
                "freelancer_id": freelancer.id,
                "service_description": sanitize_input(form.service_description),
                "booking_date": form.booking_date,
                "booking_time": form.booking_time,
                "status": BookingStatus.PENDING.value,
            },
        )
        self._session.checkpoint("request_booking")
        booking = Booking.model_validate(row)
        self._logger.info("booking.requested", booking_id=booking.id, freelancer_id=freelancer.id)
        return booking

    def incoming(self) -> list[BookingView]:
        """Requests addressed to the signed-in freelancer, newest first."""
        freelancer = self._session.require_profile(
            UserType.FREELANCER,
            denial="Only freelancers can view booking confirmations",
        )
        rows = self._store.select(
            "bookings",
            filters={"freelancer_id": freelancer.id},
            order_by="created_at",
            descending=True,
        )
        self._session.checkpoint("incoming_bookings")
        return [self._with_counterpart(row, row["client_id"]) for row in rows]

    def outgoing(self) -> list[BookingView]:
        client = self._session.require_profile(UserType.CLIENT, denial="Only clients have booking requests")
        rows = self._store.select(
            "bookings",
            filters={"client_id": client.id},
            order_by="created_at",
            descending=True,
        )
        self._session.checkpoint("outgoing_bookings")
        return [self._with_counterpart(row, row["freelancer_id"]) for row in rows]

    def update_status(self, booking_id: str, status: BookingStatus | str) -> tuple[Booking, list[Notice]]:
        """Accept or decline a pending request addressed to the signed-in freelancer."""
        freelancer = self._session.require_profile(
            UserType.FREELANCER,
            denial="Only freelancers can respond to bookings",
        )
        try:
            target = BookingStatus(status)
        except ValueError as exc:
            raise InvalidTransitionError(f"Unknown booking status: {status!r}") from exc
        rows = self._store.select("bookings", filters={"id": booking_id, "freelancer_id": freelancer.id})
        self._session.checkpoint("update_booking")
        if not rows:
            raise NotFoundError("Booking not found")
        current = Booking.model_validate(rows[0])
        check_transition(current.status, target)

        updated = self._store.update("bookings", {"status": target.value}, filters={"id": booking_id})
        self._session.checkpoint("update_booking")
        if not updated:
            raise NotFoundError("Booking not found")
        booking = Booking.model_validate(updated[0])
        self._logger.info("booking.status_updated", booking_id=booking_id, status=target.value)

        notices = [
            Notice(
                title=f"Booking {target.value}",
                description=(
                    "The client will be notified and redirected to payment"
                    if target is BookingStatus.ACCEPTED
                    else "The client will be notified of the decline"
                ),
            )
        ]
        if target is BookingStatus.ACCEPTED:
            notices.append(
                Notice(title="Payment link generated", description="Client will receive payment instructions")
            )
        return booking, notices

    def _with_counterpart(self, row: dict[str, Any], counterpart_id: str) -> BookingView:
        profiles = self._store.select("profiles", filters={"id": counterpart_id})
        summary = ProfileSummary.model_validate(profiles[0]) if profiles else ProfileSummary()
        return BookingView.model_validate({**row, "counterpart": summary})
