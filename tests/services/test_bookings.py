from __future__ import annotations

import pendulum
import pytest

from freelancehub.errors import AccessDeniedError, InvalidTransitionError, NotFoundError
from freelancehub.schemas import BookingStatus
from freelancehub.services import BookingService, ProfileService, check_transition

TODAY = pendulum.date(2025, 6, 10)
REQUEST = {
    "service_description": "Translate our product brochure",
    "booking_date": "2025-06-12",
    "booking_time": "14:00",
}


@pytest.fixture
def parties(open_session, store, files):
    freelancer = open_session("ada@example.com", "freelancer", verified=True)
    client = open_session("carl@example.com", "client")

    def service(session):
        profiles = ProfileService(session=session, store=store, files=files)
        return BookingService(session=session, store=store, profiles=profiles)

    return service(client), service(freelancer), client, freelancer


def test_client_requests_pending_booking(parties):
    client_bookings, _, client, freelancer = parties

    booking = client_bookings.request_booking(freelancer.user.id, REQUEST, today=TODAY)

    assert booking.status is BookingStatus.PENDING
    assert booking.client_id == client.user.id
    assert booking.freelancer_id == freelancer.user.id
    assert booking.created_at


def test_booking_target_must_be_a_freelancer(parties):
    client_bookings, _, client, _ = parties

    with pytest.raises(NotFoundError):
        client_bookings.request_booking(client.user.id, REQUEST, today=TODAY)


def test_freelancers_cannot_request_bookings(parties):
    _, freelancer_bookings, client, _ = parties

    with pytest.raises(AccessDeniedError, match="Only clients can request bookings"):
        freelancer_bookings.request_booking(client.user.id, REQUEST, today=TODAY)


def test_incoming_and_outgoing_views(parties, store):
    client_bookings, freelancer_bookings, _, freelancer = parties
    first = client_bookings.request_booking(freelancer.user.id, REQUEST, today=TODAY)
    store.update("bookings", {"created_at": "2025-06-01T00:00:00.000000+00:00"}, filters={"id": first.id})
    second = client_bookings.request_booking(freelancer.user.id, {**REQUEST, "booking_time": "16:00"}, today=TODAY)

    incoming = freelancer_bookings.incoming()
    outgoing = client_bookings.outgoing()

    assert [booking.id for booking in incoming] == [second.id, first.id]
    assert incoming[0].counterpart.full_name == "Carl Tester"
    assert outgoing[0].counterpart.full_name == "Ada Tester"


def test_accepting_generates_payment_notice(parties):
    client_bookings, freelancer_bookings, _, freelancer = parties
    booking = client_bookings.request_booking(freelancer.user.id, REQUEST, today=TODAY)

    updated, notices = freelancer_bookings.update_status(booking.id, "accepted")

    assert updated.status is BookingStatus.ACCEPTED
    assert [notice.title for notice in notices] == ["Booking accepted", "Payment link generated"]


def test_declining_then_accepting_is_rejected(parties):
    client_bookings, freelancer_bookings, _, freelancer = parties
    booking = client_bookings.request_booking(freelancer.user.id, REQUEST, today=TODAY)

    _, notices = freelancer_bookings.update_status(booking.id, BookingStatus.DECLINED)
    assert [notice.title for notice in notices] == ["Booking declined"]

    with pytest.raises(InvalidTransitionError):
        freelancer_bookings.update_status(booking.id, BookingStatus.ACCEPTED)


def test_unknown_status_is_rejected(parties):
    client_bookings, freelancer_bookings, _, freelancer = parties
    booking = client_bookings.request_booking(freelancer.user.id, REQUEST, today=TODAY)

    with pytest.raises(InvalidTransitionError):
        freelancer_bookings.update_status(booking.id, "archived")


@pytest.mark.parametrize(
    ("current", "target"),
    [
        (BookingStatus.PENDING, BookingStatus.PENDING),
        (BookingStatus.ACCEPTED, BookingStatus.DECLINED),
        (BookingStatus.DECLINED, BookingStatus.PENDING),
    ],
)
def test_transition_rule(current, target):
    with pytest.raises(InvalidTransitionError):
        check_transition(current, target)
