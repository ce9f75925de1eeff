"""Predicates used when a client browses verified freelancers."""

from __future__ import annotations

from ...schemas import FreelancerFilter, Profile


class ProfileLocationPredicate:
    """Case-insensitive substring on the profile location."""

    name = "profile_location"

    def is_active(self, state: FreelancerFilter) -> bool:
        return bool(state.location)

    def matches(self, item: Profile, state: FreelancerFilter) -> bool:
        return state.location.lower() in (item.location or "").lower()


class ServiceOfferedPredicate:
    """Matches when any offered service contains the query."""

    name = "service"

    def is_active(self, state: FreelancerFilter) -> bool:
        return bool(state.service)

    def matches(self, item: Profile, state: FreelancerFilter) -> bool:
        needle = state.service.lower()
        return any(needle in service.lower() for service in item.services_offered)
