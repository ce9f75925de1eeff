"""Route table and the access guards evaluated before a page loads."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Protocol
from urllib.parse import parse_qs, urlsplit

from .errors import Notice
from .schemas import AuthUser, Profile, UserType


class SessionView(Protocol):
    @property
    def user(self) -> AuthUser | None: ...

    @property
    def profile(self) -> Profile | None: ...


@dataclass(frozen=True, slots=True)
class Route:
    path: str
    name: str
    requires_auth: bool = False
    requires_profile: bool = False
    user_type: UserType | None = None
    denial: str = ""

    def pattern(self) -> re.Pattern[str]:
        regex = re.sub(r":(\w+)", r"(?P<\1>[^/]+)", self.path)
        return re.compile(f"^{regex}$")


@dataclass(frozen=True, slots=True)
class RouteMatch:
    route: Route
    params: dict[str, str] = field(default_factory=dict)
    query: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class Redirect:
    path: str
    notice: Notice | None = None


ROUTES: tuple[Route, ...] = (
    Route("/", "home"),
    Route("/auth", "auth"),
    Route("/onboarding", "onboarding", requires_auth=True),
    Route("/profile-creation", "profile-creation", requires_auth=True),
    Route(
        "/browse-freelancers",
        "browse-freelancers",
        requires_auth=True,
        requires_profile=True,
        user_type=UserType.CLIENT,
        denial="Only clients can browse freelancers",
    ),
    Route(
        "/request-booking",
        "request-booking",
        requires_auth=True,
        requires_profile=True,
        user_type=UserType.CLIENT,
        denial="Only clients can request bookings",
    ),
    Route(
        "/booking-confirmation",
        "booking-confirmation",
        requires_auth=True,
        requires_profile=True,
        user_type=UserType.FREELANCER,
        denial="Only freelancers can view booking confirmations",
    ),
    Route("/messages", "messages", requires_auth=True, requires_profile=True),
    Route(
        "/verification",
        "verification",
        requires_auth=True,
        requires_profile=True,
        user_type=UserType.FREELANCER,
        denial="Only freelancers can access verification",
    ),
    Route("/freelancer/:id", "freelancer-detail"),
    Route("/policies", "policies"),
    Route("/contact", "contact"),
    Route("/become-client", "become-client"),
    Route("/help", "help"),
)

NOT_FOUND = Route("*", "not-found")


def resolve(url: str) -> RouteMatch:
    """Match ``url`` (path plus optional query string) against the route table."""
    parts = urlsplit(url)
    path = parts.path or "/"
    if len(path) > 1:
        path = path.rstrip("/")
    query = {key: values[-1] for key, values in parse_qs(parts.query).items()}
    for route in ROUTES:
        found = route.pattern().match(path)
        if found:
            return RouteMatch(route=route, params=found.groupdict(), query=query)
    return RouteMatch(route=NOT_FOUND, query=query)


def guard(match: RouteMatch, session: SessionView) -> Redirect | None:
    """Return where to send the user instead, or ``None`` when the page may load."""
    route = match.route
    user = session.user
    profile = session.profile

    if route.name == "home":
        if user is not None and profile is None:
            return Redirect("/onboarding")
        return None

    if route.requires_auth and user is None:
        return Redirect("/auth")

    if route.name == "onboarding" and profile is not None:
        return Redirect("/")

    if route.name == "profile-creation" and match.query.get("type") not in {kind.value for kind in UserType}:
        return Redirect("/onboarding")

    if route.requires_profile and profile is None:
        return Redirect("/onboarding")

    if route.user_type is not None and profile is not None and profile.user_type != route.user_type:
        return Redirect("/", Notice(title="Access Denied", description=route.denial, variant="destructive"))

    if route.name == "request-booking" and not match.query.get("freelancer"):
        return Redirect("/browse-freelancers")

    return None


__all__ = ["NOT_FOUND", "ROUTES", "Redirect", "Route", "RouteMatch", "guard", "resolve"]
