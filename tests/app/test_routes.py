from __future__ import annotations

from types import SimpleNamespace

import pytest

from freelancehub.routes import ROUTES, guard, resolve
from freelancehub.schemas import AuthUser, Profile, UserType

USER = AuthUser(id="u1", email="u1@example.com")


def viewer(user_type: str | None = None, *, signed_in: bool = True):
    if not signed_in:
        return SimpleNamespace(user=None, profile=None)
    profile = Profile(id="u1", full_name="U One", user_type=UserType(user_type)) if user_type else None
    return SimpleNamespace(user=USER, profile=profile)


def test_every_page_resolves():
    assert len(ROUTES) == 14
    for route in ROUTES:
        if ":" not in route.path:
            assert resolve(route.path).route is route


def test_path_params_and_query():
    match = resolve("/freelancer/abc-123?tab=reviews")

    assert match.route.name == "freelancer-detail"
    assert match.params == {"id": "abc-123"}
    assert match.query == {"tab": "reviews"}


def test_unknown_path_is_not_found():
    assert resolve("/nope").route.name == "not-found"
    assert resolve("/messages/").route.name == "messages"


@pytest.mark.parametrize(
    ("url", "who", "expected"),
    [
        ("/messages", viewer(signed_in=False), "/auth"),
        ("/verification", viewer(), "/onboarding"),
        ("/verification", viewer("client"), "/"),
        ("/booking-confirmation", viewer("client"), "/"),
        ("/browse-freelancers", viewer("freelancer"), "/"),
        ("/request-booking", viewer("client"), "/browse-freelancers"),
        ("/profile-creation", viewer(), "/onboarding"),
        ("/profile-creation?type=admin", viewer(), "/onboarding"),
        ("/onboarding", viewer("client"), "/"),
        ("/", viewer(), "/onboarding"),
    ],
)
def test_guard_redirects(url, who, expected):
    redirect = guard(resolve(url), who)

    assert redirect is not None
    assert redirect.path == expected


@pytest.mark.parametrize(
    ("url", "who"),
    [
        ("/", viewer(signed_in=False)),
        ("/", viewer("client")),
        ("/auth", viewer(signed_in=False)),
        ("/onboarding", viewer()),
        ("/profile-creation?type=freelancer", viewer()),
        ("/request-booking?freelancer=f1", viewer("client")),
        ("/verification", viewer("freelancer")),
        ("/messages", viewer("client")),
        ("/freelancer/f1", viewer(signed_in=False)),
        ("/help", viewer(signed_in=False)),
    ],
)
def test_guard_allows(url, who):
    assert guard(resolve(url), who) is None


def test_wrong_user_type_carries_access_denied_notice():
    redirect = guard(resolve("/verification"), viewer("client"))

    assert redirect.notice is not None
    assert redirect.notice.title == "Access Denied"
    assert redirect.notice.description == "Only freelancers can access verification"
    assert redirect.notice.variant == "destructive"
