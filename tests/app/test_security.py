from __future__ import annotations

from freelancehub.security import RateLimiter, contains_malicious_patterns, is_valid_email, sanitize_input


def test_sanitize_input_escapes_and_truncates():
    assert sanitize_input("  <a href='x'>Tom & Jerry</a>  ") == (
        "&lt;a href=&#x27;x&#x27;&gt;Tom &amp; Jerry&lt;&#x2F;a&gt;"
    )
    assert len(sanitize_input("x" * 1500)) == 1000
    assert sanitize_input(None) == ""


def test_email_validation():
    assert is_valid_email("ada@example.com")
    assert not is_valid_email("ada@")
    assert not is_valid_email("a" * 250 + "@example.com")


def test_malicious_patterns():
    assert contains_malicious_patterns("<IFRAME src=x>")
    assert contains_malicious_patterns('<img onerror = "x">')
    assert not contains_malicious_patterns("Plain question about billing")


def test_rate_limiter_window_slides():
    now = [0.0]
    limiter = RateLimiter(max_attempts=2, window_seconds=10, clock=lambda: now[0])

    assert limiter.is_allowed("ip")
    assert limiter.is_allowed("ip")
    assert not limiter.is_allowed("ip")
    assert limiter.is_allowed("other")

    now[0] = 11.0
    assert limiter.is_allowed("ip")

    limiter.reset("ip")
    assert limiter.is_allowed("ip")


def test_rate_limiter_forgets_identifiers_whose_window_expired():
    now = [0.0]
    limiter = RateLimiter(max_attempts=2, window_seconds=10, clock=lambda: now[0])
    for index in range(50):
        limiter.is_allowed(f"user{index}@example.com")
    assert limiter.tracked == 50

    now[0] = 10.0
    assert limiter.is_allowed("late@example.com")
    assert limiter.tracked == 1
