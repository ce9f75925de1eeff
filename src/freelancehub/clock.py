"""Timestamp helpers shared by stores and services."""

from __future__ import annotations

import pendulum


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with fixed microsecond precision, so values sort lexically."""
    return pendulum.now("UTC").format("YYYY-MM-DD[T]HH:mm:ss.SSSSSSZ")


def epoch_millis() -> int:
    return int(pendulum.now("UTC").timestamp() * 1000)
