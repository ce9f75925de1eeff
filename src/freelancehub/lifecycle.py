"""Cancellation tokens tied to the lifetime of their owner."""

from __future__ import annotations

import threading

from .errors import OperationCancelled


class CancelToken:
    """Cooperative cancellation flag.

    Long-running callers check the token after each store round-trip and stop
    before touching state owned by something that has already been closed.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        self._event.set()

    def raise_if_cancelled(self, operation: str = "operation") -> None:
        if self.cancelled:
            raise OperationCancelled(f"{operation} finished after its owner was closed")


__all__ = ["CancelToken"]
