"""
Module: builder.cancellation

Purpose:
    Caller-driven cancellation for executions deployed behind a request
    timeout. The token is checked before every store round trip.
"""

from __future__ import annotations

import threading

from trivia_toolkit.errors import ExecutionCancelled


class CancellationToken:
    """
    Thread-safe cancellation flag.

    Example:
        >>> token = CancellationToken()
        >>> token.cancel()
        >>> token.cancelled
        True
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self, step: str) -> None:
        """
        Raises:
            ExecutionCancelled: If cancel() has been called
        """
        if self._event.is_set():
            raise ExecutionCancelled(step)
