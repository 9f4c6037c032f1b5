"""Cancellable execution context threaded through repository calls."""

from __future__ import annotations

import time

from ..exceptions import OperationCancelledError


class Context:
    """Cooperative cancellation signal with an optional deadline.

    Repositories check the context before touching the file; nothing is
    interrupted mid-I/O.
    """

    def __init__(self, *, deadline: float | None = None, parent: Context | None = None) -> None:
        self._deadline = deadline
        self._parent = parent
        self._cancelled = False

    @classmethod
    def with_timeout(cls, seconds: float) -> Context:
        return cls(deadline=time.monotonic() + seconds)

    @property
    def deadline(self) -> float | None:
        """Monotonic-clock deadline, the earliest one along the parent chain."""
        own = self._deadline
        inherited = self._parent.deadline if self._parent is not None else None
        if own is None:
            return inherited
        if inherited is None:
            return own
        return min(own, inherited)

    @property
    def cancelled(self) -> bool:
        return self.reason() is not None

    def cancel(self) -> None:
        self._cancelled = True

    def child(self, *, timeout: float | None = None) -> Context:
        deadline = time.monotonic() + timeout if timeout is not None else None
        return Context(deadline=deadline, parent=self)

    def reason(self) -> str | None:
        if self._cancelled:
            return "context cancelled"
        if self._parent is not None:
            inherited = self._parent.reason()
            if inherited is not None:
                return inherited
        if self._deadline is not None and time.monotonic() >= self._deadline:
            return "context deadline exceeded"
        return None

    def raise_if_cancelled(self) -> None:
        reason = self.reason()
        if reason is not None:
            raise OperationCancelledError(reason)


class _BackgroundContext(Context):
    def cancel(self) -> None:
        pass


_BACKGROUND = _BackgroundContext()


def background() -> Context:
    """Return the shared never-cancelled context."""
    return _BACKGROUND


def ensure_context(ctx: Context | None) -> Context:
    return ctx if ctx is not None else _BACKGROUND
