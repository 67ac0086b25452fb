"""Error types and the wrapping relation between errors.

A ``Result`` never inspects its error beyond two capabilities:
rendering (``str(error)``) and containment (does this error wrap that one?).
Containment follows the same links Python uses for exception chaining,
the members of exception groups, and an ``unwrap()`` method on any error
object. ``unwrap()`` may return one inner error or a list/tuple of them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from collections.abc import Iterator


class FallibleError(Exception):
    """Base exception for all fallible errors."""

    def __init__(self, message: str, *, hint: Optional[str] = None) -> None:
        super().__init__(message)
        self.hint = hint


class UnwrapError(FallibleError, ValueError):
    """Value extracted from the wrong variant.

    Raised only by ``expect``/``unwrap``/``expect_err``/``unwrap_err``.
    Signals a broken caller invariant, not an expected failure path.
    """


class WrappedError(FallibleError):
    """An error that adds context around an inner error."""

    def __init__(self, context: str, inner: object) -> None:
        super().__init__(f"{context}: {inner}")
        self.context = context
        self.inner = inner
        if isinstance(inner, BaseException):
            self.__cause__ = inner

    def unwrap(self) -> object:
        return self.inner

    def __reduce__(self):  # type: ignore[no-untyped-def]
        return (type(self), (self.context, self.inner), {"hint": self.hint})


def wrap(error: object, context: str) -> WrappedError:
    """Wrap ``error`` with a context message.

    Example:
        base = FallibleError("connection refused")
        outer = wrap(base, "loading profile")
        str(outer)             # "loading profile: connection refused"
        is_error(outer, base)  # True
    """
    return WrappedError(context, error)


def _links(error: object) -> list[object]:
    links: list[object] = []
    unwrap = getattr(error, "unwrap", None)
    if callable(unwrap):
        inner = unwrap()
        if isinstance(inner, (list, tuple)):
            links.extend(link for link in inner if link is not None)
        elif inner is not None:
            links.append(inner)
    if not isinstance(error, BaseException):
        return links
    if isinstance(error, BaseExceptionGroup):
        links.extend(error.exceptions)
    if error.__cause__ is not None:
        links.append(error.__cause__)
    if error.__context__ is not None:
        links.append(error.__context__)
    return links


def error_chain(error: object) -> Iterator[object]:
    """Yield *error* and every error it wraps, with cycle protection."""
    seen: set[int] = set()
    stack: list[object] = [error]
    while stack:
        cur = stack.pop()
        if id(cur) in seen:
            continue
        seen.add(id(cur))
        yield cur
        stack.extend(reversed(_links(cur)))


def is_error(error: object, target: object) -> bool:
    """Return True if *error* is, equals, or wraps *target*."""
    return any(link is target or link == target for link in error_chain(error))
