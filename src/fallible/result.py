"""Result type for explicit error handling without exceptions.

Provides a Rust-inspired Result[T, E] pattern for operations that can fail.
Forces callers to handle both success and error cases explicitly.

A result is exactly one of two frozen variants:

    Ok(42)                      # success carrying a value
    Err(ValueError("bad"))      # failure carrying an error
    Err("bad")                  # shorthand for Err(FallibleError("bad"))

Combinators never raise on their own account; failures travel as Err values.
Only the expect/unwrap family raises (UnwrapError), and only when called on
the wrong variant.
"""

from __future__ import annotations

import copy as _copy
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Optional, TypeGuard, TypeVar, Union

from src.fallible.errors import FallibleError, UnwrapError, is_error

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


def _independent_copy(value: T) -> T:
    try:
        return _copy.deepcopy(value)
    except (TypeError, _copy.Error):
        pass
    try:
        return _copy.copy(value)
    except (TypeError, _copy.Error):
        return value


@dataclass(frozen=True, slots=True, eq=False)
class Ok(Generic[T]):
    """Successful result containing a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def is_ok_and(self, predicate: Callable[[T], bool]) -> bool:
        return predicate(self.value)

    def is_err_and(self, predicate: Callable[[Any], bool]) -> bool:
        return False

    def ok(self) -> Optional[T]:
        return self.value

    def err(self) -> None:
        return None

    def map(self, fn: Callable[[T], U]) -> Result[U, E]:  # type: ignore[type-var]
        return Ok(fn(self.value))

    def map_err(self, fn: Callable[[E], F]) -> Result[T, F]:  # type: ignore[type-var]
        return self  # type: ignore[return-value]

    def map_or(self, default: U, fn: Callable[[T], U]) -> U:
        return fn(self.value)

    def map_or_else(self, default_fn: Callable[[Any], U], fn: Callable[[T], U]) -> U:
        return fn(self.value)

    def inspect(self, fn: Callable[[T], object]) -> Ok[T]:
        fn(self.value)
        return self

    def inspect_err(self, fn: Callable[[Any], object]) -> Ok[T]:
        return self

    def and_(self, other: Result[U, E]) -> Result[U, E]:  # type: ignore[type-var]
        return other

    def and_then(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:  # type: ignore[type-var]
        return fn(self.value)

    def or_(self, other: Result[T, E]) -> Result[T, E]:  # type: ignore[type-var]
        return self

    def or_else(self, fn: Callable[[Any], Result[T, F]]) -> Result[T, F]:  # type: ignore[type-var]
        return self

    def expect(self, msg: str) -> T:
        return self.value

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:  # type: ignore[override]
        return self.value

    def unwrap_or_else(self, fn: Callable[[Any], T]) -> T:
        return self.value

    def unwrap_or_default(self, default_factory: Optional[Callable[[], T]] = None) -> T:
        return self.value

    def expect_err(self, msg: str) -> Any:
        raise UnwrapError(msg)

    def unwrap_err(self) -> Any:
        raise UnwrapError(f"Called unwrap_err on Ok: {self.value!r}")

    def contains(self, x: T) -> bool:
        return bool(self.value == x)

    def contains_err(self, error: object) -> bool:
        return False

    def copy(self) -> Ok[T]:
        """Return an independent copy of this result.

        The value is deep-copied. Values that refuse deep copy (generators,
        locks, open files) fall back to a shallow copy, and failing that the
        copy shares the value.
        """
        return Ok(_independent_copy(self.value))

    def flatten(self) -> Result[Any, Any]:
        """Collapse ``Ok(inner_result)`` into ``inner_result``."""
        if not isinstance(self.value, (Ok, Err)):
            raise TypeError(
                f"flatten() requires Ok to hold a Result, got {type(self.value).__name__}"
            )
        return self.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (Ok, Err)):
            return NotImplemented
        return equal(self, other)

    def __hash__(self) -> int:
        return hash((Ok, self.value))

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True, eq=False)
class Err(Generic[E]):
    """Error result containing an error value.

    A plain string is accepted as shorthand and stored as a
    ``FallibleError`` so that every error can take part in wrapping.
    """

    error: E

    def __post_init__(self) -> None:
        if isinstance(self.error, str):
            object.__setattr__(self, "error", FallibleError(self.error))

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def is_ok_and(self, predicate: Callable[[Any], bool]) -> bool:
        return False

    def is_err_and(self, predicate: Callable[[E], bool]) -> bool:
        return predicate(self.error)

    def ok(self) -> None:
        return None

    def err(self) -> Optional[E]:
        return self.error

    def map(self, fn: Callable[[T], U]) -> Result[U, E]:  # type: ignore[type-var]
        return Err(self.error)

    def map_err(self, fn: Callable[[E], F]) -> Result[T, F]:  # type: ignore[type-var]
        return Err(fn(self.error))

    def map_or(self, default: U, fn: Callable[[Any], U]) -> U:
        return default

    def map_or_else(self, default_fn: Callable[[E], U], fn: Callable[[Any], U]) -> U:
        return default_fn(self.error)

    def inspect(self, fn: Callable[[Any], object]) -> Err[E]:
        return self

    def inspect_err(self, fn: Callable[[E], object]) -> Err[E]:
        fn(self.error)
        return self

    def and_(self, other: Result[U, E]) -> Result[U, E]:  # type: ignore[type-var]
        return Err(self.error)

    def and_then(self, fn: Callable[[Any], Result[U, E]]) -> Result[U, E]:  # type: ignore[type-var]
        return Err(self.error)

    def or_(self, other: Result[T, E]) -> Result[T, E]:  # type: ignore[type-var]
        return other

    def or_else(self, fn: Callable[[E], Result[T, F]]) -> Result[T, F]:  # type: ignore[type-var]
        return fn(self.error)

    def expect(self, msg: str) -> Any:
        raise UnwrapError(msg) from self._cause()

    def unwrap(self) -> Any:
        raise UnwrapError(f"Called unwrap on Err: {self.error}") from self._cause()

    def unwrap_or(self, default: T) -> T:  # type: ignore[type-var]
        return default

    def unwrap_or_else(self, fn: Callable[[E], T]) -> T:  # type: ignore[type-var]
        return fn(self.error)

    def unwrap_or_default(self, default_factory: Optional[Callable[[], T]] = None) -> Optional[T]:
        """Return ``default_factory()``, or None when no factory is given.

        Python has no per-type zero value, so the caller names it:
        ``r.unwrap_or_default(int)`` gives ``0``, ``r.unwrap_or_default(list)``
        gives ``[]``.
        """
        if default_factory is None:
            return None
        return default_factory()

    def expect_err(self, msg: str) -> E:
        return self.error

    def unwrap_err(self) -> E:
        return self.error

    def contains(self, x: object) -> bool:
        return False

    def contains_err(self, error: object) -> bool:
        """True if the held error is, equals, or wraps *error*."""
        return is_error(self.error, error)

    def copy(self) -> Err[E]:
        # Errors are opaque values; the copy shares the error so that
        # contains_err keeps matching the same instances.
        return Err(self.error)

    def flatten(self) -> Err[E]:
        return Err(self.error)

    def _cause(self) -> Optional[BaseException]:
        return self.error if isinstance(self.error, BaseException) else None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (Ok, Err)):
            return NotImplemented
        return equal(self, other)

    def __hash__(self) -> int:
        return hash((Err, str(self.error)))

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result = Union[Ok[T], Err[E]]


def is_ok(result: Result[T, E]) -> TypeGuard[Ok[T]]:
    """Narrow *result* to ``Ok``."""
    return isinstance(result, Ok)


def is_err(result: Result[T, E]) -> TypeGuard[Err[E]]:
    """Narrow *result* to ``Err``."""
    return isinstance(result, Err)


def equal(result: Result[Any, Any], other: Result[Any, Any]) -> bool:
    """Compare two results.

    Ok values compare with ``==``. Errors compare by rendered message only,
    so an error and a wrapper around it are *not* equal even though
    ``contains_err`` matches them. Mixed variants are never equal.
    """
    if isinstance(result, Ok) and isinstance(other, Ok):
        return bool(result.value == other.value)
    if isinstance(result, Err) and isinstance(other, Err):
        return str(result.error) == str(other.error)
    return False


def flatten(result: Result[Result[T, E], E]) -> Result[T, E]:
    """Collapse one level of nesting: Ok(Ok(v)) -> Ok(v), Ok(Err(e)) -> Err(e)."""
    return result.flatten()


def try_result(
    fn: Callable[..., T],
    *args: Any,
    error_type: Union[type[BaseException], tuple[type[BaseException], ...]] = Exception,
    **kwargs: Any,
) -> Result[T, BaseException]:
    """Call *fn* and capture an ``error_type`` exception as ``Err``.

    Useful at the boundary with code that raises. Exceptions outside
    ``error_type`` propagate unchanged.

    Example:
        try_result(int, "42")        # Ok(42)
        try_result(int, "forty-two") # Err(ValueError(...))
    """
    try:
        return Ok(fn(*args, **kwargs))
    except error_type as exc:
        return Err(exc)


def collect_results(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Collect results into a Result of list.

    Returns Ok with every value if all are Ok, otherwise the first Err.
    Items after the first Err are not consumed.
    """
    values: list[T] = []
    for result in results:
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return Ok(values)
