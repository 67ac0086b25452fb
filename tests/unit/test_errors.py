"""Tests for error wrapping and containment."""

import copy

import pytest
from hypothesis import given, strategies as st

from src.fallible.errors import (
    FallibleError,
    UnwrapError,
    WrappedError,
    error_chain,
    is_error,
    wrap,
)
from src.fallible.result import Err


class ChainedError:
    """Error value that is not an exception but exposes unwrap()."""

    def __init__(self, message: str, inner: object) -> None:
        self.message = message
        self.inner = inner

    def unwrap(self) -> object:
        return self.inner

    def __str__(self) -> str:
        return f"{self.message}: {self.inner}"


class JoinedError:
    def __init__(self, errors: list[object]) -> None:
        self.errors = errors

    def unwrap(self) -> list[object]:
        return self.errors


class TestFallibleError:
    def test_message_and_hint(self) -> None:
        err = FallibleError("bad input", hint="check the value")
        assert str(err) == "bad input"
        assert err.hint == "check the value"

    def test_hint_default(self) -> None:
        assert FallibleError("x").hint is None

    def test_unwrap_error_is_value_error(self) -> None:
        assert issubclass(UnwrapError, ValueError)
        assert issubclass(UnwrapError, FallibleError)


class TestWrap:
    def test_renders_context_and_inner(self) -> None:
        outer = wrap(FallibleError("connection refused"), "loading profile")
        assert isinstance(outer, WrappedError)
        assert str(outer) == "loading profile: connection refused"

    def test_sets_cause(self) -> None:
        inner = OSError("disk full")
        outer = wrap(inner, "saving")
        assert outer.__cause__ is inner
        assert outer.unwrap() is inner

    def test_non_exception_inner(self) -> None:
        outer = wrap("plain", "ctx")
        assert str(outer) == "ctx: plain"
        assert outer.__cause__ is None
        assert is_error(outer, "plain")

    def test_deepcopy(self) -> None:
        outer = wrap(FallibleError("inner"), "ctx")
        duplicate = copy.deepcopy(outer)
        assert str(duplicate) == str(outer)
        assert duplicate.context == "ctx"

    @given(st.text(), st.text())
    def test_message_format(self, inner: str, context: str) -> None:
        assert str(wrap(FallibleError(inner), context)) == f"{context}: {inner}"


class TestErrorChain:
    def test_single(self) -> None:
        err = FallibleError("x")
        assert list(error_chain(err)) == [err]

    def test_nested_wraps_in_order(self) -> None:
        root = FallibleError("root")
        middle = wrap(root, "middle")
        outer = wrap(middle, "outer")
        assert list(error_chain(outer)) == [outer, middle, root]

    def test_implicit_context(self) -> None:
        try:
            try:
                raise KeyError("k")
            except KeyError:
                raise RuntimeError("during handling")
        except RuntimeError as exc:
            chain = list(error_chain(exc))
        assert [type(e) for e in chain] == [RuntimeError, KeyError]

    def test_cycle_protection(self) -> None:
        a = FallibleError("a")
        b = FallibleError("b")
        a.__cause__ = b
        b.__cause__ = a
        assert list(error_chain(a)) == [a, b]


class TestIsError:
    def test_identity(self) -> None:
        err = ValueError("x")
        assert is_error(err, err)

    def test_equality(self) -> None:
        assert is_error("token", "token")

    def test_distinct_instances_with_same_message(self) -> None:
        assert not is_error(FallibleError("x"), FallibleError("x"))

    def test_wrapped(self) -> None:
        root = FallibleError("root")
        assert is_error(wrap(root, "ctx"), root)

    def test_outer_not_contained_in_inner(self) -> None:
        root = FallibleError("root")
        assert not is_error(root, wrap(root, "ctx"))

    def test_plain_object_with_unwrap(self) -> None:
        root = FallibleError("root")
        outer = ChainedError("outer", root)
        assert is_error(outer, root)
        assert Err(outer).contains_err(root)

    def test_unwrap_returning_many(self) -> None:
        first = FallibleError("first")
        second = KeyError("second")
        joined = JoinedError([first, second])
        assert is_error(joined, first)
        assert is_error(joined, second)
        assert not is_error(joined, FallibleError("first"))

    def test_exception_group_members(self) -> None:
        root = FallibleError("root")
        group = ExceptionGroup("many", [ValueError("other"), wrap(root, "ctx")])
        assert is_error(group, root)
        assert Err(group).contains_err(root)


@pytest.mark.parametrize("context", ["reading", "parsing config"])
def test_wrapped_message_prefix(context: str) -> None:
    assert str(wrap(ValueError("boom"), context)).startswith(f"{context}: ")
