"""fallible - an immutable Ok/Err result type and its combinators."""

from src.fallible.errors import (
    FallibleError,
    UnwrapError,
    WrappedError,
    error_chain,
    is_error,
    wrap,
)
from src.fallible.result import (
    Err,
    Ok,
    Result,
    collect_results,
    equal,
    flatten,
    is_err,
    is_ok,
    try_result,
)

__all__ = [
    "Result",
    "Ok",
    "Err",
    "equal",
    "flatten",
    "is_ok",
    "is_err",
    "try_result",
    "collect_results",
    "FallibleError",
    "UnwrapError",
    "WrappedError",
    "wrap",
    "error_chain",
    "is_error",
]
