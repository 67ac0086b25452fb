"""CLI interface for the fallible result type.

Provides command-line access to a few worked examples:
- demo: Walk through the combinators on sample values
- parse: Parse integers, reporting each failure as a value
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Optional

from src.fallible.config import FallibleConfig
from src.fallible.errors import FallibleError, wrap
from src.fallible.result import Err, Ok, Result, collect_results, try_result

logger = logging.getLogger(__name__)


def divide(numerator: float, denominator: float) -> Result[float, FallibleError]:
    if denominator == 0:
        return Err("division by zero")
    return Ok(numerator / denominator)


def parse_int(text: str) -> Result[int, BaseException]:
    """Parse *text* as an integer, wrapping the failure with the offending input."""
    return try_result(int, text, error_type=ValueError).map_err(
        lambda exc: wrap(exc, f"invalid integer {text!r}")
    )


def describe(result: Result[Any, Any]) -> dict[str, Any]:
    """JSON-friendly view of a result."""
    if result.is_ok():
        return {"ok": True, "value": result.unwrap()}
    return {"ok": False, "error": str(result.unwrap_err())}


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="fallible - explicit Ok/Err results for Python"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Demo command
    subparsers.add_parser("demo", help="Run a walkthrough of the combinators")

    # Parse command
    parse_parser = subparsers.add_parser("parse", help="Parse integers into results")
    parse_parser.add_argument("values", nargs="+", help="Values to parse")
    parse_parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Exit with status 1 if any value fails to parse",
    )

    args = parser.parse_args()

    config = FallibleConfig()
    logging.basicConfig(level=config.log_level)

    if args.command == "demo":
        run_demo(config)
    elif args.command == "parse":
        run_parse(args.values, strict=args.strict, config=config)
    else:
        parser.print_help()
        sys.exit(1)


def run_demo(config: Optional[FallibleConfig] = None) -> None:
    """Run a walkthrough with sample values."""
    config = config or FallibleConfig()

    print("=" * 60)
    print("fallible - Result Demo")
    print("=" * 60)
    print()

    good = divide(10, 2)
    bad = divide(1, 0)
    print("[1/4] Constructing results:")
    print(f"      divide(10, 2) -> {good!r}")
    print(f"      divide(1, 0)  -> {bad!r}")
    print()

    print("[2/4] Transforming:")
    doubled = good.map(lambda x: x * 2)
    chained = good.and_then(lambda x: divide(x, 0))
    fallback = bad.map_or(0, lambda x: x * 2)
    print(f"      map(x * 2)             -> {doubled!r}")
    print(f"      map_or(0, x * 2) on Err -> {fallback!r}")
    print(f"      and_then(divide by 0)  -> {chained!r}")
    print()

    print("[3/4] Falling back:")
    recovered = bad.or_else(lambda err: Ok(0.0))
    print(f"      or_(Ok(1.0))           -> {bad.or_(Ok(1.0))!r}")
    print(f"      or_else(-> Ok(0.0))    -> {recovered!r}")
    print(f"      unwrap_or(-1.0)        -> {bad.unwrap_or(-1.0)!r}")
    print()

    print("[4/4] Wrapping errors:")
    base = bad.unwrap_err()
    wrapped = bad.map_err(lambda err: wrap(err, "computing ratio"))
    print(f"      wrapped                -> {wrapped.unwrap_err()}")
    print(f"      contains_err(base)     -> {wrapped.contains_err(base)}")
    print(f"      wrapped == bad         -> {wrapped == bad}")
    print()
    print("=" * 60)

    logger.debug("demo finished: good=%r bad=%r", good, bad)

    json_output = {
        "good": describe(good),
        "bad": describe(bad),
        "doubled": describe(doubled),
        "chained": describe(chained),
        "recovered": describe(recovered),
        "wrapped": describe(wrapped),
        "contains_base": wrapped.contains_err(base),
        "equal_to_base": wrapped == bad,
    }
    print("JSON output:")
    print(json.dumps(json_output, indent=config.json_indent))


def run_parse(
    values: list[str],
    strict: Optional[bool] = None,
    config: Optional[FallibleConfig] = None,
) -> None:
    """Parse each value as an integer and print the outcome as JSON."""
    config = config or FallibleConfig()
    if strict is None:
        strict = config.strict

    results = [parse_int(value) for value in values]
    for value, result in zip(values, results):
        result.inspect_err(lambda err, value=value: logger.info("rejected %r: %s", value, err))

    total = collect_results(results).map(sum)
    print(json.dumps({
        "results": [
            {"input": value, **describe(result)}
            for value, result in zip(values, results)
        ],
        "total": total.ok(),
    }, indent=config.json_indent))

    if strict and total.is_err():
        sys.exit(1)


if __name__ == "__main__":
    main()
