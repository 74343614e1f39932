from __future__ import annotations

from typing import Any, Iterable, Mapping, Tuple

from fluent_double.models.expectation import Expectation


def _truncate(msg: str, limit: int) -> str:
    return (msg if not limit or len(msg) <= limit else f"{msg[:limit-1]}…")


def format_value(value: Any, limit: int = 200) -> str:
    return _truncate(repr(value), limit)


def format_call(
    method_name: str,
    args: Tuple[Any, ...] = (),
    kwargs: Mapping[str, Any] | None = None,
    limit: int = 200,
) -> str:
    """
    Render a call the way it would be typed.
    format_call("equals", ("USA",)) -> "equals('USA')"
    """
    parts = [format_value(a, limit) for a in args]
    parts.extend(f"{k}={format_value(v, limit)}" for k, v in (kwargs or {}).items())
    return f"{method_name}({', '.join(parts)})"


def format_expectation(expectation: Expectation, limit: int = 200) -> str:
    return format_call(
        expectation.method_name,
        expectation.expected_args,
        expectation.expected_kwargs,
        limit,
    )


def format_chain(expectations: Iterable[Expectation], limit: int = 200) -> str:
    """One line per expectation: '  #3 sort('x', 'y')'."""
    return "\n".join(
        f"  #{e.sequence_index} {format_expectation(e, limit)}" for e in expectations
    )


def format_arity(args: Tuple[Any, ...], kwargs: Mapping[str, Any]) -> str:
    names = ", ".join(sorted(kwargs)) if kwargs else "none"
    return f"{len(args)} positional and keywords [{names}]"
