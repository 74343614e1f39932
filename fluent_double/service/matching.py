from __future__ import annotations

from typing import Any, Mapping, Optional, Tuple


class _Wildcard:
    """Singleton argument placeholder that matches any value, including None."""

    _instance: Optional["_Wildcard"] = None

    def __new__(cls) -> "_Wildcard":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __eq__(self, other: object) -> bool:
        return True

    def __ne__(self, other: object) -> bool:
        return False

    __hash__ = object.__hash__

    def __repr__(self) -> str:
        return "ANY"

    def __reduce__(self):
        return (_Wildcard, ())

    def __copy__(self) -> "_Wildcard":
        return self

    def __deepcopy__(self, memo) -> "_Wildcard":
        return self


ANY = _Wildcard()


def is_wildcard(value: Any) -> bool:
    return value is ANY


def values_match(expected: Any, actual: Any) -> bool:
    """
    Single equality policy for every argument position.

    ``ANY`` accepts anything. Otherwise the types must be identical, so
    ``1``, ``1.0`` and ``True`` stay distinct, and the expected value is
    compared on the left so that ``ANY`` nested inside containers still
    matches at its position. A replayed ``ANY`` only matches a recorded one.
    """
    if is_wildcard(expected):
        return True
    if is_wildcard(actual) or type(expected) is not type(actual):
        return False
    return bool(expected == actual)


def first_mismatch(
    expected_args: Tuple[Any, ...],
    expected_kwargs: Mapping[str, Any],
    actual_args: Tuple[Any, ...],
    actual_kwargs: Mapping[str, Any],
) -> Optional[int | str]:
    """
    Return the first argument position whose value does not match.

    Positionals are reported by index, keywords by name (in recorded order).
    Arity is assumed to be checked already.
    """
    for index, (expected, actual) in enumerate(zip(expected_args, actual_args)):
        if not values_match(expected, actual):
            return index
    for key, expected in expected_kwargs.items():
        if not values_match(expected, actual_kwargs[key]):
            return key
    return None
