"""Functional API over pairs of intervals.

Each function mirrors the corresponding `Interval` method so callers can
write ``union(a, b)`` as readily as ``a | b``.
"""

import re
from typing import TypeVar

from intervalgebra.domains import Domain, integers
from intervalgebra.interval import Interval

T = TypeVar("T")

_DISPLAY_PATTERN = re.compile(
    r"^\s*\[\s*(?P<start>[^,\[\]]+?)\s*,\s*(?P<end>[^,\[\]]+?)\s*\]\s*$"
)


def construct(start: T, end: T, domain: Domain[T] = integers) -> Interval[T]:
    """Build a validated interval, raising InvalidOrder or MixedDomain."""
    return domain.interval(start, end)


def union(a: Interval[T], b: Interval[T]) -> list[Interval[T]]:
    """Exact-set union: one merged interval, or both operands if disjoint."""
    return a.union(b)


def bounding_envelope(a: Interval[T], b: Interval[T]) -> Interval[T]:
    """Single interval spanning both operands, discarding any gap between them."""
    return a.bounding_envelope(b)


def intersection(a: Interval[T], b: Interval[T]) -> Interval[T] | None:
    return a.intersection(b)


def difference(a: Interval[T], b: Interval[T]) -> list[Interval[T]]:
    return a.difference(b)


def to_display_string(interval: Interval[T]) -> str:
    return str(interval)


def parse(text: str, domain: Domain[T] = integers) -> Interval[T]:
    """Read an interval back from its ``"[start, end]"`` display form.

    Example:
        >>> parse("[1, 7]")
        Interval(start=1, end=7)
    """
    match = _DISPLAY_PATTERN.match(text)
    if match is None:
        raise ValueError(
            f"Cannot parse interval from {text!r}.\n"
            f"Expected the display form \"[start, end]\", e.g. \"[1, 7]\" or\n"
            f"  \"[2025-01-01T09:00:00+00:00, 2025-01-01T17:00:00+00:00]\""
        )
    start = domain.parse_value(match.group("start"))
    end = domain.parse_value(match.group("end"))
    return domain.interval(start, end)
