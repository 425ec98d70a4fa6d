import logging
from dataclasses import dataclass, field, replace
from typing import Any, Generic, TypeVar

from typing_extensions import Self

from intervalgebra.domains import Domain, integers
from intervalgebra.errors import InvalidOrder, MixedDomain

LOG = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, kw_only=True)
class Interval(Generic[T]):
    """Closed range ``[start, end]`` over an ordered domain.

    Both bounds are inclusive. Intervals are immutable; every operation
    returns new intervals built with ``dataclasses.replace`` so subclasses
    carrying extra fields keep them.
    """

    start: T
    end: T
    domain: Domain[T] = field(default=integers, repr=False)

    def __post_init__(self) -> None:
        if not self.domain.comparable(self.start, self.end):
            raise MixedDomain(
                f"Interval bounds must both belong to the {self.domain.name} domain.\n"
                f"Got start={self.start!r} ({type(self.start).__name__}), "
                f"end={self.end!r} ({type(self.end).__name__})\n"
                f"Domain step: {self.domain.step!r}\n"
                f"Hint: Build the interval through the matching domain:\n"
                f"  integers.interval(1, 7)\n"
                f"  reals.interval(1.5, 7.25)\n"
                f"  decimals.interval(Decimal(\"0.1\"), Decimal(\"0.3\"))\n"
                f"  instants.interval(datetime(...), datetime(...))  "
                f"# both aware or both naive"
            )
        if self.start > self.end:
            raise InvalidOrder(
                f"Interval start ({self.start}) must be <= end ({self.end})"
            )

    def __str__(self) -> str:
        render = self.domain.render
        return f"[{render(self.start)}, {render(self.end)}]"

    def _check_domain(self, other: "Interval[T]") -> None:
        if other.domain != self.domain:
            raise MixedDomain(
                f"Cannot combine intervals from different domains.\n"
                f"Got: {self.domain.name} ({self.domain.step!r} step) and "
                f"{other.domain.name} ({other.domain.step!r} step)\n"
                f"Hint: Construct both operands through the same domain."
            )

    def overlaps(self, other: "Interval[T]") -> bool:
        """True if the intervals share at least one point (touching counts)."""
        self._check_domain(other)
        return self.end >= other.start and other.end >= self.start

    def covers(self, other: "Interval[T]") -> bool:
        """True if ``other`` lies entirely inside this interval."""
        self._check_domain(other)
        return self.start <= other.start and other.end <= self.end

    def contains(self, value: Any) -> bool:
        """True if ``value`` lies within the closed bounds."""
        if not self.domain.comparable(value, self.start):
            return False
        return self.start <= value <= self.end

    def union(self, other: "Interval[T]") -> list[Self]:
        """Exact-set union.

        Overlapping or touching operands merge into a single interval;
        strictly disjoint operands come back unchanged, ordered by start.
        Use `bounding_envelope` when only the outer span matters.
        """
        if not self.overlaps(other):
            LOG.debug("union of disjoint intervals %s and %s kept apart", self, other)
            if other.start < self.start:
                return [other, self]
            return [self, other]
        return [
            replace(
                self,
                start=min(self.start, other.start),
                end=max(self.end, other.end),
            )
        ]

    def bounding_envelope(self, other: "Interval[T]") -> Self:
        """Smallest single interval spanning both operands, gaps included."""
        self._check_domain(other)
        return replace(
            self,
            start=min(self.start, other.start),
            end=max(self.end, other.end),
        )

    def intersection(self, other: "Interval[T]") -> Self | None:
        """Overlapping sub-range, or None when the operands are disjoint."""
        self._check_domain(other)
        new_start = max(self.start, other.start)
        new_end = min(self.end, other.end)
        if new_start <= new_end:
            return replace(self, start=new_start, end=new_end)
        return None

    def difference(self, other: "Interval[T]") -> list[Self]:
        """Portions of this interval not covered by ``other`` (at most two).

        On domains with adjacency the remainders exclude ``other``'s bounds:
        ``[1, 12] - [4, 7]`` on integers is ``[1, 3], [8, 12]``. On continuous
        domains the remainders touch ``other``: ``[1.0, 12.0] - [4.0, 7.0]``
        is ``[1.0, 4.0], [7.0, 12.0]``.
        """
        self._check_domain(other)

        if other.end < self.start or other.start > self.end:
            return [self]

        stepped = self.domain.supports_adjacency
        result: list[Self] = []

        if other.start > self.start:
            left_end = self.domain.prev(other.start) if stepped else other.start
            if self.start <= left_end:
                result.append(replace(self, start=self.start, end=left_end))
            else:
                LOG.debug("dropped off-grid left remainder of %s - %s", self, other)

        if other.end < self.end:
            right_start = self.domain.next(other.end) if stepped else other.end
            if right_start <= self.end:
                result.append(replace(self, start=right_start, end=self.end))
            else:
                LOG.debug("dropped off-grid right remainder of %s - %s", self, other)

        return result

    def __or__(self, other: object) -> list[Self]:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.union(other)

    def __and__(self, other: object) -> Self | None:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.intersection(other)

    def __sub__(self, other: object) -> list[Self]:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.difference(other)
