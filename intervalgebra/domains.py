"""Ordered value domains that intervals are built over.

A domain decides which values may bound an interval, how they render and
parse, and whether the domain is discrete. Discrete domains carry a
``step`` (the adjacency unit); the interval algebra only ever asks
``supports_adjacency`` and never inspects value types itself.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from datetime import date, datetime
from decimal import Decimal
from fractions import Fraction
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from dateutil.parser import isoparse
from typing_extensions import override

from intervalgebra.util import DAY

if TYPE_CHECKING:
    from intervalgebra.interval import Interval

T = TypeVar("T")


@dataclass(frozen=True)
class Domain(ABC, Generic[T]):
    name: str
    step: Any = None

    @property
    def supports_adjacency(self) -> bool:
        """True if the domain has a well-defined next/previous value."""
        return self.step is not None

    @abstractmethod
    def accepts(self, value: Any) -> bool:
        """Return True if ``value`` is a member of this domain."""
        pass

    @abstractmethod
    def parse_value(self, text: str) -> T:
        """Read a single bound back from its rendered form."""
        pass

    def render(self, value: T) -> str:
        return str(value)

    def comparable(self, a: Any, b: Any) -> bool:
        """True if both values belong here and can be ordered against each other.

        Stepped domains also require both values to move by ``step`` without
        leaving the domain.
        """
        if not (self.accepts(a) and self.accepts(b)):
            return False
        try:
            a <= b
        except TypeError:
            return False
        return self.steps(a) and self.steps(b)

    def steps(self, value: Any) -> bool:
        """True if ``value`` can move by this domain's step and stay a member."""
        if self.step is None:
            return True
        try:
            return self.accepts(value + self.step) and self.accepts(value - self.step)
        except TypeError:
            return False
        except OverflowError:
            # value sits at the edge of its type's range
            return True

    def next(self, value: T) -> T:
        return value + self._require_step()

    def prev(self, value: T) -> T:
        return value - self._require_step()

    def _require_step(self) -> Any:
        if self.step is None:
            raise TypeError(
                f"Domain {self.name!r} has no adjacency step.\n"
                f"Hint: Derive a stepped domain with a caller-supplied unit:\n"
                f"  {self.name}.with_step(...)"
            )
        return self.step

    def with_step(self, step: Any) -> "Domain[T]":
        """Return a copy of this domain using ``step`` as its adjacency unit."""
        return replace(self, step=step)

    def interval(self, start: T, end: T) -> "Interval[T]":
        from intervalgebra.interval import Interval

        return Interval(start=start, end=end, domain=self)


@dataclass(frozen=True)
class Integers(Domain[int]):
    name: str = "integers"
    step: Any = 1

    @override
    def accepts(self, value: Any) -> bool:
        return isinstance(value, int) and not isinstance(value, bool)

    @override
    def parse_value(self, text: str) -> int:
        return int(text)


@dataclass(frozen=True)
class Reals(Domain[float]):
    name: str = "reals"

    @override
    def accepts(self, value: Any) -> bool:
        if isinstance(value, float):
            return math.isfinite(value)
        return isinstance(value, int) and not isinstance(value, bool)

    @override
    def parse_value(self, text: str) -> float:
        return float(text)


@dataclass(frozen=True)
class Decimals(Domain[Decimal]):
    """Exact decimal values; steps must be `Decimal` or `int`."""

    name: str = "decimals"

    @override
    def accepts(self, value: Any) -> bool:
        if isinstance(value, Decimal):
            return value.is_finite()
        return isinstance(value, int) and not isinstance(value, bool)

    @override
    def parse_value(self, text: str) -> Decimal:
        return Decimal(text)


@dataclass(frozen=True)
class Rationals(Domain[Fraction]):
    name: str = "rationals"

    @override
    def accepts(self, value: Any) -> bool:
        return isinstance(value, (int, Fraction)) and not isinstance(value, bool)

    @override
    def parse_value(self, text: str) -> Fraction:
        return Fraction(text)


@dataclass(frozen=True)
class Instants(Domain[datetime]):
    name: str = "instants"

    @override
    def accepts(self, value: Any) -> bool:
        return isinstance(value, datetime)

    @override
    def render(self, value: datetime) -> str:
        return value.isoformat()

    @override
    def parse_value(self, text: str) -> datetime:
        return isoparse(text)


@dataclass(frozen=True)
class Dates(Domain[date]):
    name: str = "dates"
    step: Any = DAY

    @override
    def accepts(self, value: Any) -> bool:
        # datetime subclasses date but belongs to the instants domain
        return isinstance(value, date) and not isinstance(value, datetime)

    @override
    def render(self, value: date) -> str:
        return value.isoformat()

    @override
    def parse_value(self, text: str) -> date:
        return isoparse(text).date()


integers: Integers = Integers()
reals: Reals = Reals()
decimals: Decimals = Decimals()
rationals: Rationals = Rationals()
instants: Instants = Instants()
dates: Dates = Dates()
