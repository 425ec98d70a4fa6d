from .core import (
    bounding_envelope,
    construct,
    difference,
    intersection,
    parse,
    to_display_string,
    union,
)
from .domains import (
    Dates,
    Decimals,
    Domain,
    Instants,
    Integers,
    Rationals,
    Reals,
    dates,
    decimals,
    instants,
    integers,
    rationals,
    reals,
)
from .errors import IntervalError, InvalidOrder, MixedDomain
from .interval import Interval
from .util import DAY, HOUR, MINUTE, SECOND, WEEK

__all__ = [
    "Interval",
    "Domain",
    "Integers",
    "Reals",
    "Decimals",
    "Rationals",
    "Instants",
    "Dates",
    "integers",
    "reals",
    "decimals",
    "rationals",
    "instants",
    "dates",
    "construct",
    "union",
    "bounding_envelope",
    "intersection",
    "difference",
    "to_display_string",
    "parse",
    "IntervalError",
    "InvalidOrder",
    "MixedDomain",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
]
