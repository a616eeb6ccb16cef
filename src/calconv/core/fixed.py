"""
calconv.core.fixed
------------------
The fixed-date axis (Rata Die) and the exact modular helpers every calendar
is built on. Fixed day 1 is Gregorian 0001-01-01, which is also what
``datetime.date.toordinal`` counts.
"""

from __future__ import annotations

import logging
from datetime import date
from fractions import Fraction
from typing import Callable, Optional, Union

from .errors import OutOfRangeError, SearchLimitError

logger = logging.getLogger(__name__)

FixedDate = int
NumT = Union[int, Fraction]

# JD 1721424.5 is the midnight starting fixed day 0.
JD_EPOCH = Fraction(3442849, 2)
JDN_OFFSET = 1721425

# Generous for every caller: bisection over 2**32 candidates needs 32 steps.
DEFAULT_SEARCH_LIMIT = 96


def floor_div(a: NumT, b: NumT) -> int:
    """Floored quotient; exact for ints and Fractions."""
    return a // b


def mod_pos(a: NumT, b: NumT) -> NumT:
    """Remainder with the sign of b, i.e. in [0, b) for b > 0."""
    return a % b


def amod(a: int, b: int) -> int:
    """Adjusted remainder in [1, b] instead of [0, b)."""
    return mod_pos(a - 1, b) + 1


def search_cycle_boundary(
    start: int,
    predicate: Callable[[int], bool],
    *,
    hi: Optional[int] = None,
    max_iter: int = DEFAULT_SEARCH_LIMIT,
) -> int:
    """
    Least integer n >= start with predicate(n) true, for a predicate that is
    monotone (false ... false, true ... true).

    Without ``hi`` the upper bracket is found by doubling the step from
    ``start``; with ``hi`` the caller guarantees predicate(hi) and only the
    bisection runs. Either way the number of predicate calls is bounded by
    ``max_iter``.
    """
    iters = 1
    if predicate(start):
        return start

    lo = start
    if hi is None:
        step = 1
        hi = start + step
        while not predicate(hi):
            iters += 1
            if iters > max_iter:
                raise SearchLimitError(f"No boundary found in [{start}, {hi}] after {max_iter} probes")
            lo = hi
            step *= 2
            hi = start + step
        iters += 1
    elif hi < start:
        raise ValueError("hi must be >= start")

    # invariant: predicate(lo) is false, predicate(hi) is true
    while hi - lo > 1:
        iters += 1
        if iters > max_iter:
            raise SearchLimitError(f"Bisection in [{lo}, {hi}] exceeded {max_iter} probes")
        mid = (lo + hi) // 2
        if predicate(mid):
            hi = mid
        else:
            lo = mid

    logger.debug("search_cycle_boundary(start=%s) -> %s in %d probes", start, hi, iters)
    return hi


# ============================================================
# Interop with datetime and Julian day numbers
# ============================================================

def fixed_from_date(d: date) -> FixedDate:
    """Fixed date of a Python ``date`` (proleptic Gregorian)."""
    return d.toordinal()


def date_from_fixed(fixed: FixedDate) -> date:
    """Python ``date`` for a fixed date; only years 1..9999 are representable."""
    if not (date.min.toordinal() <= fixed <= date.max.toordinal()):
        raise OutOfRangeError(f"Fixed date {fixed} is outside the range of datetime.date")
    return date.fromordinal(fixed)


def fixed_from_jdn(jdn: int) -> FixedDate:
    return jdn - JDN_OFFSET


def jdn_from_fixed(fixed: FixedDate) -> int:
    """Julian Day Number of the civil day (noon-based count)."""
    return fixed + JDN_OFFSET


def fixed_from_jd(jd: NumT) -> FixedDate:
    """Fixed date containing the moment ``jd`` (Julian Date, midnight-based days)."""
    return floor_div(Fraction(jd) - JD_EPOCH, 1)


def jd_from_fixed(fixed: FixedDate) -> Fraction:
    """Julian Date at the midnight starting the fixed date."""
    return JD_EPOCH + fixed
