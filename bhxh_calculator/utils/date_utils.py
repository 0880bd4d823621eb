"""Month-resolution date arithmetic for contribution periods"""

from dataclasses import dataclass
from typing import List, Tuple

# (month, year, month, year)
MonthRange = Tuple[int, int, int, int]

POLICY_CUTOFF_MONTH = 1
POLICY_CUTOFF_YEAR = 2014


@dataclass(frozen=True)
class CutoffSplit:
    """Months of a range falling before / from a cutoff month"""

    before_months: int
    from_months: int


@dataclass(frozen=True)
class YearBucket:
    """Months of a range that fall inside one calendar year"""

    year: int
    months: int
    start_month: int
    end_month: int


def month_index(month: int, year: int) -> int:
    """Absolute month offset used for ordering and overlap checks"""
    return year * 12 + month


def months_inclusive(from_month: int, from_year: int, to_month: int, to_year: int) -> int:
    """
    Count calendar months from start to end, both inclusive.

    The result is meaningless when the end precedes the start; validate with
    is_valid_range() first.
    """
    return (to_year - from_year) * 12 + (to_month - from_month) + 1


def is_valid_range(from_month: int, from_year: int, to_month: int, to_year: int) -> bool:
    """True when the end month is not before the start month"""
    return month_index(to_month, to_year) >= month_index(from_month, from_year)


def split_at_cutoff(
    from_month: int,
    from_year: int,
    to_month: int,
    to_year: int,
    cutoff_month: int = POLICY_CUTOFF_MONTH,
    cutoff_year: int = POLICY_CUTOFF_YEAR,
) -> CutoffSplit:
    """
    Partition the inclusive month count of a range at a cutoff month.

    The cutoff month itself belongs to the "from" bucket, so with the default
    cutoff (01/2014) a period running 06/2013 - 03/2014 splits into 7 months
    before and 3 months from.
    """
    start = month_index(from_month, from_year)
    end = month_index(to_month, to_year)
    cutoff = month_index(cutoff_month, cutoff_year)
    total = months_inclusive(from_month, from_year, to_month, to_year)

    if end < cutoff:
        return CutoffSplit(before_months=total, from_months=0)

    if start >= cutoff:
        return CutoffSplit(before_months=0, from_months=total)

    # Straddles the cutoff: [start, cutoff - 1] and [cutoff, end]
    before = cutoff - start
    return CutoffSplit(before_months=before, from_months=total - before)


def months_by_calendar_year(
    from_month: int, from_year: int, to_month: int, to_year: int
) -> List[YearBucket]:
    """Split a range into per-calendar-year buckets in ascending year order"""
    buckets = []
    for year in range(from_year, to_year + 1):
        start_month = from_month if year == from_year else 1
        end_month = to_month if year == to_year else 12
        buckets.append(
            YearBucket(
                year=year,
                months=end_month - start_month + 1,
                start_month=start_month,
                end_month=end_month,
            )
        )
    return buckets


def overlap_months(range1: MonthRange, range2: MonthRange) -> int:
    """Number of months shared by two inclusive ranges (0 when disjoint)"""
    start = max(month_index(range1[0], range1[1]), month_index(range2[0], range2[1]))
    end = min(month_index(range1[2], range1[3]), month_index(range2[2], range2[3]))
    return 0 if start > end else end - start + 1

