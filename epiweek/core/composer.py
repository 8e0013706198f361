"""
EpiComposer - epidemiological week to calendar date

Turns (year, week, weekday) triples into calendar dates under the WHO or
CDC convention. Week 1 is the first week with at least four days in the
new year, so it can start as early as 29 December of the previous year
or as late as 4 January.

Year, week and weekday may each be a scalar or a sequence. Sequences are
aligned by the configured broadcast policy and missing values propagate
element-wise to None.
"""
from datetime import date
from typing import Any, List, Optional, Union

from loguru import logger

from epiweek.common.errors import InvalidInput
from epiweek.config import get_setting
from epiweek.core.broadcast import broadcast_args, check_policy
from epiweek.core.conventions import Convention, from_iso_weekday, resolve_convention
from epiweek.data.parsing import to_int

WEEK53_POLICIES = ("roll", "reject")

MIN_YEAR = date.min.year
MAX_YEAR = date.max.year

ConventionLike = Union[Convention, str, None]


def _jan1_ordinal(year: int) -> int:
    """Proleptic Gregorian ordinal of 1 January (valid one past MAX_YEAR)."""
    y = year - 1
    return y * 365 + y // 4 - y // 100 + y // 400 + 1


def _week_one_ordinal(year: int, convention: Convention) -> int:
    """Ordinal of the first day of epi week 1."""
    jan1 = _jan1_ordinal(year)
    # ordinal 1 (0001-01-01) is a Monday
    ref = from_iso_weekday((jan1 - 1) % 7 + 1, convention)
    to_add = 1 - ref if ref <= 4 else 8 - ref
    return jan1 + to_add


def _weeks_in_year(year: int, convention: Convention) -> int:
    return (_week_one_ordinal(year + 1, convention) - _week_one_ordinal(year, convention)) // 7


def _check_year(year: int, position: Optional[int] = None) -> int:
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise InvalidInput("year", year, f"must be in {MIN_YEAR}-{MAX_YEAR}", position)
    return year


def week_one_start(year: Any, convention: ConventionLike = None) -> date:
    """
    First day of epidemiological week 1.

    Args:
        year: Epidemiological year
        convention: "who" or "cdc". Defaults to the configured convention

    Returns:
        Monday (WHO) or Sunday (CDC) opening week 1

    Raises:
        InvalidInput: If the year is missing, invalid or the date is out of range
    """
    conv = resolve_convention(convention)
    y = to_int(year, "year")
    if y is None:
        raise InvalidInput("year", year, "a year is required")
    ordinal = _week_one_ordinal(_check_year(y), conv)
    try:
        return date.fromordinal(ordinal)
    except ValueError:
        raise InvalidInput("year", y, "week 1 starts outside the supported date range")


def weeks_in_year(year: Any, convention: ConventionLike = None) -> int:
    """
    Number of epidemiological weeks in a year (52 or 53).

    Args:
        year: Epidemiological year
        convention: "who" or "cdc". Defaults to the configured convention
    """
    conv = resolve_convention(convention)
    y = to_int(year, "year")
    if y is None:
        raise InvalidInput("year", year, "a year is required")
    return _weeks_in_year(_check_year(y), conv)


def _compose_one(
    year: Any,
    week: Any,
    weekday: Any,
    convention: Convention,
    week53: str,
    position: Optional[int]
) -> Optional[date]:
    y = to_int(year, "year", position)
    w = to_int(week, "week", position)
    d = to_int(weekday, "weekday", position)

    if y is not None:
        _check_year(y, position)
    if w is not None and not 1 <= w <= 53:
        raise InvalidInput("week", w, "must be in 1-53", position)
    if d is not None and not 1 <= d <= 7:
        raise InvalidInput("weekday", d, "must be in 1-7", position)

    if y is None or w is None or d is None:
        return None

    if w == 53 and _weeks_in_year(y, convention) == 52:
        if week53 == "reject":
            raise InvalidInput(
                "week", w, f"{y} has 52 {convention.name} weeks", position
            )
        logger.debug("Week 53 of {} ({}) rolls into week 1 of {}", y, convention.name, y + 1)

    ordinal = _week_one_ordinal(y, convention) + (w - 1) * 7 + (d - 1)
    try:
        return date.fromordinal(ordinal)
    except ValueError:
        raise InvalidInput(
            "year", y, f"week {w} day {d} falls outside the supported date range", position
        )


def compose(
    year: Any,
    week: Any,
    weekday: Any = 1,
    convention: ConventionLike = None,
    *,
    broadcast: Optional[str] = None,
    week53: Optional[str] = None
) -> Union[Optional[date], List[Optional[date]]]:
    """
    Calculate calendar dates from epidemiological years, weeks and weekdays.

    Args:
        year: Epidemiological year(s), e.g. 2017 or "2017"
        week: Week number(s), 1-53
        weekday: Weekday number(s), 1-7. 1 is Monday under WHO, Sunday under CDC
        convention: "who" or "cdc". Defaults to the configured convention
        broadcast: "recycle" or "strict". Defaults to the configured policy
        week53: "roll" or "reject". Defaults to the configured policy

    Returns:
        A date (or None if any component is missing) when all arguments are
        scalars, otherwise a list of dates aligned with the inputs

    Raises:
        InvalidInput: On out-of-range or non-integral values, unknown
                      convention or policy, or incompatible sequence lengths
    """
    conv = resolve_convention(convention)
    policy = check_policy(broadcast or get_setting("compose", "broadcast"))
    week53 = week53 or get_setting("compose", "week53")
    if week53 not in WEEK53_POLICIES:
        raise InvalidInput("week53", week53, f"expected one of {list(WEEK53_POLICIES)}")

    n, aligned, batched = broadcast_args(
        {"year": year, "week": week, "weekday": weekday}, policy
    )
    if batched:
        logger.debug("Composing {} {} epi-week dates ({} broadcast)", n, conv.name, policy)

    dates = [
        _compose_one(
            aligned["year"][i], aligned["week"][i], aligned["weekday"][i],
            conv, week53, i if batched else None
        )
        for i in range(n)
    ]
    return dates if batched else dates[0]


def make_date_yw(
    year: Any = 1970,
    week: Any = 1,
    weekday: Any = 1
) -> Union[Optional[date], List[Optional[date]]]:
    """
    WHO composition with every argument defaulted.

    make_date_yw() is 1969-12-29, the Monday opening ISO week 1970-W01.
    """
    return compose(year, week, weekday, Convention.WHO)
