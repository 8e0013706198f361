"""
EpiDecomposer - calendar date to epidemiological week

Uses the WHO (ISO 8601) week date: weeks run Monday to Sunday and week 1
contains the year's first Thursday. Dates in the last days of December can
belong to week 1 of the next year, and 1-3 January can belong to week 52
or 53 of the previous year.

Only the WHO convention is decomposed here. epiweekday() reports weekday
numbers for either convention.
"""
from datetime import date
from typing import Any, Callable, List, Optional, TypeVar, Union

from loguru import logger

from epiweek.core.broadcast import is_sequence
from epiweek.core.conventions import Convention, resolve_convention, weekday_number
from epiweek.core.types import EpiWeek, EpiWeekRef
from epiweek.data.parsing import to_date

T = TypeVar('T')


def _map_dates(
    dates: Any,
    func: Callable[[date], T]
) -> Union[Optional[T], List[Optional[T]]]:
    """Apply func element-wise, parsing first and passing missing values through."""
    if not is_sequence(dates):
        d = to_date(dates)
        return None if d is None else func(d)

    values = list(dates)
    logger.debug("Decomposing {} dates", len(values))
    out = []
    for i, value in enumerate(values):
        d = to_date(value, position=i)
        out.append(None if d is None else func(d))
    return out


def _iso_epiweek(d: date) -> EpiWeek:
    iso = d.isocalendar()
    return EpiWeek(year=iso[0], week=iso[1])


def _iso_epiweek_ref(d: date) -> EpiWeekRef:
    iso = d.isocalendar()
    return EpiWeekRef(year=iso[0], week=iso[1], weekday=iso[2])


def decompose(dates: Any) -> Union[Optional[EpiWeek], List[Optional[EpiWeek]]]:
    """
    Epidemiological year and week of one date or a sequence of dates.

    Args:
        dates: A date-like value or a sequence of them. Strings must be YYYY-MM-DD

    Returns:
        EpiWeek (or None for a missing date), or a list of them in input order

    Raises:
        InvalidInput: If a value cannot be read as a date
    """
    return _map_dates(dates, _iso_epiweek)


def decompose_ref(dates: Any) -> Union[Optional[EpiWeekRef], List[Optional[EpiWeekRef]]]:
    """Like decompose(), but also returns the WHO weekday (Monday=1)."""
    return _map_dates(dates, _iso_epiweek_ref)


def epiweek(dates: Any) -> Union[Optional[int], List[Optional[int]]]:
    """Epidemiological (ISO) week number of date(s)."""
    return _map_dates(dates, lambda d: d.isocalendar()[1])


def epiyear(dates: Any) -> Union[Optional[int], List[Optional[int]]]:
    """Epidemiological (ISO) year of date(s)."""
    return _map_dates(dates, lambda d: d.isocalendar()[0])


def epiweekday(
    dates: Any,
    convention: Union[Convention, str, None] = None
) -> Union[Optional[int], List[Optional[int]]]:
    """
    Weekday number of date(s) in the convention's numbering.

    Args:
        dates: A date-like value or a sequence of them
        convention: "who" (Monday=1) or "cdc" (Sunday=1). Defaults to the
                    configured convention
    """
    conv = resolve_convention(convention)
    return _map_dates(dates, lambda d: weekday_number(d, conv))
