"""
Input coercion for epiweek

Callers hand us dates as date objects, pandas Timestamps, numpy datetime64
values or ISO strings, and year/week/weekday numbers as ints, floats
(pandas upcasts integer columns with NaN) or strings. Everything is
normalised here before any arithmetic.
"""
import re
from datetime import date, datetime
from typing import Any, Optional

import numpy as np

from epiweek.common.errors import InvalidInput
from epiweek.common.missing import is_missing
from epiweek.core.types import EpiWeek

ISO_DATE_FORMAT = '%Y-%m-%d'
_INT_PATTERN = re.compile(r'[+-]?\d+')


def _unwrap(value: Any) -> Any:
    """Reduce a 0-d numpy array to its numpy scalar."""
    if isinstance(value, np.ndarray) and value.ndim == 0:
        return value[()]
    return value


def to_date(value: Any, position: Optional[int] = None) -> Optional[date]:
    """
    Coerce a single value to a calendar date.

    Args:
        value: date, datetime, pd.Timestamp, np.datetime64 or 'YYYY-MM-DD' string
        position: Batch position, reported in errors

    Returns:
        datetime.date, or None for missing values

    Raises:
        InvalidInput: If the value cannot be read as a date
    """
    value = _unwrap(value)
    if is_missing(value):
        return None

    # datetime (and pd.Timestamp) subclass date, so check them first
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    if isinstance(value, np.datetime64):
        try:
            result = value.astype('datetime64[D]').item()
        except (OverflowError, ValueError) as e:
            raise InvalidInput("date", value, str(e), position)
        if not isinstance(result, date):
            raise InvalidInput("date", value, "outside the supported date range", position)
        return result

    if isinstance(value, str):
        try:
            return datetime.strptime(value.strip(), ISO_DATE_FORMAT).date()
        except ValueError:
            raise InvalidInput("date", value, "expected YYYY-MM-DD", position)

    raise InvalidInput("date", value, f"unsupported type {type(value).__name__}", position)


def to_int(value: Any, name: str, position: Optional[int] = None) -> Optional[int]:
    """
    Coerce a single value to an integer without rounding.

    Floats are accepted only when integral (integer columns with NaN are
    stored as float by pandas). Strings must be plain digits, so "2017"
    works as a year.

    Args:
        value: Value to convert
        name: Argument name, reported in errors
        position: Batch position, reported in errors

    Returns:
        int, or None for missing values

    Raises:
        InvalidInput: If the value is not an integral number
    """
    value = _unwrap(value)
    if is_missing(value):
        return None
    if isinstance(value, (bool, np.bool_)):
        raise InvalidInput(name, value, "expected an integer, got a boolean", position)
    if isinstance(value, (int, np.integer)):
        return int(value)
    if isinstance(value, (float, np.floating)):
        if float(value).is_integer():
            return int(value)
        raise InvalidInput(name, value, "expected an integer", position)
    if isinstance(value, str):
        text = value.strip()
        if _INT_PATTERN.fullmatch(text):
            return int(text)
        raise InvalidInput(name, value, "expected an integer", position)
    raise InvalidInput(name, value, f"unsupported type {type(value).__name__}", position)


def parse_week_string(week_str: Any) -> Optional[int]:
    """
    Parse week string like "1st week", "2nd week", "10th week" to integer.

    Args:
        week_str: String like "1st week", "22nd week", etc.

    Returns:
        Integer week number, or None if missing or no number is present
    """
    if is_missing(week_str):
        return None

    # Extract number from string
    match = re.search(r'(\d+)', str(week_str))
    if match:
        return int(match.group(1))
    return None


def parse_epiweek_int(value: Any) -> Optional[EpiWeek]:
    """
    Split a YYYYWW code (e.g. 201806 or "201806") into an EpiWeek.

    Returns:
        EpiWeek, or None for missing values

    Raises:
        InvalidInput: If the value is not an integer or the week part is not 1-53
    """
    code = to_int(value, "epiweek")
    if code is None:
        return None
    return EpiWeek.from_int(code)
