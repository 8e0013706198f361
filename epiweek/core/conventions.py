"""
Epidemiological Week Conventions

Two week-numbering systems are supported:
- WHO: ISO 8601 weeks, Monday (1) to Sunday (7)
- CDC: MMWR weeks, Sunday (1) to Saturday (7)

Both place week 1 on the first week with at least four days in the new year.
They differ only in which weekday opens the week.
"""
from datetime import date
from enum import Enum
from typing import Union

from epiweek.common.errors import InvalidInput
from epiweek.config import get_setting


class Convention(Enum):
    """Epidemiological week-numbering convention."""
    WHO = "who"
    CDC = "cdc"


# String tokens accepted at the API boundary
CONVENTION_ALIASES = {
    "who": Convention.WHO,
    "iso": Convention.WHO,
    "cdc": Convention.CDC,
    "mmwr": Convention.CDC,
}


def parse_convention(value: Union[Convention, str]) -> Convention:
    """
    Resolve a convention token.

    Args:
        value: Convention member or one of "who", "iso", "cdc", "mmwr"
               (case-insensitive)

    Returns:
        Convention member

    Raises:
        InvalidInput: If the token is not recognised
    """
    if isinstance(value, Convention):
        return value
    if isinstance(value, str):
        token = value.strip().lower()
        if token in CONVENTION_ALIASES:
            return CONVENTION_ALIASES[token]
    raise InvalidInput(
        "convention", value, f"expected one of {sorted(CONVENTION_ALIASES)}"
    )


def weekday_number(d: date, convention: Convention) -> int:
    """
    Weekday of a date in the convention's 1-7 numbering.

    Args:
        d: Calendar date
        convention: WHO (Monday=1) or CDC (Sunday=1)

    Returns:
        Integer in [1, 7]
    """
    return from_iso_weekday(d.isoweekday(), convention)


def from_iso_weekday(iso: int, convention: Convention) -> int:
    """Convert an ISO weekday (Monday=1 .. Sunday=7) to the convention's numbering."""
    if convention is Convention.WHO:
        return iso
    if convention is Convention.CDC:
        return iso % 7 + 1
    raise InvalidInput("convention", convention, "unhandled convention")


def resolve_convention(value: Union[Convention, str, None]) -> Convention:
    """Like parse_convention(), but None falls back to compose.convention from config."""
    if value is None:
        value = get_setting("compose", "convention")
    return parse_convention(value)
