"""Data module - input parsing. DataFrame helpers live in epiweek.data.frame."""

from epiweek.data.parsing import (
    to_date,
    to_int,
    parse_week_string,
    parse_epiweek_int
)

__all__ = [
    'to_date',
    'to_int',
    'parse_week_string',
    'parse_epiweek_int'
]
