"""Core module - conventions, value types, composition and decomposition."""

from epiweek.core.conventions import (
    Convention,
    parse_convention,
    weekday_number
)

from epiweek.core.types import (
    EpiWeek,
    EpiWeekRef
)

from epiweek.core.composer import (
    compose,
    make_date_yw,
    week_one_start,
    weeks_in_year
)

from epiweek.core.decomposer import (
    decompose,
    decompose_ref,
    epiweek,
    epiyear,
    epiweekday
)

__all__ = [
    # Conventions
    'Convention',
    'parse_convention',
    'weekday_number',
    # Types
    'EpiWeek',
    'EpiWeekRef',
    # Composition
    'compose',
    'make_date_yw',
    'week_one_start',
    'weeks_in_year',
    # Decomposition
    'decompose',
    'decompose_ref',
    'epiweek',
    'epiyear',
    'epiweekday'
]
