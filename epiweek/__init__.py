"""
epiweek - Epidemiological week conversions

Converts between calendar dates and epidemiological (year, week, weekday)
triples under the WHO (ISO 8601, Monday start) and CDC (MMWR, Sunday start)
conventions.

Project Structure:
    epiweek/
    ├── common/   - Errors and missing-value helpers
    ├── core/     - Conventions, value types, compose / decompose
    ├── data/     - Input parsing and DataFrame helpers
    └── configs/  - Default YAML configuration
"""
from loguru import logger

from epiweek.common.errors import InvalidInput
from epiweek.core import (
    Convention,
    EpiWeek,
    EpiWeekRef,
    compose,
    decompose,
    decompose_ref,
    epiweek,
    epiweekday,
    epiyear,
    make_date_yw,
    week_one_start,
    weeks_in_year
)
from epiweek.data.frame import (
    add_epiweek_columns,
    add_week_dates,
    summarize_by_epiweek
)

__version__ = "0.1.0"

# Library logging is silent until the caller runs logger.enable("epiweek")
logger.disable("epiweek")

__all__ = [
    'InvalidInput',
    'Convention',
    'EpiWeek',
    'EpiWeekRef',
    'compose',
    'decompose',
    'decompose_ref',
    'epiweek',
    'epiweekday',
    'epiyear',
    'make_date_yw',
    'week_one_start',
    'weeks_in_year',
    'add_epiweek_columns',
    'add_week_dates',
    'summarize_by_epiweek'
]
