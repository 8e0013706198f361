"""
DataFrame helpers for epidemiological weeks

Column-wise wrappers around compose() and decompose() for panel data:
- Derive epi_year/epi_week from daily observation dates
- Derive week start dates from stored (epi_year, epi_week) columns
- Summarise daily series (rainfall, NDVI) to epi weeks so they can be
  joined onto weekly case counts

Input frames are never modified; each helper returns a copy.
"""
import warnings
from typing import Dict, List, Optional, Union

import pandas as pd

from epiweek.config import get_setting
from epiweek.core.composer import compose
from epiweek.core.conventions import Convention
from epiweek.core.decomposer import decompose


def add_epiweek_columns(
    df: pd.DataFrame,
    date_col: str = 'date',
    year_col: Optional[str] = None,
    week_col: Optional[str] = None
) -> pd.DataFrame:
    """
    Add WHO epidemiological year and week columns.

    Args:
        df: DataFrame with a date column (datetime64, date objects or ISO strings)
        date_col: Name of the date column
        year_col: Output year column. Defaults to frame.year_col from config
        week_col: Output week column. Defaults to frame.week_col from config

    Returns:
        Copy of df with nullable Int64 year and week columns
    """
    year_col = year_col or get_setting('frame', 'year_col')
    week_col = week_col or get_setting('frame', 'week_col')

    df = df.copy()
    weeks = decompose(df[date_col].tolist())

    n_missing = sum(w is None for w in weeks)
    if n_missing:
        warnings.warn(f"{n_missing} rows have no {date_col}; epi week left empty")

    df[year_col] = pd.array([w.year if w is not None else None for w in weeks], dtype='Int64')
    df[week_col] = pd.array([w.week if w is not None else None for w in weeks], dtype='Int64')
    return df


def add_week_dates(
    df: pd.DataFrame,
    year_col: Optional[str] = None,
    week_col: Optional[str] = None,
    weekday: int = 1,
    convention: Union[Convention, str, None] = None,
    out_col: Optional[str] = None,
    weekday_col: Optional[str] = None
) -> pd.DataFrame:
    """
    Add a calendar date column from epidemiological year/week columns.

    Args:
        df: DataFrame with year and week columns
        year_col: Year column. Defaults to frame.year_col from config
        week_col: Week column. Defaults to frame.week_col from config
        weekday: Weekday to place the date on (1 = first day of the week)
        convention: "who" or "cdc". Defaults to compose.convention from config
        out_col: Output column. Defaults to frame.week_start_col from config
        weekday_col: If given, read weekdays per row from this column instead

    Returns:
        Copy of df with a datetime64 column, NaT where any component is missing
    """
    year_col = year_col or get_setting('frame', 'year_col')
    week_col = week_col or get_setting('frame', 'week_col')
    out_col = out_col or get_setting('frame', 'week_start_col')

    df = df.copy()
    weekdays = df[weekday_col].tolist() if weekday_col else weekday
    dates = compose(
        df[year_col].tolist(),
        df[week_col].tolist(),
        weekdays,
        convention,
        broadcast='strict'
    )

    n_missing = sum(d is None for d in dates)
    if n_missing:
        warnings.warn(f"{n_missing} rows have missing epi week fields; {out_col} set to NaT")

    df[out_col] = pd.to_datetime(pd.Series(dates, index=df.index, dtype=object))
    return df


def summarize_by_epiweek(
    df: pd.DataFrame,
    date_col: str,
    value_cols: List[str],
    agg: Union[str, Dict[str, str]] = 'mean',
    group_cols: Optional[List[str]] = None
) -> pd.DataFrame:
    """
    Aggregate daily observations to WHO epidemiological weeks.

    Rows without a date are dropped. The output carries the epi year,
    epi week, the Monday starting each week and the number of daily
    observations behind each value (n_obs).

    Args:
        df: Daily DataFrame
        date_col: Name of the date column
        value_cols: Columns to aggregate
        agg: Aggregation name (e.g. 'mean', 'sum') or per-column mapping
        group_cols: Extra grouping columns, e.g. ['woreda']

    Returns:
        Weekly DataFrame sorted by group columns, year and week
    """
    year_col = get_setting('frame', 'year_col')
    week_col = get_setting('frame', 'week_col')
    keys = list(group_cols or []) + [year_col, week_col]

    keyed = add_epiweek_columns(df, date_col, year_col, week_col)
    keyed = keyed.dropna(subset=[year_col, week_col])

    grouped = keyed.groupby(keys)
    weekly = grouped[value_cols].agg(agg)
    weekly['n_obs'] = grouped.size()
    weekly = weekly.reset_index()

    weekly = add_week_dates(weekly, year_col, week_col, convention=Convention.WHO)
    return weekly.sort_values(keys).reset_index(drop=True)
