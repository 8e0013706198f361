#!/usr/bin/env python3
"""Add a week-start date column to a weekly surveillance CSV.

Weekly case exports carry the epidemiological year and week as separate
columns (e.g. `epi_year`, `epi_week`) but no calendar date, which makes
them awkward to chart or join with daily climate data. This script adds a
date column for each row, written to a new file next to the input unless
`--output` is given.

Week columns holding labels like "22nd week" are parsed to integers first.

Usage:
  python scripts/add_epiweek_dates.py \
    --input data/raw/mecha.csv

  python scripts/add_epiweek_dates.py --input data/raw/mecha.csv \
    --convention cdc --weekday 7 --out-col week_end
"""

from __future__ import annotations

import argparse
from pathlib import Path

import pandas as pd

from epiweek import add_week_dates
from epiweek.config import get_setting
from epiweek.data.parsing import parse_week_string


def main() -> None:
    parser = argparse.ArgumentParser(description="Add epi week dates to a CSV")
    parser.add_argument("--input", type=str, required=True, help="Path to weekly CSV")
    parser.add_argument("--output", type=str, default=None, help="Output path")
    parser.add_argument("--year-col", type=str, default=get_setting("frame", "year_col"))
    parser.add_argument("--week-col", type=str, default=get_setting("frame", "week_col"))
    parser.add_argument("--out-col", type=str, default=get_setting("frame", "week_start_col"))
    parser.add_argument(
        "--convention",
        choices=["who", "cdc"],
        default=get_setting("compose", "convention"),
        help="who: weeks start Monday. cdc: weeks start Sunday.",
    )
    parser.add_argument("--weekday", type=int, default=1, help="Weekday number, 1-7")
    args = parser.parse_args()

    src = Path(args.input)
    if not src.exists():
        raise SystemExit(f"Input file not found: {src}")

    df = pd.read_csv(src, low_memory=False)
    for col in (args.year_col, args.week_col):
        if col not in df.columns:
            raise SystemExit(f"Column '{col}' not found in input CSV")

    if not pd.api.types.is_numeric_dtype(df[args.week_col]):
        df[args.week_col] = df[args.week_col].apply(parse_week_string)

    out = add_week_dates(
        df,
        year_col=args.year_col,
        week_col=args.week_col,
        weekday=args.weekday,
        convention=args.convention,
        out_col=args.out_col,
    )

    dest = Path(args.output) if args.output else src.with_name(f"{src.stem}_dated.csv")
    out.to_csv(dest, index=False)

    # Report
    print("Epi week dates added")
    print(f"  Input path:   {src}")
    print(f"  Output path:  {dest}")
    print(f"  Convention:   {args.convention}")
    print(f"  Rows:         {len(out)}")
    print(f"  Missing:      {out[args.out_col].isna().sum()}")
    print(f"  Date range:   {out[args.out_col].min()} - {out[args.out_col].max()}")


if __name__ == "__main__":
    main()
