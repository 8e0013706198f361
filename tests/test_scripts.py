"""Tests for scripts/add_epiweek_dates.py."""

import runpy
import sys
from pathlib import Path

import pandas as pd
import pytest

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "add_epiweek_dates.py"


def run_script(monkeypatch, *args):
    monkeypatch.setattr(sys, "argv", [str(SCRIPT), *args])
    runpy.run_path(str(SCRIPT), run_name="__main__")


class TestAddEpiweekDatesScript:

    def test_writes_dated_copy(self, tmp_path, monkeypatch):
        src = tmp_path / "mecha.csv"
        pd.DataFrame({
            "woreda": ["Mecha", "Mecha"],
            "epi_year": [2016, 2016],
            "epi_week": ["1st week", "2nd week"],
            "mal_case": [12, 15],
        }).to_csv(src, index=False)

        run_script(monkeypatch, "--input", str(src))

        out = pd.read_csv(tmp_path / "mecha_dated.csv")
        assert out["epi_week"].tolist() == [1, 2]
        # 1 Jan 2016 is a Friday, so ISO week 1 starts on 4 Jan
        assert out["week_start"].tolist() == ["2016-01-04", "2016-01-11"]

    def test_week_labels_in_string_dtype_column(self, tmp_path, monkeypatch):
        """Text columns may load as a pandas string dtype rather than object."""
        src = tmp_path / "fogera.csv"
        pd.DataFrame({"epi_year": [2016], "epi_week": ["3rd week"]}).to_csv(src, index=False)
        read_csv = pd.read_csv
        monkeypatch.setattr(pd, "read_csv", lambda *a, **k: read_csv(*a, **k).convert_dtypes())

        run_script(monkeypatch, "--input", str(src))

        out = pd.read_csv(tmp_path / "fogera_dated.csv")
        assert out["epi_week"].tolist() == [3]
        assert out["week_start"].tolist() == ["2016-01-18"]

    def test_cdc_week_end(self, tmp_path, monkeypatch):
        src = tmp_path / "weekly.csv"
        dest = tmp_path / "out.csv"
        pd.DataFrame({"year": [2017], "week": [1]}).to_csv(src, index=False)

        run_script(
            monkeypatch, "--input", str(src), "--output", str(dest),
            "--year-col", "year", "--week-col", "week",
            "--convention", "cdc", "--weekday", "7", "--out-col", "week_end",
        )

        assert pd.read_csv(dest)["week_end"].tolist() == ["2017-01-07"]

    def test_missing_column(self, tmp_path, monkeypatch):
        src = tmp_path / "weekly.csv"
        pd.DataFrame({"year": [2017]}).to_csv(src, index=False)
        with pytest.raises(SystemExit):
            run_script(monkeypatch, "--input", str(src))
