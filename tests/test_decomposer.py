"""Tests for converting calendar dates to epidemiological weeks."""

from datetime import date, datetime

import numpy as np
import pandas as pd
import pytest

from epiweek import (
    EpiWeek,
    EpiWeekRef,
    InvalidInput,
    decompose,
    decompose_ref,
    epiweek,
    epiweekday,
    epiyear,
)
from epiweek.config import CONFIG


# ISO 8601 week dates around year boundaries
ISO_BOUNDARIES = [
    (date(2016, 12, 31), 2016, 52),
    (date(2017, 1, 1), 2016, 52),
    (date(2017, 1, 2), 2017, 1),
    (date(2018, 12, 31), 2019, 1),
    (date(2019, 12, 30), 2020, 1),
    (date(2021, 1, 3), 2020, 53),
    (date(2021, 1, 4), 2021, 1),
    (date(2016, 1, 3), 2015, 53),
    (date(2010, 1, 3), 2009, 53),
    (date(2011, 1, 1), 2010, 52),
    (date(2014, 12, 29), 2015, 1),
]


class TestDecompose:
    """Tests for decompose()."""

    @pytest.mark.parametrize("day,year,week", ISO_BOUNDARIES)
    def test_year_boundaries(self, day, year, week):
        assert decompose(day) == EpiWeek(year, week)

    def test_string_input(self):
        assert decompose("2018-12-31") == EpiWeek(2019, 1)

    def test_unpadded_string(self):
        assert decompose("2011-1-1") == EpiWeek(2010, 52)

    def test_datetime_input(self):
        assert decompose(datetime(2021, 1, 3, 23, 59)) == EpiWeek(2020, 53)

    def test_timestamp_input(self):
        assert decompose(pd.Timestamp("2017-01-01")) == EpiWeek(2016, 52)

    def test_datetime64_input(self):
        assert decompose(np.datetime64("2018-12-31")) == EpiWeek(2019, 1)

    def test_missing_scalar(self):
        assert decompose(None) is None
        assert decompose(pd.NaT) is None
        assert decompose(np.datetime64("NaT")) is None

    def test_batch_preserves_order_and_missing(self):
        days = [date(2017, 1, 2), None, "2021-01-03", pd.NaT]
        assert decompose(days) == [EpiWeek(2017, 1), None, EpiWeek(2020, 53), None]

    def test_datetime_series(self):
        days = pd.Series(pd.to_datetime(["2016-12-31", None, "2018-12-31"]))
        assert decompose(days) == [EpiWeek(2016, 52), None, EpiWeek(2019, 1)]

    def test_empty(self):
        assert decompose([]) == []
        assert decompose(pd.Series([], dtype="datetime64[ns]")) == []

    @pytest.mark.parametrize("value", ["not a date", "2017-02-30", "31/12/2017", 12345, 3.5])
    def test_unparseable(self, value):
        with pytest.raises(InvalidInput) as exc:
            decompose(value)
        assert exc.value.argument == "date"

    def test_unparseable_in_batch_names_position(self):
        with pytest.raises(InvalidInput) as exc:
            decompose(["2017-01-01", "2017-13-01"])
        assert exc.value.position == 1


class TestDecomposeRef:
    """Tests for decompose_ref()."""

    def test_includes_weekday(self):
        assert decompose_ref(date(2017, 1, 1)) == EpiWeekRef(2016, 52, 7)

    def test_to_date_round_trip(self):
        day = date(2020, 12, 31)
        assert decompose_ref(day).to_date("who") == day


class TestAccessors:
    """Tests for epiweek(), epiyear() and epiweekday()."""

    def test_epiweek_and_epiyear(self):
        assert epiweek(date(2021, 1, 3)) == 53
        assert epiyear(date(2021, 1, 3)) == 2020

    def test_batch(self):
        days = ["2018-12-31", None]
        assert epiweek(days) == [1, None]
        assert epiyear(days) == [2019, None]

    def test_epiweekday_conventions(self):
        # 1 Jan 2017 is a Sunday
        assert epiweekday(date(2017, 1, 1), "who") == 7
        assert epiweekday(date(2017, 1, 1), "cdc") == 1
        assert epiweekday(date(2017, 1, 7), "cdc") == 7

    def test_epiweekday_default_is_who(self):
        assert epiweekday(date(2017, 1, 2)) == 1

    def test_epiweekday_uses_configured_convention(self, monkeypatch):
        monkeypatch.setitem(CONFIG["compose"], "convention", "cdc")
        assert epiweekday(date(2017, 1, 1)) == 1

    def test_epiweekday_unknown_convention(self):
        with pytest.raises(InvalidInput):
            epiweekday(date(2017, 1, 2), "julian")
