"""Value types for epidemiological weeks."""
from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

from epiweek.common.errors import InvalidInput
from epiweek.core.conventions import Convention


@dataclass(frozen=True, order=True)
class EpiWeek:
    """An epidemiological (year, week) pair."""
    year: int
    week: int

    def to_int(self) -> int:
        """Encode as a YYYYWW integer, e.g. 2018 week 6 -> 201806."""
        return self.year * 100 + self.week

    @classmethod
    def from_int(cls, value: int) -> 'EpiWeek':
        """
        Decode a YYYYWW integer.

        Raises:
            InvalidInput: If the week part is outside 1-53
        """
        year, week = divmod(int(value), 100)
        if not 1 <= week <= 53:
            raise InvalidInput("epiweek", value, "week part must be in 1-53")
        return cls(year=year, week=week)

    def __str__(self) -> str:
        return f"{self.year}-W{self.week:02d}"


@dataclass(frozen=True, order=True)
class EpiWeekRef:
    """
    A fully specified epidemiological day: year, week and weekday.

    The meaning of weekday 1 depends on the convention used to
    compose it (Monday for WHO, Sunday for CDC).
    """
    year: int
    week: int
    weekday: int = 1

    def __post_init__(self):
        if not 1 <= self.week <= 53:
            raise InvalidInput("week", self.week, "must be in 1-53")
        if not 1 <= self.weekday <= 7:
            raise InvalidInput("weekday", self.weekday, "must be in 1-7")

    @property
    def epiweek(self) -> EpiWeek:
        return EpiWeek(self.year, self.week)

    def to_date(
        self,
        convention: Union[Convention, str, None] = None
    ) -> Optional[date]:
        """Compose this reference into a calendar date."""
        from epiweek.core.composer import compose
        return compose(self.year, self.week, self.weekday, convention)
