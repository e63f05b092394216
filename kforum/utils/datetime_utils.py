# kforum/utils/datetime_utils.py
from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from functools import total_ordering
from typing import Union


def now_utc() -> datetime:
    return datetime.now(timezone.utc)


def to_utc_aware(dt):
    if dt is None:
        return None
    return dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)


@total_ordering
class CalendarDay:
    """
    A UTC calendar day. Mongo has no date type, so days are stored as naive
    UTC-midnight datetimes; every day comparison in the wordle flow goes through here.
    """

    __slots__ = ("_d",)

    def __init__(self, value: date):
        if isinstance(value, datetime):
            value = to_utc_aware(value).astimezone(timezone.utc).date()
        self._d = value

    # ---- constructors ----
    @classmethod
    def today(cls) -> "CalendarDay":
        return cls(now_utc().date())

    @classmethod
    def from_datetime(cls, dt: datetime) -> "CalendarDay":
        return cls(dt)

    @classmethod
    def parse(cls, value: Union[str, date, datetime, "CalendarDay"]) -> "CalendarDay":
        if isinstance(value, CalendarDay):
            return value
        if isinstance(value, (date, datetime)):
            return cls(value)
        text = str(value).strip()
        try:
            return cls(date.fromisoformat(text[:10]))
        except ValueError:
            raise ValueError(f"Invalid calendar day: {value!r}")

    # ---- conversions ----
    @property
    def date(self) -> date:
        return self._d

    def to_datetime(self) -> datetime:
        """Naive UTC midnight, the shape stored in Mongo."""
        return datetime(self._d.year, self._d.month, self._d.day)

    # ---- arithmetic ----
    def previous(self) -> "CalendarDay":
        return CalendarDay(self._d - timedelta(days=1))

    def next(self) -> "CalendarDay":
        return CalendarDay(self._d + timedelta(days=1))

    def is_consecutive_after(self, other: "CalendarDay | None") -> bool:
        """True when `self` is exactly one day after `other`."""
        if other is None:
            return False
        return self._d - other._d == timedelta(days=1)

    # ---- value semantics ----
    def __eq__(self, other) -> bool:
        if not isinstance(other, CalendarDay):
            return NotImplemented
        return self._d == other._d

    def __lt__(self, other: "CalendarDay") -> bool:
        if not isinstance(other, CalendarDay):
            return NotImplemented
        return self._d < other._d

    def __hash__(self) -> int:
        return hash(self._d)

    def __str__(self) -> str:
        return self._d.isoformat()

    def __repr__(self) -> str:
        return f"CalendarDay({self._d.isoformat()})"
