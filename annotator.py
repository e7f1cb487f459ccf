"""Holiday and leave annotations, matched to grid days by calendar date."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Iterable, Sequence, TypeVar

from calendar_logic import as_date, build_window, day_key


@dataclass(frozen=True)
class Holiday:
    date: date
    occasion: str

    def __post_init__(self) -> None:
        if not isinstance(self.date, date):
            raise TypeError(f"Holiday date must be a date, got {self.date!r}")


@dataclass(frozen=True)
class LeaveRecord:
    """Number of people on leave on a given day."""

    date: date
    count: int

    def __post_init__(self) -> None:
        if not isinstance(self.date, date):
            raise TypeError(f"Leave date must be a date, got {self.date!r}")
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise TypeError(f"Leave count must be an int, got {self.count!r}")
        if self.count < 0:
            raise ValueError(f"Leave count must be non-negative, got {self.count}")


@dataclass(frozen=True)
class DayCellFacts:
    """Everything the renderer needs to draw one grid cell."""

    date: date
    day_of_month: int
    is_today: bool
    is_in_reference_month: bool
    holiday: Holiday | None = field(default=None)
    leave: LeaveRecord | None = field(default=None)


_A = TypeVar("_A", Holiday, LeaveRecord)


def _first_match(records: Iterable[_A], key: tuple[int, int, int]) -> _A | None:
    return next((r for r in records if day_key(r.date) == key), None)


def index_by_day(records: Iterable[_A]) -> dict[tuple[int, int, int], _A]:
    """Map (year, month, day) to the first record for that day.

    Later duplicates are shadowed, same as the linear lookup in ``annotate``.
    """
    index: dict[tuple[int, int, int], _A] = {}
    for r in records:
        index.setdefault(day_key(r.date), r)
    return index


def in_reference_month(d: date, reference: date, match_year: bool = True) -> bool:
    """True if *d* is in the displayed month.

    With ``match_year=False`` only month numbers are compared, so e.g. a
    January 2023 date counts as part of January 2024.
    """
    if match_year:
        return (d.year, d.month) == (reference.year, reference.month)
    return d.month == reference.month


def annotate(
    d: date,
    reference: date,
    holidays: Sequence[Holiday],
    leave_records: Sequence[LeaveRecord],
    today: date | None = None,
    match_year: bool = True,
) -> DayCellFacts:
    """Compute the render facts for a single day.

    *today* defaults to the real current date; it is never the reference
    date, so highlighting does not follow the browsed month.
    """
    if today is None:
        today = date.today()
    key = day_key(d)
    return DayCellFacts(
        date=as_date(d),
        day_of_month=d.day,
        is_today=key == day_key(today),
        is_in_reference_month=in_reference_month(d, reference, match_year),
        holiday=_first_match(holidays, key),
        leave=_first_match(leave_records, key),
    )


def annotate_window(
    reference: date,
    holidays: Sequence[Holiday],
    leave_records: Sequence[LeaveRecord],
    today: date | None = None,
    match_year: bool = True,
) -> list[DayCellFacts]:
    """Build the display window for *reference* and annotate all 42 cells."""
    if today is None:
        today = date.today()
    today_key = day_key(today)
    holiday_index = index_by_day(holidays)
    leave_index = index_by_day(leave_records)

    cells: list[DayCellFacts] = []
    for d in build_window(reference):
        key = day_key(d)
        cells.append(DayCellFacts(
            date=d,
            day_of_month=d.day,
            is_today=key == today_key,
            is_in_reference_month=in_reference_month(d, reference, match_year),
            holiday=holiday_index.get(key),
            leave=leave_index.get(key),
        ))
    return cells


def preview_annotations(today: date) -> tuple[list[Holiday], list[LeaveRecord]]:
    """Demo holidays and leave counts placed relative to *today*."""
    holidays = [
        Holiday(today + timedelta(days=5), "New Year's Day"),
        Holiday(today + timedelta(days=15), "Republic Day"),
    ]
    on_leave = [
        LeaveRecord(today + timedelta(days=10), 3),
        LeaveRecord(today + timedelta(days=20), 2),
    ]
    return holidays, on_leave

