"""Pure calendar calculations — no UI dependencies."""

import calendar
import logging
from datetime import date, timedelta

logger = logging.getLogger(__name__)

DAY_ABBR = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

WEEKS = 6
WINDOW_SIZE = WEEKS * 7

_ONE_DAY = timedelta(days=1)


class DateOverflow(OverflowError):
    """A calendar date fell outside the range ``datetime.date`` can represent."""


def day_key(d: date) -> tuple[int, int, int]:
    """Return the (year, month, day) triple used for all date comparisons.

    Works for ``date`` and ``datetime`` alike; time-of-day is dropped.
    """
    return d.year, d.month, d.day


def as_date(d: date) -> date:
    """Strip any time component, returning a plain ``date``."""
    return date(d.year, d.month, d.day)


def leading_days(first_of_month: date) -> int:
    """Return how many cells of the previous month precede the 1st.

    0 when the 1st is a Sunday, 6 when it is a Saturday.
    """
    # Sunday=1 .. Saturday=7
    weekday = first_of_month.isoweekday() % 7 + 1
    return (weekday + 6) % 7


def build_window(reference: date) -> list[date]:
    """Return the 42 dates (6 Sunday-first weeks) shown for *reference*'s month.

    The window starts on the Sunday on or before the 1st and always contains
    the whole month. Raises ``DateOverflow`` instead of returning a partial
    window when a date falls outside ``date.min``..``date.max``.
    """
    first = date(reference.year, reference.month, 1)
    try:
        start = first - timedelta(days=leading_days(first))
        window = [start]
        for _ in range(WINDOW_SIZE - 1):
            window.append(window[-1] + _ONE_DAY)
    except OverflowError as exc:
        logger.debug("Cannot build window for %04d-%02d: %s",
                     reference.year, reference.month, exc)
        raise DateOverflow(
            f"display window for {reference.year:04d}-{reference.month:02d} "
            f"is outside the supported date range"
        ) from exc
    return window


def weeks(cells: list) -> list[list]:
    """Split a 42-entry window (of dates or cell facts) into 6 rows of 7."""
    return [cells[i:i + 7] for i in range(0, len(cells), 7)]


def month_label(d: date) -> str:
    """Header text for the displayed month, e.g. ``"February, 2024"``."""
    return f"{calendar.month_name[d.month]}, {d.year}"
