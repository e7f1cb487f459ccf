"""Observable month view state shared by the window and the tray."""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Iterable

from annotator import DayCellFacts, Holiday, LeaveRecord, annotate_window
from calendar_logic import as_date, month_label

logger = logging.getLogger(__name__)

Listener = Callable[["CalendarModel"], None]


class CalendarModel:
    """Reference date plus the 42 annotated cells derived from it.

    Subscribers are called with the model after every successful change.
    A change that fails with ``DateOverflow`` leaves the model untouched.
    """

    def __init__(
        self,
        holidays: Iterable[Holiday] = (),
        leave_records: Iterable[LeaveRecord] = (),
        reference_date: date | None = None,
        clock: Callable[[], date] = date.today,
        match_year: bool = True,
    ) -> None:
        self.holidays: tuple[Holiday, ...] = tuple(holidays)
        self.leave_records: tuple[LeaveRecord, ...] = tuple(leave_records)
        self.match_year = match_year
        self._clock = clock
        self._listeners: list[Listener] = []

        self._reference_date = as_date(reference_date or clock())
        self.window: list[date] = []
        self.cells: list[DayCellFacts] = []
        self._regenerate(self._reference_date)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def reference_date(self) -> date:
        return self._reference_date

    @reference_date.setter
    def reference_date(self, value: date) -> None:
        self._regenerate(as_date(value))
        self._notify()

    def today(self) -> date:
        return as_date(self._clock())

    @property
    def header(self) -> str:
        return month_label(self._reference_date)

    def refresh(self) -> None:
        """Recompute against the clock, e.g. after midnight."""
        self._regenerate(self._reference_date)
        self._notify()

    def _regenerate(self, reference: date) -> None:
        today = self.today()
        cells = annotate_window(reference, self.holidays, self.leave_records,
                                today=today, match_year=self.match_year)
        window = [c.date for c in cells]
        self._reference_date = reference
        self.window = window
        self.cells = cells
        logger.debug("Regenerated window for %s (%s .. %s)",
                     reference, window[0], window[-1])

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener*; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)
