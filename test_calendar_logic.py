import calendar
import unittest
from datetime import date, datetime, timedelta

import calendar_logic
from calendar_logic import DateOverflow, build_window


class LeadingDaysTests(unittest.TestCase):
    def test_sunday_first_has_no_leading_days(self) -> None:
        self.assertEqual(calendar_logic.leading_days(date(2023, 10, 1)), 0)  # Sunday

    def test_saturday_first_has_six_leading_days(self) -> None:
        self.assertEqual(calendar_logic.leading_days(date(2022, 10, 1)), 6)  # Saturday

    def test_thursday_first(self) -> None:
        self.assertEqual(calendar_logic.leading_days(date(2024, 2, 1)), 4)


class BuildWindowTests(unittest.TestCase):
    def test_february_leap_year(self) -> None:
        window = build_window(date(2024, 2, 1))
        self.assertEqual(len(window), 42)
        self.assertEqual(window[0], date(2024, 1, 28))
        self.assertEqual(window[4], date(2024, 2, 1))
        self.assertEqual(window[-1], date(2024, 3, 9))
        self.assertEqual(sum(1 for d in window if (d.year, d.month) == (2024, 2)), 29)

    def test_january_starts_in_previous_year(self) -> None:
        window = build_window(date(2024, 1, 1))
        self.assertEqual(window[0], date(2023, 12, 31))
        self.assertEqual(window[1], date(2024, 1, 1))

    def test_reference_day_does_not_matter(self) -> None:
        self.assertEqual(build_window(date(2024, 2, 1)), build_window(date(2024, 2, 29)))

    def test_datetime_reference(self) -> None:
        window = build_window(datetime(2024, 2, 10, 23, 30))
        self.assertEqual(window[0], date(2024, 1, 28))
        self.assertIs(type(window[0]), date)

    def test_idempotent(self) -> None:
        self.assertEqual(build_window(date(2025, 7, 4)), build_window(date(2025, 7, 4)))

    def test_properties_for_many_months(self) -> None:
        for year in range(1999, 2031):
            for month in range(1, 13):
                window = build_window(date(year, month, 15))
                with self.subTest(year=year, month=month):
                    self.assertEqual(len(window), 42)
                    for prev, cur in zip(window, window[1:]):
                        self.assertEqual(cur - prev, timedelta(days=1))
                    for week in calendar_logic.weeks(window):
                        self.assertEqual(week[0].isoweekday(), 7)  # Sunday
                        self.assertEqual(week[6].isoweekday(), 6)  # Saturday
                    in_month = [d for d in window if (d.year, d.month) == (year, month)]
                    self.assertEqual(len(in_month), calendar.monthrange(year, month)[1])
                    first = window.index(date(year, month, 1))
                    self.assertEqual(first, calendar_logic.leading_days(date(year, month, 1)))
                    self.assertTrue(all(d < date(year, month, 1) for d in window[:first]))

    def test_lower_bound_overflow(self) -> None:
        # 0001-01-01 is a Monday, so the window would start in year 0
        with self.assertRaises(DateOverflow):
            build_window(date(1, 1, 1))

    def test_upper_bound_overflow(self) -> None:
        with self.assertRaises(DateOverflow):
            build_window(date(9999, 12, 1))

    def test_overflow_is_overflow_error(self) -> None:
        self.assertTrue(issubclass(DateOverflow, OverflowError))

    def test_last_supported_month(self) -> None:
        window = build_window(date(9999, 11, 1))
        self.assertEqual(len(window), 42)


class HelperTests(unittest.TestCase):
    def test_weeks(self) -> None:
        rows = calendar_logic.weeks(build_window(date(2024, 2, 1)))
        self.assertEqual(len(rows), 6)
        self.assertTrue(all(len(row) == 7 for row in rows))

    def test_day_key_ignores_time(self) -> None:
        self.assertEqual(
            calendar_logic.day_key(datetime(2024, 2, 14, 0, 0)),
            calendar_logic.day_key(datetime(2024, 2, 14, 23, 59)),
        )
        self.assertEqual(calendar_logic.day_key(date(2024, 2, 14)), (2024, 2, 14))

    def test_month_label(self) -> None:
        self.assertEqual(calendar_logic.month_label(date(2024, 2, 1)), "February, 2024")

    def test_day_abbr_sunday_first(self) -> None:
        self.assertEqual(calendar_logic.DAY_ABBR[0], "Sun")
        self.assertEqual(calendar_logic.DAY_ABBR[6], "Sat")


if __name__ == "__main__":
    unittest.main()
