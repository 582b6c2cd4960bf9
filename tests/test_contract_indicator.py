import datetime as dt
import unittest

from apptgrid.indicator import current_time_indicator

TODAY = dt.date(2026, 10, 19)


def _at(hour: int, minute: int) -> dt.datetime:
    return dt.datetime(2026, 10, 19, hour, minute)


class TestCurrentTimeIndicatorContract(unittest.TestCase):
    def test_visible_today_in_business_hours(self) -> None:
        ind = current_time_indicator(TODAY, _at(10, 30))
        self.assertTrue(ind.visible)
        self.assertEqual(ind.top, 420)

        self.assertEqual(current_time_indicator(TODAY, _at(7, 0)).top, 0)
        self.assertEqual(current_time_indicator(TODAY, _at(18, 59)).top, 1438)

    def test_hidden_outside_business_hours(self) -> None:
        for h, m in ((6, 59), (19, 0), (23, 30), (0, 0)):
            ind = current_time_indicator(TODAY, _at(h, m))
            self.assertFalse(ind.visible, (h, m))
            self.assertEqual(ind.top, -1)

    def test_hidden_on_other_days(self) -> None:
        self.assertFalse(current_time_indicator(dt.date(2026, 10, 20), _at(10, 0)).visible)
        self.assertFalse(current_time_indicator(dt.date(2026, 10, 18), _at(10, 0)).visible)

    def test_aware_now(self) -> None:
        now = dt.datetime(2026, 10, 19, 8, 0, tzinfo=dt.timezone.utc)
        self.assertEqual(current_time_indicator(TODAY, now).top, 120)


if __name__ == "__main__":
    unittest.main(verbosity=2)
