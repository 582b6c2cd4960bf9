import unittest

from apptgrid.config import DAY_VIEW, config_from_dict
from apptgrid.slots import generate_slots, grid_height, slot_top


class TestSlotGridContract(unittest.TestCase):
    def test_default_window_has_144_slots(self) -> None:
        slots = generate_slots()
        self.assertEqual(len(slots), 144)
        self.assertEqual(slots[0].label, "7:00 AM")
        self.assertEqual(slots[0].start_minute, 420)
        self.assertEqual(slots[-1].label, "6:55 PM")
        self.assertEqual(slots[-1].start_minute, 19 * 60 - 5)
        self.assertEqual([s.index for s in slots], list(range(144)))
        self.assertEqual(grid_height(), 1440)

    def test_flags(self) -> None:
        slots = generate_slots()
        quarter = [s.label for s in slots[:6] if s.is_quarter_hour]
        self.assertEqual(quarter, ["7:00 AM", "7:15 AM"])
        self.assertTrue(all(s.is_five_minute_mark for s in slots))

    def test_deterministic(self) -> None:
        self.assertEqual(generate_slots(DAY_VIEW), generate_slots(DAY_VIEW))

    def test_custom_window(self) -> None:
        cfg = config_from_dict({"workhours": "08:00-09:00"})
        slots = generate_slots(cfg)
        self.assertEqual(len(slots), 12)
        self.assertEqual(slots[3].label, "8:15 AM")
        self.assertEqual(slot_top(slots[3], cfg), 30)


if __name__ == "__main__":
    unittest.main(verbosity=2)
