import datetime as dt
import unittest

from apptgrid.engine import compute_day_layout
from apptgrid.expansion import GroupExpansionController, apply_expansion, toggle_group
from apptgrid.model import COLLAPSED, Appointment, ExpansionState

DAY = dt.date(2026, 10, 19)


def _appts():
    return [
        Appointment(id="a", start_time="9:00 AM", duration_label="30 min", date=DAY),
        Appointment(id="b", start_time="9:00 AM", duration_label="45 min", date=DAY),
        Appointment(id="c", start_time="9:00 AM", duration_label="60 min", date=DAY),
        Appointment(id="d", start_time="11:00 AM", duration_label="30 min", date=DAY),
        Appointment(id="e", start_time="11:00 AM", duration_label="N/A", date=DAY),
    ]


class TestGroupExpansionContract(unittest.TestCase):
    def test_expand_stacks_group_vertically(self) -> None:
        positions = compute_day_layout(_appts(), ExpansionState.expanded_at(240))
        a, b, c = positions[:3]
        self.assertEqual([p.top for p in (a, b, c)], [240, 302, 364])
        self.assertEqual({p.left for p in (a, b, c)}, {40})
        self.assertEqual({p.height for p in (a, b, c)}, {60})

    def test_expand_leaves_other_groups_alone(self) -> None:
        collapsed = compute_day_layout(_appts())
        expanded = compute_day_layout(_appts(), ExpansionState.expanded_at(240))
        self.assertEqual(expanded[3:], collapsed[3:])
        self.assertEqual([p.left for p in expanded[3:]], [64, 84])

    def test_collapse_is_exact_inverse(self) -> None:
        collapsed = compute_day_layout(_appts())
        expanded = apply_expansion(collapsed, ExpansionState.expanded_at(240))
        self.assertNotEqual(expanded, collapsed)
        self.assertEqual(apply_expansion(expanded, COLLAPSED), collapsed)

        for bucket in (240, 480):
            ctl = GroupExpansionController()
            ctl.toggle(bucket)
            stacked = ctl.apply(collapsed)
            ctl.toggle(bucket)
            self.assertEqual(ctl.apply(stacked), collapsed)

    def test_toggle_transitions(self) -> None:
        s = toggle_group(COLLAPSED, 240)
        self.assertEqual(s, ExpansionState.expanded_at(240))
        self.assertEqual(toggle_group(s, 240), COLLAPSED)
        self.assertEqual(toggle_group(s, 244), COLLAPSED)
        self.assertEqual(toggle_group(s, 480), ExpansionState.expanded_at(480))

    def test_controller_holds_one_target(self) -> None:
        ctl = GroupExpansionController()
        ctl.toggle(240)
        ctl.toggle(480)
        self.assertTrue(ctl.is_expanded(480))
        self.assertFalse(ctl.is_expanded(240))
        ctl.collapse()
        self.assertFalse(ctl.state.is_expanded)

    def test_expanding_small_or_empty_bucket_is_noop(self) -> None:
        appts = [
            Appointment(id="x", start_time="9:00 AM", duration_label="45 min", date=DAY),
            Appointment(id="y", start_time="2:00 PM", duration_label="30 min", date=DAY),
        ]
        collapsed = compute_day_layout(appts)
        self.assertEqual(compute_day_layout(appts, ExpansionState.expanded_at(240)), collapsed)
        self.assertEqual(compute_day_layout(appts, ExpansionState.expanded_at(999)), collapsed)
        self.assertEqual(compute_day_layout([], ExpansionState.expanded_at(0)), ())

    def test_stacking_starts_at_group_minimum(self) -> None:
        appts = [
            Appointment(id="p", start_time="9:02 AM", duration_label="30 min", date=DAY),
            Appointment(id="q", start_time="9:00 AM", duration_label="30 min", date=DAY),
        ]
        positions = compute_day_layout(appts, ExpansionState.expanded_at(240))
        self.assertEqual([p.top for p in positions], [240, 302])


if __name__ == "__main__":
    unittest.main(verbosity=2)
