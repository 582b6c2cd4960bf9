from __future__ import annotations

import json
import os
import subprocess
import sys
import tempfile
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]

APPOINTMENTS = [
    {"id": "a", "time": "9:00 AM", "duration": "30 min", "date": "2026-10-19", "status": 1},
    {"id": "b", "time": "9:00 AM", "duration": "45 min", "date": "2026-10-19", "status": "pending"},
    {"id": "c", "time": "6:45 AM", "duration": "30 min", "date": "2026-10-19"},
    {"id": "d", "time": "10:00 AM", "duration": "N/A", "date": "2026-10-20"},
]


def _run(args: list[str]) -> subprocess.CompletedProcess:
    env = os.environ.copy()
    env["PYTHONPATH"] = str(REPO_ROOT)
    return subprocess.run(
        [sys.executable, "-m", "apptgrid.cli", *args],
        cwd=str(REPO_ROOT),
        env=env,
        text=True,
        capture_output=True,
    )


class TestCliContract(unittest.TestCase):
    def setUp(self) -> None:
        self._td = tempfile.TemporaryDirectory()
        self.td = Path(self._td.name)
        self.in_json = self.td / "appointments.json"
        self.in_json.write_text(json.dumps({"appointments": APPOINTMENTS}), encoding="utf-8")

    def tearDown(self) -> None:
        self._td.cleanup()

    def test_day_layout_to_stdout(self) -> None:
        cp = _run(["--in", str(self.in_json), "--date", "2026-10-19", "--tz", "UTC"])
        self.assertEqual(cp.returncode, 0, cp.stderr)
        doc = json.loads(cp.stdout)
        self.assertEqual(doc["view"], "day")
        positions = doc["day"]["positions"]
        self.assertEqual([p["id"] for p in positions], ["a", "b"])
        self.assertEqual([(p["left"], p["height"]) for p in positions], [(64, 60), (84, 90)])
        self.assertEqual(doc["day"]["groups"], [{"top": 240, "expanded": False}])

    def test_day_layout_expanded_to_file(self) -> None:
        out = self.td / "out" / "layout.json"
        cp = _run(["--in", str(self.in_json), "--date", "2026-10-19", "--tz", "UTC", "--expand", "240", "--out", str(out)])
        self.assertEqual(cp.returncode, 0, cp.stderr)
        doc = json.loads(out.read_text(encoding="utf-8"))
        positions = doc["day"]["positions"]
        self.assertEqual([p["top"] for p in positions], [240, 302])
        self.assertEqual({p["left"] for p in positions}, {40})
        self.assertEqual(doc["day"]["groups"], [{"top": 240, "expanded": True}])

    def test_week_and_month_views(self) -> None:
        cp = _run(["--in", str(self.in_json), "--date", "2026-10-21", "--view", "week", "--tz", "UTC"])
        self.assertEqual(cp.returncode, 0, cp.stderr)
        doc = json.loads(cp.stdout)
        self.assertEqual(doc["label"], "October 19 - 25, 2026")
        self.assertEqual([len(d["positions"]) for d in doc["days"]], [2, 1, 0, 0, 0, 0, 0])
        self.assertEqual(doc["days"][0]["positions"][0]["width"], 200)

        cp = _run(["--in", str(self.in_json), "--date", "2026-10-19", "--view", "month", "--tz", "UTC"])
        self.assertEqual(cp.returncode, 0, cp.stderr)
        doc = json.loads(cp.stdout)
        self.assertEqual(doc["month"], "2026-10")
        cell = next(c for c in doc["cells"] if c["date"] == "2026-10-19")
        self.assertEqual(cell["count"], 3)
        self.assertEqual([i["id"] for i in cell["items"]], ["c", "a", "b"])

    def test_bad_inputs_exit_2(self) -> None:
        cp = _run(["--in", str(self.td / "missing.json")])
        self.assertEqual(cp.returncode, 2)
        self.assertIn("[apptgrid] ERROR", cp.stderr)

        cp = _run(["--in", str(self.in_json), "--workhours", "19:00-07:00", "--tz", "UTC"])
        self.assertEqual(cp.returncode, 2)

        cp = _run(["--in", str(self.in_json), "--tz", "Not/AZone"])
        self.assertEqual(cp.returncode, 2)

        bad_cfg = self.td / "cfg.json"
        bad_cfg.write_text(json.dumps({"work_start_min": [1]}), encoding="utf-8")
        cp = _run(["--in", str(self.in_json), "--cfg", str(bad_cfg), "--tz", "UTC"])
        self.assertEqual(cp.returncode, 2)
        self.assertIn("[apptgrid] ERROR: Invalid layout config", cp.stderr)
        self.assertNotIn("Traceback", cp.stderr)

        cp = _run(["--in", str(self.td), "--tz", "UTC"])
        self.assertEqual(cp.returncode, 2)
        self.assertIn("[apptgrid] ERROR: Failed to load appointments", cp.stderr)
        self.assertNotIn("Traceback", cp.stderr)


if __name__ == "__main__":
    unittest.main(verbosity=2)
