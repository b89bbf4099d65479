# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

import json
import tempfile
import unittest
from datetime import date
from pathlib import Path

from inception_report.core.models import Report, ReportOptions, load_report
from inception_report.render.cover import participant_lines
from tests.test_support import make_report, make_template


class TestReportFromDict(unittest.TestCase):
    def test_reads_templates_and_metadata(self) -> None:
        report = Report.from_dict(make_report(make_template("Kickoff", 1), title="Payments"))
        self.assertEqual(report.title, "Payments")
        self.assertEqual(report.workshop_name, "Checkout Revamp")
        self.assertEqual(report.templates[0].name, "Kickoff")
        self.assertEqual(report.metadata.status, "Completed")
        self.assertEqual(report.metadata.participants, ("Ana", "Bruno", "Carla"))

    def test_step_numbers_are_coerced(self) -> None:
        report = Report.from_dict(
            {
                "templates": [
                    {"name": "A", "stepNumber": "3"},
                    {"name": "B", "stepNumber": None},
                    {"name": "C", "stepNumber": float("nan")},
                    {"name": "D", "stepNumber": float("inf")},
                    "junk",
                ]
            }
        )
        self.assertEqual(
            [(entry.name, entry.step_number) for entry in report.templates],
            [("A", 3), ("B", 0), ("C", 0), ("D", 0)],
        )

    def test_non_finite_step_numbers_from_json_load(self) -> None:
        raw = '{"templates": [{"name": "K", "stepNumber": NaN}, {"name": "L", "stepNumber": -Infinity}]}'
        report = Report.from_dict(json.loads(raw))
        self.assertEqual([entry.step_number for entry in report.templates], [0, 0])

    def test_metadata_may_sit_at_top_level(self) -> None:
        report = Report.from_dict({"status": "Draft", "participants": "Ana, Bruno"})
        self.assertEqual(report.metadata.status, "Draft")
        self.assertEqual(report.metadata.participants, "Ana, Bruno")

    def test_rejects_non_object(self) -> None:
        with self.assertRaises(ValueError):
            Report.from_dict(["not", "an", "object"])

    def test_sorted_templates_is_stable(self) -> None:
        report = Report.from_dict(
            {"templates": [{"name": "B", "stepNumber": 2}, {"name": "C", "stepNumber": 2}, {"name": "A", "stepNumber": 1}]}
        )
        self.assertEqual([entry.name for entry in report.sorted_templates()], ["A", "B", "C"])


class TestLoadReport(unittest.TestCase):
    def test_loads_json_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "report.json"
            path.write_text(json.dumps(make_report(make_template("Agenda", 1))), encoding="utf-8")
            report = load_report(path)
        self.assertEqual(report.templates[0].name, "Agenda")

    def test_invalid_json_names_the_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "broken.json"
            path.write_text("{not json", encoding="utf-8")
            with self.assertRaises(ValueError) as ctx:
                load_report(path)
        self.assertIn("broken.json", str(ctx.exception))


class TestReportOptions(unittest.TestCase):
    def test_header_date_uses_format(self) -> None:
        options = ReportOptions(report_date=date(2024, 5, 1))
        self.assertEqual(options.header_date(), "01/05/2024")
        options = ReportOptions(report_date=date(2024, 5, 1), date_format="%Y-%m-%d")
        self.assertEqual(options.header_date(), "2024-05-01")


class TestParticipantLines(unittest.TestCase):
    def test_two_names_per_line(self) -> None:
        self.assertEqual(participant_lines(["Ana", "Bruno", "Carla"]), ["Ana, Bruno", "Carla"])
        self.assertEqual(participant_lines("Ana, Bruno, Carla, Davi"), ["Ana, Bruno", "Carla, Davi"])
        self.assertEqual(participant_lines(None), ["-"])


if __name__ == "__main__":
    unittest.main()
