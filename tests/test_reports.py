import io
import sys
import pytest
from openpyxl import load_workbook
import constants
from models import Event
from reports import (
	ExportUnavailableError,
	attendance_matrix,
	attendance_percentage,
	attendance_summary,
	build_export_grid,
	column_widths,
	export_attendance_report,
	sort_events_by_date,
	write_attendance_workbook,
)


@pytest.mark.unit
class TestAttendanceSummary:

	def test_one_of_two_events_is_fifty_percent(self, member_factory, event_factory):
		member = member_factory()
		events = [
			event_factory(date="2024-05-10", attendance=[member.id]),
			event_factory(date="2024-06-01", attendance=[]),
		]
		[stats] = attendance_summary([member], events)
		assert stats.attended_count == 1
		assert stats.total_events == 2
		assert stats.percentage == 50

	def test_no_events_is_zero_percent(self, member_factory):
		summary = attendance_summary([member_factory(), member_factory()], [])
		assert [s.percentage for s in summary] == [0, 0]
		assert [s.attended_count for s in summary] == [0, 0]

	@pytest.mark.parametrize("attended,total,expected", [
		(0, 3, 0),
		(1, 3, 33),
		(2, 3, 67),
		(1, 8, 13),   # 12.5 rounds up
		(3, 8, 38),   # 37.5 rounds up
		(3, 3, 100),
		(0, 0, 0),
	])
	def test_percentage_rounding(self, attended, total, expected):
		assert attendance_percentage(attended, total) == expected

	def test_percentage_is_bounded_integer(self, sample_store):
		for stats in attendance_summary(sample_store.members, sample_store.events):
			assert isinstance(stats.percentage, int)
			assert 0 <= stats.percentage <= 100

	def test_sample_roster(self, sample_store):
		summary = {s.member.id: (s.attended_count, s.percentage) for s in attendance_summary(sample_store.members, sample_store.events)}
		assert summary == {"m1": (2, 67), "m2": (1, 33), "m3": (2, 67), "m4": (1, 33)}


@pytest.mark.unit
class TestAttendanceMatrix:

	def test_columns_sorted_by_date(self, sample_store):
		# move the first event after the others
		sample_store.update_event(Event(id="e1", title="Weekly Bible Study", date="2024-07-01", attendance=["m1", "m3"]))
		events, rows = attendance_matrix(sample_store.members, sample_store.events)
		assert [e.id for e in events] == ["e2", "e3", "e1"]
		stats, cells = rows[0]
		assert stats.member.id == "m1"
		assert cells == [True, False, True]

	def test_undated_events_sort_last(self, event_factory):
		events = [event_factory(title="Undated", date=""), event_factory(title="Dated", date="2024-01-01")]
		assert [e.title for e in sort_events_by_date(events)] == ["Dated", "Undated"]

	def test_rows_follow_member_order(self, sample_store):
		_, rows = attendance_matrix(sample_store.members, sample_store.events)
		assert [stats.member.id for stats, _ in rows] == ["m1", "m2", "m3", "m4"]


@pytest.mark.unit
class TestExportGrid:

	def test_header_and_rows(self, sample_store):
		grid = build_export_grid(sample_store.members, sample_store.events)
		assert grid[0] == [
			"Member Name", "Email", "Phone",
			"Weekly Bible Study (2024-05-10)",
			"Community Outreach (2024-05-18)",
			"Game Night (2024-06-01)",
			"Total Attended", "Attendance Percentage",
		]
		assert grid[1] == ["John Doe", "john@example.com", "123-456-7890", "✔", "✔", "", "2 / 3", "67%"]
		assert grid[2] == ["Jane Smith", "jane@example.com", "234-567-8901", "", "✔", "", "1 / 3", "33%"]
		assert len(grid) == 1 + len(sample_store.members)

	def test_no_events(self, member_factory):
		grid = build_export_grid([member_factory(name="Alice", email="a@x.com", phone="555")], [])
		assert grid == [
			["Member Name", "Email", "Phone", "Total Attended", "Attendance Percentage"],
			["Alice", "a@x.com", "555", "0 / 0", "0%"],
		]

	def test_column_widths(self):
		assert column_widths(7) == [25, 25, 25, 20, 20, 15, 15]
		assert column_widths(5) == [25, 25, 25, 15, 15]


@pytest.mark.integration
class TestWorkbook:

	def test_workbook_contents(self, sample_store):
		content = export_attendance_report(sample_store.members, sample_store.events)
		workbook = load_workbook(io.BytesIO(content))
		sheet = workbook[constants.REPORT_SHEET_NAME]
		rows = [[cell if cell is not None else "" for cell in row] for row in sheet.iter_rows(values_only=True)]
		assert rows == build_export_grid(sample_store.members, sample_store.events)
		assert sheet.column_dimensions["A"].width == 25
		assert sheet.column_dimensions["D"].width == 20
		assert sheet.column_dimensions["H"].width == 15

	def test_saves_to_path(self, sample_store, tmp_path):
		output = tmp_path / constants.REPORT_FILENAME
		content = export_attendance_report(sample_store.members, sample_store.events, output=output)
		assert output.read_bytes() == content

	@pytest.mark.parametrize("module", ["pandas", "openpyxl.utils"])
	def test_missing_writer_library(self, monkeypatch, tmp_path, module):
		monkeypatch.setitem(sys.modules, module, None)

		output = tmp_path / "report.xlsx"
		with pytest.raises(ExportUnavailableError, match="Excel export library not found"):
			write_attendance_workbook([["Member Name"]], output)
		assert not output.exists()
