"""
Attendance reporting.

Joins events and members into per-member attendance stats, builds the
attendance matrix shown on the reports page, and turns it into the grid
of cell values written to the downloadable spreadsheet.
"""

import io
import logging
from dataclasses import dataclass
from pathlib import Path

import constants
from models import Event, Member

class ExportUnavailableError(RuntimeError):
	"""Raised when the spreadsheet writer library cannot be loaded."""

@dataclass
class MemberAttendance:
	member: Member
	attended_count: int
	total_events: int
	percentage: int

	@property
	def total_str(self):
		return f"{self.attended_count} / {self.total_events}"

	def to_dict(self):
		return {
			**self.member.to_dict(),
			"attended_count": self.attended_count,
			"total_events": self.total_events,
			"percentage": self.percentage,
		}

def sort_events_by_date(events) -> list[Event]:
	"""Oldest first. Events without a usable date go last, in their original order."""
	return sorted(events, key=lambda e: (e.parsed_date is None, e.parsed_date or 0))

def attendance_percentage(attended: int, total: int) -> int:
	"""Whole-number percentage, rounding halves up. 0 when there are no events."""
	if total <= 0:
		return 0
	return (200 * attended + total) // (2 * total)

def attendance_summary(members, events) -> list[MemberAttendance]:
	"""Attended count and percentage for every member, in member order."""
	events = list(events)
	total = len(events)
	summary = []
	for member in members:
		attended = sum(1 for event in events if event.attended(member.id))
		summary.append(MemberAttendance(
			member=member,
			attended_count=attended,
			total_events=total,
			percentage=attendance_percentage(attended, total),
		))
	return summary

def attendance_matrix(members, events):
	"""
	Rows are members, columns are events sorted by date, cells are True when
	the member attended.

	Returns:
		tuple: (sorted_events, [(MemberAttendance, [bool, ...]), ...])
	"""
	sorted_events = sort_events_by_date(events)
	rows = []
	for stats in attendance_summary(members, sorted_events):
		cells = [event.attended(stats.member.id) for event in sorted_events]
		rows.append((stats, cells))
	return sorted_events, rows

def event_column_label(event: Event) -> str:
	return f"{event.title} ({event.date})"

def build_export_grid(members, events) -> list[list[str]]:
	"""Header row plus one row per member, ready for the spreadsheet writer."""
	sorted_events, rows = attendance_matrix(members, events)
	header = [
		"Member Name",
		"Email",
		"Phone",
		*[event_column_label(e) for e in sorted_events],
		"Total Attended",
		"Attendance Percentage",
	]
	grid = [header]
	for stats, cells in rows:
		member = stats.member
		grid.append([
			member.name,
			member.email,
			member.phone,
			*[constants.CHECK_MARK if present else "" for present in cells],
			stats.total_str,
			f"{stats.percentage}%",
		])
	return grid

def column_widths(num_columns: int) -> list[int]:
	"""Identity columns are widest, then event columns, then the two summary columns."""
	widths = constants.REPORT_COLUMN_WIDTHS
	result = []
	for i in range(num_columns):
		if i < 3:
			result.append(widths["identity"])
		elif i < num_columns - 2:
			result.append(widths["event"])
		else:
			result.append(widths["summary"])
	return result

def write_attendance_workbook(grid, output, sheet_name=constants.REPORT_SHEET_NAME):
	"""
	Write the grid to an xlsx workbook.

	Args:
		grid: list of rows, the first one being the header
		output: file path or binary file-like object
		sheet_name: worksheet title

	Raises:
		ExportUnavailableError: if the Excel writer engine is not installed
	"""
	# only the export needs pandas and openpyxl
	try:
		import pandas as pd
		from openpyxl.utils import get_column_letter
		writer = pd.ExcelWriter(output, engine="openpyxl")
	except ImportError as e:
		logging.error(f"Excel export library not available: {e}")
		raise ExportUnavailableError("Excel export library not found.") from e

	df = pd.DataFrame(grid)
	with writer:
		df.to_excel(writer, index=False, header=False, sheet_name=sheet_name)
		worksheet = writer.sheets[sheet_name]
		for i, width in enumerate(column_widths(len(grid[0]) if grid else 0), start=1):
			worksheet.column_dimensions[get_column_letter(i)].width = width

def export_attendance_report(members, events, output=None) -> bytes:
	"""
	Build the attendance grid and serialize it as an xlsx workbook.

	If `output` is a path the workbook is also saved there. Returns the
	workbook bytes either way.
	"""
	grid = build_export_grid(members, events)
	buffer = io.BytesIO()
	write_attendance_workbook(grid, buffer)
	content = buffer.getvalue()

	if output is not None:
		output = Path(output)
		output.write_bytes(content)
		logging.info(f"Attendance report saved to {output}")
	else:
		logging.info(f"Attendance report built: {len(grid) - 1} member row(s), {len(grid[0]) - 5} event column(s)")
	return content

def print_attendance_report(members, events):
	sorted_events, rows = attendance_matrix(members, events)
	print("\n📊 Attendance Report:")
	if not sorted_events or not rows:
		print("  No data to display. Add members and events to see reports.")
		return
	for event in sorted_events:
		print(f"  - {event_column_label(event)}: {len(event.attendance)} attendee(s)")
	print()
	for stats, _ in rows:
		print(f"  {stats.member.name}  attended: {stats.total_str} ({stats.percentage}%)")
