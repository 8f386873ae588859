import argparse
import datetime
import logging
import sys
import constants
import utils
from file_io import ValidationError, read_members_csv
from models import ReminderType
from reminders import monthly_reminders, upcoming_events
from reports import ExportUnavailableError, export_attendance_report, print_attendance_report
from store import MemberStore

def build_store(load_sample=True, members_csv=None, logger=None):
	"""Create the in-memory store, optionally seeded and extended with a CSV import."""
	logger = logger or logging.getLogger("cli")
	store = MemberStore()
	if load_sample:
		store.load_sample_data()
	if members_csv:
		records = read_members_csv(members_csv)
		added = store.bulk_add_members(records)
		logger.info(f"Imported {len(added)} member(s) from {members_csv}")
	return store

def print_dashboard(store, today):
	print(f"\n📅 Upcoming events (from {today}):")
	upcoming = upcoming_events(store.events, today)
	if not upcoming:
		print("  No upcoming events.")
	for event in upcoming:
		print(f"  {event.date}  {event.title}")

	for reminder_type in ReminderType:
		reminders = monthly_reminders(store.members, reminder_type, today)
		print(f"\n🎉 {reminder_type.label}")
		for month_name, bucket in ((reminders.this_month_name, reminders.this_month), (reminders.next_month_name, reminders.next_month)):
			print(f"  {month_name}:")
			if not bucket:
				print(f"    No {reminder_type.label.lower()} in {month_name}.")
			for member in bucket:
				print(f"    {utils.format_display_date(member.reminder_date(reminder_type)):<12} {member.name}")

def print_members(store, search=""):
	members = store.search_members(search)
	print(f"\n👥 Members ({len(members)}):")
	for member in members:
		print(f"  {member.name:<20} {member.email:<25} {member.phone:<14} b: {member.birthday or '-':<10} a: {member.anniversary or '-'}")

def parse_today(value):
	try:
		return datetime.datetime.strptime(value, constants.DATE_FORMAT).date()
	except ValueError:
		raise argparse.ArgumentTypeError(f"invalid date '{value}', expected YYYY-MM-DD")

def main(argv=None):
	parser = argparse.ArgumentParser(description="Impacters Roster CLI")
	parser.add_argument("--verbose", action="store_true", help="Enable verbose (DEBUG) logging")
	parser.add_argument("--no-sample", action="store_true", help="Start from an empty roster instead of the sample data")
	parser.add_argument("--members-csv", type=str, help="Import members from this CSV before running the command")
	parser.add_argument("--today", type=parse_today, default=None, help="Override today's date (YYYY-MM-DD)")

	subparsers = parser.add_subparsers(dest="command")

	subparsers.add_parser("dashboard", help="Show upcoming events and monthly reminders")

	members_parser = subparsers.add_parser("members", help="List members")
	members_parser.add_argument("--search", type=str, default="", help="Filter members by name")

	subparsers.add_parser("attendance", help="Print the attendance report")

	export_parser = subparsers.add_parser("export", help="Export the attendance report spreadsheet")
	export_parser.add_argument(
		"--output",
		type=str,
		default=constants.REPORT_FILENAME,
		help=f"Output path (default: {constants.REPORT_FILENAME})",
	)

	args = parser.parse_args(argv)
	logger = utils.setup_logging(verbose=args.verbose)
	today = args.today or utils.today()

	if args.command is None:
		parser.print_help()
		return 0

	try:
		store = build_store(load_sample=not args.no_sample, members_csv=args.members_csv, logger=logger)
	except ValidationError as e:
		logger.error(f"Member import failed: {e}")
		return 1
	except OSError as e:
		logger.error(f"Cannot read members CSV: {e}")
		return 1

	# Routing logic
	if args.command == "dashboard":
		print_dashboard(store, today)
	elif args.command == "members":
		print_members(store, args.search)
	elif args.command == "attendance":
		print_attendance_report(store.members, store.events)
	elif args.command == "export":
		try:
			export_attendance_report(store.members, store.events, output=args.output)
		except ExportUnavailableError as e:
			logger.error(f"Export failed: {e}")
			return 1
	return 0

if __name__ == "__main__":
	sys.exit(main())
