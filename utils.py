import datetime
import logging
from constants import DATE_FORMAT, DISPLAY_DATE_FORMAT

def setup_logging(verbose=False):
	stream_log_level = logging.DEBUG if verbose else logging.INFO

	# stream level is set by the verbose arg
	stream_handler = logging.StreamHandler()
	stream_handler.setLevel(stream_log_level)

	# file level is alway DEBUG
	file_handler = logging.FileHandler('debug.log')
	file_handler.setLevel(logging.DEBUG)

	logging.basicConfig(
		level=logging.DEBUG,
		format='%(asctime)s - %(levelname)s - %(message)s',
		handlers=[stream_handler, file_handler]
		)
	return logging.getLogger("cli")

def parse_iso_date(value):
	"""
	Parse a "YYYY-MM-DD" string into a date.

	Empty, missing or malformed values are treated as unset and return None,
	so date-based computations can skip them instead of failing.
	"""
	if isinstance(value, datetime.datetime):
		return value.date()
	if isinstance(value, datetime.date):
		return value
	if not value or not isinstance(value, str):
		return None
	try:
		return datetime.datetime.strptime(value.strip(), DATE_FORMAT).date()
	except ValueError:
		logging.debug(f"Ignoring malformed date: {value!r}")
		return None

def next_month(month: int) -> int:
	"""Calendar month after `month` (1-12), wrapping December to January."""
	return month % 12 + 1

def month_name(month: int) -> str:
	return datetime.date(2000, month, 1).strftime("%B")

def format_display_date(value) -> str:
	"""Format an ISO date as e.g. "May 15". Unset dates format as an empty string."""
	date = parse_iso_date(value)
	if date is None:
		return ""
	formatted = date.strftime(DISPLAY_DATE_FORMAT)
	# strip the leading zero from the day, %-d is not portable
	return formatted.replace(" 0", " ")

def today() -> datetime.date:
	return datetime.date.today()
