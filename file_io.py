import csv
import logging
import re
from pathlib import Path
from constants import REQUIRED_MEMBER_COLUMNS

class ValidationError(ValueError):
	"""Raised when an uploaded members CSV cannot be imported."""

# -- CSV-related --

def split_lines(text):
	"""Split raw text on CR/LF and drop lines that are blank after trimming."""
	return [line for line in re.split(r"\r\n|\r|\n", text or "") if line.strip()]

def split_fields(line):
	"""
	Split one CSV line into its fields.

	Unquoted lines split on every comma. A double-quoted field may contain
	commas, so names like "Doe, John" keep their columns aligned.

	Raises:
		ValidationError: if the csv module rejects the line (e.g. a NUL byte)
	"""
	try:
		return next(csv.reader([line], skipinitialspace=False), [])
	except csv.Error as e:
		raise ValidationError(f"CSV line could not be parsed: {e}") from e

def parse_members_csv(text):
	"""
	Parse member records from CSV text.

	The first non-blank line is the header. It must contain the columns
	name, email, phone, birthday and anniversary (any order, any case);
	extra columns are ignored. Every following line becomes one record,
	with values matched to the header by position, trimmed, and missing
	values defaulted to "". Records carry no id, the store assigns one
	on insert.

	Raises:
		ValidationError: if there is no data row, a required column is missing
			or a line cannot be parsed
	"""
	lines = split_lines(text)
	if len(lines) < 2:
		raise ValidationError("CSV must have a header row and at least one data row.")

	headers = [h.strip().lower() for h in split_fields(lines[0])]
	missing = [column for column in REQUIRED_MEMBER_COLUMNS if column not in headers]
	if missing:
		raise ValidationError(
			f"CSV header is missing required column(s): {', '.join(missing)} "
			f"(must contain: {', '.join(REQUIRED_MEMBER_COLUMNS)})"
		)

	positions = {column: headers.index(column) for column in REQUIRED_MEMBER_COLUMNS}
	records = []
	for line_number, line in enumerate(lines[1:], start=2):
		values = split_fields(line)
		if len(values) != len(headers):
			logging.debug(f"CSV line {line_number} has {len(values)} field(s), header has {len(headers)}")
		record = {}
		for column, index in positions.items():
			value = values[index] if index < len(values) else ""
			record[column] = (value or "").strip()
		records.append(record)

	logging.info(f"Parsed {len(records)} member record(s) from CSV")
	return records

def read_members_csv(filename):
	"""Read a members CSV file from disk and parse it. A UTF-8 byte order mark is ignored."""
	filename = Path(filename)
	with open(filename, newline='', encoding='utf-8-sig') as csvfile:
		text = csvfile.read()
	logging.debug(f"Read {len(text)} characters from {filename}")
	return parse_members_csv(text)

def decode_upload(content: bytes) -> str:
	"""Decode uploaded file bytes as UTF-8 text, tolerating a byte order mark."""
	try:
		return content.decode("utf-8-sig")
	except UnicodeDecodeError as e:
		raise ValidationError(f"CSV file must be UTF-8 encoded text: {e}") from e
