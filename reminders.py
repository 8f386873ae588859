"""
Dashboard computations: monthly birthday/anniversary reminders and the
upcoming-events list.

Both work on calendar dates only. "today" is always passed in so callers
(and tests) decide what the current date is.
"""

import logging
from typing import NamedTuple, Optional
import datetime

import constants
import utils
from models import Event, Member, ReminderType

class MonthlyReminders(NamedTuple):
	reminder_type: ReminderType
	this_month: list[Member]
	next_month: list[Member]
	this_month_name: str
	next_month_name: str

def members_in_month(members, reminder_type: ReminderType, month: int) -> list[Member]:
	"""
	Members whose date for `reminder_type` falls in `month`, ordered by day of month.
	The year is ignored since birthdays and anniversaries recur yearly.
	"""
	matches = []
	for member in members:
		date = member.parsed_reminder_date(reminder_type)
		if date is not None and date.month == month:
			matches.append((date.day, member))
	# sort is stable, ties keep input order
	matches.sort(key=lambda pair: pair[0])
	return [member for _, member in matches]

def monthly_reminders(members, reminder_type: ReminderType, today: Optional[datetime.date] = None) -> MonthlyReminders:
	"""Bucket members into this month's and next month's reminders for one date field."""
	today = today or utils.today()
	this_month = today.month
	following = utils.next_month(this_month)

	reminders = MonthlyReminders(
		reminder_type=reminder_type,
		this_month=members_in_month(members, reminder_type, this_month),
		next_month=members_in_month(members, reminder_type, following),
		this_month_name=utils.month_name(this_month),
		next_month_name=utils.month_name(following),
	)
	logging.debug(
		f"{reminder_type.label} reminders for {today}: "
		f"{len(reminders.this_month)} this month, {len(reminders.next_month)} next month"
	)
	return reminders

def upcoming_events(events, today: Optional[datetime.date] = None, limit: int = constants.UPCOMING_EVENTS_LIMIT) -> list[Event]:
	"""Events dated today or later, soonest first, at most `limit` of them."""
	today = today or utils.today()
	dated = [(event.parsed_date, event) for event in events]
	upcoming = [(date, event) for date, event in dated if date is not None and date >= today]
	upcoming.sort(key=lambda pair: pair[0])
	return [event for _, event in upcoming[:limit]]

def dashboard(members, events, today: Optional[datetime.date] = None) -> dict:
	"""Everything the dashboard shows, as plain data."""
	today = today or utils.today()

	def reminder_dict(reminders: MonthlyReminders):
		def entry(member: Member):
			raw = member.reminder_date(reminders.reminder_type)
			return {"id": member.id, "name": member.name, "date": raw, "display_date": utils.format_display_date(raw)}
		return {
			"this_month_name": reminders.this_month_name,
			"next_month_name": reminders.next_month_name,
			"this_month": [entry(m) for m in reminders.this_month],
			"next_month": [entry(m) for m in reminders.next_month],
		}

	return {
		"today": today.strftime(constants.DATE_FORMAT),
		"upcoming_events": [e.to_dict() for e in upcoming_events(events, today)],
		"birthdays": reminder_dict(monthly_reminders(members, ReminderType.BIRTHDAY, today)),
		"anniversaries": reminder_dict(monthly_reminders(members, ReminderType.ANNIVERSARY, today)),
	}
