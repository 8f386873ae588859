import pytest
from models import Member, Event, ReminderType


@pytest.mark.unit
class TestReminderType:

	@pytest.mark.parametrize("value,expected", [
		("birthday", ReminderType.BIRTHDAY),
		(" Birthdays ", ReminderType.BIRTHDAY),
		("ANNIVERSARY", ReminderType.ANNIVERSARY),
		("anniversaries", ReminderType.ANNIVERSARY),
	])
	def test_from_string(self, value, expected):
		assert ReminderType.from_string(value) == expected

	def test_from_string_unknown(self):
		with pytest.raises(ValueError, match="Unknown reminder type"):
			ReminderType.from_string("wedding")

	def test_labels(self):
		assert ReminderType.BIRTHDAY.label == "Birthdays"
		assert ReminderType.ANNIVERSARY.label == "Anniversaries"


@pytest.mark.unit
class TestMember:

	def test_defaults_are_empty_strings(self):
		member = Member(name="Alice")
		assert member.id == ""
		assert member.email == ""
		assert member.phone == ""
		assert member.birthday == ""
		assert member.anniversary == ""

	def test_values_are_trimmed(self):
		member = Member(id="m1", name="  Alice ", email=" a@x.com ", birthday=" 2000-01-01 ")
		assert member.name == "Alice"
		assert member.email == "a@x.com"
		assert member.birthday == "2000-01-01"

	def test_none_values_become_empty(self):
		member = Member(id="m1", name="Alice", anniversary=None)
		assert member.anniversary == ""

	def test_reminder_date_selects_field_by_type(self):
		member = Member(id="m1", birthday="1990-05-15", anniversary="2015-06-20")
		assert member.reminder_date(ReminderType.BIRTHDAY) == "1990-05-15"
		assert member.reminder_date(ReminderType.ANNIVERSARY) == "2015-06-20"

	def test_parsed_reminder_date_unset_or_malformed(self):
		member = Member(id="m1", birthday="", anniversary="not-a-date")
		assert member.parsed_reminder_date(ReminderType.BIRTHDAY) is None
		assert member.parsed_reminder_date(ReminderType.ANNIVERSARY) is None

	def test_dict_round_trip(self):
		data = {"id": "m1", "name": "Alice", "email": "a@x.com", "phone": "555",
				"birthday": "2000-01-01", "anniversary": ""}
		assert Member.from_dict(data).to_dict() == data


@pytest.mark.unit
class TestEvent:

	def test_attendance_is_a_set(self):
		event = Event(id="e1", title="Study", date="2024-05-10", attendance=["m1", "m2", "m1"])
		assert event.attendance == {"m1", "m2"}
		assert event.attended("m1")
		assert not event.attended("m3")

	def test_to_dict_sorts_attendance(self):
		event = Event(id="e1", title="Study", date="2024-05-10", attendance=["m2", "m1"])
		assert event.to_dict()["attendance"] == ["m1", "m2"]

	def test_parsed_date(self):
		assert Event(date="2024-05-10").parsed_date.isoformat() == "2024-05-10"
		assert Event(date="").parsed_date is None
		assert Event(date="2024-13-40").parsed_date is None

	def test_str(self):
		assert str(Event(title="Game Night", date="2024-06-01")) == "Game Night (2024-06-01)"
