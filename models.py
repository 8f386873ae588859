import uuid
from enum import Enum
from utils import parse_iso_date

def new_id() -> str:
	return uuid.uuid4().hex

class ReminderType(Enum):
	BIRTHDAY = "birthday"
	ANNIVERSARY = "anniversary"

	@classmethod
	def from_string(cls, value):
		value = value.strip().lower()
		if value in ["birthday", "birthdays"]:
			return cls.BIRTHDAY
		elif value in ["anniversary", "anniversaries"]:
			return cls.ANNIVERSARY
		else:
			raise ValueError(f"Unknown reminder type: {value}")

	@property
	def label(self):
		return "Birthdays" if self == ReminderType.BIRTHDAY else "Anniversaries"

class Member:
	FIELDS = ("name", "email", "phone", "birthday", "anniversary")

	def __init__(self, **kwargs):
		self.id = str(kwargs.get("id") or "")
		self.name = str(kwargs.get("name", "") or "").strip()
		self.email = str(kwargs.get("email", "") or "").strip()
		self.phone = str(kwargs.get("phone", "") or "").strip()
		# keep dates as ISO strings, "" means unset
		self.birthday = str(kwargs.get("birthday", "") or "").strip()
		self.anniversary = str(kwargs.get("anniversary", "") or "").strip()

	def reminder_date(self, reminder_type: ReminderType) -> str:
		"""Return the raw date string that a reminder of the given type reads."""
		if reminder_type == ReminderType.BIRTHDAY:
			return self.birthday
		elif reminder_type == ReminderType.ANNIVERSARY:
			return self.anniversary
		raise ValueError(f"Unknown reminder type: {reminder_type}")

	def parsed_reminder_date(self, reminder_type: ReminderType):
		return parse_iso_date(self.reminder_date(reminder_type))

	def to_dict(self):
		return {
			"id": self.id,
			"name": self.name,
			"email": self.email,
			"phone": self.phone,
			"birthday": self.birthday,
			"anniversary": self.anniversary,
		}

	@classmethod
	def from_dict(cls, data):
		return cls(**data)

	def __eq__(self, other):
		if isinstance(other, Member):
			return self.to_dict() == other.to_dict()
		return False

	def __repr__(self):
		return (f"Member(id='{self.id}', name='{self.name}', email='{self.email}', "
				f"birthday='{self.birthday}', anniversary='{self.anniversary}')")

	def __str__(self):
		return f"{self.name} <{self.email}>" if self.email else self.name

class Event:
	def __init__(self, **kwargs):
		self.id = str(kwargs.get("id") or "")
		self.title = str(kwargs.get("title", "") or "").strip()
		self.date = str(kwargs.get("date", "") or "").strip()
		self.description = str(kwargs.get("description", "") or "").strip()
		self.attendance = set(kwargs.get("attendance") or [])

	@property
	def parsed_date(self):
		return parse_iso_date(self.date)

	def attended(self, member_id) -> bool:
		return member_id in self.attendance

	def to_dict(self):
		return {
			"id": self.id,
			"title": self.title,
			"date": self.date,
			"description": self.description,
			"attendance": sorted(self.attendance),
		}

	@classmethod
	def from_dict(cls, data):
		return cls(**data)

	def __eq__(self, other):
		if isinstance(other, Event):
			return self.to_dict() == other.to_dict()
		return False

	def __repr__(self):
		return (f"Event(id='{self.id}', title='{self.title}', date='{self.date}', "
				f"attendance={sorted(self.attendance)})")

	def __str__(self):
		return f"{self.title} ({self.date})"
