from pydantic import BaseModel, field_validator
import utils


class MemberIn(BaseModel):
	name: str = ""
	email: str = ""
	phone: str = ""
	birthday: str = ""
	anniversary: str = ""

	@field_validator("birthday", "anniversary")
	@classmethod
	def iso_date_or_empty(cls, value: str) -> str:
		value = value.strip()
		if value and utils.parse_iso_date(value) is None:
			raise ValueError("date must be empty or YYYY-MM-DD")
		return value


class EventIn(BaseModel):
	title: str = ""
	date: str
	description: str = ""

	@field_validator("date")
	@classmethod
	def iso_date(cls, value: str) -> str:
		value = value.strip()
		if utils.parse_iso_date(value) is None:
			raise ValueError("date must be YYYY-MM-DD")
		return value


class EventUpdate(EventIn):
	attendance: list[str] = []


class AttendanceIn(BaseModel):
	member_ids: list[str] = []
