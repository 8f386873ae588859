import copy
import logging
from contextlib import contextmanager
from models import Member, Event, new_id

SAMPLE_MEMBERS = [
	{"id": "m1", "name": "John Doe", "email": "john@example.com", "phone": "123-456-7890", "birthday": "1990-05-15", "anniversary": "2015-06-20"},
	{"id": "m2", "name": "Jane Smith", "email": "jane@example.com", "phone": "234-567-8901", "birthday": "1992-08-22", "anniversary": "2018-07-10"},
	{"id": "m3", "name": "Peter Jones", "email": "peter@example.com", "phone": "345-678-9012", "birthday": "1985-12-01", "anniversary": ""},
	{"id": "m4", "name": "Mary Garcia", "email": "mary@example.com", "phone": "456-789-0123", "birthday": "1995-05-30", "anniversary": "2020-09-05"},
]

SAMPLE_EVENTS = [
	{"id": "e1", "title": "Weekly Bible Study", "date": "2024-05-10", "description": "Chapter 5 of Romans", "attendance": ["m1", "m3"]},
	{"id": "e2", "title": "Community Outreach", "date": "2024-05-18", "description": "Serving at the local shelter", "attendance": ["m1", "m2", "m3", "m4"]},
	{"id": "e3", "title": "Game Night", "date": "2024-06-01", "description": "Fun and fellowship", "attendance": []},
]

def _as_member(data) -> Member:
	if isinstance(data, Member):
		return copy.deepcopy(data)
	if isinstance(data, dict):
		return Member.from_dict(data)
	raise TypeError(f"cannot build a Member from {type(data).__name__}")

def _as_event(data) -> Event:
	if isinstance(data, Event):
		return copy.deepcopy(data)
	if isinstance(data, dict):
		return Event.from_dict(data)
	raise TypeError(f"cannot build an Event from {type(data).__name__}")

class MemberStore:
	"""
	In-memory owner of the member and event collections.

	Every mutation goes through this class. Readers get tuples of the current
	objects; callers that want to change a record build a new one and hand it
	to the matching update method (records are replaced by id, never patched).
	"""

	def __init__(self, members=None, events=None):
		self._members: list[Member] = []
		self._events: list[Event] = []
		for member in members or []:
			self._members.append(_as_member(member))
		for event in events or []:
			self._events.append(_as_event(event))

	@contextmanager
	def transaction(self):
		"""Snapshot both collections and restore them if the block raises."""
		members = copy.deepcopy(self._members)
		events = copy.deepcopy(self._events)
		try:
			yield self
		except Exception:
			self._members = members
			self._events = events
			logging.debug("Store transaction rolled back")
			raise

	# -- read views --

	@property
	def members(self) -> tuple[Member, ...]:
		return tuple(self._members)

	@property
	def events(self) -> tuple[Event, ...]:
		return tuple(self._events)

	def get_member(self, member_id) -> Member:
		member = next((m for m in self._members if m.id == member_id), None)
		if member is None:
			raise LookupError(f"member id {member_id} not found")
		return member

	def get_event(self, event_id) -> Event:
		event = next((e for e in self._events if e.id == event_id), None)
		if event is None:
			raise LookupError(f"event id {event_id} not found")
		return event

	def search_members(self, term: str = "") -> list[Member]:
		"""Case-insensitive substring match on member name. An empty term matches everyone."""
		term = (term or "").strip().lower()
		return [m for m in self._members if term in m.name.lower()]

	# -- members --

	def add_member(self, data) -> Member:
		member = _as_member(data)
		member.id = new_id()
		self._members.append(member)
		logging.info(f"Added member {member.id} ({member.name})")
		return member

	def bulk_add_members(self, records) -> list[Member]:
		"""Add several members at once. Either every record is inserted or none is."""
		with self.transaction():
			added = [self.add_member(record) for record in records]
		logging.info(f"Bulk added {len(added)} member(s)")
		return added

	def update_member(self, data) -> Member:
		member = _as_member(data)
		for i, existing in enumerate(self._members):
			if existing.id == member.id:
				self._members[i] = member
				logging.info(f"Updated member {member.id}")
				return member
		raise LookupError(f"member id {member.id} not found")

	def delete_member(self, member_id) -> None:
		"""Remove a member and strip its id from every event's attendance."""
		member = self.get_member(member_id)
		self._members.remove(member)
		cleaned = 0
		for event in self._events:
			if member_id in event.attendance:
				event.attendance.discard(member_id)
				cleaned += 1
		logging.info(f"Deleted member {member_id}, removed from {cleaned} attendance record(s)")

	# -- events --

	def add_event(self, data) -> Event:
		event = _as_event(data)
		event.id = new_id()
		event.attendance = set()
		self._events.append(event)
		logging.info(f"Added event {event.id} ({event.title} on {event.date})")
		return event

	def update_event(self, data) -> Event:
		event = _as_event(data)
		member_ids = {m.id for m in self._members}
		unknown = event.attendance - member_ids
		if unknown:
			logging.warning(f"Dropping unknown member id(s) from attendance of event {event.id}: {sorted(unknown)}")
			event.attendance -= unknown
		for i, existing in enumerate(self._events):
			if existing.id == event.id:
				self._events[i] = event
				logging.info(f"Updated event {event.id}")
				return event
		raise LookupError(f"event id {event.id} not found")

	def delete_event(self, event_id) -> None:
		event = self.get_event(event_id)
		self._events.remove(event)
		logging.info(f"Deleted event {event_id}")

	# -- attendance --

	def set_attendance(self, event_id, member_ids) -> Event:
		"""Replace the attendance set of an event. Every id must name a current member."""
		event = self.get_event(event_id)
		member_ids = set(member_ids)
		known = {m.id for m in self._members}
		unknown = member_ids - known
		if unknown:
			raise LookupError(f"member id(s) not found: {sorted(unknown)}")
		event.attendance = member_ids
		logging.info(f"Recorded {len(member_ids)} attendee(s) for event {event_id}")
		return event

	def toggle_attendance(self, event_id, member_id) -> bool:
		"""Flip one member's attendance for an event and return the new state."""
		event = self.get_event(event_id)
		self.get_member(member_id)
		if member_id in event.attendance:
			event.attendance.discard(member_id)
			return False
		event.attendance.add(member_id)
		return True

	# -- seed data --

	def load_sample_data(self) -> None:
		"""Replace the current contents with the sample roster."""
		self._members = [Member.from_dict(dict(m)) for m in SAMPLE_MEMBERS]
		self._events = [Event.from_dict(dict(e)) for e in SAMPLE_EVENTS]
		logging.debug(f"Loaded sample data: {len(self._members)} members, {len(self._events)} events")

	def clear(self) -> None:
		self._members = []
		self._events = []

	def __repr__(self):
		return f"MemberStore(members={len(self._members)}, events={len(self._events)})"
