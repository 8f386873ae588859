"""Shared fixtures for the roster test suite.

- member_factory / event_factory build domain objects with sensible defaults
- store is an empty MemberStore, sample_store is seeded with the sample roster
- today pins the current date so date-based tests are deterministic
"""

import datetime
import itertools
import pytest
from models import Event, Member
from store import MemberStore


@pytest.fixture
def today():
	return datetime.date(2024, 5, 9)


@pytest.fixture
def member_factory():
	"""Factory: build a Member, ids default to m1, m2, ..."""
	counter = itertools.count(1)

	def _build(**overrides):
		n = next(counter)
		data = {
			"id": f"m{n}",
			"name": f"Member {n}",
			"email": f"member{n}@example.com",
			"phone": f"555-000{n}",
			"birthday": "",
			"anniversary": "",
		}
		data.update(overrides)
		return Member(**data)
	return _build


@pytest.fixture
def event_factory():
	"""Factory: build an Event, ids default to e1, e2, ..."""
	counter = itertools.count(1)

	def _build(**overrides):
		n = next(counter)
		data = {
			"id": f"e{n}",
			"title": f"Event {n}",
			"date": "2024-05-10",
			"description": "",
			"attendance": [],
		}
		data.update(overrides)
		return Event(**data)
	return _build


@pytest.fixture
def store():
	return MemberStore()


@pytest.fixture
def sample_store():
	store = MemberStore()
	store.load_sample_data()
	return store
