import pytest
from fastapi.testclient import TestClient
import webapp.main as appmod
from webapp.api import get_store
from store import MemberStore


@pytest.fixture
def app_store():
	store = MemberStore()
	store.load_sample_data()
	return store


@pytest.fixture
def client(app_store):
	# Give every test its own store instead of the application-wide one
	appmod.app.dependency_overrides[get_store] = lambda: app_store
	yield TestClient(appmod.app)
	appmod.app.dependency_overrides.clear()
