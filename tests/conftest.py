# tests/conftest.py

import asyncio
import random
from datetime import date, datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from main import app
from routes.dashboard import get_dashboard
from services.dashboard import DashboardController
from services.mock_api import MockApi, SimulationSettings
from services.storage import FileStorage, LocalStorageHelper

START = datetime(2026, 10, 19, 9, 30, tzinfo=timezone.utc)
TODAY = date(2026, 10, 19)


class TickingClock:
    """Returns a later time on every call."""

    def __init__(self, start=START, step=timedelta(seconds=1)):
        self.now = start
        self.step = step

    def __call__(self):
        now = self.now
        self.now += self.step
        return now


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def clock():
    return TickingClock()


@pytest.fixture
def api(clock):
    return MockApi(SimulationSettings.instant(), rng=random.Random(7), clock=clock)


@pytest.fixture
def storage_path(tmp_path):
    return str(tmp_path / "storage.json")


@pytest.fixture
def local_storage(storage_path):
    return LocalStorageHelper(FileStorage(storage_path))


@pytest.fixture
def dashboard(api, local_storage):
    return DashboardController(api, storage=local_storage, today=lambda: TODAY)


@pytest.fixture
def mounted_dashboard(dashboard):
    asyncio.run(dashboard.mount())
    return dashboard


@pytest.fixture
def client(mounted_dashboard):
    app.dependency_overrides[get_dashboard] = lambda: mounted_dashboard
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def ana_form():
    return {"name": "Ana Lima", "email": "ana@x.com", "course": "2", "profileImage": ""}
