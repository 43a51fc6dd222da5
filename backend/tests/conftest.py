# backend/tests/conftest.py
import os
import sys
import pytest
from fastapi.testclient import TestClient

# Make /Project/backend importable as top-level
BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

# Keep the auto selector quick and deterministic under test
os.environ.setdefault("AUTO_CANDIDATE_BUDGET_S", "5.0")
os.environ.setdefault("OSRM_BASE_URL", "http://osrm.test")

# Import app only after setting env
from main import app
from adapters.offline.haversine_adapter import HaversineAdapter


@pytest.fixture(scope="session")
def client():
    # Use context manager so FastAPI lifespan (startup/shutdown) runs
    with TestClient(app) as c:
        yield c


@pytest.fixture
def haversine():
    return HaversineAdapter(speed_kmh=50.0)


