import pytest
from fastapi.testclient import TestClient

from main import app
from presets.registry import PresetRegistry, get_registry
from schemas import OptimizationOptions, PresetDraft
from storage.memory import MemoryStorage

STORAGE_KEY = "imgpro_user_presets"


@pytest.fixture
def storage():
    """Unlimited in-memory storage slot."""
    return MemoryStorage()


@pytest.fixture
def registry(storage):
    return PresetRegistry(storage, key=STORAGE_KEY)


@pytest.fixture
def draft():
    return PresetDraft(
        name="Product shots",
        description="Square product photos",
        icon="📦",
        options=OptimizationOptions(format="webp", quality=0.8, max_width_or_height=1000),
    )


@pytest.fixture
def client(registry):
    """FastAPI test client bound to the in-memory registry (does not raise server exceptions)."""
    app.dependency_overrides[get_registry] = lambda: registry
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    """Headers for authenticated requests (dev mode, no API_KEY set)."""
    return {"Authorization": "Bearer test-api-key"}
