import sys
from pathlib import Path

import pytest

# Ensure the project root is on sys.path for direct pytest runs
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from main import create_app  # noqa: E402
from thrift_finder.core.config import settings  # noqa: E402


@pytest.fixture
def configured(monkeypatch):
    monkeypatch.setattr(settings, "GOOGLE_MAPS_API_KEY", "maps-key")
    monkeypatch.setattr(settings, "GEMINI_API_KEY", "gemini-key")
    return settings


@pytest.fixture
def client(configured):
    app = create_app()
    app.config["TESTING"] = True
    return app.test_client()
