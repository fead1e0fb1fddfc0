import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

# Start-up reads these once at import time; keep the app predictable in tests.
os.environ.setdefault("API_PREFIX", "/api")
os.environ.pop("SENTRY_DSN", None)


@pytest.fixture
def api_client():
    from fastapi.testclient import TestClient

    from tenpin.main import app

    with TestClient(app) as client:
        yield client
