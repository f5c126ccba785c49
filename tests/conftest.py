"""Pytest configuration and fixtures."""
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Ensure project root is on path when running pytest without installing the package
root = Path(__file__).resolve().parent.parent
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

from stub_api import APP_ID, APP_KEY, create_stub_app  # noqa: E402

from tfl_client.api.client import TflClient  # noqa: E402

STUB_BASE_URL = "http://testserver"


@pytest.fixture
def stub_app():
    return create_stub_app()


@pytest.fixture
def client(stub_app):
    """TflClient whose requests are served in-process by the stub app."""
    with TestClient(stub_app) as http:
        yield TflClient(base_url=STUB_BASE_URL, app_id=APP_ID, app_key=APP_KEY, http_client=http)
