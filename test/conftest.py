"""Pytest configuration and fixtures

Provides shared fixtures for all tests: a temporary static file root, a
fresh hit counter, and a Starlette test client wired to a ChirpyWebServer.
"""

import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from starlette.testclient import TestClient

from chirpy.metrics import HitCounter
from chirpy.web_server import ChirpyWebServer


INDEX_HTML = "<html><body><h1>Welcome to Chirpy</h1></body></html>"

_CHIRPY_ENV_VARS = (
    "CHIRPY_HOST",
    "CHIRPY_PORT",
    "PORT",
    "CHIRPY_FILEPATH_ROOT",
    "DB_URL",
    "CHIRPY_LOG_LEVEL",
    "CHIRPY_JSON_LOGS",
)


@pytest.fixture(scope="function")
def clean_env():
    """
    Provide os.environ without any chirpy variables

    The whole environment is restored afterwards, including anything a .env
    file loaded during the test.
    """
    with patch.dict(os.environ):
        for name in _CHIRPY_ENV_VARS:
            os.environ.pop(name, None)
        yield os.environ


@pytest.fixture(scope="function")
def static_root(tmp_path):
    """
    Provide a temporary static file root

    Contains index.html at the top level and assets/logo.txt.
    """
    root = tmp_path / "app"
    (root / "assets").mkdir(parents=True)
    (root / "index.html").write_text(INDEX_HTML)
    (root / "assets" / "logo.txt").write_text("chirpy logo")
    return root


@pytest.fixture(scope="function")
def hit_counter():
    return HitCounter()


@pytest.fixture(scope="function")
def server(static_root, hit_counter):
    return ChirpyWebServer(filepath_root=str(static_root), hit_counter=hit_counter)


@pytest.fixture(scope="function")
def client(server):
    return TestClient(server.get_app())
