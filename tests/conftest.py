"""Shared pytest fixtures and configuration."""

import httpx
import pytest
from loguru import logger

from biapi.settings import SettingsStore, set_store

BIAPI_ENV_VARS = (
    "BIAPI_ACCESS_TOKEN",
    "BIAPI_BASE_URL",
    "BIAPI_DOMAIN",
    "BIAPI_CLIENT_ID",
    "BIAPI_CLIENT_SECRET",
)

TEST_TOKEN = "test-token-0123456789abcdef"


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep tests away from the real environment, settings file and .env."""
    for var in BIAPI_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("BIAPI_CONFIG_DIR", str(tmp_path / "config"))
    monkeypatch.chdir(tmp_path)
    set_store(None)

    yield

    set_store(None)
    logger.remove()


@pytest.fixture
def store(tmp_path):
    """A settings store backed by a temporary file, installed process-wide."""
    settings = SettingsStore(tmp_path / "settings.json")
    set_store(settings)
    return settings


@pytest.fixture
def token(store):
    """Configure a valid access token."""
    store.set("accessToken", TEST_TOKEN)
    return TEST_TOKEN


class RecordingTransport:
    """httpx mock transport that records requests and replays canned responses."""

    def __init__(self, responder=None):
        self.requests = []
        self.responder = responder or (lambda request: httpx.Response(200, json={}))
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    def client(self) -> httpx.Client:
        return httpx.Client(transport=self.transport)


@pytest.fixture
def transport(monkeypatch):
    """Route every request made by biapi.api through a RecordingTransport."""
    recorder = RecordingTransport()
    monkeypatch.setattr("biapi.api._new_client", recorder.client)
    return recorder


@pytest.fixture
def dotenv_file(tmp_path, monkeypatch):
    """Write a .env file into the working directory.

    load_dotenv writes straight into os.environ, so every key is
    registered with monkeypatch first and removed again on teardown.
    """

    def write(**values):
        for key in values:
            monkeypatch.setenv(key, "")
            monkeypatch.delenv(key)
        lines = [f"{key}={value}" for key, value in values.items()]
        path = tmp_path / ".env"
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return write
