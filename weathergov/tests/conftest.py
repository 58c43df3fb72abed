"""Shared test fixtures."""

import json
from pathlib import Path

import pytest

from weathergov.client import NwsClient
from weathergov.config.schema import ClientConfig
from weathergov.core.executor import RequestExecutor

TEST_BASE_URL = "https://api.test.example.com"


@pytest.fixture
def config() -> ClientConfig:
    """Client config pointed at a fake host that respx intercepts."""
    return ClientConfig(
        base_url=TEST_BASE_URL,
        user_agent="weathergov-tests/1.0 (tests@example.com)",
        timeout=5.0,
    )


@pytest.fixture
def executor(config: ClientConfig) -> RequestExecutor:
    return RequestExecutor(config)


@pytest.fixture
def client(config: ClientConfig) -> NwsClient:
    return NwsClient(config)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def load_fixture(fixtures_dir: Path):
    """Return a loader that reads a JSON fixture by file name."""

    def _load(name: str) -> dict:
        with open(fixtures_dir / name) as f:
            return json.load(f)

    return _load


@pytest.fixture
def read_fixture(fixtures_dir: Path):
    """Return a reader that gives a fixture's raw bytes, as the API sends them."""

    def _read(name: str) -> bytes:
        return (fixtures_dir / name).read_bytes()

    return _read
