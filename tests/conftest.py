"""Shared pytest fixtures for the test suite.

Import any of these in a test file by simply declaring the fixture name as a
parameter - pytest discovers them automatically from this conftest.py.

Fixture overview
----------------
backend      - fresh in-process backend (tables, users, change feed)
storage      - JSON local storage inside the test's tmp_path
gate         - auth gate over ``backend`` and ``storage``
owner_id     - id of a registered, signed-in user "alice"
workspace    - workspace sharing ``backend`` / ``storage``, nobody signed in
now          - fixed reference instant, 2024-01-11 00:00 UTC
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest

from dayboard.backend.core.auth import AuthGate
from dayboard.backend.core.remote.memory import InMemoryBackend
from dayboard.backend.core.utils.config import get_default_config
from dayboard.backend.core.utils.storage import LocalStorage
from dayboard.backend.services import Workspace

USERNAME = "alice"
PASSWORD = "secret1"

# ── Infrastructure ───────────────────────────────────────────────────────────


@pytest.fixture
def backend() -> InMemoryBackend:
    return InMemoryBackend()


@pytest.fixture
def storage(tmp_path: Path) -> LocalStorage:
    return LocalStorage(tmp_path / "storage.json")


@pytest.fixture
def config(tmp_path: Path) -> dict:
    cfg = get_default_config()
    cfg["storage"]["path"] = str(tmp_path / "storage.json")
    return cfg


# ── Auth ──────────────────────────────────────────────────────────────────────


@pytest.fixture
def gate(backend: InMemoryBackend, storage: LocalStorage) -> AuthGate:
    return AuthGate(backend, storage)


@pytest.fixture
def owner_id(gate: AuthGate) -> str:
    """Register and sign in "alice"; returns the user id."""
    gate.sign_up(USERNAME, PASSWORD, PASSWORD)
    return gate.sign_in(USERNAME, PASSWORD).id


@pytest.fixture
def workspace(config: dict, backend: InMemoryBackend, storage: LocalStorage) -> Workspace:
    ws = Workspace(config, backend=backend, storage=storage)
    yield ws
    ws.close()


# ── Time ──────────────────────────────────────────────────────────────────────


@pytest.fixture
def now() -> datetime:
    return datetime(2024, 1, 11, tzinfo=timezone.utc)
