"""
Test configuration and fixtures for the JustMyLuck API.

The app binds its engine at import time, so DB_PATH is pointed at a throwaway
SQLite file before anything from `justmyluck` is imported.
"""

import os
import tempfile
from typing import Generator, List, Tuple

import pytest
from fastapi.testclient import TestClient

test_db_path = os.path.join(tempfile.mkdtemp(), "subscribers.db")
os.environ["DB_PATH"] = test_db_path

# Mail and origin checks stay off unless a test turns them on
for var in ("SMTP_HOST", "NOTIFY_TO", "NOTIFY_FROM", "FRONTEND_ORIGINS"):
    os.environ.pop(var, None)


class RecordingNotifier:
    """Stands in for SignupNotifier and remembers what it was asked to send."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.sent: List[Tuple[str, str]] = []

    def notify(self, email: str, source: str) -> None:
        if self.fail:
            raise RuntimeError("smtp is down")
        self.sent.append((email, source))


class RecordingSideTasks:
    """Stands in for BestEffortTasks; collects scheduled calls without running them."""

    def __init__(self):
        self.scheduled = []

    def add(self, func, *args, **kwargs):
        self.scheduled.append((func, args, kwargs))


@pytest.fixture(scope="session")
def test_app():
    """Create FastAPI test application."""
    from justmyluck.main import app

    return app


@pytest.fixture(scope="function")
def client(test_app) -> Generator[TestClient, None, None]:
    """
    Create a test client for making HTTP requests.
    Entering the client runs the app lifespan, which creates the table.
    """
    with TestClient(test_app) as test_client:
        yield test_client
    test_app.dependency_overrides.clear()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def side_tasks():
    return RecordingSideTasks()


@pytest.fixture
def failing_notifier():
    return RecordingNotifier(fail=True)
