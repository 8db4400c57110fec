"""Service test fixtures — recording fake drivers for façade-only tests.

Invariants:
    - Fakes record every call so tests can assert the store was never reached
    - list results are configurable per test
"""

import pytest

from organizer.core.validation import RegexUidValidator


class RecordingDriver:
    """Structural stand-in for AreaDriver / FolderDriver."""

    def __init__(self):
        self.calls: list[tuple[str, object]] = []
        self.rows: list = []

    def __getattr__(self, name):
        if name.split("_", 1)[0] not in ("create", "list", "update", "delete"):
            raise AttributeError(name)

        async def record(arg):
            self.calls.append((name, arg))
            if name.startswith("create"):
                return arg
            if name.startswith("list"):
                return list(self.rows)
            return None
        return record


@pytest.fixture
def fake_driver():
    return RecordingDriver()


@pytest.fixture
def uid_validator():
    return RegexUidValidator()
