"""
tests/conftest.py — Shared fixtures.

Tests pass the profile explicitly and use throwaway session ids, so nothing
depends on the working directory or leaks state between tests.
"""
import uuid
from pathlib import Path

import pytest

from app.conversation.session import ChatSession, drop_session
from app.profile.loader import load_profile

PROFILE_PATH = Path(__file__).resolve().parent.parent / "data" / "profile.json"


@pytest.fixture(scope="session")
def profile():
    return load_profile(PROFILE_PATH)


@pytest.fixture
def session():
    return ChatSession.create(f"test-{uuid.uuid4().hex}")


@pytest.fixture
def session_id():
    sid = f"test-{uuid.uuid4().hex}"
    yield sid
    drop_session(sid)
