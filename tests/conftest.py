"""
Shared fixtures for the automarker tests.
Answers are plain strings; the HTTP client talks to the app in-process.
"""
import pytest
from fastapi.testclient import TestClient

from automarker import config
from automarker.main import app

TEST_CODE = "TEST-CODE-01"

# 25 words, no rubric needles anywhere (not even as substrings)
FILLER = (
    "The weather was lovely today and we all went down to the beach "
    "to play games and eat sandwiches while the sun was shining brightly."
)

STRONG_ANSWER = (
    "Role: You are a coach. Task: rank these five requests by urgency, importance, "
    "risk and dependencies, then give a prioritised order, a time-blocked plan, a "
    "decision rule, three reusable prompts, and one reflective question. Context: "
    "Monday morning, line manager needs slides at 2pm, finance spreadsheet for an "
    "external partner, client email about a delay, new starter blocked, weekly report "
    "due 5pm. Format: one page, max 400 words, bullet points, professional tone."
)


@pytest.fixture
def filler():
    return FILLER


@pytest.fixture
def strong_answer():
    return STRONG_ANSWER


@pytest.fixture
def client(monkeypatch):
    """Locked client; https so the Secure session cookie is kept."""
    monkeypatch.setattr(config, "ACCESS_CODE", TEST_CODE)
    monkeypatch.setattr(config, "SECRET_KEY", "test-secret")
    with TestClient(app, base_url="https://testserver") as c:
        yield c


@pytest.fixture
def unlocked_client(client):
    resp = client.post("/api/unlock", json={"code": TEST_CODE})
    assert resp.status_code == 200
    return client
