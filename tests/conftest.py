"""Shared test fixtures for gl-api tests."""

import sys
from pathlib import Path
from typing import Any

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from gl_api.client import GitLabClient

# Constants for use in tests - pytest makes conftest.py fixtures available,
# but these constants need to be imported directly from tests
MOCK_API_URL = "https://gitlab.example.com/api/v3"


class Boxed:
    """Stand-in for a non-primitive leaf value, like a decoded boolean object."""

    def __init__(self, value):
        self.value = value

    def __str__(self) -> str:
        return "1" if self.value else "0"


@pytest.fixture
def mock_client():
    """GitLabClient pointing at mock server."""
    return GitLabClient(MOCK_API_URL, "test-token", max_retries=3)


@pytest.fixture
def api_env(monkeypatch):
    """Point the CLI at the mock server through the environment."""
    monkeypatch.setenv("GITLAB_API_V3_URL", MOCK_API_URL)
    monkeypatch.setenv("GITLAB_API_V3_TOKEN", "env-token")


@pytest.fixture
def sample_project() -> dict[str, Any]:
    """Sample project API response."""
    return {
        "id": 42,
        "name": "my-project",
        "path_with_namespace": "myorg/my-project",
        "public": False,
        "visibility_level": 0,
        "web_url": "https://gitlab.example.com/myorg/my-project",
        "description": None,
        "tag_list": ["infra", "ci"],
        "owner": {"id": 7, "username": "jdoe"},
    }


@pytest.fixture
def result_tree() -> dict[str, Any]:
    """Nested result holding boxed leaves at several depths."""
    return {
        "id": 1,
        "active": Boxed(True),
        "blocked": Boxed(False),
        "ratio": 0.5,
        "note": None,
        "identities": [{"provider": "ldap", "primary": Boxed(True)}, ("a", Boxed(False))],
        "labels": [],
        "meta": {},
    }


class Tag(str):
    """A str subclass leaf, like a tag name wrapped by a client library."""
