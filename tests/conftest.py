"""Pytest configuration and fixtures."""

from datetime import datetime, timezone

import pytest

from repo_spy.models import RawRepository

# Fixed "current time" for scoring tests
NOW = datetime(2025, 6, 15, 12, 0, tzinfo=timezone.utc)


def make_payload(**overrides) -> dict:
    """A GitHub ``/repos/{owner}/{repo}`` payload with optional overrides."""
    payload = {
        "id": 1,
        "name": "test-repo",
        "full_name": "test-owner/test-repo",
        "description": "A test repository",
        "stargazers_count": 100,
        "forks_count": 50,
        "open_issues_count": 10,
        "language": "Python",
        "html_url": "https://github.com/test-owner/test-repo",
        "created_at": "2023-01-01T00:00:00Z",
        "updated_at": "2025-06-01T00:00:00Z",
        "size": 1024,
        "default_branch": "main",
        "owner": {
            "login": "test-owner",
            "id": 1,
            "avatar_url": "https://github.com/test-owner.png",
            "html_url": "https://github.com/test-owner",
        },
        "topics": ["cli"],
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def raw_payload():
    return make_payload()


@pytest.fixture
def raw_repository(raw_payload):
    return RawRepository.model_validate(raw_payload)
