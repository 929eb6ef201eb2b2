"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone

import pytest
from rest_framework.test import APIClient

from webinars.domain import User, UserId


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def alice() -> User:
    return User(id=UserId("alice"), email="alice@example.com")


@pytest.fixture
def bob() -> User:
    return User(id=UserId("bob"), email="bob@example.com")


@pytest.fixture
def now() -> datetime:
    return datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def clock(now):
    return lambda: now
