"""Shared fixtures for the harvest pipeline tests."""

import pytest

from helpers import FakeClient


@pytest.fixture
def fake_client():
    return FakeClient()
