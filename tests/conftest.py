"""Shared fixtures for the party API tests."""

import pytest
from fastapi.testclient import TestClient

from main import create_app
from party import Move, Pokemon


@pytest.fixture
def client():
    return TestClient(create_app())


@pytest.fixture
def electric_party():
    """A party whose only move has a type with no max move."""
    return (
        Pokemon(id=25, name="ピカチュウ", moves=[Move(name="でんきショック", type="でんき")]),
    )
