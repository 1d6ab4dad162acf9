"""Shared test fixtures."""

import pytest

from tests.unit.fakes import FakeApi, FakeNoteStore


@pytest.fixture
def fake_api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def note_store() -> FakeNoteStore:
    return FakeNoteStore()
