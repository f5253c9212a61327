"""
테스트 공용 fixture
"""
import pytest

from fakes import FakeBackend


@pytest.fixture
def fake_backend():
    return FakeBackend()
