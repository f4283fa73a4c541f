import pytest

from dek_registry import MockDekRegistryClient


@pytest.fixture
def client() -> MockDekRegistryClient:
    return MockDekRegistryClient()
