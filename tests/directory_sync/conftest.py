"""
pytest configuration and fixtures for the directory sync suite
"""

import sys
from pathlib import Path

import pytest
import pytest_asyncio

sys.path.insert(0, str(Path(__file__).parent))
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from infrastructure import BASE_URL, FakeDirectory, RecordingRenderer, UserDataFactory
from services.directory_client import DirectoryClient
from services.directory_sync import DirectorySyncController
from services.user_store import UserStore


@pytest.fixture
def factory() -> UserDataFactory:
    return UserDataFactory()


@pytest.fixture
def fake_directory(factory) -> FakeDirectory:
    """Directory holding users 1, 2 and 3"""
    return FakeDirectory(users=[factory.directory_record(i) for i in (1, 2, 3)])


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest_asyncio.fixture
async def directory_client(fake_directory):
    client = DirectoryClient(BASE_URL, client=fake_directory.client())
    yield client
    await client._client.aclose()


@pytest.fixture
def controller(directory_client, renderer) -> DirectorySyncController:
    return DirectorySyncController(directory_client, UserStore(), renderer)


@pytest_asyncio.fixture
async def loaded_controller(controller) -> DirectorySyncController:
    """Controller after a successful initial load"""
    await controller.load()
    return controller
