"""
Preset Catalog Testing Configuration
Pytest fixtures and test setup
"""
import uuid
from typing import Iterable, Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from preset_catalog.api.dependencies import get_session
from preset_catalog.database.connection import DatabaseManager
from preset_catalog.database.repositories import PresetRepository, SoundRepository
from preset_catalog.main import create_app

# In-memory SQLite, one fresh database per test
TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest_asyncio.fixture
async def database():
    """Initialized store with the catalog schema"""
    manager = DatabaseManager()
    await manager.initialize(TEST_DATABASE_URL)
    await manager.create_schema()
    yield manager
    await manager.close()


@pytest_asyncio.fixture
async def file_database(tmp_path):
    """File-backed store, so concurrent sessions get their own connections"""
    manager = DatabaseManager()
    await manager.initialize(f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}")
    await manager.create_schema()
    yield manager
    await manager.close()


def make_seeder(database):
    """Insert a preset and its sounds directly, bypassing the HTTP contract"""

    async def _seed(
        name: str,
        preset_type: str = "kit",
        sounds: Iterable[str] = (),
        is_factory_preset: Optional[bool] = None,
        legacy_is_factory_presets: Optional[bool] = None
    ) -> uuid.UUID:
        async with database.get_session() as session:
            preset = await PresetRepository(session).create(
                name=name,
                type=preset_type,
                is_factory_preset=is_factory_preset,
                legacy_is_factory_presets=legacy_is_factory_presets
            )
            sound_repository = SoundRepository(session)
            for sound_name in sounds:
                await sound_repository.create(
                    preset_id=preset.id,
                    name=sound_name,
                    url=f"{name}/{sound_name}.wav"
                )
            return preset.id

    return _seed


@pytest.fixture
def seed(database):
    return make_seeder(database)


@pytest.fixture
def file_seed(file_database):
    return make_seeder(file_database)


@pytest.fixture
def app(database):
    """Application wired to the test store"""
    application = create_app()

    async def override_session():
        async with database.get_session() as session:
            yield session

    application.dependency_overrides[get_session] = override_session
    return application


@pytest_asyncio.fixture
async def client(app):
    """Async HTTP client talking to the application in-process"""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: mark test as unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as integration test"
    )
