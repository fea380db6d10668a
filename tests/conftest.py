"""
pytest 설정 및 공통 fixtures
"""
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from app.common.database import Database
from app.core.config import Settings
from app.main import create_app


@pytest.fixture
def test_settings(tmp_path):
    """테스트마다 독립된 SQLite 파일 DB를 사용하는 Settings"""
    return Settings(
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'devices.db'}",
        LOG_LEVEL="DEBUG",
    )


@pytest_asyncio.fixture
async def database(test_settings):
    """연결된 Database (시드 없음)"""
    db = Database(test_settings)
    await db.connect()
    yield db
    await db.disconnect()


@pytest_asyncio.fixture
async def session(database):
    """단일 AsyncSession"""
    async with database.session() as db:
        yield db


@pytest.fixture
def client(test_settings):
    """lifespan(스키마 생성 + 기본 디바이스 시드)까지 실행되는 TestClient"""
    app = create_app(test_settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_device_data():
    """샘플 디바이스 생성 요청"""
    return {
        "name": "Garage Light",
        "device_type": "LightBulb"
    }
