"""
데이터베이스 연결 및 ORM 모델 정의
"""
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import Request
from sqlalchemy import Column, String, DateTime, Enum, JSON, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base

from app.core.config import Settings
from app.domain.device.device_type import DeviceType
import logging

logger = logging.getLogger(__name__)

Base = declarative_base()


# ==================== ORM Models ====================

class DeviceModel(Base):
    """디바이스 테이블"""
    __tablename__ = "devices"

    id = Column(Uuid, primary_key=True, comment='디바이스 ID')
    name = Column(String(255), nullable=False, comment='디바이스 이름')
    # PostgreSQL: native enum, 그 외: CHECK 제약으로 허용 값 제한
    device_type = Column(
        Enum(
            DeviceType,
            name="device_type",
            values_callable=lambda enum_cls: [member.value for member in enum_cls],
            create_constraint=True,
            validate_strings=True,
        ),
        nullable=False,
        comment='디바이스 종류'
    )
    state = Column(JSON().with_variant(JSONB(), "postgresql"), nullable=False, comment='디바이스 상태')
    created_at = Column(DateTime(timezone=True), nullable=False, index=True, comment='생성일')
    updated_at = Column(DateTime(timezone=True), nullable=False, comment='수정일')


# ==================== Database Connection ====================

class Database:
    """
    데이터베이스 연결 관리

    앱 시작 시 한 번 생성되어 app.state.database에 보관되고,
    요청마다 get_db 의존성을 통해 세션을 빌려준다.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker] = None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("Database is not connected")
        return self._engine

    def _engine_options(self) -> dict:
        settings = self.settings
        options = {"echo": settings.DB_ECHO}
        if make_url(settings.DATABASE_URL).get_backend_name() != "sqlite":
            options.update(
                pool_size=settings.DB_POOL_SIZE,
                max_overflow=settings.DB_MAX_OVERFLOW,
                pool_timeout=settings.DB_POOL_TIMEOUT,
                pool_recycle=settings.DB_POOL_RECYCLE,
                pool_pre_ping=True,
            )
        return options

    async def connect(self):
        """DB 엔진과 세션 팩토리 초기화 + 스키마 생성"""
        if self._engine is None:
            masked_url = make_url(self.settings.DATABASE_URL).render_as_string(hide_password=True)
            logger.debug(f"Connecting to database at: {masked_url}")
            self._engine = create_async_engine(self.settings.DATABASE_URL, **self._engine_options())
            logger.info(f"Database engine created (echo={self.settings.DB_ECHO})")

            async with self._engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            logger.info("Database schema ready")

        if self._session_factory is None:
            self._session_factory = async_sessionmaker(
                bind=self._engine,
                class_=AsyncSession,
                autoflush=False,
                expire_on_commit=False
            )

    async def disconnect(self):
        """DB 엔진 종료"""
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None
            logger.info("Database disconnected")

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """비동기 세션 (종료 시 커넥션 반환)"""
        if self._session_factory is None:
            await self.connect()
        db = self._session_factory()
        try:
            yield db
        finally:
            await db.close()


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """의존성 주입용 DB 세션"""
    database: Database = request.app.state.database
    async with database.session() as db:
        yield db
