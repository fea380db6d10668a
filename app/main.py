"""
FastAPI 애플리케이션 진입점
"""
import logging
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from app.common.database import Database
from app.core.config import Settings, get_settings
from app.domain.device.bootstrap import ensure_default_devices
from app.exceptions.handlers import register_exception_handlers

# 라우터 임포트
from app.routers import (
    device_router,
    health_router,
)

logging.basicConfig(level=get_settings().LOG_LEVEL.upper())
logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """애플리케이션 생성 (테스트에서는 settings를 직접 주입)"""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """애플리케이션 라이프사이클 관리"""
        logger.info(f"Starting {settings.APP_NAME}...")

        # 시작 시 리소스 초기화 (시드 실패 시 기동 중단)
        database = Database(settings)
        await database.connect()
        try:
            await ensure_default_devices(database)
        except Exception:
            await database.disconnect()
            raise
        app.state.database = database

        logger.info(f"{settings.APP_NAME} started successfully")

        try:
            yield
        finally:
            # 종료 시 리소스 정리
            logger.info(f"Shutting down {settings.APP_NAME}...")
            await database.disconnect()
            logger.info(f"{settings.APP_NAME} shutdown complete")

    app = FastAPI(
        title=settings.APP_NAME,
        description="시뮬레이션 IoT 디바이스 관리 API",
        version=settings.APP_VERSION,
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.debug(f"Request: {request.method} {request.url.path}")
        response = await call_next(request)
        logger.debug(f"Response: {request.method} {request.url.path} -> {response.status_code}")
        return response

    # 전역 예외 핸들러
    register_exception_handlers(app)

    # 라우터 등록
    app.include_router(health_router)
    app.include_router(device_router)

    return app


app = create_app()


def run():
    """uvicorn 서버 실행 (HOST/PORT 환경 변수)"""
    import uvicorn

    settings = get_settings()
    logger.debug(f"Server configuration: port={settings.PORT}, max_connections={settings.DB_POOL_SIZE}")
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
