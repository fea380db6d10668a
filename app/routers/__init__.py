"""
API 라우터 모듈
각 도메인에서 라우터를 가져옴
"""
from app.domain.device.router import router as device_router
from app.routers.health_router import router as health_router

__all__ = [
    "device_router",
    "health_router",
]
