"""
공통 모듈
- database: DB 연결 및 모델
"""
from app.common.database import get_db, Database, Base, DeviceModel

__all__ = [
    "get_db",
    "Database",
    "Base",
    "DeviceModel",
]
