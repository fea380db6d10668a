"""
Device Repository - 데이터 접근 계층
"""
from datetime import datetime
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, func
from typing import Any, Optional, List
from uuid import UUID

from app.common.database import DeviceModel
from app.domain.device.entity import Device
from app.domain.device.schemas import DeviceResponse
import logging

logger = logging.getLogger(__name__)


class DeviceRepository:
    """디바이스 Repository"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def count(self) -> int:
        """전체 디바이스 수"""
        query = select(func.count()).select_from(DeviceModel)
        result = await self.db.execute(query)
        return result.scalar_one()

    async def find_by_id(self, device_id: UUID) -> Optional[dict]:
        """디바이스 조회"""
        query = select(DeviceModel).filter(DeviceModel.id == device_id)
        result = await self.db.execute(query)
        db_device = result.scalars().first()
        if not db_device:
            return None
        return DeviceResponse.model_validate(db_device).model_dump()

    async def find_all(self) -> List[dict]:
        """
        디바이스 목록 조회 (최신 생성순)

        변환할 수 없는 행이 하나라도 있으면 전체 조회가 실패한다.
        """
        query = select(DeviceModel).order_by(DeviceModel.created_at.desc())
        result = await self.db.execute(query)
        db_devices = result.scalars().all()
        return [DeviceResponse.model_validate(device).model_dump() for device in db_devices]

    async def save(self, device: Device) -> dict:
        """디바이스 저장 (flush 후 DB에서 다시 읽은 값 반환)"""
        db_device = DeviceModel(
            id=device.id,
            name=device.name,
            device_type=device.device_type,
            state=device.state,
            created_at=device.created_at,
            updated_at=device.updated_at
        )
        self.db.add(db_device)
        await self.db.flush()
        await self.db.refresh(db_device)
        return DeviceResponse.model_validate(db_device).model_dump()

    async def save_all(self, devices: List[Device]) -> int:
        """여러 디바이스 저장 (flush만 수행)"""
        self.db.add_all([
            DeviceModel(
                id=device.id,
                name=device.name,
                device_type=device.device_type,
                state=device.state,
                created_at=device.created_at,
                updated_at=device.updated_at
            )
            for device in devices
        ])
        await self.db.flush()
        return len(devices)

    async def update_state(self, device_id: UUID, state: Any, updated_at: datetime) -> Optional[dict]:
        """
        상태 교체 + updated_at 갱신 (단일 UPDATE ... RETURNING)

        대상이 없으면 None (insert 하지 않음)
        """
        query = (
            update(DeviceModel)
            .filter(DeviceModel.id == device_id)
            .values(state=state, updated_at=updated_at)
            .returning(DeviceModel)
        )
        result = await self.db.execute(query)
        db_device = result.scalars().first()
        if not db_device:
            return None
        return DeviceResponse.model_validate(db_device).model_dump()
