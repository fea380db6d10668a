"""
Device Service - 입력 검증 + 트랜잭션 관리
"""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
from typing import List
import logging

from app.domain.device.repository import DeviceRepository
from app.domain.device.schemas import DeviceCreateRequest, DeviceStateUpdateRequest
from app.domain.device.entity import Device, parse_device_id, utc_now
from app.domain.device.device_type import from_canonical_string
from app.exceptions import NotFoundError, DatabaseError

logger = logging.getLogger(__name__)

# DB 장애 + 저장된 행 변환 실패 (JSON 파싱, 알 수 없는 enum 값 등)
STORAGE_ERRORS = (SQLAlchemyError, ValueError, LookupError)


class DeviceService:
    """디바이스 서비스"""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.repo = DeviceRepository(db)

    async def get_all_devices(self) -> List[dict]:
        """디바이스 목록 조회"""
        try:
            devices = await self.repo.find_all()
        except STORAGE_ERRORS as e:
            logger.error(f"디바이스 목록 조회 실패: {e}")
            raise DatabaseError("디바이스 목록을 조회할 수 없습니다", operation="find_all", original_error=e)

        logger.info(f"Successfully retrieved {len(devices)} devices")
        logger.debug(f"Device types: {[device['device_type'] for device in devices]}")
        return devices

    async def get_device(self, device_id: str) -> dict:
        """디바이스 조회"""
        parsed_id = parse_device_id(device_id)
        try:
            device = await self.repo.find_by_id(parsed_id)
        except STORAGE_ERRORS as e:
            logger.error(f"디바이스 조회 실패 ({parsed_id}): {e}")
            raise DatabaseError("디바이스를 조회할 수 없습니다", operation="find_by_id", original_error=e)

        if not device:
            logger.warning(f"Device with id {parsed_id} not found")
            raise NotFoundError("디바이스", device_id)

        logger.info(f"Successfully retrieved device: {device['name']} ({device['device_type']})")
        return device

    async def create_device(self, request: DeviceCreateRequest) -> dict:
        """디바이스 생성"""
        device_type = from_canonical_string(request.device_type)

        # 도메인 엔티티 생성 (id, 시각, 기본 상태)
        device = Device.create(name=request.name, device_type=device_type)
        logger.debug(f"Generated device id: {device.id}, default state: {device.state}")

        try:
            saved = await self.repo.save(device)
            await self.db.commit()
        except STORAGE_ERRORS as e:
            await self.db.rollback()
            logger.error(f"디바이스 생성 실패 '{request.name}': {e}")
            raise DatabaseError("디바이스를 생성할 수 없습니다", operation="save", original_error=e)

        logger.info(f"Successfully created device: {saved['name']} ({saved['device_type']}) with id: {saved['id']}")
        return saved

    async def update_device_state(self, device_id: str, request: DeviceStateUpdateRequest) -> dict:
        """디바이스 상태 교체 + updated_at 갱신"""
        parsed_id = parse_device_id(device_id)
        try:
            device = await self.repo.update_state(parsed_id, request.state, utc_now())
            if not device:
                await self.db.rollback()
            else:
                await self.db.commit()
        except STORAGE_ERRORS as e:
            await self.db.rollback()
            logger.error(f"디바이스 상태 변경 실패 ({parsed_id}): {e}")
            raise DatabaseError("디바이스 상태를 변경할 수 없습니다", operation="update_state", original_error=e)

        if not device:
            logger.warning(f"Device with id {parsed_id} not found for state update")
            raise NotFoundError("디바이스", device_id)

        logger.info(f"Successfully updated device state: {device['name']} ({device['device_type']}) -> {device['state']}")
        return device
