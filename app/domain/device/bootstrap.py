"""
초기 디바이스 시드 - 빈 DB에만 기본 디바이스 4개를 등록
"""
from sqlalchemy.exc import SQLAlchemyError
import logging

from app.common.database import Database
from app.domain.device.device_type import DeviceType
from app.domain.device.entity import Device
from app.domain.device.repository import DeviceRepository
from app.exceptions import DatabaseError

logger = logging.getLogger(__name__)

# (이름, 종류, 초기 상태) - 생성 기본값과 달리 샘플 값을 사용
DEFAULT_DEVICES = [
    ("Living Room Light", DeviceType.LIGHT_BULB, {"on": False}),
    ("Kitchen Switch", DeviceType.SWITCH, {"on": True}),
    ("Bedroom Temperature", DeviceType.TEMPERATURE_SENSOR, {"temperature": 22.5}),
    ("Office Humidity", DeviceType.HUMIDITY_SENSOR, {"humidity": 45.2}),
]


async def ensure_default_devices(database: Database) -> int:
    """
    기본 디바이스 초기화 (앱 시작 시 1회)

    디바이스가 하나도 없을 때만 DEFAULT_DEVICES를 단일 트랜잭션으로 등록한다.
    실패 시 DatabaseError를 던져 앱 기동을 중단시킨다.

    Returns:
        등록한 디바이스 수 (이미 데이터가 있으면 0)
    """
    async with database.session() as db:
        repo = DeviceRepository(db)
        try:
            count = await repo.count()
            logger.debug(f"Found {count} existing devices in database")

            if count != 0:
                logger.debug(f"Skipping default device initialization - {count} devices already exist")
                return 0

            logger.info("No devices found, initializing default devices")
            devices = [
                Device.create(name=name, device_type=device_type, state=dict(state))
                for name, device_type, state in DEFAULT_DEVICES
            ]
            for device in devices:
                logger.debug(f"Creating default device: {device.name} ({device.device_type}) with id: {device.id}")

            inserted = await repo.save_all(devices)
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error(f"기본 디바이스 초기화 실패: {e}")
            raise DatabaseError("기본 디바이스를 초기화할 수 없습니다", operation="ensure_default_devices", original_error=e)

    logger.info(f"Successfully initialized {inserted} default devices")
    return inserted
