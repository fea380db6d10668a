"""
Device 도메인 엔티티 - 비즈니스 로직 캡슐화
"""
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from app.domain.device.device_type import DeviceType, default_state
from app.exceptions import ValidationError


def utc_now() -> datetime:
    """현재 시각 (UTC, timezone-aware)"""
    return datetime.now(timezone.utc)


def parse_device_id(value: str) -> uuid.UUID:
    """디바이스 ID 문자열 파싱 (하이픈 포함/미포함 UUID 모두 허용)"""
    try:
        return uuid.UUID(value)
    except (ValueError, TypeError, AttributeError):
        raise ValidationError(f"유효하지 않은 디바이스 ID입니다: {value}", field="id")


@dataclass
class Device:
    """디바이스 도메인 엔티티"""
    id: uuid.UUID
    name: str
    device_type: DeviceType
    state: Dict[str, Any] = field(default_factory=dict)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        if self.updated_at is None:
            self.updated_at = self.created_at

    # ==================== 비즈니스 로직 ====================

    def validate(self) -> None:
        """디바이스 유효성 검증"""
        if not self.name or not self.name.strip():
            raise ValidationError("디바이스 이름은 필수입니다", field="name")
        if not isinstance(self.device_type, DeviceType):
            raise ValidationError("디바이스 종류가 올바르지 않습니다", field="device_type")
        if self.state is None:
            raise ValidationError("디바이스 상태는 null일 수 없습니다", field="state")
        if self.updated_at < self.created_at:
            raise ValidationError("updated_at은 created_at보다 이전일 수 없습니다")

    # ==================== 팩토리 메서드 ====================

    @classmethod
    def create(
        cls,
        name: str,
        device_type: DeviceType,
        state: Optional[Dict[str, Any]] = None
    ) -> "Device":
        """
        새 디바이스 생성

        id와 시각은 서버에서 생성하며 created_at == updated_at.
        state를 생략하면 종류별 기본 상태를 사용한다.
        """
        now = utc_now()
        device = cls(
            id=uuid.uuid4(),
            name=name,
            device_type=device_type,
            state=default_state(device_type) if state is None else state,
            created_at=now,
            updated_at=now
        )
        device.validate()
        return device
