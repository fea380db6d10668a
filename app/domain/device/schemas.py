"""
Device 스키마 - Request/Response DTO
"""
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_serializer
from typing import Any
from datetime import datetime, timezone
from uuid import UUID

from app.domain.device.device_type import DeviceType


class DeviceCreateRequest(BaseModel):
    """디바이스 생성 요청"""
    name: str = Field(..., min_length=1, description="디바이스 이름")
    device_type: str = Field(
        ...,
        validation_alias=AliasChoices("device_type", "deviceType"),
        description="디바이스 종류 (LightBulb, Switch, TemperatureSensor, HumiditySensor)"
    )


class DeviceStateUpdateRequest(BaseModel):
    """디바이스 상태 변경 요청 (state 전체 교체)"""
    state: Any = Field(..., description="새 상태 JSON 문서")


class DeviceResponse(BaseModel):
    """디바이스 응답"""
    id: UUID
    name: str
    device_type: DeviceType
    state: Any
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_serializer("id")
    def serialize_id(self, value: UUID) -> str:
        # 하이픈 없는 32자리 hex
        return value.hex

    @field_serializer("device_type")
    def serialize_device_type(self, value: DeviceType) -> str:
        return value.value

    @field_serializer("created_at", "updated_at")
    def serialize_timestamp(self, value: datetime) -> int:
        # SQLite 등 tz 정보가 없는 backend는 UTC로 간주
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return int(value.timestamp())
