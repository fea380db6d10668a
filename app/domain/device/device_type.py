"""
Device Type 레지스트리 - 디바이스 종류와 표준 문자열 매핑

표준 문자열은 API 페이로드와 DB 저장값에 동일하게 사용된다.
종류를 추가하려면 DeviceType, _DEFAULT_STATES, DB의 device_type 제약을 함께 수정해야 한다.
"""
import copy
from enum import Enum
from typing import Any, Dict

from app.exceptions import ValidationError


class DeviceType(str, Enum):
    """디바이스 종류 (고정 집합)"""
    LIGHT_BULB = "LightBulb"
    SWITCH = "Switch"
    TEMPERATURE_SENSOR = "TemperatureSensor"
    HUMIDITY_SENSOR = "HumiditySensor"

    def __str__(self) -> str:
        return self.value


# 생성 시 기본 상태 (초기 디바이스 시드값과는 의도적으로 다름)
_DEFAULT_STATES: Dict[DeviceType, Dict[str, Any]] = {
    DeviceType.LIGHT_BULB: {"on": False},
    DeviceType.SWITCH: {"on": False},
    DeviceType.TEMPERATURE_SENSOR: {"temperature": 22.0},
    DeviceType.HUMIDITY_SENSOR: {"humidity": 50.0},
}

_missing = set(DeviceType) - set(_DEFAULT_STATES)
if _missing:
    raise RuntimeError(f"기본 상태가 정의되지 않은 디바이스 종류: {sorted(t.value for t in _missing)}")


def to_canonical_string(device_type: DeviceType) -> str:
    """DeviceType → 표준 문자열"""
    return device_type.value


def from_canonical_string(value: str) -> DeviceType:
    """
    표준 문자열 → DeviceType

    대소문자를 구분하는 완전 일치만 허용하며, 그 외에는 ValidationError
    """
    if isinstance(value, str):
        for device_type in DeviceType:
            if device_type.value == value:
                return device_type
    allowed = ", ".join(t.value for t in DeviceType)
    raise ValidationError(
        f"지원하지 않는 디바이스 종류입니다: {value!r} (허용: {allowed})",
        field="device_type"
    )


def default_state(device_type: DeviceType) -> Dict[str, Any]:
    """디바이스 종류별 생성 기본 상태 (호출마다 새 dict 반환)"""
    return copy.deepcopy(_DEFAULT_STATES[device_type])
