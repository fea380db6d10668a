"""
Device Type 레지스트리 유닛 테스트
"""
import pytest

from app.domain.device.device_type import (
    DeviceType,
    default_state,
    from_canonical_string,
    to_canonical_string,
)
from app.exceptions import ValidationError


@pytest.mark.unit
class TestDeviceTypeRegistry:
    """표준 문자열 매핑 테스트"""

    @pytest.mark.parametrize("device_type, canonical", [
        (DeviceType.LIGHT_BULB, "LightBulb"),
        (DeviceType.SWITCH, "Switch"),
        (DeviceType.TEMPERATURE_SENSOR, "TemperatureSensor"),
        (DeviceType.HUMIDITY_SENSOR, "HumiditySensor"),
    ])
    def test_canonical_string_round_trip(self, device_type, canonical):
        assert to_canonical_string(device_type) == canonical
        assert from_canonical_string(canonical) is device_type

    @pytest.mark.parametrize("value", [
        "lightbulb", "LIGHTBULB", "Light", "LightBulb ", "", "Toaster", "LIGHT_BULB",
    ])
    def test_unknown_string_is_invalid_input(self, value):
        with pytest.raises(ValidationError) as exc_info:
            from_canonical_string(value)
        assert exc_info.value.status_code == 422
        assert exc_info.value.field == "device_type"

    def test_non_string_is_invalid_input(self):
        with pytest.raises(ValidationError):
            from_canonical_string(None)


@pytest.mark.unit
class TestDefaultState:
    """생성 기본 상태 테이블 테스트"""

    def test_default_states(self):
        assert default_state(DeviceType.LIGHT_BULB) == {"on": False}
        assert default_state(DeviceType.SWITCH) == {"on": False}
        assert default_state(DeviceType.TEMPERATURE_SENSOR) == {"temperature": 22.0}
        assert default_state(DeviceType.HUMIDITY_SENSOR) == {"humidity": 50.0}

    def test_every_type_has_a_default(self):
        for device_type in DeviceType:
            assert default_state(device_type) is not None

    def test_returns_fresh_copy(self):
        state = default_state(DeviceType.SWITCH)
        state["on"] = True
        assert default_state(DeviceType.SWITCH) == {"on": False}
