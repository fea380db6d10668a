"""
Device 엔티티 / 응답 스키마 유닛 테스트
"""
import uuid
from datetime import datetime, timezone

import pytest

from app.domain.device.device_type import DeviceType
from app.domain.device.entity import Device, parse_device_id
from app.domain.device.schemas import DeviceCreateRequest, DeviceResponse
from app.exceptions import ValidationError


@pytest.mark.unit
class TestDeviceEntity:

    def test_create_generates_identity_and_defaults(self):
        device = Device.create(name="Porch Sensor", device_type=DeviceType.TEMPERATURE_SENSOR)

        assert isinstance(device.id, uuid.UUID)
        assert device.state == {"temperature": 22.0}
        assert device.created_at == device.updated_at
        assert device.created_at.tzinfo is not None

    def test_create_generates_unique_ids(self):
        ids = {Device.create(name="d", device_type=DeviceType.SWITCH).id for _ in range(50)}
        assert len(ids) == 50

    def test_create_with_explicit_state(self):
        device = Device.create(name="Kitchen Switch", device_type=DeviceType.SWITCH, state={"on": True})
        assert device.state == {"on": True}

    @pytest.mark.parametrize("name", ["", "   "])
    def test_create_rejects_blank_name(self, name):
        with pytest.raises(ValidationError):
            Device.create(name=name, device_type=DeviceType.LIGHT_BULB)


@pytest.mark.unit
class TestParseDeviceId:

    def test_accepts_hyphenated_and_simple_forms(self):
        value = uuid.uuid4()
        assert parse_device_id(str(value)) == value
        assert parse_device_id(value.hex) == value

    @pytest.mark.parametrize("value", ["not-a-uuid", "123", ""])
    def test_rejects_malformed_id(self, value):
        with pytest.raises(ValidationError) as exc_info:
            parse_device_id(value)
        assert exc_info.value.field == "id"


@pytest.mark.unit
class TestDeviceSchemas:

    def test_create_request_accepts_camel_case_alias(self):
        request = DeviceCreateRequest.model_validate({"name": "Lamp", "deviceType": "LightBulb"})
        assert request.device_type == "LightBulb"

    def test_create_request_accepts_snake_case(self):
        request = DeviceCreateRequest.model_validate({"name": "Lamp", "device_type": "Switch"})
        assert request.device_type == "Switch"

    def test_response_wire_format(self):
        device = Device(
            id=uuid.UUID("0b8a4a1e-3f2c-4d7a-9c1e-2a5b6c7d8e9f"),
            name="Lamp",
            device_type=DeviceType.LIGHT_BULB,
            state={"on": True},
            created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
            updated_at=datetime(2024, 1, 2, tzinfo=timezone.utc),
        )

        data = DeviceResponse.model_validate(device, from_attributes=True).model_dump()

        assert data == {
            "id": "0b8a4a1e3f2c4d7a9c1e2a5b6c7d8e9f",
            "name": "Lamp",
            "device_type": "LightBulb",
            "state": {"on": True},
            "created_at": 1704067200,
            "updated_at": 1704153600,
        }

    def test_naive_timestamps_are_treated_as_utc(self):
        device = Device(
            id=uuid.uuid4(),
            name="Lamp",
            device_type=DeviceType.LIGHT_BULB,
            created_at=datetime(2024, 1, 1),
        )

        data = DeviceResponse.model_validate(device, from_attributes=True).model_dump()

        assert data["created_at"] == 1704067200
        assert data["updated_at"] == 1704067200
