"""
Device Router - 디바이스 관리 API
"""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Annotated, List

from app.common.database import get_db
from app.core.response import ApiResponse, success_response
from app.domain.device.service import DeviceService
from app.domain.device.schemas import DeviceCreateRequest, DeviceStateUpdateRequest, DeviceResponse

router = APIRouter(prefix="/devices", tags=["Devices"])


def get_device_service(db: AsyncSession = Depends(get_db)) -> DeviceService:
    """DeviceService 의존성 주입"""
    return DeviceService(db)


@router.get("", summary="디바이스 목록 조회", response_model=ApiResponse[List[DeviceResponse]])
async def get_devices(
    service: Annotated[DeviceService, Depends(get_device_service)]
):
    """디바이스 목록 조회 (최신 생성순)"""
    result = await service.get_all_devices()
    return success_response(result)


@router.post("", summary="디바이스 등록", response_model=ApiResponse[DeviceResponse])
async def create_device(
    request: DeviceCreateRequest,
    service: Annotated[DeviceService, Depends(get_device_service)]
):
    """디바이스 등록 (id, 생성 시각, 기본 상태는 서버에서 결정)"""
    result = await service.create_device(request)
    return success_response(result)


@router.get("/{device_id}", summary="디바이스 상세 조회", response_model=ApiResponse[DeviceResponse])
async def get_device(
    device_id: str,
    service: Annotated[DeviceService, Depends(get_device_service)]
):
    """디바이스 상세 조회"""
    result = await service.get_device(device_id)
    return success_response(result)


@router.put("/{device_id}/state", summary="디바이스 상태 변경", response_model=ApiResponse[DeviceResponse])
async def update_device_state(
    device_id: str,
    request: DeviceStateUpdateRequest,
    service: Annotated[DeviceService, Depends(get_device_service)]
):
    """디바이스 상태 변경 (state 전체 교체)"""
    result = await service.update_device_state(device_id, request)
    return success_response(result)
