from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError

from src.platform.logging.loguru_io import Logger
from src.service.parking.app.command.register_vehicle_use_case import RegisterVehicleUseCase
from src.service.parking.app.query.list_vehicles_use_case import ListVehiclesUseCase
from src.service.parking.domain.entity.vehicle_entity import VehicleEntity
from src.service.parking.driving_adapter.http_controller.schema.vehicle_schema import (
    RegisterVehicleRequest,
    VehicleResponse,
)


router = APIRouter()


def _to_response(vehicle: VehicleEntity) -> VehicleResponse:
    return VehicleResponse(
        vehicle_id=vehicle.id or 0,
        user_id=vehicle.user_id,
        reg_no=vehicle.reg_no,
        type=vehicle.type.value,
    )


@router.get('', response_model=List[VehicleResponse])
@Logger.io
async def list_vehicles(
    use_case: ListVehiclesUseCase = Depends(ListVehiclesUseCase.depends),
) -> List[VehicleResponse]:
    return [_to_response(vehicle) for vehicle in await use_case.execute()]


@router.post('', response_model=VehicleResponse)
@Logger.io
async def register_vehicle(
    request: RegisterVehicleRequest,
    use_case: RegisterVehicleUseCase = Depends(RegisterVehicleUseCase.depends),
) -> VehicleResponse:
    try:
        vehicle = await use_case.execute(
            user_id=request.user_id, reg_no=request.reg_no, type=request.type
        )
    except IntegrityError as e:
        # Unique reg_no; the owner was checked just before the insert
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f'Vehicle with registration number {request.reg_no} already exists',
        ) from e
    return _to_response(vehicle)
