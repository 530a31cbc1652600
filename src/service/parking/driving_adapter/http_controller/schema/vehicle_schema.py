from pydantic import BaseModel


class RegisterVehicleRequest(BaseModel):
    user_id: int
    reg_no: str
    type: str  # car / bike / ev / electric, any case

    model_config = {
        'json_schema_extra': {'example': {'user_id': 1, 'reg_no': 'KA01AB1234', 'type': 'car'}}
    }


class VehicleResponse(BaseModel):
    vehicle_id: int
    user_id: int
    reg_no: str
    type: str
