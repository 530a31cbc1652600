from pydantic import BaseModel


class CreateUserRequest(BaseModel):
    name: str
    role: str

    model_config = {
        'json_schema_extra': {'example': {'name': 'Asha Rao', 'role': 'student'}}
    }


class UserResponse(BaseModel):
    user_id: int
    name: str
    role: str
