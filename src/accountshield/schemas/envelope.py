from pydantic import BaseModel
from .base import WireModel
from .user import FilterUser


class UserData(BaseModel):
    user: FilterUser


class UserResponse(WireModel):
    status: str
    data: UserData


class UserListResponse(WireModel):
    status: str
    users: list[FilterUser]
    results: int


class LoginResponse(WireModel):
    status: str
    token: str


class MessageResponse(WireModel):
    status: str
    message: str
