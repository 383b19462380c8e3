"""Response envelope constructors.

Plain constructors around the envelope schemas: callers pass data that has
already been validated and projected, nothing is checked here. Use
``model_dump(by_alias=True, mode="json")`` to obtain the wire document.
"""
from __future__ import annotations

from typing import Sequence

from accountshield.schemas.envelope import (
    LoginResponse,
    MessageResponse,
    UserData,
    UserListResponse,
    UserResponse,
)
from accountshield.schemas.user import FilterUser

__all__ = [
    "SUCCESS",
    "ERROR",
    "FAIL",
    "user_response",
    "user_list_response",
    "message_response",
    "login_response",
]

SUCCESS = "success"
ERROR = "error"
FAIL = "fail"


def user_response(user: FilterUser, status: str = SUCCESS) -> UserResponse:
    return UserResponse(status=status, data=UserData(user=user))


def user_list_response(
    users: Sequence[FilterUser],
    status: str = SUCCESS,
    results: int | None = None,
) -> UserListResponse:
    # results may be a total count larger than the page handed in
    return UserListResponse(
        status=status,
        users=list(users),
        results=len(users) if results is None else results,
    )


def message_response(message: str, status: str = SUCCESS) -> MessageResponse:
    return MessageResponse(status=status, message=message)


def login_response(token: str, status: str = SUCCESS) -> LoginResponse:
    return LoginResponse(status=status, token=token)
