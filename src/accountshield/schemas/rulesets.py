"""Rule tables for every input shape.

Schemas are built once at import time and shared read-only by every request.
Messages are shown to end users verbatim.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from accountshield.core.errors import UnknownSchemaError
from accountshield.core.rules import (
    AssignableRole,
    EmailFormat,
    EqualsField,
    Length,
    Range,
    Required,
)
from accountshield.core.validation import Schema
from accountshield.schemas.user import (
    EmailVerifyQuery,
    ForgotPasswordRequest,
    LoginUser,
    NameUpdate,
    PagedQuery,
    PasswordUpdate,
    RegisterUser,
    ResetPasswordRequest,
    RoleUpdate,
)

__all__ = [
    "PASSWORD_MIN_LENGTH",
    "PAGE_LIMIT_MAX",
    "REGISTER_USER",
    "LOGIN_USER",
    "PAGED_QUERY",
    "NAME_UPDATE",
    "ROLE_UPDATE",
    "PASSWORD_UPDATE",
    "EMAIL_VERIFY_QUERY",
    "FORGOT_PASSWORD",
    "RESET_PASSWORD",
    "SCHEMAS",
    "get_schema",
]

PASSWORD_MIN_LENGTH = 8
PAGE_LIMIT_MAX = 50


REGISTER_USER = Schema(
    name="register_user",
    model=RegisterUser,
    rules={
        "name": [Required("Name is required")],
        "email": [
            Required("Email is required"),
            EmailFormat("Email is invalid"),
        ],
        "password": [
            Length("Password should be at least 8 characters", min=PASSWORD_MIN_LENGTH),
        ],
        "password_confirm": [
            Required("Confirm password is required"),
            EqualsField("Passwords do not match", other="password"),
        ],
    },
)

LOGIN_USER = Schema(
    name="login_user",
    model=LoginUser,
    rules={
        "email": [
            Required("Email is required"),
            EmailFormat("Email is invalid"),
        ],
        "password": [
            Length("Password must be at least 8 characters", min=PASSWORD_MIN_LENGTH),
        ],
    },
)

PAGED_QUERY = Schema(
    name="paged_query",
    model=PagedQuery,
    rules={
        "page": [Range("Page must be at least 1", min=1)],
        "limit": [Range(f"Limit must be between 1 and {PAGE_LIMIT_MAX}", min=1, max=PAGE_LIMIT_MAX)],
    },
)

NAME_UPDATE = Schema(
    name="name_update",
    model=NameUpdate,
    rules={"name": [Required("Name is required")]},
)

ROLE_UPDATE = Schema(
    name="role_update",
    model=RoleUpdate,
    rules={"role": [AssignableRole("Role must be either admin or user")]},
)

PASSWORD_UPDATE = Schema(
    name="password_update",
    model=PasswordUpdate,
    rules={
        "new_password": [
            Length("Password must be at least 8 characters", min=PASSWORD_MIN_LENGTH),
        ],
        "new_password_confirm": [
            Length("Confirm password must be at least 8 characters", min=PASSWORD_MIN_LENGTH),
            EqualsField("New passwords do not match", other="new_password"),
        ],
        "old_password": [Required("Old password is required")],
    },
)

EMAIL_VERIFY_QUERY = Schema(
    name="email_verify_query",
    model=EmailVerifyQuery,
    rules={"token": [Required("Token is required")]},
)

FORGOT_PASSWORD = Schema(
    name="forgot_password",
    model=ForgotPasswordRequest,
    rules={"email": [Required("Email is required")]},
)

RESET_PASSWORD = Schema(
    name="reset_password",
    model=ResetPasswordRequest,
    rules={
        "token": [Required("Token is required")],
        "new_password": [
            Length("New password must be at least 8 characters", min=PASSWORD_MIN_LENGTH),
        ],
        "new_password_confirm": [
            Length("New password confirm must be at least 8 characters", min=PASSWORD_MIN_LENGTH),
            EqualsField("New passwords do not match", other="new_password"),
        ],
    },
)


SCHEMAS: Mapping[str, Schema] = MappingProxyType(
    {
        s.name: s
        for s in (
            REGISTER_USER,
            LOGIN_USER,
            PAGED_QUERY,
            NAME_UPDATE,
            ROLE_UPDATE,
            PASSWORD_UPDATE,
            EMAIL_VERIFY_QUERY,
            FORGOT_PASSWORD,
            RESET_PASSWORD,
        )
    }
)


def get_schema(name: str) -> Schema:
    try:
        return SCHEMAS[name]
    except KeyError:
        raise UnknownSchemaError(name) from None
