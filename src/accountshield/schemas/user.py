from datetime import datetime
from typing import Optional
from .base import InputModel, ORMBase
from accountshield.models.user import UserRole

# Input DTOs carry types only; content rules live in schemas.rulesets.

class RegisterUser(InputModel):
    name: str
    email: str
    password: str
    password_confirm: str


class LoginUser(InputModel):
    email: str
    password: str


class PagedQuery(InputModel):
    page: Optional[int] = None
    limit: Optional[int] = None


class NameUpdate(InputModel):
    name: str


class RoleUpdate(InputModel):
    role: UserRole


class PasswordUpdate(InputModel):
    new_password: str
    new_password_confirm: str
    old_password: str


class EmailVerifyQuery(InputModel):
    token: str


class ForgotPasswordRequest(InputModel):
    email: str


class ResetPasswordRequest(InputModel):
    token: str
    new_password: str
    new_password_confirm: str


class FilterUser(ORMBase):
    """Public view of a user. There is deliberately no password field."""
    id: str
    name: str
    email: str
    role: str
    verified: bool
    created_at: datetime
    updated_at: datetime
