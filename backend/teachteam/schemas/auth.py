"""Auth Schemas — signup and signin bodies.

Invariants:
    - Email stored lowercased and stripped; lookups use the same normalization
    - Password rules checked here, before hashing (never logged)
"""

from pydantic import BaseModel, field_validator

from teachteam.core.domain_types import UserRole
from teachteam.core.validation import check_email, check_name, check_password


class SignupRequest(BaseModel):
    name: str
    email: str
    password: str
    role: UserRole = UserRole.CANDIDATE

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        error = check_name(v)
        if error:
            raise ValueError(error)
        return v.strip()

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        error = check_email(v)
        if error:
            raise ValueError(error)
        return v.strip().lower()

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        error = check_password(v)
        if error:
            raise ValueError(error)
        return v


class SigninRequest(BaseModel):
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        v = v.strip().lower()
        if not v:
            raise ValueError("Email is required")
        return v

    @field_validator("password")
    @classmethod
    def require_password(cls, v: str) -> str:
        if not v:
            raise ValueError("Password is required")
        return v
