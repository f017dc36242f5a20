"""
Request and response schemas for signup / login.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar, Dict

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic_core import PydanticCustomError

from api.validation import RequestSchema

# bcrypt only looks at the first 72 bytes and bcrypt>=5 rejects longer input
MAX_PASSWORD_BYTES = 72


def _require_text(value: Any, strip: bool = True) -> Any:
    """Trim strings and reject blank ones as ``string_empty``."""
    if not isinstance(value, str):
        return value
    text = value.strip() if strip else value
    if not text:
        raise PydanticCustomError("string_empty", "Value is required")
    return text


def _normalize_email(value: Any) -> Any:
    value = _require_text(value)
    return value.lower() if isinstance(value, str) else value


def _check_password_bytes(value: str) -> str:
    if len(value.encode()) > MAX_PASSWORD_BYTES:
        raise ValueError(f"password longer than {MAX_PASSWORD_BYTES} bytes")
    return value


_EMAIL_MESSAGES = {
    "email.value_error": "Please provide a valid email address",
    "email.missing": "Email is required",
    "email.string_empty": "Email is required",
    "email.string_type": "Email must be a string",
}


class SignupRequest(RequestSchema):
    email: EmailStr
    password: str = Field(..., min_length=5)
    name: str = Field(..., min_length=2, max_length=100, pattern=r"^\S+$")

    messages: ClassVar[Dict[str, str]] = {
        **_EMAIL_MESSAGES,
        "password.missing": "Password is required",
        "password.string_empty": "Password is required",
        "password.string_too_short": "Password must be at least 5 characters long",
        "password.value_error": f"Password cannot exceed {MAX_PASSWORD_BYTES} bytes",
        "name.missing": "Name is required",
        "name.string_empty": "Name is required",
        "name.string_too_short": "Name must be at least 2 characters long",
        "name.string_too_long": "Name cannot exceed 100 characters",
        "name.string_pattern_mismatch": "Name cannot contain spaces",
    }

    @field_validator("email", mode="before")
    @classmethod
    def _email(cls, value: Any) -> Any:
        return _normalize_email(value)

    @field_validator("password", mode="before")
    @classmethod
    def _password_present(cls, value: Any) -> Any:
        return _require_text(value, strip=False)

    @field_validator("password")
    @classmethod
    def _password_fits_bcrypt(cls, value: str) -> str:
        return _check_password_bytes(value)

    @field_validator("name", mode="before")
    @classmethod
    def _trim_name(cls, value: Any) -> Any:
        return _require_text(value)


class LoginRequest(RequestSchema):
    email: EmailStr
    password: str = Field(..., min_length=1)

    messages: ClassVar[Dict[str, str]] = {
        **_EMAIL_MESSAGES,
        "password.missing": "Password is required",
        "password.string_too_short": "Password is required",
    }

    @field_validator("email", mode="before")
    @classmethod
    def _email(cls, value: Any) -> Any:
        return _normalize_email(value)


class PublicUser(BaseModel):
    """What a user record looks like outside the service layer."""

    model_config = ConfigDict(from_attributes=True)

    user_id: int
    name: str
    email: str
    created_at: datetime
    updated_at: datetime


class AuthenticatedUser(BaseModel):
    """Identity carried by a verified access token."""

    user_id: int
    email: str
    name: str
