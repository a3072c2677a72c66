"""Authentication related schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationInfo, field_validator


class RegisterRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=8)
    password_confirmation: str | None = None

    @field_validator("password_confirmation")
    @classmethod
    def _passwords_match(cls, value: str | None, info: ValidationInfo) -> str | None:
        if value is not None and value != info.data.get("password"):
            raise ValueError("The password field confirmation does not match.")
        return value


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class UserRead(BaseModel):
    id: int
    name: str
    email: EmailStr
    is_active: bool
    created_at: datetime | None
    updated_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class TokenResponse(BaseModel):
    message: str
    user: UserRead
    access_token: str
    token_type: str = "bearer"
