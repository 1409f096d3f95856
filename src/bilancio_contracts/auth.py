"""Authentication and user models."""

from pydantic import BaseModel, EmailStr, Field, model_validator

from .common import CamelModel


class LoginRequest(CamelModel):
    username_or_email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class GoogleLoginRequest(CamelModel):
    credential: str = Field(..., min_length=1)


class LoginResponse(CamelModel):
    token: str = Field(..., min_length=1)


class RegistrationRequest(CamelModel):
    username: str = Field(..., min_length=3)
    password: str = Field(..., min_length=6)
    firstname: str = Field(..., min_length=1)
    lastname: str = Field(..., min_length=1)
    email: EmailStr


class UserInfoResponse(BaseModel):
    """User info; the backend uses snake_case keys here."""

    person_id: int
    email: str
    username: str
    role: str
    provider: str | None = None
    firstname: str | None = None
    lastname: str | None = None
    enabled: bool | None = None


class RegistrationForm(RegistrationRequest):
    """Registration input with password confirmation (never sent as is)."""

    confirm_password: str

    @model_validator(mode="after")
    def check_passwords_match(self) -> "RegistrationForm":
        if self.password != self.confirm_password:
            msg = "Passwords do not match"
            raise ValueError(msg)
        return self

    def to_request(self) -> RegistrationRequest:
        return RegistrationRequest.model_validate(
            self.model_dump(exclude={"confirm_password"}),
        )
