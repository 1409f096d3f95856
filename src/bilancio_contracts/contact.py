"""Contact form models."""

from pydantic import EmailStr, Field

from .common import CamelModel


class ContactRequest(CamelModel):
    firstname: str = Field(..., min_length=1)
    lastname: str = Field(..., min_length=1)
    email: EmailStr
    subject: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)


class ContactResponse(CamelModel):
    success: bool
    message: str
