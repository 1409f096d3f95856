"""Admin endpoint models."""

from pydantic import BaseModel, Field

from .common import CamelModel


class AdminUser(BaseModel):
    id: int
    username: str
    email: str
    firstname: str | None = None
    lastname: str | None = None
    enabled: bool = True
    registration_date: str | None = None
    roles: list[str] = Field(default_factory=list)


class GetUsersResponse(CamelModel):
    users: list[AdminUser]
    total_count: int = Field(..., ge=0)
    page_index: int = Field(..., ge=0)
    page_size: int = Field(..., ge=1)
    total_pages: int = Field(..., ge=0)
