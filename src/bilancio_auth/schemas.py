"""Data classes for authentication."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class UserRole(str, Enum):
    USER = "ROLE_USER"
    ADMIN = "ROLE_ADMIN"
    USER_ADMIN = "ROLE_USER_ADMIN"

    @property
    def is_admin(self) -> bool:
        return self is not UserRole.USER


@dataclass(frozen=True)
class UserInfo:
    """The logged-in user as known to the client."""

    person_id: int
    email: str
    username: str
    role: UserRole
    provider: str | None = None
    firstname: str | None = None
    lastname: str | None = None

    @property
    def is_admin(self) -> bool:
        return self.role.is_admin

    @property
    def display_name(self) -> str:
        full = " ".join(p for p in (self.firstname, self.lastname) if p)
        return full or self.username

    def to_dict(self) -> dict[str, Any]:
        return {
            "person_id": self.person_id,
            "email": self.email,
            "username": self.username,
            "role": self.role.value,
            "provider": self.provider,
            "firstname": self.firstname,
            "lastname": self.lastname,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UserInfo:
        return cls(
            person_id=int(data["person_id"]),
            email=data["email"],
            username=data["username"],
            role=UserRole(data["role"]),
            provider=data.get("provider"),
            firstname=data.get("firstname"),
            lastname=data.get("lastname"),
        )


@dataclass(frozen=True)
class TokenPayload:
    """Claims carried by a backend-issued access token."""

    person_id: int
    email: str
    username: str
    role: UserRole
    exp: int | None = None

    @property
    def expires_at(self) -> datetime | None:
        if self.exp is None:
            return None
        return datetime.fromtimestamp(self.exp, tz=timezone.utc)

    def to_user(self) -> UserInfo:
        return UserInfo(
            person_id=self.person_id,
            email=self.email,
            username=self.username,
            role=self.role,
        )
