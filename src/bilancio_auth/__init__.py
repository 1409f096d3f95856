"""Bilancio Auth - client-side token handling.

This package is independent of the ledger domain. It handles:
- Decoding backend-issued JWT access tokens (no signature check)
- Token expiry checks
- The user/role data classes carried by tokens

Architecture:
    bilancio_auth/
    ├── services/           # Token inspection
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions
"""

from bilancio_auth.exceptions import (
    AuthError,
    InvalidTokenError,
    NotAuthenticatedError,
)
from bilancio_auth.schemas import TokenPayload, UserInfo, UserRole
from bilancio_auth.services import TokenService, decode_token, is_token_expired

__all__ = [
    # Services
    "TokenService",
    "decode_token",
    "is_token_expired",
    # Schemas
    "TokenPayload",
    "UserInfo",
    "UserRole",
    # Exceptions
    "AuthError",
    "InvalidTokenError",
    "NotAuthenticatedError",
]
