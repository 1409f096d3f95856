"""Inspection of backend-issued JWT tokens.

The client never holds the signing secret. Tokens are decoded without
signature verification to read the user claims and the expiry; the
backend verifies every request it receives.
"""

from __future__ import annotations

from datetime import datetime, timezone

import jwt

from bilancio_auth.exceptions import InvalidTokenError
from bilancio_auth.schemas import TokenPayload, UserRole

REQUIRED_CLAIMS = ("person_id", "email", "username", "role")


class TokenService:
    """Read claims from access tokens.

    Examples
    --------
    >>> service = TokenService()
    >>> payload = service.decode(token)
    >>> print(payload.username)
    """

    def decode(self, token: str) -> TokenPayload:
        """Decode the payload without verifying the signature.

        Raises
        ------
        InvalidTokenError
            If the token is not a JWT or misses one of the user claims.
        """
        try:
            claims = _read_claims(token)
        except jwt.PyJWTError as e:
            msg = f"Cannot decode token: {e}"
            raise InvalidTokenError(msg) from e

        missing = [claim for claim in REQUIRED_CLAIMS if claim not in claims]
        if missing:
            msg = f"Token is missing claims: {', '.join(missing)}"
            raise InvalidTokenError(msg)

        try:
            role = UserRole(claims["role"])
            exp = claims.get("exp")
            return TokenPayload(
                person_id=int(claims["person_id"]),
                email=str(claims["email"]),
                username=str(claims["username"]),
                role=role,
                exp=int(exp) if exp is not None else None,
            )
        except (TypeError, ValueError) as e:
            msg = f"Token has invalid claims: {e}"
            raise InvalidTokenError(msg) from e

    def is_expired(self, token: str, now: datetime | None = None) -> bool:
        """True when the token is past ``exp`` or cannot be read at all.

        A token without ``exp`` never expires.
        """
        try:
            claims = _read_claims(token)
        except jwt.PyJWTError:
            return True

        exp = claims.get("exp")
        if exp is None:
            return False
        current = now or datetime.now(tz=timezone.utc)
        try:
            return current.timestamp() >= float(exp)
        except (TypeError, ValueError):
            return True


def _read_claims(token: str) -> dict:
    return jwt.decode(token, options={"verify_signature": False})


_default_service = TokenService()


def decode_token(token: str) -> TokenPayload:
    """Module-level shortcut for ``TokenService().decode``."""
    return _default_service.decode(token)


def is_token_expired(token: str, now: datetime | None = None) -> bool:
    """Module-level shortcut for ``TokenService().is_expired``."""
    return _default_service.is_expired(token, now)
