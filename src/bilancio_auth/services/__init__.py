from bilancio_auth.services.token_service import (
    TokenService,
    decode_token,
    is_token_expired,
)

__all__ = ["TokenService", "decode_token", "is_token_expired"]
