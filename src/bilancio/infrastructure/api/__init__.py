"""Backend REST API adapter."""

from bilancio.infrastructure.api.client import BilancioApiClient
from bilancio.infrastructure.api.exceptions import (
    ApiConnectionError,
    ApiError,
    ApiResponseError,
    UnauthorizedError,
)

__all__ = [
    "ApiConnectionError",
    "ApiError",
    "ApiResponseError",
    "BilancioApiClient",
    "UnauthorizedError",
]
