"""Errors raised by the backend API client."""


class ApiError(Exception):
    """Base exception for all backend API failures."""

    def __init__(self, message: str = "Backend request failed"):
        self.message = message
        super().__init__(self.message)


class ApiConnectionError(ApiError):
    """Raised when the backend cannot be reached or does not answer in time."""

    def __init__(self, message: str = "Cannot reach the backend"):
        super().__init__(message)


class ApiResponseError(ApiError):
    """Raised when the backend answers with an error status."""

    def __init__(self, status_code: int, body: str = "", method: str = "", path: str = ""):
        self.status_code = status_code
        self.body = body
        self.method = method
        self.path = path
        detail = f": {body[:200]}" if body else ""
        super().__init__(f"{method} {path} returned {status_code}{detail}".strip())


class UnauthorizedError(ApiResponseError):
    """Raised on 401; the session has been logged out when this is raised."""

    def __init__(self, body: str = "", method: str = "", path: str = ""):
        super().__init__(401, body, method, path)
