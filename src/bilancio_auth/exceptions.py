"""Authentication exceptions.

Raised by the bilancio_auth package and handled by the application
layer (login command, session hydration) or the CLI.
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class InvalidTokenError(AuthError):
    """Raised when a JWT token is malformed or lacks required claims."""

    def __init__(self, message: str = "Invalid or malformed token"):
        super().__init__(message)


class NotAuthenticatedError(AuthError):
    """Raised when an operation needs a logged-in session."""

    def __init__(self, message: str = "Not logged in"):
        super().__init__(message)
