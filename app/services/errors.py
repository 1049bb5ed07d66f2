"""Errors raised by the user pipelines; routes map them to HTTP responses."""


class UserServiceError(Exception):
    """Base error for a failed pipeline stage; carries the HTTP status to answer with."""

    status_code = 500

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)


class ValidationError(UserServiceError):
    """Missing or invalid input (no file, wrong file type)."""

    status_code = 400


class AuthError(UserServiceError):
    """Bad credentials, or an account that already exists."""

    status_code = 401


class ConflictError(UserServiceError):
    """A bulk administrative operation reported no result."""

    status_code = 409


class InternalError(UserServiceError):
    """Storage, filesystem or hashing failure. The message never includes the cause."""

    status_code = 500
