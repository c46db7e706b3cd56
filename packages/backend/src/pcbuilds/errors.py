"""Application error taxonomy.

Learn: Handlers raise one of these instead of building JSON error
responses inline. A single exception handler (registered in main.py)
renders them as {"message": ..., "error": ...} with the class's status.

  400  RequestValidationFailed, ConflictError
  401  AuthenticationError
  403  AccessDenied
  404  NotFoundError
  500  StorageError, ConfigurationError
"""

from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy.exc import SQLAlchemyError


class PCBuildsError(Exception):
    """Base class for errors that map to an HTTP response."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None, error: Optional[str] = None):
        self.message = message or self.default_message
        self.error = error
        super().__init__(self.message)

    def to_dict(self) -> dict:
        body = {"message": self.message}
        if self.error is not None:
            body["error"] = self.error
        return body


class RequestValidationFailed(PCBuildsError):
    """Missing or malformed request input."""

    status_code = 400
    default_message = "Please provide all required fields"


class ConflictError(PCBuildsError):
    """Username or email already taken."""

    status_code = 400
    default_message = "User already exists"


class AuthenticationError(PCBuildsError):
    status_code = 401
    default_message = "Invalid credentials"


class AccessDenied(PCBuildsError):
    """Missing, invalid or expired access token."""

    status_code = 403
    default_message = "You need to sign in before continuing"


class NotFoundError(PCBuildsError):
    status_code = 404
    default_message = "Not found"


class StorageError(PCBuildsError):
    """Database unreachable or an operation failed.

    The driver's message is passed through in `error`.
    """

    status_code = 500


class ConfigurationError(PCBuildsError):
    """Fatal misconfiguration, e.g. a token signing secret is not set."""

    status_code = 500
    default_message = "Server misconfigured"


@contextmanager
def storage_errors(message: str) -> Iterator[None]:
    """Re-raise database failures inside the block as StorageError(message).

    The async drivers raise connect failures (e.g. connection refused)
    as plain OSError, which SQLAlchemy passes through unwrapped.
    """
    try:
        yield
    except (SQLAlchemyError, OSError) as e:
        raise StorageError(message, error=str(e) or type(e).__name__) from e
