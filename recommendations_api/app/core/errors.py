"""
Business errors raised by the service layer.

Each error carries a machine readable ``type``, a human readable
``message`` and the HTTP status the API layer answers with.  Errors are
terminal: callers should report them, not retry.
"""

from typing import Dict


class ServiceError(Exception):
    """Base class for errors surfaced to API callers."""

    type: str = "error"
    status_code: int = 500

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, str]:
        return {"type": self.type, "message": self.message}


class ConflictError(ServiceError):
    """Raised when a create would break a uniqueness rule."""

    type = "conflict"
    status_code = 409


class NotFoundError(ServiceError):
    """Raised when the requested record does not exist."""

    type = "not_found"
    status_code = 404
