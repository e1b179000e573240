"""Domain exceptions raised by the service layer.

Services never raise ``HTTPException`` directly; the handlers registered in
``inkpost.main`` translate these into JSON error responses.
"""

from __future__ import annotations


class InkpostError(RuntimeError):
    """Base exception for all domain failures."""

    status_code: int = 500

    def __init__(self, message: str = "Internal server error") -> None:
        super().__init__(message)
        self.message = message


class ValidationError(InkpostError):
    """Raised when input is missing or malformed."""

    status_code = 400


class InvalidParentError(ValidationError):
    """Raised when a reply targets a comment that cannot be a parent.

    Only top-level comments on the same post may receive replies.
    """


class NotFoundError(InkpostError):
    """Raised when a referenced entity does not exist."""

    status_code = 404


class ForbiddenError(InkpostError):
    """Raised when the requester does not own the target entity."""

    status_code = 403


class StoreError(InkpostError):
    """Raised when the underlying store fails.

    The message returned to clients is always opaque.
    """

    status_code = 500


__all__ = [
    "ForbiddenError",
    "InkpostError",
    "InvalidParentError",
    "NotFoundError",
    "StoreError",
    "ValidationError",
]
