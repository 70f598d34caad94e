"""
Error kinds raised by the reminder store and its collaborators.
"""
from typing import Optional


class ZoocoError(Exception):
    """Base class; `status_code` is the HTTP status the API layer answers with."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ZoocoError):
    """A create/update payload is missing a required field or is malformed."""

    status_code = 400


class NotFoundError(ZoocoError):
    status_code = 404


class TransportError(ZoocoError):
    """Network failure or non-success HTTP status from the remote API."""

    status_code = 502

    def __init__(self, message: str, upstream_status: Optional[int] = None):
        super().__init__(message)
        self.upstream_status = upstream_status
