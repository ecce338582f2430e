"""Errors raised while serving a single request.

Every error here is contained by the request handler and rendered as a
plain-text body; none of them reaches the transport layer.
"""
from __future__ import annotations

import errno


class ServeError(Exception):
    status_code = 500

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class DecodeError(ServeError):
    """Request path is not valid percent-encoded UTF-8."""

    status_code = 400


class ForbiddenPathError(ServeError):
    """Request path resolves outside the served root."""

    status_code = 403


class FileAccessError(ServeError):
    """Filesystem fault while reading a file or listing a directory."""

    @classmethod
    def from_exc(cls, exc: Exception) -> "FileAccessError":
        status = 500
        if isinstance(exc, FileNotFoundError) or getattr(exc, "errno", None) == errno.ENOTDIR:
            status = 404
        elif isinstance(exc, PermissionError):
            status = 403
        elif isinstance(exc, ValueError):
            # embedded NUL byte, the path cannot exist
            status = 404
        message = getattr(exc, "strerror", None) or str(exc)
        return cls(message, status_code=status)


class RenderError(ServeError):
    """Directory listing template failed to render."""

    status_code = 500


__all__ = [
    "ServeError",
    "DecodeError",
    "ForbiddenPathError",
    "FileAccessError",
    "RenderError",
]
