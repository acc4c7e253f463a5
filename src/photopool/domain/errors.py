"""Typed failures raised by the photo pool core.

Every core operation either returns its value or raises one of these. The
HTTP layer maps ``kind`` and ``status_code`` straight onto the response.
"""

from __future__ import annotations


class PhotoPoolError(Exception):
    """Base class for all photo pool failures."""

    kind: str = "PhotoPoolError"
    status_code: int = 500

    def __init__(self, message: str, *, filename: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.filename = filename

    def to_dict(self) -> dict[str, str]:
        return {"error": self.kind, "message": self.message}


class NotFound(PhotoPoolError):
    """The referenced filename is not in the pool."""

    kind = "NotFound"
    status_code = 404


class UnsupportedFileType(PhotoPoolError):
    """The upload's extension is not on the allow-list."""

    kind = "UnsupportedFileType"
    status_code = 400


class InvalidInput(PhotoPoolError):
    """Malformed request data (blank description, unsafe filename, ...)."""

    kind = "InvalidInput"
    status_code = 400


class FileTooLarge(InvalidInput):
    kind = "FileTooLarge"
    status_code = 413


class WriteConflict(PhotoPoolError):
    """Every candidate name for a new file was already taken."""

    kind = "WriteConflict"
    status_code = 409


class IOFailure(PhotoPoolError):
    """The underlying storage failed."""

    kind = "IOFailure"
    status_code = 500
