"""
Error taxonomy shared by every flow in the directory.

Each error knows the HTTP status it is reported with; the FastAPI app renders
all of them as ``{"error": <message>}``.
"""
from __future__ import annotations


class DirectoryError(Exception):
    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInput(DirectoryError):
    status_code = 400


class InvalidCoordinate(InvalidInput):
    def __init__(self, message: str = "Latitude and Longitude must be valid numbers.") -> None:
        super().__init__(message)


class InvalidRadius(InvalidInput):
    def __init__(self, message: str = "Radius must be a positive number.") -> None:
        super().__init__(message)


class MethodNotAllowed(DirectoryError):
    status_code = 405

    def __init__(self, message: str = "Method Not Allowed") -> None:
        super().__init__(message)


class NotFound(DirectoryError):
    status_code = 404


class BackendError(DirectoryError):
    """The restaurant database rejected or failed a query."""

    status_code = 500


class SearchBackendError(BackendError):
    """One branch of a geo-radius search failed."""
