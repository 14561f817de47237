"""
Domain Exceptions

Errors raised by the service layer. Services never translate these into
HTTP responses themselves: they propagate to the exception handlers
registered in app.main, which turn them into {"errors": [...]} bodies.

Each exception carries the HTTP status code it maps to, so a single
handler covers the whole hierarchy.
"""

from fastapi import status


class LibraryError(Exception):
    """Base class for all business-rule violations."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ResourceNotFoundError(LibraryError):
    """A book or loan identifier does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class ExistingBookError(LibraryError):
    """A book with the same ISBN is already registered."""


class ResourceNotRegisteredError(LibraryError):
    """A loan references an ISBN that no book has."""


class BookAlreadyOnLoanError(LibraryError):
    """The referenced book already has an unreturned loan."""
