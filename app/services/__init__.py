"""
Services Package

This package contains business logic services that are:
- Separate from HTTP handling (routers)
- Reusable from the API, scripts and tests
- Easier to test in isolation

Current services:
- books.py: Book catalogue (ISBN uniqueness, CRUD, filtered pages)
- loans.py: Lending (book availability, filtered pages)
- rate_limiter.py: Rate limiting with slowapi
"""

from app.services.books import BookService
from app.services.loans import LoanService

__all__ = [
    "BookService",
    "LoanService",
]
