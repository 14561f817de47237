"""
Repositories Package

Thin persistence layer between the services and SQLAlchemy.

Each repository wraps the request's Session and exposes only the
lookups the services need (existence by natural key, lookup by id,
save, delete, filtered pages), so services can be tested against a
stand-in store.
"""

from app.repositories.books import BookRepository
from app.repositories.loans import LoanRepository

__all__ = [
    "BookRepository",
    "LoanRepository",
]
