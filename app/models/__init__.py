"""
SQLAlchemy Models Package

This package contains all database models for the Library API.

Model Relationships:
- Book <-> Loan: One-to-Many (a book has a loan history, at most one
                 loan of which is unreturned)

Import all models here so Alembic discovers them for migrations.
"""

from app.models.book import Book
from app.models.loan import Loan

__all__ = [
    "Book",
    "Loan",
]
