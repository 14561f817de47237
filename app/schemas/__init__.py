"""
Pydantic Schemas Package

This package contains Pydantic models for request/response validation.

WHY Separate Schemas from SQLAlchemy Models?
============================================
1. Security: Control exactly what data is exposed in API responses
2. Validation: Different rules for create vs update vs response
3. Decoupling: Database schema can evolve independently of API

Schema Naming Convention:
- XxxCreate: Fields required when creating a new record
- XxxUpdate: Fields allowed when updating
- XxxResponse: Fields returned in API responses
"""

from app.schemas.book import (
    BookBase,
    BookCreate,
    BookResponse,
    BookUpdate,
)
from app.schemas.error import ErrorResponse
from app.schemas.loan import LoanCreate, LoanResponse
from app.schemas.page import Page, Pageable, PageRequest

__all__ = [
    # Book schemas
    "BookBase",
    "BookCreate",
    "BookUpdate",
    "BookResponse",
    # Loan schemas
    "LoanCreate",
    "LoanResponse",
    # Pagination
    "Page",
    "Pageable",
    "PageRequest",
    # Errors
    "ErrorResponse",
]
