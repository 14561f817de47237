"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.
FastAPI's Depends() function manages their lifecycle.

Wiring per request:
    get_db → Session → BookRepository / LoanRepository → BookService / LoanService

Routes only declare the service they need; tests can swap any layer
through app.dependency_overrides.
"""

from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.orm import Session

from app.config import get_settings
from app.database import get_db
from app.repositories import BookRepository, LoanRepository
from app.schemas import PageRequest
from app.services import BookService, LoanService

settings = get_settings()

# =============================================================================
# Type Aliases with Annotated
# =============================================================================
# Instead of writing:
#   def get_book(db: Session = Depends(get_db)):
# You can write:
#   def get_book(db: DbSession):

DbSession = Annotated[Session, Depends(get_db)]


# =============================================================================
# Pagination Parameters
# =============================================================================
def get_page_request(
    page: int = Query(
        default=0,
        ge=0,
        le=settings.max_page_index,
        description="Page index (0-based)",
        examples=[0, 1, 2],
    ),
    size: int = Query(
        default=settings.default_page_size,
        ge=1,
        le=settings.max_page_size,
        description=f"Number of items per page (max {settings.max_page_size})",
        examples=[12, 25, 50],
    ),
) -> PageRequest:
    """
    Build a PageRequest from the query string.

        GET /api/books?page=1&size=20
    """
    return PageRequest(page=page, size=size)


Pagination = Annotated[PageRequest, Depends(get_page_request)]


# =============================================================================
# Listing Filters
# =============================================================================
class BookSearchParams:
    """
    Filter parameters for GET /books.

    Both filters are optional, partial and case-insensitive; an empty
    value is the same as leaving it out.

        GET /api/books?title=eighty&author=orwell
    """

    def __init__(
        self,
        title: str | None = Query(
            default=None,
            max_length=100,
            description="Filter by title (partial match, case-insensitive)",
            examples=["1984", "pride"],
        ),
        author: str | None = Query(
            default=None,
            max_length=100,
            description="Filter by author name (partial match, case-insensitive)",
            examples=["orwell", "austen"],
        ),
    ) -> None:
        self.title = title
        self.author = author


BookFilters = Annotated[BookSearchParams, Depends()]


class LoanSearchParams:
    """
    Filter parameters for GET /loans.

        GET /api/loans?isbn=978045&customer=doe
    """

    def __init__(
        self,
        isbn: str | None = Query(
            default=None,
            max_length=50,
            description="Filter by the lent book's ISBN (partial match)",
            examples=["9780451524935"],
        ),
        customer: str | None = Query(
            default=None,
            max_length=100,
            description="Filter by customer name (partial match, case-insensitive)",
            examples=["doe"],
        ),
    ) -> None:
        self.isbn = isbn
        self.customer = customer


LoanFilters = Annotated[LoanSearchParams, Depends()]


# =============================================================================
# Services
# =============================================================================
def get_book_service(db: DbSession) -> BookService:
    """BookService bound to the request's session."""
    return BookService(BookRepository(db))


def get_loan_service(db: DbSession) -> LoanService:
    """LoanService bound to the request's session."""
    return LoanService(LoanRepository(db), BookRepository(db))


BookServiceDep = Annotated[BookService, Depends(get_book_service)]
LoanServiceDep = Annotated[LoanService, Depends(get_loan_service)]
