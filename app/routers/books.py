"""
Books Router

CRUD endpoints for books plus the filtered, paginated listing.

Routes stay thin: they receive validated input, call BookService, and
shape the HTTP response (status code, Location header). Business errors
raised by the service are turned into {"errors": [...]} bodies by the
exception handlers registered in app.main.
"""

from fastapi import APIRouter, Request, Response, status

from app.config import get_settings
from app.dependencies import BookFilters, BookServiceDep, Pagination
from app.schemas import (
    BookCreate,
    BookResponse,
    BookUpdate,
    ErrorResponse,
    Page,
)
from app.services.rate_limiter import limiter

settings = get_settings()

router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        404: {"model": ErrorResponse, "description": "Book not found"},
    },
)


@router.get(
    "",
    response_model=Page[BookResponse],
    summary="List books",
    description="Get a page of books, optionally filtered by title and author.",
)
@limiter.limit(settings.rate_limit_default)
def list_books(
    request: Request,
    service: BookServiceDep,
    pagination: Pagination,
    filters: BookFilters,
) -> Page[BookResponse]:
    """
    List books with pagination and optional filtering.

    Examples:
        GET /api/books?page=0&size=12
        GET /api/books?title=1984&author=orwell
    """
    return service.find_with_filter(filters.title, filters.author, pagination)


@router.get(
    "/{book_id}",
    response_model=BookResponse,
    summary="Get a book by ID",
    description="Retrieve a specific book.",
)
@limiter.limit(settings.rate_limit_default)
def get_book(
    request: Request,
    book_id: int,
    service: BookServiceDep,
) -> BookResponse:
    """Get a single book by its ID."""
    return service.find_by_id(book_id)


@router.post(
    "",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
    description="Register a new book. The ISBN must not be registered yet.",
    responses={400: {"model": ErrorResponse, "description": "Invalid data or ISBN taken"}},
)
@limiter.limit(settings.rate_limit_write)
def create_book(
    request: Request,
    response: Response,
    book_data: BookCreate,
    service: BookServiceDep,
) -> BookResponse:
    """
    Create a new book.

    Responds 201 Created with a Location header pointing at the new book.
    """
    book = service.create(book_data)
    response.headers["Location"] = str(request.url_for("get_book", book_id=book.id))
    return book


@router.put(
    "/{book_id}",
    response_model=BookResponse,
    summary="Update a book",
    description="Replace a book's title and author. The ISBN cannot change.",
    responses={400: {"model": ErrorResponse, "description": "Invalid data"}},
)
@limiter.limit(settings.rate_limit_write)
def update_book(
    request: Request,
    book_id: int,
    book_data: BookUpdate,
    service: BookServiceDep,
) -> BookResponse:
    """Update an existing book's title and author."""
    return service.update(book_id, book_data)


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a book",
    description="Permanently delete a book and its loan history.",
)
@limiter.limit(settings.rate_limit_write)
def delete_book(
    request: Request,
    book_id: int,
    service: BookServiceDep,
) -> None:
    """
    Delete a book.

    Returns 204 No Content on success (standard for DELETE).
    """
    service.delete(book_id)
