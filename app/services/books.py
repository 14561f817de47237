"""
Book Service

Business rules for the book catalogue:
- ISBN is unique across all books
- only title and author change after creation
- missing ids are reported as ResourceNotFoundError

The service raises domain exceptions and lets the HTTP layer translate
them; it never builds HTTP responses itself.
"""

import logging

from sqlalchemy.exc import IntegrityError

from app.exceptions import ExistingBookError, ResourceNotFoundError
from app.models import Book
from app.repositories import BookRepository
from app.schemas import BookCreate, BookResponse, BookUpdate, Page, PageRequest

logger = logging.getLogger(__name__)


class BookService:
    """Create, read, update, delete and list books."""

    def __init__(self, book_repository: BookRepository) -> None:
        self.book_repository = book_repository

    def _get_or_raise(self, book_id: int) -> Book:
        book = self.book_repository.find_by_id(book_id)
        if book is None:
            raise ResourceNotFoundError(f"Book {book_id} not found!")
        return book

    def find_by_id(self, book_id: int) -> BookResponse:
        """
        Get a single book.

        Raises:
            ResourceNotFoundError: If no book has this id
        """
        return BookResponse.model_validate(self._get_or_raise(book_id))

    def create(self, book_request: BookCreate) -> BookResponse:
        """
        Register a new book.

        The existence check gives a clean error in the common case; the
        unique constraint on books.isbn catches a concurrent insert that
        slips between the check and the commit.

        Raises:
            ExistingBookError: If the ISBN is already registered
        """
        isbn = book_request.isbn
        message = f"ISBN: {isbn} already registered!"

        if self.book_repository.exists_by_isbn(isbn):
            logger.warning(f"Rejected book create, duplicate ISBN {isbn}")
            raise ExistingBookError(message)

        book = Book(
            title=book_request.title,
            author=book_request.author,
            isbn=isbn,
        )
        try:
            book = self.book_repository.save(book)
        except IntegrityError:
            logger.warning(f"Rejected book create, ISBN {isbn} inserted concurrently")
            raise ExistingBookError(message) from None

        logger.info(f"Created book {book.id} (ISBN {book.isbn})")
        return BookResponse.model_validate(book)

    def update(self, book_id: int, book_request: BookUpdate) -> BookResponse:
        """
        Overwrite a book's title and author.

        ISBN and id are never touched.

        Raises:
            ResourceNotFoundError: If no book has this id
        """
        book = self._get_or_raise(book_id)
        book.title = book_request.title
        book.author = book_request.author
        book = self.book_repository.save(book)

        logger.info(f"Updated book {book.id}")
        return BookResponse.model_validate(book)

    def delete(self, book_id: int) -> None:
        """
        Remove a book together with its loan history.

        Raises:
            ResourceNotFoundError: If no book has this id
        """
        book = self._get_or_raise(book_id)
        self.book_repository.delete(book)
        logger.info(f"Deleted book {book_id}")

    def find_with_filter(
        self,
        title: str | None,
        author: str | None,
        page_request: PageRequest,
    ) -> Page[BookResponse]:
        """List books whose title and author contain the given filters."""
        books, total = self.book_repository.find_by_filter(title, author, page_request)
        return Page[BookResponse].build(
            [BookResponse.model_validate(book) for book in books],
            total,
            page_request,
        )
