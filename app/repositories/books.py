"""
Book Repository

Persistence operations for books, bound to one request-scoped session.

Filtering follows the same conventions as the loans repository:
- filters are case-insensitive "contains" matches
- a missing or empty filter matches every record
- results are ordered by id so pages are stable
"""

from collections.abc import Sequence

from sqlalchemy import Select, exists, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models import Book
from app.schemas.page import PageRequest


def contains_ignore_case(column, value: str):
    """Case-insensitive substring match; % and _ in value are literal."""
    return column.icontains(value, autoescape=True)


class BookRepository:
    """SQLAlchemy-backed store for Book records."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def exists_by_isbn(self, isbn: str) -> bool:
        stmt = select(exists().where(Book.isbn == isbn))
        return bool(self.db.execute(stmt).scalar())

    def find_by_id(self, book_id: int) -> Book | None:
        return self.db.get(Book, book_id)

    def find_by_isbn(self, isbn: str) -> Book | None:
        stmt = select(Book).where(Book.isbn == isbn)
        return self.db.execute(stmt).scalar_one_or_none()

    def save(self, book: Book) -> Book:
        """
        Insert or update a book and commit.

        Raises:
            IntegrityError: If the ISBN collides with another book. The
                session is rolled back before re-raising.
        """
        self.db.add(book)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise
        self.db.refresh(book)
        return book

    def delete(self, book: Book) -> None:
        self.db.delete(book)
        self.db.commit()

    def find_by_filter(
        self,
        title: str | None,
        author: str | None,
        page_request: PageRequest,
    ) -> tuple[Sequence[Book], int]:
        """
        Fetch one page of books matching the filters.

        Args:
            title: Partial title to match, or None/"" for any
            author: Partial author name to match, or None/"" for any
            page_request: Page index and size

        Returns:
            (books on the requested page, total number of matches)
        """
        stmt = self._filtered(select(Book), title, author)

        count_stmt = select(func.count()).select_from(stmt.subquery())
        total = self.db.execute(count_stmt).scalar() or 0

        stmt = (
            stmt
            .order_by(Book.id)
            .offset(page_request.offset)
            .limit(page_request.size)
        )
        books = self.db.execute(stmt).scalars().all()
        return books, total

    @staticmethod
    def _filtered(stmt: Select, title: str | None, author: str | None) -> Select:
        if title:
            stmt = stmt.where(contains_ignore_case(Book.title, title))
        if author:
            stmt = stmt.where(contains_ignore_case(Book.author, author))
        return stmt
