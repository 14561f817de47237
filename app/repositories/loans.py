"""
Loan Repository

Persistence operations for loans, bound to one request-scoped session.
"""

from collections.abc import Sequence

from sqlalchemy import Select, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from app.models import Book, Loan
from app.repositories.books import contains_ignore_case
from app.schemas.page import PageRequest


class LoanRepository:
    """SQLAlchemy-backed store for Loan records."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def find_active_by_book(self, book: Book) -> Loan | None:
        """Return the book's unreturned loan, if it has one."""
        stmt = select(Loan).where(
            Loan.book_id == book.id,
            Loan.is_returned.is_(False),
        )
        return self.db.execute(stmt).scalars().first()

    def find_by_id(self, loan_id: int) -> Loan | None:
        stmt = (
            select(Loan)
            .options(joinedload(Loan.book))
            .where(Loan.id == loan_id)
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def save(self, loan: Loan) -> Loan:
        """
        Insert or update a loan and commit.

        Raises:
            IntegrityError: If the book already has an active loan. The
                session is rolled back before re-raising.
        """
        self.db.add(loan)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise
        self.db.refresh(loan)
        return loan

    def find_by_filter(
        self,
        isbn: str | None,
        customer: str | None,
        page_request: PageRequest,
    ) -> tuple[Sequence[Loan], int]:
        """
        Fetch one page of loans matching the filters.

        Args:
            isbn: Partial ISBN of the lent book, or None/"" for any
            customer: Partial customer name, or None/"" for any
            page_request: Page index and size

        Returns:
            (loans on the requested page, total number of matches)
        """
        stmt = self._filtered(select(Loan).join(Loan.book), isbn, customer)

        count_stmt = select(func.count()).select_from(stmt.subquery())
        total = self.db.execute(count_stmt).scalar() or 0

        stmt = (
            stmt
            .options(joinedload(Loan.book))
            .order_by(Loan.id)
            .offset(page_request.offset)
            .limit(page_request.size)
        )
        loans = self.db.execute(stmt).scalars().all()
        return loans, total

    @staticmethod
    def _filtered(stmt: Select, isbn: str | None, customer: str | None) -> Select:
        if isbn:
            stmt = stmt.where(contains_ignore_case(Book.isbn, isbn))
        if customer:
            stmt = stmt.where(contains_ignore_case(Loan.customer, customer))
        return stmt
