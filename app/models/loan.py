"""
Loan Model

Represents a book lent to a customer.

A loan is created with returned = false. A book may have at most one
such active loan at a time; the partial unique index below enforces
that in the database, so two concurrent loan requests for the same book
cannot both succeed.
"""

from datetime import date, datetime
from typing import TYPE_CHECKING

from sqlalchemy import (
    Boolean,
    Date,
    DateTime,
    ForeignKey,
    Index,
    String,
    func,
    text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base

if TYPE_CHECKING:
    from app.models.book import Book


class Loan(Base):
    """
    Loan model.

    Table: loans

    Fields:
    - customer: Name of the customer who borrowed the book
    - loan_date: Day the loan was created
    - book_id: The lent book
    - is_returned: Whether the book came back (column "returned")

    Example:
        loan = Loan(
            customer="Jane Doe",
            loan_date=date.today(),
            book=book,
        )
    """

    __tablename__ = "loans"

    # Only one unreturned loan per book
    __table_args__ = (
        Index(
            "ix_loans_active_book",
            "book_id",
            unique=True,
            postgresql_where=text("NOT returned"),
            sqlite_where=text("returned = 0"),
        ),
    )

    id: Mapped[int] = mapped_column(primary_key=True)

    customer: Mapped[str] = mapped_column(
        String(255),
        index=True,
        nullable=False,
        comment="Customer name"
    )

    # Date (not DateTime): a loan is tracked per day
    loan_date: Mapped[date] = mapped_column(
        Date,
        nullable=False,
        comment="Day the book was lent"
    )

    book_id: Mapped[int] = mapped_column(
        ForeignKey("books.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )

    is_returned: Mapped[bool] = mapped_column(
        "returned",
        Boolean,
        default=False,
        nullable=False,
        comment="Whether the book has been returned"
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    book: Mapped["Book"] = relationship(
        "Book",
        back_populates="loans",
    )

    def __repr__(self) -> str:
        return (
            f"Loan(id={self.id}, book_id={self.book_id}, "
            f"customer='{self.customer}', returned={self.is_returned})"
        )
