"""
Loan Service

Lends books to customers. A loan can only be created when:
1. a book with the requested ISBN is registered
2. that book has no unreturned loan

New loans are dated today and start unreturned.
"""

import logging
from datetime import date

from sqlalchemy.exc import IntegrityError

from app.exceptions import (
    BookAlreadyOnLoanError,
    ResourceNotFoundError,
    ResourceNotRegisteredError,
)
from app.models import Loan
from app.repositories import BookRepository, LoanRepository
from app.schemas import LoanCreate, LoanResponse, Page, PageRequest

logger = logging.getLogger(__name__)


class LoanService:
    """Create, read and list loans."""

    def __init__(
        self,
        loan_repository: LoanRepository,
        book_repository: BookRepository,
    ) -> None:
        self.loan_repository = loan_repository
        self.book_repository = book_repository

    def create(self, loan_request: LoanCreate) -> LoanResponse:
        """
        Lend the book identified by ISBN to a customer.

        The partial unique index on loans(book_id) for unreturned loans
        turns a concurrent double loan into an IntegrityError, reported
        the same way as the pre-check.

        Raises:
            ResourceNotRegisteredError: If no book has this ISBN
            BookAlreadyOnLoanError: If the book has an unreturned loan
        """
        isbn = loan_request.isbn

        book = self.book_repository.find_by_isbn(isbn)
        if book is None:
            logger.warning(f"Rejected loan, ISBN {isbn} not registered")
            raise ResourceNotRegisteredError(f"Book not registered! ISBN: '{isbn}'")

        on_loan = f"Book already on loan! ISBN: '{isbn}'"
        if self.loan_repository.find_active_by_book(book) is not None:
            logger.warning(f"Rejected loan, book {book.id} already on loan")
            raise BookAlreadyOnLoanError(on_loan)

        loan = Loan(
            customer=loan_request.customer,
            loan_date=date.today(),
            book=book,
            is_returned=False,
        )
        try:
            loan = self.loan_repository.save(loan)
        except IntegrityError:
            logger.warning(f"Rejected loan, book {book.id} lent concurrently")
            raise BookAlreadyOnLoanError(on_loan) from None

        logger.info(f"Created loan {loan.id} of book {book.id} to '{loan.customer}'")
        return LoanResponse.model_validate(loan)

    def find_by_id(self, loan_id: int) -> LoanResponse:
        """
        Get a single loan.

        Raises:
            ResourceNotFoundError: If no loan has this id
        """
        loan = self.loan_repository.find_by_id(loan_id)
        if loan is None:
            raise ResourceNotFoundError(f"Loan {loan_id} not found!")
        return LoanResponse.model_validate(loan)

    def find_with_filter(
        self,
        isbn: str | None,
        customer: str | None,
        page_request: PageRequest,
    ) -> Page[LoanResponse]:
        """List loans whose book ISBN and customer contain the given filters."""
        loans, total = self.loan_repository.find_by_filter(isbn, customer, page_request)
        return Page[LoanResponse].build(
            [LoanResponse.model_validate(loan) for loan in loans],
            total,
            page_request,
        )
