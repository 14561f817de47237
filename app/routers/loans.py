"""
Loans Router

Endpoints for lending books and browsing the loan history.
"""

from fastapi import APIRouter, Request, Response, status

from app.config import get_settings
from app.dependencies import LoanFilters, LoanServiceDep, Pagination
from app.schemas import ErrorResponse, LoanCreate, LoanResponse, Page
from app.services.rate_limiter import limiter

settings = get_settings()

router = APIRouter(
    prefix="/loans",
    tags=["Loans"],
)


@router.get(
    "",
    response_model=Page[LoanResponse],
    summary="List loans",
    description="Get a page of loans, optionally filtered by ISBN and customer.",
)
@limiter.limit(settings.rate_limit_default)
def list_loans(
    request: Request,
    service: LoanServiceDep,
    pagination: Pagination,
    filters: LoanFilters,
) -> Page[LoanResponse]:
    """
    List loans with pagination and optional filtering.

    Examples:
        GET /api/loans?isbn=9780451524935
        GET /api/loans?customer=doe&page=0&size=12
    """
    return service.find_with_filter(filters.isbn, filters.customer, pagination)


@router.get(
    "/{loan_id}",
    response_model=LoanResponse,
    summary="Get a loan by ID",
    responses={404: {"model": ErrorResponse, "description": "Loan not found"}},
)
@limiter.limit(settings.rate_limit_default)
def get_loan(
    request: Request,
    loan_id: int,
    service: LoanServiceDep,
) -> LoanResponse:
    """Get a single loan by its ID."""
    return service.find_by_id(loan_id)


@router.post(
    "",
    response_model=LoanResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Lend a book",
    description=(
        "Lend the book with the given ISBN to a customer. Fails when the "
        "ISBN is not registered or the book is already on loan."
    ),
    responses={400: {"model": ErrorResponse, "description": "Invalid data or book unavailable"}},
)
@limiter.limit(settings.rate_limit_write)
def create_loan(
    request: Request,
    response: Response,
    loan_data: LoanCreate,
    service: LoanServiceDep,
) -> LoanResponse:
    """
    Create a loan.

    Responds 201 Created with a Location header pointing at the new loan.
    """
    loan = service.create(loan_data)
    response.headers["Location"] = str(request.url_for("get_loan", loan_id=loan.id))
    return loan
