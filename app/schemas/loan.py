"""
Loan Pydantic Schemas

A loan is requested by ISBN and customer name. The response embeds the
lent book so clients get everything in one call.

Response JSON uses camelCase keys (loanDate, isReturned).
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.schemas.book import BookResponse


class LoanCreate(BaseModel):
    """
    Schema for creating a loan.

    Example request body:
    {
        "isbn": "9780451524935",
        "customer": "Jane Doe"
    }
    """

    isbn: str = Field(
        ...,
        min_length=1,
        max_length=50,
        description="ISBN of the book to lend",
        examples=["9780451524935"],
    )

    customer: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Name of the customer borrowing the book",
        examples=["Jane Doe"],
    )

    @field_validator("isbn", "customer")
    @classmethod
    def must_not_be_empty(cls, v: str) -> str:
        """Reject whitespace-only values."""
        if not v.strip():
            raise ValueError("Value cannot be empty or whitespace")
        return v.strip()


class LoanResponse(BaseModel):
    """Schema for loan responses."""

    id: int = Field(..., description="Unique identifier")
    customer: str = Field(..., description="Customer name")
    loan_date: date = Field(..., description="Day the book was lent")
    book: BookResponse = Field(..., description="The lent book")
    is_returned: bool = Field(..., description="Whether the book was returned")

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "customer": "Jane Doe",
                "loanDate": "2024-01-15",
                "book": {
                    "id": 1,
                    "title": "1984",
                    "author": "George Orwell",
                    "isbn": "9780451524935",
                },
                "isReturned": False,
            }
        },
    )
