"""
Book Pydantic Schemas

Request and response shapes for the books endpoints.

Every request field is required and must contain something other than
whitespace; FastAPI rejects the request before the service is called
when any of them fails, and the validation handler in app.main reports
one error per failing field.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _not_blank(v: str, field: str) -> str:
    if not v.strip():
        raise ValueError(f"{field} cannot be empty or whitespace")
    return v.strip()


class BookBase(BaseModel):
    """
    Base schema with shared book fields.

    ISBN is treated as an opaque natural key: only blankness is checked,
    since the library also registers items carrying internal codes.
    """

    title: str = Field(
        ...,
        min_length=1,
        max_length=500,
        description="Book title",
        examples=["1984", "Pride and Prejudice"],
    )

    author: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Author name",
        examples=["George Orwell", "Jane Austen"],
    )

    isbn: str = Field(
        ...,
        min_length=1,
        max_length=50,
        description="International Standard Book Number",
        examples=["9780451524935"],
    )

    @field_validator("title")
    @classmethod
    def title_must_not_be_empty(cls, v: str) -> str:
        """Validate and normalize title."""
        return _not_blank(v, "Title")

    @field_validator("author")
    @classmethod
    def author_must_not_be_empty(cls, v: str) -> str:
        """Validate and normalize author."""
        return _not_blank(v, "Author")

    @field_validator("isbn")
    @classmethod
    def isbn_must_not_be_empty(cls, v: str) -> str:
        """Validate and normalize ISBN."""
        return _not_blank(v, "ISBN")


class BookCreate(BookBase):
    """
    Schema for creating a new book.

    Example request body:
    {
        "title": "1984",
        "author": "George Orwell",
        "isbn": "9780451524935"
    }
    """
    pass


class BookUpdate(BaseModel):
    """
    Schema for updating an existing book.

    Only the mutable fields are accepted; ISBN cannot be changed, and any
    "isbn" key in the body is ignored.
    """

    title: str = Field(
        ...,
        min_length=1,
        max_length=500,
        description="Book title",
    )

    author: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Author name",
    )

    @field_validator("title")
    @classmethod
    def title_must_not_be_empty(cls, v: str) -> str:
        """Validate and normalize title."""
        return _not_blank(v, "Title")

    @field_validator("author")
    @classmethod
    def author_must_not_be_empty(cls, v: str) -> str:
        """Validate and normalize author."""
        return _not_blank(v, "Author")


class BookResponse(BaseModel):
    """
    Schema for book responses.

    from_attributes=True lets the service build this directly from a
    Book ORM instance with BookResponse.model_validate(book).
    """

    id: int = Field(..., description="Unique identifier")
    title: str = Field(..., description="Book title")
    author: str = Field(..., description="Author name")
    isbn: str = Field(..., description="International Standard Book Number")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "1984",
                "author": "George Orwell",
                "isbn": "9780451524935",
            }
        },
    )
