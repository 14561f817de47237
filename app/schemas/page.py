"""
Pagination Schemas

PageRequest is what the services receive; Page is what they return.

Pages are 0-indexed: page=0 is the first page. The response carries the
requested page under "pageable" alongside totals, so clients can render
pagers without a separate count call:

    {
        "content": [...],
        "pageable": {"pageNumber": 0, "pageSize": 12, "offset": 0},
        "totalElements": 1,
        "totalPages": 1,
        "numberOfElements": 1,
        ...
    }
"""

import math
from typing import Generic, Sequence, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class PageRequest(BaseModel):
    """Requested page index (0-based) and page size."""

    page: int = Field(default=0, ge=0, description="Page index (0-based)")
    size: int = Field(default=12, ge=1, description="Number of items per page")

    @property
    def offset(self) -> int:
        """
        Number of records to skip.

        Page 0 → skip 0 items
        Page 1 → skip size items
        """
        return self.page * self.size


class Pageable(BaseModel):
    """The page that was requested."""

    page_number: int
    page_size: int
    offset: int

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Page(BaseModel, Generic[T]):
    """One page of results plus pagination metadata."""

    content: list[T] = Field(..., description="Items on this page")
    pageable: Pageable
    total_elements: int = Field(..., ge=0, description="Matches across all pages")
    total_pages: int = Field(..., ge=0, description="Number of pages")
    number_of_elements: int = Field(..., ge=0, description="Items on this page")
    size: int = Field(..., ge=1, description="Requested page size")
    number: int = Field(..., ge=0, description="Requested page index")
    first: bool
    last: bool
    empty: bool

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @classmethod
    def build(cls, items: Sequence[T], total: int, page_request: PageRequest) -> "Page[T]":
        """
        Assemble a page from a slice of results and the total match count.

        Args:
            items: Results for the requested page
            total: Number of matching records across all pages
            page_request: The page that was requested

        Returns:
            Page with computed metadata
        """
        total_pages = math.ceil(total / page_request.size) if total > 0 else 0
        return cls(
            content=list(items),
            pageable=Pageable(
                page_number=page_request.page,
                page_size=page_request.size,
                offset=page_request.offset,
            ),
            total_elements=total,
            total_pages=total_pages,
            number_of_elements=len(items),
            size=page_request.size,
            number=page_request.page,
            first=page_request.page == 0,
            last=page_request.page + 1 >= total_pages,
            empty=len(items) == 0,
        )
