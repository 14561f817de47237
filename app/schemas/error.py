"""
Error Response Schema

Every error produced by the application has the same body: a list of
human-readable messages. Validation failures contribute one message per
failing field; business-rule failures contribute exactly one.
"""

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Body of every non-2xx response."""

    errors: list[str] = Field(..., description="Error messages")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"errors": ["ISBN: 9780451524935 already registered!"]}
        },
    )
