"""
API-specific data models for the quote service.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class QuotePayload(BaseModel):
    """Request body for creating or updating a quote."""

    book: Annotated[str, Field(description="Book the quote comes from")]
    quote: Annotated[str, Field(description="Quote text")]


class HealthResponse(BaseModel):
    """Model for the health check response."""

    status: Annotated[str, Field(description="Service status")]


class ErrorResponse(BaseModel):
    """Model for error responses."""

    model_config = ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True,
    )

    error: Annotated[str, Field(description="Error code")]
    message: Annotated[str, Field(description="Human-readable error message")]
