"""Pydantic schema for API error responses."""

from pydantic import BaseModel, Field


class ErrorResponseSchema(BaseModel):
    """Standard error response format for all API errors."""
    error: str = Field(
        ...,
        description="Error code",
        examples=["INVALID_LOAN_TERMS"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
        examples=["duration_months must be at least 1: 0"],
    )
    request_id: str | None = Field(
        None,
        description="Request ID for tracing",
    )
