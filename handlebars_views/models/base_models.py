"""Pydantic models for request/response validation."""

from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Basic health check response."""

    status: str
    version: str
    partials_registered: bool = Field(..., description="Whether partials have been registered at least once")


class ErrorDetail(BaseModel):
    """Structured error body."""

    code: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    """Error response."""

    error: ErrorDetail
