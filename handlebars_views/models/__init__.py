"""Pydantic models for HTTP responses."""

from handlebars_views.models.base_models import ErrorDetail, ErrorResponse, HealthResponse

__all__ = ["ErrorDetail", "ErrorResponse", "HealthResponse"]
