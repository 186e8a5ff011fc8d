"""Schemas shared by every resource."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

# Largest value an INTEGER column holds on every supported backend
INT32_MAX = 2**31 - 1


class ErrorDetail(BaseModel):
    """Error payload."""

    code: str = Field(..., description="Application-specific error code")
    message: str = Field(..., description="Human-readable error message")
    status_code: int = Field(..., description="HTTP status code")
    details: Optional[Dict[str, Any]] = Field(default=None, description="Extra context")


class ErrorResponse(BaseModel):
    """Envelope returned for every error response."""

    error: ErrorDetail
    success: bool = False
    request_id: Optional[str] = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    service: Optional[str] = None
    database: Optional[str] = None
    error: Optional[str] = None
