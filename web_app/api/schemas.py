"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field, StrictStr
from datetime import datetime


class RegisterRequest(BaseModel):
    """Request to register a slug.

    Only types are checked here; the URL format is validated by the
    registrar after the API key, so unauthenticated callers learn nothing.
    """

    api_key: StrictStr = Field(..., alias="apiKey", description="Registration secret")
    url: StrictStr = Field(..., description="Destination URL (absolute URI)")

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "examples": [
                {
                    "apiKey": "change-me",
                    "url": "https://example.com/documentation"
                }
            ]
        }
    }


class RegisterResponse(BaseModel):
    """Response after registering a slug."""

    slug: str = Field(..., description="The registered slug")
    url: str = Field(..., description="The destination URL")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "slug": "docs",
                    "url": "https://example.com/documentation"
                }
            ]
        }
    }


class ErrorResponse(BaseModel):
    """Error response."""

    statusCode: int = Field(..., description="HTTP status code")
    error: str = Field(..., description="HTTP error title")
    message: str = Field(..., description="Error message")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall status")
    database: str = Field(..., description="Database status")
    timestamp: datetime = Field(..., description="Check timestamp")
