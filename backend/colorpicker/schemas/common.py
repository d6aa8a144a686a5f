"""
Color Picker API - Shared Response Schemas
============================================

What:  Message, error and health payloads used across all routers.
"""

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Confirmation body for PATCH and DELETE, e.g. {"message": "Color updated"}."""
    message: str = Field(description="Human-readable confirmation")


class ErrorResponse(BaseModel):
    """
    Error body for every failed request.

    Example:
        {"error": "Could not find palette with name invalid palette"}

    The request id for correlating with server logs travels in the
    X-Request-ID response header.
    """
    error: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer probes."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
