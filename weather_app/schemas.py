from __future__ import annotations

from pydantic import BaseModel, Field


class HealthStatus(BaseModel):
    status: str = Field("healthy", description="Service state")
    timestamp: str = Field(..., description="ISO-8601 UTC time of the check")


class ErrorResponse(BaseModel):
    error: str = Field(..., description="Short error category")
    message: str | None = Field(None, description="Human readable detail")
    path: str | None = Field(None, description="Requested path for unmatched routes")
    timestamp: str | None = Field(None, description="ISO-8601 UTC time of the failure")
    stack: str | None = Field(None, description="Traceback, outside production only")
