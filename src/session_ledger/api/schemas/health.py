"""Pydantic schemas for the health endpoint."""

from pydantic import BaseModel


class ServicesStatus(BaseModel):
    http: bool
    db: bool
    redis: bool


class HealthResponse(BaseModel):
    """Response schema for GET /health."""

    message: str
    services: ServicesStatus
