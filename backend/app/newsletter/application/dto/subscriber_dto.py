"""Data Transfer Objects for subscriber email requests and responses."""

from pydantic import BaseModel, Field


class SubscriberEmailRequest(BaseModel):
    """Request payload carrying a raw, unvalidated subscriber email."""

    email: str = Field(description="Candidate subscriber email address")


class SubscriberEmailDTO(BaseModel):
    """A subscriber email that passed validation, exactly as submitted."""

    email: str = Field(description="Validated subscriber email address")
