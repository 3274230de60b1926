"""Data Transfer Objects for API input/output."""

from app.newsletter.application.dto.subscriber_dto import (
    SubscriberEmailDTO,
    SubscriberEmailRequest,
)

__all__ = ["SubscriberEmailDTO", "SubscriberEmailRequest"]
