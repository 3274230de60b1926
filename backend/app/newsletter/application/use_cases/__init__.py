"""Application use cases for orchestrating domain logic."""

from app.newsletter.application.use_cases.parse_subscriber_email import (
    ParseSubscriberEmailUseCase,
)

__all__ = ["ParseSubscriberEmailUseCase"]
