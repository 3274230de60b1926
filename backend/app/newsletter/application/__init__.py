"""Application layer - use cases and orchestration.

This layer contains:
- DTOs: Data Transfer Objects for API input/output
- Use Cases: Application services that orchestrate domain logic
- Exceptions: Application-level error types
"""

from app.newsletter.application.dto import SubscriberEmailDTO, SubscriberEmailRequest
from app.newsletter.application.exceptions import ApplicationError, InvalidEmailError
from app.newsletter.application.use_cases import ParseSubscriberEmailUseCase

__all__ = [
    # DTOs
    "SubscriberEmailRequest",
    "SubscriberEmailDTO",
    # Use Cases
    "ParseSubscriberEmailUseCase",
    # Exceptions
    "ApplicationError",
    "InvalidEmailError",
]
