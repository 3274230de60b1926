"""Domain value objects for the newsletter service.

This module exports immutable value objects used throughout the domain layer:
- SubscriberEmail: Validated subscriber email addresses
"""

from app.newsletter.domain.value_objects.subscriber_email import (
    InvalidSubscriberEmailError,
    SubscriberEmail,
)

__all__ = ["InvalidSubscriberEmailError", "SubscriberEmail"]
